from __future__ import annotations

# Words longer than this earn the bonus point.
LONG_WORD_LENGTH = 5


def score_word(word: str) -> int:
    """Points for an accepted word: 2 if longer than five letters, else 1."""
    return 2 if len(word) > LONG_WORD_LENGTH else 1
