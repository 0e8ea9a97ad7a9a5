"""
Word validation for WordScramble.

This module answers the question: "May this candidate be added right now?"
A normalized candidate is checked against the current session in a fixed
order, and the first failing check decides the verdict:

  1) empty          -> "empty"          (ignored by the UI)
  2) already played -> "already_used"
  3) contains root  -> "already_used"   (same user-facing category)
  4) not spellable  -> "not_possible"
  5) not a word     -> "not_recognized"
  6) shorter than 4 -> "too_short"

The order matters: it decides which message the player sees. Rejections are
ordinary return values, never exceptions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple, Union

from .dictionary import DEFAULT_LANGUAGE, DictionaryOracle
from .letters import LetterMultiset
from .state import SessionState

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 4

RejectReason = Literal["empty", "already_used", "not_possible", "not_recognized", "too_short"]

# (title, message) shown to the player; "{root}" is filled with the root word.
_MESSAGES: Dict[str, Tuple[str, str]] = {
    "empty": ("", ""),
    "already_used": ("Word used already", "Be more original"),
    "not_possible": ("Word not possible", "You can't spell that word from '{root}'!"),
    "not_recognized": ("Word not recognized", "You can't just make them up, you know!"),
    "too_short": ("Word too short!", "Needs to be bigger then 3 letters"),
}


@dataclass(frozen=True)
class Accepted:
    """
    A word that passed every check.

    `validate` leaves the totals as None; `engine.submit_word` fills in the
    points earned and the session totals after adding the word.
    """
    word: str
    points: Optional[int] = None
    score: Optional[int] = None
    used_words: Optional[Tuple[str, ...]] = None

    accepted = True


@dataclass(frozen=True)
class Rejected:
    """A refused candidate; carries what the UI needs to explain why."""
    reason: RejectReason
    word: str
    root_word: str

    accepted = False

    @property
    def title(self) -> str:
        return _MESSAGES[self.reason][0]

    @property
    def message(self) -> str:
        return _MESSAGES[self.reason][1].format(root=self.root_word)


SubmitResult = Union[Accepted, Rejected]


def normalize(raw: str) -> str:
    """Lowercase and trim surrounding whitespace (newlines included)."""
    return (raw or "").strip().lower()


def is_original(word: str, state: SessionState) -> bool:
    return word not in state.used_words


def is_not_root(word: str, state: SessionState) -> bool:
    # Any candidate containing the root is refused, not only the root itself.
    return state.root_word not in word


def is_possible(word: str, state: SessionState) -> bool:
    return LetterMultiset.from_word(state.root_word).can_spell(word)


def is_real(word: str, oracle: DictionaryOracle, language: str = DEFAULT_LANGUAGE) -> bool:
    """Ask the oracle; an oracle that fails counts as "not a word"."""
    try:
        return bool(oracle.is_real_word(word, language))
    except Exception:
        logger.warning("dictionary lookup failed for %r; treating as unrecognized", word, exc_info=True)
        return False


def is_long_enough(word: str) -> bool:
    return len(word) >= MIN_WORD_LENGTH


def validate(
        candidate: str,
        state: SessionState,
        oracle: DictionaryOracle,
        language: str = DEFAULT_LANGUAGE,
) -> SubmitResult:
    """
    Classify an already-normalized `candidate` against `state`.

    Returns
    -------
    Accepted
        With only `word` set; `points`, `score` and `used_words` stay None.
    Rejected
        With the first failing reason, in the order listed in the module docstring.
    """
    if not candidate:
        return Rejected("empty", candidate, state.root_word)
    if not is_original(candidate, state):
        return Rejected("already_used", candidate, state.root_word)
    if not is_not_root(candidate, state):
        return Rejected("already_used", candidate, state.root_word)
    if not is_possible(candidate, state):
        return Rejected("not_possible", candidate, state.root_word)
    if not is_real(candidate, oracle, language):
        return Rejected("not_recognized", candidate, state.root_word)
    if not is_long_enough(candidate):
        return Rejected("too_short", candidate, state.root_word)
    return Accepted(candidate)
