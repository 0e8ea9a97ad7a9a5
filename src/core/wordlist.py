from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List, Optional, Protocol

logger = logging.getLogger(__name__)

# Project-local start words live here:
_DATA_DIR = Path("data")
DEFAULT_START_WORDS = _DATA_DIR / "start.txt"


class StartWordsUnavailable(RuntimeError):
    """The start-word list is missing or empty and no fallback word is configured."""


class RootWordSource(Protocol):
    """Anything that can hand out one root word per new game."""

    def pick_random(self) -> str: ...


def _read_lines(path: Path) -> List[str]:
    """
    Read a text file (UTF-8) and return non-empty, stripped, lowercase lines.

    Notes
    -----
    - Raises StartWordsUnavailable if the file is missing, unreadable or not UTF-8.
    - Each line should contain exactly one word.
    """
    try:
        raw = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise StartWordsUnavailable(f"Could not load start words from {path}") from e
    return [ln.strip().lower() for ln in raw if ln.strip()]


def load_start_words(path: Path | str = DEFAULT_START_WORDS) -> List[str]:
    """
    Load the newline-delimited start-word list.

    Raises
    ------
    StartWordsUnavailable
        If the file cannot be read or holds no words.
    """
    words = _read_lines(Path(path))
    if not words:
        raise StartWordsUnavailable(f"Start-word list {path} is empty")
    return words


class StartWordList:
    """
    Root words drawn uniformly at random from a start-word file.

    Fallback strategy
    -----------------
    1) Pick from the words in `path` (read lazily, once).
    2) If the file is missing or empty and `fallback` is set, use `fallback`.
    3) Otherwise raise StartWordsUnavailable: a game cannot start without a root.

    Parameters
    ----------
    path : Path | str
        Newline-delimited word list.
    fallback : str | None
        Word to use when the list is unavailable; None makes that fatal.
    seed : int | None
        Optional seed for reproducible picks during tests or demos.
    """

    def __init__(
            self,
            path: Path | str = DEFAULT_START_WORDS,
            *,
            fallback: Optional[str] = None,
            seed: int | None = None,
    ):
        self.path = Path(path)
        self.fallback = (fallback or "").strip().lower() or None
        self.rng = random.Random(seed)
        self._words: Optional[List[str]] = None

    @property
    def words(self) -> List[str]:
        if self._words is None:
            self._words = load_start_words(self.path)
        return self._words

    def pick_random(self) -> str:
        try:
            return self.rng.choice(self.words)
        except StartWordsUnavailable:
            if self.fallback is None:
                raise
            logger.warning("start words unavailable at %s; using fallback %r", self.path, self.fallback)
            return self.fallback
