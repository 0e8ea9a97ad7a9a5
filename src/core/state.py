from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class SessionState:
    """
    Immutable container for one WordScramble session.

    Notes
    -----
    - `used_words` is ordered most-recent first and never holds duplicates.
    - The engine never edits a state in place; every accepted word produces a
      new `SessionState`, so a rejected submission can hand back the very same
      object and a reset is a single swap of the whole value.
    - Rule transitions live in `core.engine`; this file only defines the data
      structure and basic normalization/validation.
    """

    root_word: str
    used_words: Tuple[str, ...] = field(default_factory=tuple)
    score: int = 0

    def __post_init__(self) -> None:
        """
        Normalize and validate fields.

        Normalization
        -------------
        - `root_word` is trimmed and lowercased.
        - `used_words` is coerced to a tuple.

        Validation
        ----------
        - `root_word` must be non-empty.
        - `score` must be >= 0.
        """
        rw = (self.root_word or "").strip().lower()
        if not rw:
            raise ValueError("`root_word` must be a non-empty string.")
        object.__setattr__(self, "root_word", rw)
        object.__setattr__(self, "used_words", tuple(self.used_words or ()))

        if self.score < 0:
            raise ValueError("`score` must be >= 0.")
