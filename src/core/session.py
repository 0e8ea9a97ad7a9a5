from __future__ import annotations

import logging
from typing import Optional, Tuple

from .dictionary import DEFAULT_LANGUAGE, DictionaryOracle
from .engine import new_session, submit_word
from .rules import SubmitResult
from .state import SessionState
from .wordlist import RootWordSource

logger = logging.getLogger(__name__)


class GameSession:
    """
    One player's game: the current root word, accepted words and score.

    The session starts Idle; `reset()` moves it to Active (and restarts it any
    time later). `submit()` is the only other mutation. Callers own the object
    and must serialize access to it; there is no internal locking.
    """

    def __init__(self, source: RootWordSource, oracle: DictionaryOracle, language: str = DEFAULT_LANGUAGE):
        self.source = source
        self.oracle = oracle
        self.language = language
        self.state: Optional[SessionState] = None

    @property
    def is_active(self) -> bool:
        return self.state is not None

    def reset(self) -> SessionState:
        """
        Draw a new root word and clear used words and score.

        The new state is built before it replaces the old one, so a failing
        root-word source leaves the current game untouched.
        """
        fresh = new_session(self.source)
        self.state = fresh
        logger.debug("new game with root %r", fresh.root_word)
        return fresh

    def submit(self, raw: str) -> SubmitResult:
        if self.state is None:
            raise RuntimeError("No game in progress; call reset() first.")
        self.state, result = submit_word(self.state, raw, self.oracle, self.language)
        return result

    @property
    def root_word(self) -> str:
        return self.state.root_word if self.state else ""

    @property
    def used_words(self) -> Tuple[str, ...]:
        return self.state.used_words if self.state else ()

    @property
    def score(self) -> int:
        return self.state.score if self.state else 0
