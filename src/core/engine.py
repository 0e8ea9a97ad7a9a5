from __future__ import annotations

from typing import Tuple

from .dictionary import DEFAULT_LANGUAGE, DictionaryOracle
from .rules import Accepted, SubmitResult, normalize, validate
from .scoring import score_word
from .state import SessionState
from .wordlist import RootWordSource


def new_session(source: RootWordSource) -> SessionState:
    """
    Start a new game using the provided source to choose the root word.

    Parameters
    ----------
    source : RootWordSource
        Object whose `pick_random()` returns one root word. This can be the local
        start-word list or an LLM-based picker; the engine does not care.

    Returns
    -------
    SessionState
        A fresh state with no used words and a score of 0.

    Raises
    ------
    StartWordsUnavailable
        Propagated from the source when no root word can be produced.
    """
    return SessionState(root_word=source.pick_random(), used_words=(), score=0)


def submit_word(
        state: SessionState,
        raw: str,
        oracle: DictionaryOracle,
        language: str = DEFAULT_LANGUAGE,
) -> Tuple[SessionState, SubmitResult]:
    """
    Apply one player submission and return `(new_state, result)`.

    Behavior
    --------
    - `raw` is normalized exactly once, then validated against `state`.
    - On acceptance the word is prepended to `used_words` and its points are
      added to `score`.
    - On rejection the input `state` object itself is returned unchanged.
    """
    word = normalize(raw)
    verdict = validate(word, state, oracle, language)
    if not isinstance(verdict, Accepted):
        return state, verdict

    points = score_word(word)
    new_state = SessionState(
        root_word=state.root_word,
        used_words=(word,) + state.used_words,
        score=state.score + points,
    )
    return new_state, Accepted(word, points=points, score=new_state.score, used_words=new_state.used_words)
