from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional

from openai import OpenAI

from src.core.letters import LetterMultiset
from src.core.rules import MIN_WORD_LENGTH

logger = logging.getLogger(__name__)


def find_words(root: str, vocabulary: Iterable[str], used: Iterable[str] = (),
               min_length: int = MIN_WORD_LENGTH) -> List[str]:
    """
    Vocabulary words that would still be accepted in this game, longest first.

    Same rules as the validator except the dictionary lookup (the vocabulary
    already is the dictionary): spellable from `root`, not containing it,
    not yet used, at least `min_length` letters. Ties sort alphabetically.
    """
    letters = LetterMultiset.from_word(root)
    used_set = set(used)
    found = {
        w for w in vocabulary
        if len(w) >= min_length and w not in used_set and root not in w and letters.can_spell(w)
    }
    return sorted(found, key=lambda w: (-len(w), w))


def local_hint(root: str, used: Iterable[str], vocabulary: Iterable[str]) -> str:
    """Always-available local hint (simple and safe)."""
    remaining = find_words(root, vocabulary, used)
    if not remaining:
        return f"Looks like you've found every word I know in '{root}'. Try a new word!"
    target = remaining[0]
    return (
        f"There's still a {len(target)}-letter word starting with '{target[0].upper()}' "
        f"({len(remaining)} left in total)."
    )


# Reject only if the hint literally contains the hidden word (case-insensitive).
def _contains_answer(text: str, answer: str) -> bool:
    return answer.lower() in (text or "").lower()


def llm_hint(root: str, used: Iterable[str], vocabulary: Iterable[str],
             model: Optional[str] = None, temperature: float = 0.8) -> str:
    """
    Return ONE clue for a word the player hasn't found yet; fallback locally on failure.

    - The clue target is the longest remaining word from `find_words`.
    - Accept any text as long as it does NOT contain the target word itself.
    - Offline, no remaining words, errors, or rule violations -> `local_hint`.
    """
    used = list(used)
    vocabulary = list(vocabulary)

    api_key = os.getenv("OPENAI_API_KEY", "")
    offline = os.getenv("OFFLINE_MODE", "true").lower() == "true"
    remaining = find_words(root, vocabulary, used)
    if offline or not api_key or not remaining:
        return local_hint(root, used, vocabulary)

    target = remaining[0]
    client = OpenAI(api_key=api_key)
    mdl = model or os.getenv("MODEL_NAME", "gpt-4o-mini")

    system = "You are a helpful clue-giver for a word scramble game."
    user = (
        f"The player must find words made from the letters of '{root}'. "
        f"One word they haven't found is '{target}'. "
        "Give exactly ONE short, natural-sounding hint for it. "
        "Do NOT include the word itself. Reply with the hint only."
    )

    try:
        resp = client.chat.completions.create(
            model=mdl,
            messages=[{"role": "system", "content": system},
                      {"role": "user", "content": user}],
            temperature=temperature,
            max_tokens=80,
        )
        text = (resp.choices[0].message.content or "").strip()
    except Exception:
        logger.info("LLM hint request failed", exc_info=True)
        return local_hint(root, used, vocabulary)

    if not text or _contains_answer(text, target):
        return local_hint(root, used, vocabulary)
    # Trim extreme verbosity (soft cap ~25 words)
    words = text.split()
    if len(words) > 25:
        text = " ".join(words[:25])
    return text


__all__ = ["find_words", "local_hint", "llm_hint"]
