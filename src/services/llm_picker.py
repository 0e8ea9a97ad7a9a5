from __future__ import annotations

import logging
import os
import re
from typing import Optional

from openai import OpenAI

from src.core.wordlist import RootWordSource

logger = logging.getLogger(__name__)

# Root words are exactly eight lowercase letters, like the bundled start list.
_ROOT_WORD = re.compile(r"^[a-z]{8}$")


def pick_with_llm(retries: int = 2, model: Optional[str] = None) -> Optional[str]:
    """
    Try to pick ONE eight-letter root word via an LLM. Returns None on failure
    (caller should fallback).

    Safety
    ------
    - OFFLINE_MODE=true or missing OPENAI_API_KEY -> returns None immediately.
    - Prompts the model to output exactly ONE word (lowercase, a–z only).
    - Validates with a regex; retries a few times; then gives up.
    """
    api_key = os.getenv("OPENAI_API_KEY", "")
    offline = os.getenv("OFFLINE_MODE", "true").lower() == "true"
    if offline or not api_key:
        return None

    prompt = (
        "Give me one common English word that is exactly 8 letters long, "
        "suitable for making smaller words out of its letters. "
        "It should be different each time. Output only the word in lowercase."
    )

    client = OpenAI(api_key=api_key)
    mdl = model or os.getenv("MODEL_NAME", "gpt-4o-mini")

    attempts = retries + 1
    for _ in range(attempts):
        try:
            resp = client.chat.completions.create(
                model=mdl,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.9,
                max_tokens=20,
            )
        except Exception:
            logger.info("LLM root word request failed", exc_info=True)
            continue
        # Tighten: strip quotes/spaces/punctuation and force lowercase
        word = (resp.choices[0].message.content or "").strip().strip("\"'.").lower()
        if _ROOT_WORD.match(word):
            return word
        logger.info("LLM returned an unusable root word: %r", word)

    return None  # let caller fallback to local source


class LLMRootWordSource:
    """Root words from the LLM when available, otherwise from `fallback_source`."""

    def __init__(self, fallback_source: RootWordSource):
        self.fallback_source = fallback_source
        self.last_source = "unknown"

    def pick_random(self) -> str:
        word = pick_with_llm()
        if word:
            self.last_source = "llm"
            return word
        self.last_source = "local"
        return self.fallback_source.pick_random()
