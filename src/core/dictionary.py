from __future__ import annotations

import os
from functools import lru_cache
from typing import Iterable, List, Optional, Protocol, Set

from wordfreq import top_n_list, zipf_frequency

# Game language; the rules only ever ask about English.
DEFAULT_LANGUAGE = "en"

# Distinct (word, language) answers kept per dictionary.
LOOKUP_CACHE_SIZE = 4096


class DictionaryOracle(Protocol):
    """Anything that can tell whether `word` is a real word in `language`."""

    def is_real_word(self, word: str, language: str) -> bool: ...


class WordfreqDictionary:
    """
    Dictionary backed by the `wordfreq` corpus.

    A word counts as real when its Zipf frequency reaches `min_zipf`
    (0 means "never seen"; everyday words sit around 3-6). Recent answers are
    cached per (word, language) in a bounded LRU cache; wordfreq data is static,
    so a lookup that falls out of the cache gets the same answer again.
    """

    def __init__(self, min_zipf: Optional[float] = None):
        if min_zipf is None:
            min_zipf = float(os.getenv("DICTIONARY_MIN_ZIPF", "2.0"))
        self.min_zipf = min_zipf
        self._lookup = lru_cache(maxsize=LOOKUP_CACHE_SIZE)(self._is_frequent)

    def _is_frequent(self, word: str, language: str) -> bool:
        return zipf_frequency(word, language) >= self.min_zipf

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        return self._lookup(word.lower(), language)

    def vocabulary(self, language: str = DEFAULT_LANGUAGE, n: int = 50000) -> List[str]:
        """
        Return the real words (same `min_zipf` rule as `is_real_word`) among the
        `n` most frequent alphabetic words of `language`, lowercased.
        Used by the hint service to look for words the player has not found yet.
        """
        words = (w.lower() for w in top_n_list(language, n) if w.isalpha())
        # Scanned outside the lookup cache.
        return [w for w in words if self._is_frequent(w, language)]


class StaticDictionary:
    """Small in-memory dictionary; handy for tests and offline play."""

    def __init__(self, words: Iterable[str], language: str = DEFAULT_LANGUAGE):
        self.language = language
        # Store lowercase words
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word or language != self.language:
            return False
        return word.lower() in self._words

    def vocabulary(self, language: str = DEFAULT_LANGUAGE, n: int = 50000) -> List[str]:
        if language != self.language:
            return []
        return sorted(self._words)[:n]
