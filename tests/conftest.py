import pytest

from src.core.dictionary import StaticDictionary

WORDS = ["silk", "worm", "worms", "milk", "mills", "slow", "owl", "silo", "limo", "milks", "wormils"]


class FixedSource:
    """Root-word source that hands out the given words in order, then repeats the last."""

    def __init__(self, *words):
        self.words = list(words)
        self.calls = 0

    def pick_random(self) -> str:
        w = self.words[min(self.calls, len(self.words) - 1)]
        self.calls += 1
        return w


class BrokenOracle:
    def is_real_word(self, word, language):
        raise ConnectionError("spellchecker offline")


@pytest.fixture
def oracle():
    return StaticDictionary(WORDS + ["silkworm", "silkworms"])
