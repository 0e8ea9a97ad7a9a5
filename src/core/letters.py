from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LetterMultiset:
    """
    Per-letter available counts derived from a source word.

    Notes
    -----
    - This is a multiset, not a set: the root "see" offers two 'e's and one 's',
      so it cannot spell "sees".
    - Instances are never mutated; `can_spell` works on a copy.
    """

    counts: Counter = field(default_factory=Counter)

    @classmethod
    def from_word(cls, word: str) -> "LetterMultiset":
        return cls(counts=Counter(word))

    def can_spell(self, target: str) -> bool:
        """
        Return True if every character of `target` can be taken from this multiset.

        Characters are consumed in order from a working copy; the first one with
        no remaining units fails the check.
        """
        remaining = Counter(self.counts)
        for ch in target:
            if remaining[ch] <= 0:
                return False
            remaining[ch] -= 1
        return True

    def count(self, letter: str) -> int:
        return self.counts.get(letter, 0)

    def __len__(self) -> int:
        return sum(self.counts.values())
