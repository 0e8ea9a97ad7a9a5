import pytest
from src.core.letters import LetterMultiset


@pytest.mark.parametrize("root,target,expected", [
    ("silkworm", "silk", True),
    ("silkworm", "worms", True),
    ("silkworm", "silkworm", True),
    ("silkworm", "mills", False),   # needs two 'l'
    ("silkworm", "silkworms", False),
    ("see", "sees", False),         # multiset, not set
    ("see", "see", True),
    ("abc", "", True),
    ("", "a", False),
])
def test_can_spell(root, target, expected):
    assert LetterMultiset.from_word(root).can_spell(target) is expected


def test_can_spell_does_not_consume_letters():
    letters = LetterMultiset.from_word("silkworm")
    assert letters.can_spell("silk") is True
    assert letters.can_spell("silk") is True
    assert letters.count("s") == 1 and len(letters) == 8


def test_count_missing_letter_is_zero():
    assert LetterMultiset.from_word("see").count("z") == 0
    assert LetterMultiset.from_word("see").count("e") == 2
