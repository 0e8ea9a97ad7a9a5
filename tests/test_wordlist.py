from pathlib import Path

import pytest

from src.core.wordlist import StartWordList, StartWordsUnavailable, load_start_words


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_start_words_cleans_lines(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Silkworm\n\n  scramble  \r\n", encoding="utf-8")
    assert load_start_words(p) == ["silkworm", "scramble"]


def test_pick_random_is_reproducible(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["silkworm", "scramble", "elephant", "triangle"])
    a = [StartWordList(p, seed=3).pick_random() for _ in range(5)]
    b = [StartWordList(p, seed=3).pick_random() for _ in range(5)]
    assert a == b
    assert set(a) <= {"silkworm", "scramble", "elephant", "triangle"}


@pytest.mark.parametrize("create", [False, True])
def test_unavailable_without_fallback_is_fatal(tmp_path: Path, create):
    p = tmp_path / "start.txt"
    if create:
        p.write_text("\n\n", encoding="utf-8")
    with pytest.raises(StartWordsUnavailable):
        StartWordList(p).pick_random()


@pytest.mark.parametrize("create", [False, True])
def test_unavailable_with_fallback(tmp_path: Path, create):
    p = tmp_path / "start.txt"
    if create:
        p.write_text("", encoding="utf-8")
    assert StartWordList(p, fallback="Silkworm").pick_random() == "silkworm"


def test_bundled_start_words():
    words = load_start_words(Path(__file__).resolve().parent.parent / "data" / "start.txt")
    assert "silkworm" in words
    assert all(len(w) == 8 and w.isalpha() for w in words)


def test_undecodable_file_without_fallback_is_fatal(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_bytes(b"silk\xffworm\n")
    with pytest.raises(StartWordsUnavailable):
        StartWordList(p).pick_random()


def test_undecodable_file_uses_fallback(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_bytes(b"silk\xffworm\n")
    assert StartWordList(p, fallback="silkworm").pick_random() == "silkworm"
