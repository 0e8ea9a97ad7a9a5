from types import SimpleNamespace

import src.services.llm_picker as llm_picker
from src.services.llm_picker import LLMRootWordSource, pick_with_llm
from conftest import FixedSource


def _fake_client(*replies):
    """OpenAI stand-in whose chat completions return `replies` in order."""
    it = iter(replies)

    def create(**kwargs):
        r = next(it)
        if isinstance(r, Exception):
            raise r
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=r))])

    return lambda api_key: SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


def test_offline_returns_none(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "true")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    assert pick_with_llm() is None


def test_picks_valid_word_after_retries(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "false")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(llm_picker, "OpenAI", _fake_client(TimeoutError(), "two words", '"Elephant."'))
    assert pick_with_llm(retries=2) == "elephant"


def test_source_falls_back_to_local(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "false")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(llm_picker, "OpenAI", _fake_client("cat", "dog", "bird"))
    source = LLMRootWordSource(FixedSource("silkworm"))
    assert source.pick_random() == "silkworm"
    assert source.last_source == "local"


def test_source_uses_llm_word(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "false")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(llm_picker, "OpenAI", _fake_client("triangle"))
    source = LLMRootWordSource(FixedSource("silkworm"))
    assert source.pick_random() == "triangle"
    assert source.last_source == "llm"
