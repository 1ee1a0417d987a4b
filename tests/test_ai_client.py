# tests/test_ai_client.py

from types import SimpleNamespace

import pytest

from core.ai_client import GenerationError, OpenAITextGenerator, build_generator


class _FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _generator(completions):
    gen = OpenAITextGenerator(api_key="test-key")
    gen.client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return gen


def test_no_api_key_means_no_generator(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    assert build_generator() is None


def test_api_key_builds_openai_generator(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "test-key")

    assert isinstance(build_generator(), OpenAITextGenerator)


def test_generate_sends_prompt_and_model():
    completions = _FakeCompletions(content="  Summary text  ")

    text = _generator(completions).generate("Analyze this", "gpt-4o-mini")

    assert text == "Summary text"
    assert completions.kwargs["model"] == "gpt-4o-mini"
    assert completions.kwargs["messages"] == [{"role": "user", "content": "Analyze this"}]


def test_empty_response_is_generation_error():
    with pytest.raises(GenerationError):
        _generator(_FakeCompletions(content="")).generate("p", "m")


def test_sdk_errors_become_generation_error():
    from openai import OpenAIError

    completions = _FakeCompletions(error=OpenAIError("rate limited"))

    with pytest.raises(GenerationError):
        _generator(completions).generate("p", "m")
