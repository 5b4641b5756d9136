import asyncio
from types import SimpleNamespace

import pytest

from stylelog.services import llm as llm_service
from stylelog.services.llm.prompts import build_chat_prompt, is_low_effort, wants_images
from stylelog.services.llm.providers.base import LLMUnavailableError, NullProvider
from stylelog.services.llm.providers.openai import OpenAIProvider
from stylelog.services.llm.types import ChatImage, StyleChatInput


class DummyCompletions:
    def __init__(self, content="Try the navy blazer.", delay=0.0):
        self.content = content
        self.delay = delay
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.delay:
            await asyncio.sleep(self.delay)
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=self.content))],
            usage=SimpleNamespace(prompt_tokens=120, completion_tokens=30),
        )


def _client(completions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def test_prompt_has_images_and_history():
    payload = StyleChatInput(
        message="what should I wear?",
        history=[{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}],
        outfit_context=["2026-10-01; occasion: work"],
        images=[ChatImage(filename="look1.jpg", url="https://cdn.test/look1.jpg")],
    )
    messages = build_chat_prompt(payload)
    assert messages[0]["role"] == "system"
    assert "occasion: work" in messages[0]["content"]
    assert "PHOTO_REFS" in messages[0]["content"]
    assert messages[1:3] == payload.history
    parts = messages[-1]["content"]
    assert parts[0] == {"type": "text", "text": "what should I wear?"}
    assert parts[1]["image_url"]["url"] == "https://cdn.test/look1.jpg"


def test_keyword_detection():
    assert is_low_effort("too tired to think")
    assert not is_low_effort("show me something bold")
    assert wants_images("hello", first_turn=True)
    assert wants_images("any outfit ideas?", first_turn=False)
    assert not wants_images("thanks", first_turn=False)


@pytest.mark.asyncio
async def test_openai_provider_maps_response():
    completions = DummyCompletions()
    provider = OpenAIProvider("gpt-4o", max_output_tokens=300, client=_client(completions))
    out = await provider.style_chat(StyleChatInput(message="hi"), timeout_ms=1000)
    assert out.answer == "Try the navy blazer."
    assert out.usage.model == "gpt-4o"
    assert out.usage.tokens_in == 120
    assert completions.calls[0]["max_tokens"] == 300


@pytest.mark.asyncio
async def test_timeout_becomes_unavailable():
    provider = OpenAIProvider("gpt-4o", client=_client(DummyCompletions(delay=1)))
    with pytest.raises(LLMUnavailableError):
        await provider.style_chat(StyleChatInput(message="hi"), timeout_ms=10)


@pytest.mark.asyncio
async def test_style_chat_falls_back(monkeypatch):
    monkeypatch.setattr(llm_service.settings, "LLM_CHAT_TIMEOUT_MS", 10)
    provider = OpenAIProvider("gpt-4o", client=_client(DummyCompletions(delay=1)))
    out = await llm_service.style_chat(StyleChatInput(message="hi"), provider=provider)
    assert out.answer == llm_service.FALLBACK_ANSWER
    assert out.error == "timeout"


def test_disabled_by_default(monkeypatch):
    monkeypatch.setattr(llm_service, "_provider", None)
    monkeypatch.setattr(llm_service.settings, "LLM_ENABLED", False)
    assert isinstance(llm_service.get_provider(), NullProvider)
