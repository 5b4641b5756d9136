from __future__ import annotations

import logging

from stylelog.core.config import settings
from stylelog.services.llm.prompts import PROMPT_VERSION
from stylelog.services.llm.providers.base import LLMProvider, LLMUnavailableError, NullProvider
from stylelog.services.llm.types import LLMUsage, StyleChatInput, StyleChatOutput

logger = logging.getLogger("uvicorn.error")

FALLBACK_ANSWER = "I couldn't reach the style assistant just now. Please try again in a moment."

_provider: LLMProvider | None = None


def get_provider() -> LLMProvider:
    global _provider
    if _provider:
        return _provider
    if not settings.LLM_ENABLED:
        _provider = NullProvider()
        return _provider
    name = (settings.LLM_PROVIDER or "openai").lower()
    if name == "openai":
        from stylelog.services.llm.providers.openai import OpenAIProvider

        _provider = OpenAIProvider(settings.LLM_MODEL_CHAT, settings.LLM_MAX_OUTPUT_TOKENS)
    else:
        _provider = NullProvider()
    return _provider


async def style_chat(payload: StyleChatInput, provider: LLMProvider | None = None) -> StyleChatOutput:
    payload.prompt_version = payload.prompt_version or PROMPT_VERSION
    provider = provider or get_provider()
    try:
        return await provider.style_chat(payload, timeout_ms=settings.LLM_CHAT_TIMEOUT_MS)
    except LLMUnavailableError as exc:
        logger.warning("llm:chat fallback provider=%s reason=%s", getattr(provider, "name", "?"), exc)
        return StyleChatOutput(
            answer=FALLBACK_ANSWER,
            usage=LLMUsage(model=getattr(provider, "name", ""), prompt_version=payload.prompt_version),
            error=str(exc),
        )
