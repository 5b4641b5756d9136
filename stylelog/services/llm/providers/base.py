from __future__ import annotations

from typing import Protocol

from stylelog.services.llm.types import LLMUsage, StyleChatInput, StyleChatOutput

DISABLED_ANSWER = (
    "The style assistant is not configured yet. Set LLM_ENABLED=true and an OPENAI_API_KEY "
    "to chat about your outfits."
)


class LLMUnavailableError(RuntimeError):
    """Provider call failed or timed out."""


class LLMProvider(Protocol):
    name: str

    async def style_chat(self, payload: StyleChatInput, *, timeout_ms: int) -> StyleChatOutput:
        ...


class NullProvider:
    """Safety net provider used when LLM is disabled."""

    name = "disabled"

    async def style_chat(self, payload: StyleChatInput, *, timeout_ms: int) -> StyleChatOutput:
        return StyleChatOutput(
            answer=DISABLED_ANSWER,
            usage=LLMUsage(model=self.name, prompt_version=payload.prompt_version),
        )
