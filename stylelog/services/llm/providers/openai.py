from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, List

from openai import AsyncOpenAI, OpenAIError

from stylelog.services.llm.prompts import build_chat_prompt
from stylelog.services.llm.providers.base import LLMUnavailableError
from stylelog.services.llm.types import LLMUsage, StyleChatInput, StyleChatOutput

logger = logging.getLogger("uvicorn.error")


class OpenAIProvider:
    name = "openai"

    def __init__(self, model_chat: str, max_output_tokens: int = 800, client: AsyncOpenAI | None = None):
        self.client = client or AsyncOpenAI()
        self.model_chat = model_chat
        self.max_output_tokens = max_output_tokens

    async def _chat(self, messages: List[Dict[str, Any]], model: str, timeout_ms: int) -> Dict[str, Any]:
        start = time.perf_counter()
        logger.info("llm:openai request model=%s timeout_ms=%s", model, timeout_ms)
        try:
            resp = await asyncio.wait_for(
                self.client.chat.completions.create(
                    model=model,
                    messages=messages,
                    temperature=0.7,
                    max_tokens=self.max_output_tokens,
                ),
                timeout=timeout_ms / 1000.0,
            )
        except asyncio.TimeoutError as exc:
            logger.warning("llm:openai timeout model=%s timeout_ms=%s", model, timeout_ms)
            raise LLMUnavailableError("timeout") from exc
        except OpenAIError as exc:
            logger.warning("llm:openai error model=%s err=%s", model, type(exc).__name__)
            raise LLMUnavailableError(type(exc).__name__) from exc
        latency_ms = int((time.perf_counter() - start) * 1000)
        choice = resp.choices[0].message.content if resp.choices else ""
        return {
            "content": choice or "",
            "latency_ms": latency_ms,
            "tokens_in": getattr(resp.usage, "prompt_tokens", 0) if resp.usage else 0,
            "tokens_out": getattr(resp.usage, "completion_tokens", 0) if resp.usage else 0,
        }

    async def style_chat(self, payload: StyleChatInput, *, timeout_ms: int) -> StyleChatOutput:
        messages = build_chat_prompt(payload)
        res = await self._chat(messages, self.model_chat, timeout_ms)
        return StyleChatOutput(
            answer=res["content"].strip(),
            usage=LLMUsage(
                model=self.model_chat,
                tokens_in=res["tokens_in"],
                tokens_out=res["tokens_out"],
                latency_ms=res["latency_ms"],
                prompt_version=payload.prompt_version,
            ),
        )
