from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class LLMUsage(BaseModel):
    model: str = ""
    tokens_in: int = 0
    tokens_out: int = 0
    latency_ms: int = 0
    prompt_version: str = "p1"


class ChatImage(BaseModel):
    filename: str
    url: str


class StyleChatInput(BaseModel):
    message: str
    history: List[Dict[str, Any]] = Field(default_factory=list)
    outfit_context: List[str] = Field(default_factory=list)
    images: List[ChatImage] = Field(default_factory=list)
    low_effort: bool = False
    prompt_version: str = "p1"


class StyleChatOutput(BaseModel):
    answer: str
    usage: LLMUsage = Field(default_factory=LLMUsage)
    error: Optional[str] = None
