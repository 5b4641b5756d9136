from typing import List, Optional
from pydantic import BaseModel, Field


class ChatIn(BaseModel):
    message: str = Field(min_length=1, max_length=4000)
    session_id: str = Field("default", min_length=1, max_length=128)


class ChatImageOut(BaseModel):
    url: str
    filename: str
    is_reference: bool = True


class ChatOut(BaseModel):
    response: str
    images: List[ChatImageOut] = Field(default_factory=list)
    model: Optional[str] = None
