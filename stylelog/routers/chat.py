from fastapi import APIRouter, Depends

from stylelog.auth.deps import get_current_user_id
from stylelog.chat.relay import relay_chat
from stylelog.chat.sessions import ChatSessionStore, get_chat_store
from stylelog.schemas.chat import ChatIn, ChatOut
from stylelog.services import llm as llm_service
from stylelog.services.llm.providers.base import LLMProvider
from stylelog.store import OutfitStore, get_store

router = APIRouter(prefix="/chat", tags=["chat"], dependencies=[Depends(get_current_user_id)])


def get_chat_provider() -> LLMProvider:
    return llm_service.get_provider()


@router.post("", response_model=ChatOut)
async def chat(
    body: ChatIn,
    sessions: ChatSessionStore = Depends(get_chat_store),
    store: OutfitStore = Depends(get_store),
    provider: LLMProvider = Depends(get_chat_provider),
):
    return await relay_chat(body.message, body.session_id, sessions, store, provider=provider)
