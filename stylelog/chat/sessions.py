import json
from collections import OrderedDict
from functools import lru_cache
from typing import Any, Dict, List, Protocol, Sequence

from redis.asyncio import Redis

from stylelog.core.config import settings

Message = Dict[str, Any]


class ChatSessionStore(Protocol):
    async def history(self, session_id: str) -> List[Message]:
        ...

    async def append(self, session_id: str, messages: Sequence[Message]) -> None:
        ...

    async def clear(self, session_id: str) -> None:
        ...


class InMemoryChatSessionStore:
    """Per-process chat history.

    Each session keeps its last ``max_messages`` messages; once ``max_sessions``
    sessions exist the least recently used one is evicted.
    """

    def __init__(self, max_messages: int = 20, max_sessions: int = 500):
        self.max_messages = max_messages
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, List[Message]]" = OrderedDict()

    async def history(self, session_id: str) -> List[Message]:
        msgs = self._sessions.get(session_id)
        if msgs is None:
            return []
        self._sessions.move_to_end(session_id)
        return [dict(m) for m in msgs]

    async def append(self, session_id: str, messages: Sequence[Message]) -> None:
        msgs = self._sessions.setdefault(session_id, [])
        msgs.extend(dict(m) for m in messages)
        del msgs[: max(0, len(msgs) - self.max_messages)]
        self._sessions.move_to_end(session_id)
        while len(self._sessions) > self.max_sessions:
            self._sessions.popitem(last=False)

    async def clear(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)


class RedisChatSessionStore:
    """History as a Redis list per session, trimmed to the cap and expired after a TTL."""

    def __init__(self, redis: Redis, max_messages: int = 20, ttl_s: int = 86400, prefix: str = "chat:"):
        self.redis = redis
        self.max_messages = max_messages
        self.ttl_s = ttl_s
        self.prefix = prefix

    def _key(self, session_id: str) -> str:
        return f"{self.prefix}{session_id}"

    async def history(self, session_id: str) -> List[Message]:
        raw = await self.redis.lrange(self._key(session_id), 0, -1)
        return [json.loads(r) for r in raw]

    async def append(self, session_id: str, messages: Sequence[Message]) -> None:
        if not messages:
            return
        key = self._key(session_id)
        async with self.redis.pipeline(transaction=True) as pipe:
            pipe.rpush(key, *(json.dumps(m) for m in messages))
            pipe.ltrim(key, -self.max_messages, -1)
            pipe.expire(key, self.ttl_s)
            await pipe.execute()

    async def clear(self, session_id: str) -> None:
        await self.redis.delete(self._key(session_id))


@lru_cache(maxsize=1)
def get_chat_store() -> ChatSessionStore:
    if settings.CHAT_SESSION_BACKEND.lower() == "redis":
        redis = Redis.from_url(settings.REDIS_URL, decode_responses=True)
        return RedisChatSessionStore(redis, settings.CHAT_HISTORY_MAX, settings.CHAT_SESSION_TTL_S)
    return InMemoryChatSessionStore(settings.CHAT_HISTORY_MAX, settings.CHAT_MAX_SESSIONS)
