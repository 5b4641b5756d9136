from functools import lru_cache

from stylelog.core.config import settings
from stylelog.store.base import OutfitStore
from stylelog.store.in_memory import InMemoryOutfitStore
from stylelog.store.types import (
    OutfitNotFoundError,
    OutfitQuery,
    RecordNotFoundError,
    WardrobeItemNotFoundError,
)


@lru_cache(maxsize=1)
def get_store() -> OutfitStore:
    backend = settings.STORE_BACKEND.lower()
    if backend == "sql":
        from stylelog.core.db import SessionLocal
        from stylelog.store.sql import SQLOutfitStore

        return SQLOutfitStore(SessionLocal)
    if backend == "memory":
        return InMemoryOutfitStore()
    raise ValueError(f"unknown STORE_BACKEND: {settings.STORE_BACKEND}")


__all__ = [
    "OutfitStore",
    "InMemoryOutfitStore",
    "OutfitQuery",
    "RecordNotFoundError",
    "OutfitNotFoundError",
    "WardrobeItemNotFoundError",
    "get_store",
]
