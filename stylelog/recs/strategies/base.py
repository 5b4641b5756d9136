from typing import Optional, Protocol, Sequence

from stylelog.schemas.outfits import Outfit
from stylelog.schemas.recs import RecommendationContext
from stylelog.store.records import as_utc


class Strategy(Protocol):
    name: str
    reasons: tuple[str, ...]

    def pick(self, history: Sequence[Outfit], context: RecommendationContext) -> Optional[Outfit]:
        ...


def recency(outfit: Outfit) -> tuple[float, str]:
    """Sort key suffix: newer first, then id, so picks are stable."""
    return as_utc(outfit.timestamp).timestamp(), outfit.id


def rated(history: Sequence[Outfit]) -> list[Outfit]:
    return [o for o in history if o.ratings is not None]
