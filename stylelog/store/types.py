from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from stylelog.core.tags import filter_season, filter_slug


class RecordNotFoundError(LookupError):
    """Raised when a store operation references an unknown id."""

    detail = "not_found"

    def __init__(self, record_id: str):
        super().__init__(record_id)
        self.record_id = record_id


class OutfitNotFoundError(RecordNotFoundError):
    detail = "outfit_not_found"


class WardrobeItemNotFoundError(RecordNotFoundError):
    detail = "wardrobe_item_not_found"


@dataclass(frozen=True)
class OutfitQuery:
    """Search criteria; every field is optional and filters combine with AND.

    ``tags`` match against occasion or style by substring, each tag must match.
    Text filters are slugged like stored tags, so ``"Date Night"`` finds
    ``date-night`` and ``"autumn"`` finds ``fall``.
    """
    tags: List[str] = field(default_factory=list)
    occasion: Optional[str] = None
    season: Optional[str] = None
    min_confidence: Optional[int] = None
    min_comfort: Optional[int] = None
    min_success: Optional[int] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    limit: Optional[int] = None

    def __post_init__(self):
        tags = [t for t in (filter_slug(x) for x in self.tags) if t]
        object.__setattr__(self, "tags", tags)
        object.__setattr__(self, "occasion", filter_slug(self.occasion))
        object.__setattr__(self, "season", filter_season(self.season))
