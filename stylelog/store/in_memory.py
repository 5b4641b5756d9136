from datetime import datetime, timedelta
from typing import Dict, Iterable, Optional
from uuid import uuid4

from stylelog.schemas.outfits import AIAnalysis, Outfit, OutfitCreate, OutfitRatings, OutfitTags
from stylelog.schemas.wardrobe import WardrobeItem, WardrobeItemCreate, WardrobeItemUpdate
from stylelog.store.records import as_utc, build_outfit, item_changes, matches_query, utcnow
from stylelog.store.types import OutfitNotFoundError, OutfitQuery, WardrobeItemNotFoundError


class InMemoryOutfitStore:
    """Dict-backed store. Returned models are copies; callers cannot mutate stored state."""

    def __init__(self) -> None:
        self._outfits: Dict[str, Outfit] = {}
        self._items: Dict[str, WardrobeItem] = {}

    def _outfit(self, outfit_id: str) -> Outfit:
        outfit = self._outfits.get(outfit_id)
        if outfit is None:
            raise OutfitNotFoundError(outfit_id)
        return outfit

    def _item(self, item_id: str) -> WardrobeItem:
        item = self._items.get(item_id)
        if item is None:
            raise WardrobeItemNotFoundError(item_id)
        return item

    def _save(self, outfit: Outfit) -> Outfit:
        outfit.updated_at = utcnow()
        self._outfits[outfit.id] = outfit
        return outfit.model_copy(deep=True)

    async def create_outfit(self, data: OutfitCreate) -> Outfit:
        outfit = build_outfit(data)
        self._outfits[outfit.id] = outfit
        return outfit.model_copy(deep=True)

    async def get_outfit(self, outfit_id: str) -> Outfit:
        return self._outfit(outfit_id).model_copy(deep=True)

    async def update_outfit_tags(self, outfit_id: str, tags: OutfitTags, analysis: AIAnalysis) -> Outfit:
        outfit = self._outfit(outfit_id)
        outfit.tags = tags.model_copy(deep=True)
        outfit.ai_analysis = analysis.model_copy(deep=True)
        return self._save(outfit)

    async def update_outfit_ratings(self, outfit_id: str, ratings: OutfitRatings) -> Outfit:
        outfit = self._outfit(outfit_id)
        outfit.ratings = ratings.model_copy(deep=True)
        return self._save(outfit)

    async def update_outfit_analysis(self, outfit_id: str, analysis: AIAnalysis) -> Outfit:
        outfit = self._outfit(outfit_id)
        outfit.ai_analysis = analysis.model_copy(deep=True)
        return self._save(outfit)

    async def add_outfit_photos(self, outfit_id: str, refs: Iterable[str]) -> Outfit:
        outfit = self._outfit(outfit_id)
        outfit.photo_references = [*outfit.photo_references, *refs]
        return self._save(outfit)

    async def search_outfits(self, query: OutfitQuery) -> list[Outfit]:
        hits = [o for o in self._outfits.values() if matches_query(o, query)]
        hits.sort(key=lambda o: as_utc(o.timestamp), reverse=True)
        if query.limit:
            hits = hits[: query.limit]
        return [o.model_copy(deep=True) for o in hits]

    async def recent_outfits(self, days: int = 30, now: Optional[datetime] = None) -> list[Outfit]:
        now = now or utcnow()
        return await self.search_outfits(OutfitQuery(start=now - timedelta(days=days), end=now))

    async def outfits_between(self, start: datetime, end: datetime) -> list[Outfit]:
        return await self.search_outfits(OutfitQuery(start=start, end=end))

    async def add_wardrobe_item(self, data: WardrobeItemCreate) -> WardrobeItem:
        item = WardrobeItem(id=str(uuid4()), created_at=utcnow(), worn_count=0, **data.model_dump())
        self._items[item.id] = item
        return item.model_copy(deep=True)

    async def get_wardrobe_item(self, item_id: str) -> WardrobeItem:
        return self._item(item_id).model_copy(deep=True)

    async def update_wardrobe_item(self, item_id: str, data: WardrobeItemUpdate) -> WardrobeItem:
        item = self._item(item_id)
        updated = item.model_copy(update=item_changes(data), deep=True)
        self._items[item_id] = updated
        return updated.model_copy(deep=True)

    async def remove_wardrobe_item(self, item_id: str) -> None:
        self._item(item_id)
        del self._items[item_id]

    async def list_wardrobe_items(self, category: Optional[str] = None) -> list[WardrobeItem]:
        items = [i for i in self._items.values() if category is None or i.category == category]
        items.sort(key=lambda i: (i.category, i.name.lower()))
        return [i.model_copy(deep=True) for i in items]

    async def wardrobe_count(self) -> int:
        return len(self._items)

    async def record_item_wear(self, item_id: str, worn_at: datetime) -> WardrobeItem:
        item = self._item(item_id)
        item.worn_count += 1
        if item.last_worn is None or as_utc(worn_at) > as_utc(item.last_worn):
            item.last_worn = worn_at
        return item.model_copy(deep=True)
