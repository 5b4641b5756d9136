from datetime import datetime
from typing import Protocol, Iterable, Optional

from stylelog.schemas.outfits import AIAnalysis, Outfit, OutfitCreate, OutfitRatings, OutfitTags
from stylelog.schemas.wardrobe import WardrobeItem, WardrobeItemCreate, WardrobeItemUpdate
from stylelog.store.types import OutfitQuery


class OutfitStore(Protocol):
    async def create_outfit(self, data: OutfitCreate) -> Outfit:
        ...

    async def get_outfit(self, outfit_id: str) -> Outfit:
        ...

    async def update_outfit_tags(self, outfit_id: str, tags: OutfitTags, analysis: AIAnalysis) -> Outfit:
        ...

    async def update_outfit_ratings(self, outfit_id: str, ratings: OutfitRatings) -> Outfit:
        ...

    async def update_outfit_analysis(self, outfit_id: str, analysis: AIAnalysis) -> Outfit:
        ...

    async def add_outfit_photos(self, outfit_id: str, refs: Iterable[str]) -> Outfit:
        ...

    async def search_outfits(self, query: OutfitQuery) -> list[Outfit]:
        ...

    async def recent_outfits(self, days: int = 30, now: Optional[datetime] = None) -> list[Outfit]:
        ...

    async def outfits_between(self, start: datetime, end: datetime) -> list[Outfit]:
        ...

    async def add_wardrobe_item(self, data: WardrobeItemCreate) -> WardrobeItem:
        ...

    async def get_wardrobe_item(self, item_id: str) -> WardrobeItem:
        ...

    async def update_wardrobe_item(self, item_id: str, data: WardrobeItemUpdate) -> WardrobeItem:
        ...

    async def remove_wardrobe_item(self, item_id: str) -> None:
        ...

    async def list_wardrobe_items(self, category: Optional[str] = None) -> list[WardrobeItem]:
        ...

    async def wardrobe_count(self) -> int:
        ...

    async def record_item_wear(self, item_id: str, worn_at: datetime) -> WardrobeItem:
        ...
