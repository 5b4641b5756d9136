"""
Synthetic outfit and wardrobe fixtures for analysis tests.
Use these to build consistent histories without touching a store.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from stylelog.schemas.outfits import Outfit, OutfitContext, OutfitRatings, OutfitTags, WeatherData
from stylelog.schemas.wardrobe import WardrobeItem

NOW = datetime(2026, 10, 15, 12, 0, tzinfo=timezone.utc)


def make_outfit(
    *,
    days_ago: float = 0,
    occasion: Optional[List[str]] = None,
    style: Optional[List[str]] = None,
    colors: Optional[List[str]] = None,
    garments: Optional[List[str]] = None,
    season: Optional[List[str]] = None,
    mood: str = "",
    ratings: Optional[Dict[str, Any]] = None,
    temperature: int = 70,
    precipitation: bool = False,
    photos: Optional[List[str]] = None,
    now: datetime = NOW,
) -> Outfit:
    """Outfit ``days_ago`` before ``now``; ``ratings`` is a dict of OutfitRatings fields."""
    ts = now - timedelta(days=days_ago)
    return Outfit(
        id=str(uuid4()),
        timestamp=ts,
        photo_references=photos or [],
        tags=OutfitTags(
            occasion=occasion or [],
            style=style or [],
            colors=colors or [],
            garments=garments or [],
            season=season or ["fall"],
            mood=mood,
        ),
        context=OutfitContext(weather=WeatherData(temperature=temperature, precipitation=precipitation)),
        ratings=OutfitRatings(**ratings) if ratings else None,
        created_at=ts,
        updated_at=ts,
    )


def make_item(name: str, category: str, *, cost: Optional[float] = None, worn_count: int = 0) -> WardrobeItem:
    return WardrobeItem(
        id=str(uuid4()),
        name=name,
        category=category,
        cost=cost,
        worn_count=worn_count,
        created_at=NOW,
    )


def rated(confidence: int, comfort: int, success: int) -> Dict[str, int]:
    return {"confidence": confidence, "comfort": comfort, "success": success}


def work_history() -> List[Outfit]:
    """Ten days of work and casual outfits; confidence climbs over time."""
    out = []
    for i in range(10):
        out.append(
            make_outfit(
                days_ago=10 - i,
                occasion=["work"] if i % 2 == 0 else ["casual"],
                style=["classic"] if i % 3 else ["minimalist"],
                colors=["navy", "white"] if i % 2 == 0 else ["red", "black"],
                ratings=rated(4 + i // 2, 6, 5 + i // 3),
            )
        )
    return out


def basic_wardrobe() -> List[WardrobeItem]:
    return [
        make_item("White Tee", "tops", cost=20, worn_count=10),
        make_item("Oxford Shirt", "tops", cost=60, worn_count=3),
        make_item("Dark Jeans", "bottoms", cost=90, worn_count=12),
        make_item("Chinos", "bottoms", cost=70),
        make_item("Loafers", "shoes", cost=150, worn_count=5),
        make_item("Sneakers", "shoes", cost=80, worn_count=20),
        make_item("Navy Blazer", "outerwear", cost=200, worn_count=2),
    ]
