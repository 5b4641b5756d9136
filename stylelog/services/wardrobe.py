from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from stylelog.schemas.wardrobe import CATEGORIES, CostPerWear, WardrobeItem, WardrobeUsage
from stylelog.store.base import OutfitStore

log = logging.getLogger(__name__)

MIN_MATCH_LEN = 3
MOST_WORN_LIMIT = 5


def _norm(s: str) -> str:
    return " ".join((s or "").lower().split())


def _garment_matches(garment: str, item: WardrobeItem) -> bool:
    g, name = _norm(garment), _norm(item.name)
    if not g or not name:
        return False
    if g == name:
        return True
    if len(g) < MIN_MATCH_LEN or len(name) < MIN_MATCH_LEN:
        return False
    return name in g or g in name


def match_garments(garments: Sequence[str], items: Sequence[WardrobeItem]) -> List[str]:
    """Link free-text garment labels to wardrobe items by name.

    Exact (case-insensitive) matches win over substring matches; each garment
    maps to at most one item and each item is matched at most once.
    """
    matched: List[str] = []
    taken: set[str] = set()
    for garment in garments:
        exact = [i for i in items if i.id not in taken and _norm(i.name) == _norm(garment)]
        fuzzy = [i for i in items if i.id not in taken and _garment_matches(garment, i)]
        pick: Optional[WardrobeItem] = (exact or fuzzy or [None])[0]
        if pick is not None:
            taken.add(pick.id)
            matched.append(pick.id)
    return matched


async def record_outfit_wear(store: OutfitStore, garments: Sequence[str], worn_at: datetime) -> List[str]:
    """Bump worn_count / last_worn on the items a logged outfit references."""
    if not garments:
        return []
    items = await store.list_wardrobe_items()
    ids = match_garments(garments, items)
    for item_id in ids:
        await store.record_item_wear(item_id, worn_at)
    if ids:
        log.info("wardrobe:wear_recorded items=%d garments=%d", len(ids), len(garments))
    return ids


def cost_per_wear(items: Sequence[WardrobeItem], category: Optional[str] = None) -> List[CostPerWear]:
    """Cost divided by wears (unworn items count as one wear), cheapest first."""
    rows = []
    for item in items:
        if item.cost is None or (category and item.category != category):
            continue
        rows.append(
            CostPerWear(
                item_id=item.id,
                name=item.name,
                category=item.category,
                cost=item.cost,
                worn_count=item.worn_count,
                cost_per_wear=round(item.cost / max(item.worn_count, 1), 2),
            )
        )
    rows.sort(key=lambda r: (r.cost_per_wear, r.name.lower()))
    return rows


def usage_summary(items: Sequence[WardrobeItem]) -> WardrobeUsage:
    by_category: Dict[str, int] = {c: 0 for c in CATEGORIES}
    for item in items:
        by_category[item.category] = by_category.get(item.category, 0) + 1
    worn = sorted((i for i in items if i.worn_count > 0), key=lambda i: (-i.worn_count, i.name.lower()))
    return WardrobeUsage(
        total_items=len(items),
        most_worn=worn[:MOST_WORN_LIMIT],
        never_worn=[i for i in items if i.worn_count == 0],
        by_category=by_category,
    )
