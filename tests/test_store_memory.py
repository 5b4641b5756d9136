from datetime import datetime, timedelta, timezone

import pytest

from stylelog.schemas.outfits import AIAnalysis, OutfitCreate, OutfitRatings, OutfitTags
from stylelog.schemas.wardrobe import WardrobeItemCreate, WardrobeItemUpdate
from stylelog.store import (
    InMemoryOutfitStore,
    OutfitNotFoundError,
    OutfitQuery,
    WardrobeItemNotFoundError,
)

T0 = datetime(2026, 10, 1, 9, tzinfo=timezone.utc)


async def _seed(store: InMemoryOutfitStore):
    specs = [
        (0, ["work"], ["classic"], ["fall"], (8, 6, 8)),
        (1, ["casual"], ["minimalist"], ["fall"], (5, 9, 6)),
        (2, ["date-night"], ["romantic"], ["summer"], None),
    ]
    ids = []
    for days, occ, style, season, ratings in specs:
        o = await store.create_outfit(
            OutfitCreate(
                timestamp=T0 + timedelta(days=days),
                tags=OutfitTags(occasion=occ, style=style, season=season),
            )
        )
        if ratings:
            c, f, s = ratings
            await store.update_outfit_ratings(o.id, OutfitRatings(confidence=c, comfort=f, success=s))
        ids.append(o.id)
    return ids


async def test_create_fills_season_and_defaults():
    store = InMemoryOutfitStore()
    o = await store.create_outfit(OutfitCreate(timestamp=datetime(2026, 1, 5, tzinfo=timezone.utc)))
    assert o.tags.season == ["winter"]
    assert o.context.weather.temperature == 70
    assert o.ratings is None
    assert (await store.get_outfit(o.id)).id == o.id


async def test_returned_models_are_copies():
    store = InMemoryOutfitStore()
    o = await store.create_outfit(OutfitCreate(tags=OutfitTags(style=["edgy"])))
    o.tags.style.append("formal")
    assert (await store.get_outfit(o.id)).tags.style == ["edgy"]


async def test_search_filters_and_order():
    store = InMemoryOutfitStore()
    ids = await _seed(store)
    newest_first = await store.search_outfits(OutfitQuery())
    assert [o.id for o in newest_first] == list(reversed(ids))

    assert [o.id for o in await store.search_outfits(OutfitQuery(tags=["date"]))] == [ids[2]]
    assert [o.id for o in await store.search_outfits(OutfitQuery(tags=["CLASS"]))] == [ids[0]]
    assert [o.id for o in await store.search_outfits(OutfitQuery(season="summer"))] == [ids[2]]
    assert [o.id for o in await store.search_outfits(OutfitQuery(min_confidence=7))] == [ids[0]]
    assert [o.id for o in await store.search_outfits(OutfitQuery(min_comfort=9))] == [ids[1]]
    window = OutfitQuery(start=T0 + timedelta(hours=12), end=T0 + timedelta(days=1, hours=1))
    assert [o.id for o in await store.search_outfits(window)] == [ids[1]]
    assert len(await store.search_outfits(OutfitQuery(limit=2))) == 2


async def test_search_accepts_typed_filter_values():
    store = InMemoryOutfitStore()
    ids = await _seed(store)

    assert [o.id for o in await store.search_outfits(OutfitQuery(occasion="Date Night"))] == [ids[2]]
    assert [o.id for o in await store.search_outfits(OutfitQuery(tags=["Date Night", " Romantic "]))] == [ids[2]]
    autumn = await store.search_outfits(OutfitQuery(season="Autumn"))
    assert [o.id for o in autumn] == [ids[1], ids[0]]
    assert OutfitQuery(tags=["", "  "], occasion=" ").tags == []
    assert OutfitQuery(occasion=" ").occasion is None


async def test_recent_outfits_window():
    store = InMemoryOutfitStore()
    await _seed(store)
    now = T0 + timedelta(days=2, hours=1)
    assert len(await store.recent_outfits(1, now=now)) == 1
    assert len(await store.recent_outfits(30, now=now)) == 3


async def test_updates_and_photos():
    store = InMemoryOutfitStore()
    o = await store.create_outfit(OutfitCreate())
    analysis = AIAnalysis(style_coherence=0.5, color_harmony=0.5, occasion_appropriateness=0.5, summary="ok")
    updated = await store.update_outfit_analysis(o.id, analysis)
    assert updated.ai_analysis == analysis
    updated = await store.add_outfit_photos(o.id, ["a.jpg", "b.jpg"])
    assert updated.photo_references == ["a.jpg", "b.jpg"]
    assert updated.updated_at >= o.updated_at


async def test_unknown_outfit_raises():
    store = InMemoryOutfitStore()
    with pytest.raises(OutfitNotFoundError) as exc:
        await store.get_outfit("missing")
    assert exc.value.detail == "outfit_not_found"
    with pytest.raises(OutfitNotFoundError):
        await store.update_outfit_ratings("missing", OutfitRatings(confidence=5, comfort=5, success=5))


async def test_wardrobe_crud_and_wear():
    store = InMemoryOutfitStore()
    item = await store.add_wardrobe_item(WardrobeItemCreate(name="Navy Blazer", category="outerwear", cost=200))
    assert item.worn_count == 0

    updated = await store.update_wardrobe_item(item.id, WardrobeItemUpdate(brand="Acme", name=None))
    assert updated.brand == "Acme"
    assert updated.name == "Navy Blazer"

    worn = await store.record_item_wear(item.id, T0)
    worn = await store.record_item_wear(item.id, T0 - timedelta(days=3))
    assert worn.worn_count == 2
    assert worn.last_worn == T0

    assert await store.wardrobe_count() == 1
    assert [i.id for i in await store.list_wardrobe_items("outerwear")] == [item.id]
    assert await store.list_wardrobe_items("tops") == []

    await store.remove_wardrobe_item(item.id)
    with pytest.raises(WardrobeItemNotFoundError):
        await store.get_wardrobe_item(item.id)
    assert await store.wardrobe_count() == 0
