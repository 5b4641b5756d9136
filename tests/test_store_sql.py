import os
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from stylelog.core.db import Base
from stylelog.schemas.outfits import OutfitCreate, OutfitRatings, OutfitTags, WeatherData
from stylelog.schemas.wardrobe import WardrobeItemCreate
from stylelog.store import OutfitQuery, WardrobeItemNotFoundError
from stylelog.store.sql import SQLOutfitStore

DB_URL = os.getenv("TEST_DATABASE_URL")

pytestmark = pytest.mark.skipif(not DB_URL, reason="requires TEST_DATABASE_URL")

T0 = datetime(2026, 10, 1, 9, tzinfo=timezone.utc)


@pytest.fixture
async def sql_store():
    engine = create_async_engine(DB_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield SQLOutfitStore(async_sessionmaker(engine, expire_on_commit=False))
    await engine.dispose()


async def test_outfit_roundtrip_and_search(sql_store):
    work = await sql_store.create_outfit(
        OutfitCreate(
            timestamp=T0,
            tags=OutfitTags(occasion=["work"], style=["classic"], colors=["navy"], garments=["Blazer"]),
            weather=WeatherData(temperature=55, condition="Rain", precipitation=True),
        )
    )
    date = await sql_store.create_outfit(
        OutfitCreate(timestamp=T0 + timedelta(days=1), tags=OutfitTags(occasion=["date-night"], season=["summer"]))
    )
    await sql_store.update_outfit_ratings(work.id, OutfitRatings(confidence=9, comfort=5, success=8, felt_appropriate=True))

    got = await sql_store.get_outfit(work.id)
    assert got.tags.garments == ["Blazer"]
    assert got.context.weather.condition == "rain"
    assert got.ratings.felt_appropriate is True
    assert got.tags.season == ["fall"]

    assert [o.id for o in await sql_store.search_outfits(OutfitQuery())] == [date.id, work.id]
    assert [o.id for o in await sql_store.search_outfits(OutfitQuery(tags=["date"]))] == [date.id]
    assert [o.id for o in await sql_store.search_outfits(OutfitQuery(season="summer"))] == [date.id]
    assert [o.id for o in await sql_store.search_outfits(OutfitQuery(min_confidence=9))] == [work.id]
    assert [o.id for o in await sql_store.search_outfits(OutfitQuery(occasion="Date Night"))] == [date.id]
    assert [o.id for o in await sql_store.search_outfits(OutfitQuery(season="Autumn"))] == [work.id]

    photos = await sql_store.add_outfit_photos(work.id, ["u/1/outfits/x/a.jpg"])
    assert photos.photo_references == ["u/1/outfits/x/a.jpg"]


async def test_wardrobe_soft_delete(sql_store):
    item = await sql_store.add_wardrobe_item(WardrobeItemCreate(name="Loafers", category="shoes", cost=120))
    worn = await sql_store.record_item_wear(item.id, T0)
    assert worn.worn_count == 1
    await sql_store.remove_wardrobe_item(item.id)
    assert await sql_store.wardrobe_count() == 0
    with pytest.raises(WardrobeItemNotFoundError):
        await sql_store.get_wardrobe_item(item.id)
