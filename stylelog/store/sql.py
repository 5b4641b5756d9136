from datetime import datetime, timedelta
from typing import Iterable, Optional
from uuid import uuid4

from sqlalchemy import Text, cast, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from stylelog.models.models import OutfitRecord, WardrobeItemRecord
from stylelog.schemas.outfits import (
    AIAnalysis,
    Outfit,
    OutfitContext,
    OutfitCreate,
    OutfitRatings,
    OutfitTags,
    WeatherData,
)
from stylelog.schemas.wardrobe import WardrobeItem, WardrobeItemCreate, WardrobeItemUpdate
from stylelog.store.records import as_utc, build_outfit, item_changes, utcnow
from stylelog.store.types import OutfitNotFoundError, OutfitQuery, WardrobeItemNotFoundError

_FEEDBACK_FIELDS = ("received_compliments", "felt_appropriate", "feedback_notes")


def _json_text(col):
    return func.lower(cast(col, Text))


def _apply_tags(row: OutfitRecord, tags: OutfitTags) -> None:
    row.occasion_tags = list(tags.occasion)
    row.style_tags = list(tags.style)
    row.season_tags = list(tags.season)
    row.colors = list(tags.colors)
    row.garments = list(tags.garments)
    row.mood = tags.mood
    row.formality_level = tags.formality_level
    row.effort_level = tags.effort_level


def _row_to_outfit(row: OutfitRecord) -> Outfit:
    ratings = None
    if row.confidence_rating is not None:
        feedback = row.ratings_feedback or {}
        ratings = OutfitRatings(
            confidence=row.confidence_rating,
            comfort=row.comfort_rating,
            success=row.success_rating,
            repeat_likelihood=row.repeat_likelihood,
            **{k: feedback.get(k) for k in _FEEDBACK_FIELDS},
        )
    return Outfit(
        id=row.id,
        timestamp=row.timestamp,
        photo_references=row.photo_references or [],
        tags=OutfitTags.model_construct(
            occasion=row.occasion_tags or [],
            season=row.season_tags or [],
            style=row.style_tags or [],
            mood=row.mood or "",
            colors=row.colors or [],
            garments=row.garments or [],
            formality_level=row.formality_level,
            effort_level=row.effort_level,
        ),
        context=OutfitContext(
            weather=WeatherData.model_validate(row.weather or {}),
            location=row.location,
            duration=row.duration,
            event_type=row.event_type,
        ),
        ratings=ratings,
        notes=row.notes,
        ai_analysis=AIAnalysis.model_validate(row.ai_analysis) if row.ai_analysis else None,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _row_to_item(row: WardrobeItemRecord) -> WardrobeItem:
    return WardrobeItem(
        id=row.id,
        name=row.name,
        category=row.category,
        colors=row.colors or [],
        style_tags=row.style_tags or [],
        purchase_date=row.purchase_date,
        cost=row.cost,
        brand=row.brand,
        care_instructions=row.care_instructions,
        worn_count=row.worn_count or 0,
        last_worn=row.last_worn,
        created_at=row.created_at,
    )


class SQLOutfitStore:
    """SQLAlchemy-backed store; list-valued tags live in JSON columns."""

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession]):
        self.sessionmaker = sessionmaker

    async def _get_outfit_row(self, session: AsyncSession, outfit_id: str) -> OutfitRecord:
        row = await session.get(OutfitRecord, outfit_id)
        if row is None:
            raise OutfitNotFoundError(outfit_id)
        return row

    async def _get_item_row(self, session: AsyncSession, item_id: str) -> WardrobeItemRecord:
        row = await session.get(WardrobeItemRecord, item_id)
        if row is None or not row.is_active:
            raise WardrobeItemNotFoundError(item_id)
        return row

    async def _commit_outfit(self, session: AsyncSession, row: OutfitRecord) -> Outfit:
        row.updated_at = utcnow()
        await session.commit()
        await session.refresh(row)
        return _row_to_outfit(row)

    async def create_outfit(self, data: OutfitCreate) -> Outfit:
        outfit = build_outfit(data)
        row = OutfitRecord(
            id=outfit.id,
            timestamp=outfit.timestamp,
            photo_references=list(outfit.photo_references),
            weather=outfit.context.weather.model_dump(),
            location=outfit.context.location,
            duration=outfit.context.duration,
            event_type=outfit.context.event_type,
            notes=outfit.notes,
            created_at=outfit.created_at,
            updated_at=outfit.updated_at,
        )
        _apply_tags(row, outfit.tags)
        async with self.sessionmaker() as session:
            session.add(row)
            await session.commit()
            await session.refresh(row)
            return _row_to_outfit(row)

    async def get_outfit(self, outfit_id: str) -> Outfit:
        async with self.sessionmaker() as session:
            return _row_to_outfit(await self._get_outfit_row(session, outfit_id))

    async def update_outfit_tags(self, outfit_id: str, tags: OutfitTags, analysis: AIAnalysis) -> Outfit:
        async with self.sessionmaker() as session:
            row = await self._get_outfit_row(session, outfit_id)
            _apply_tags(row, tags)
            row.ai_analysis = analysis.model_dump()
            return await self._commit_outfit(session, row)

    async def update_outfit_ratings(self, outfit_id: str, ratings: OutfitRatings) -> Outfit:
        async with self.sessionmaker() as session:
            row = await self._get_outfit_row(session, outfit_id)
            row.confidence_rating = ratings.confidence
            row.comfort_rating = ratings.comfort
            row.success_rating = ratings.success
            row.repeat_likelihood = ratings.repeat_likelihood
            row.ratings_feedback = {k: getattr(ratings, k) for k in _FEEDBACK_FIELDS}
            return await self._commit_outfit(session, row)

    async def update_outfit_analysis(self, outfit_id: str, analysis: AIAnalysis) -> Outfit:
        async with self.sessionmaker() as session:
            row = await self._get_outfit_row(session, outfit_id)
            row.ai_analysis = analysis.model_dump()
            return await self._commit_outfit(session, row)

    async def add_outfit_photos(self, outfit_id: str, refs: Iterable[str]) -> Outfit:
        async with self.sessionmaker() as session:
            row = await self._get_outfit_row(session, outfit_id)
            # reassign so the JSON column is flagged dirty
            row.photo_references = [*(row.photo_references or []), *refs]
            return await self._commit_outfit(session, row)

    async def search_outfits(self, query: OutfitQuery) -> list[Outfit]:
        stmt = select(OutfitRecord)
        for tag in query.tags:
            pattern = f"%{tag}%"
            stmt = stmt.where(
                or_(
                    _json_text(OutfitRecord.occasion_tags).like(pattern),
                    _json_text(OutfitRecord.style_tags).like(pattern),
                )
            )
        if query.occasion:
            stmt = stmt.where(_json_text(OutfitRecord.occasion_tags).like(f"%{query.occasion}%"))
        if query.season:
            stmt = stmt.where(_json_text(OutfitRecord.season_tags).like(f'%"{query.season}"%'))
        if query.min_confidence is not None:
            stmt = stmt.where(OutfitRecord.confidence_rating >= query.min_confidence)
        if query.min_comfort is not None:
            stmt = stmt.where(OutfitRecord.comfort_rating >= query.min_comfort)
        if query.min_success is not None:
            stmt = stmt.where(OutfitRecord.success_rating >= query.min_success)
        if query.start is not None:
            stmt = stmt.where(OutfitRecord.timestamp >= query.start)
        if query.end is not None:
            stmt = stmt.where(OutfitRecord.timestamp <= query.end)
        stmt = stmt.order_by(OutfitRecord.timestamp.desc())
        if query.limit:
            stmt = stmt.limit(query.limit)
        async with self.sessionmaker() as session:
            res = await session.execute(stmt)
            return [_row_to_outfit(r) for r in res.scalars().all()]

    async def recent_outfits(self, days: int = 30, now: Optional[datetime] = None) -> list[Outfit]:
        now = now or utcnow()
        return await self.search_outfits(OutfitQuery(start=now - timedelta(days=days), end=now))

    async def outfits_between(self, start: datetime, end: datetime) -> list[Outfit]:
        return await self.search_outfits(OutfitQuery(start=start, end=end))

    async def add_wardrobe_item(self, data: WardrobeItemCreate) -> WardrobeItem:
        row = WardrobeItemRecord(id=str(uuid4()), worn_count=0, created_at=utcnow(), **data.model_dump())
        async with self.sessionmaker() as session:
            session.add(row)
            await session.commit()
            await session.refresh(row)
            return _row_to_item(row)

    async def get_wardrobe_item(self, item_id: str) -> WardrobeItem:
        async with self.sessionmaker() as session:
            return _row_to_item(await self._get_item_row(session, item_id))

    async def update_wardrobe_item(self, item_id: str, data: WardrobeItemUpdate) -> WardrobeItem:
        async with self.sessionmaker() as session:
            row = await self._get_item_row(session, item_id)
            for key, value in item_changes(data).items():
                setattr(row, key, value)
            await session.commit()
            await session.refresh(row)
            return _row_to_item(row)

    async def remove_wardrobe_item(self, item_id: str) -> None:
        async with self.sessionmaker() as session:
            row = await self._get_item_row(session, item_id)
            row.is_active = False
            await session.commit()

    async def list_wardrobe_items(self, category: Optional[str] = None) -> list[WardrobeItem]:
        stmt = select(WardrobeItemRecord).where(WardrobeItemRecord.is_active.is_(True))
        if category:
            stmt = stmt.where(WardrobeItemRecord.category == category)
        stmt = stmt.order_by(WardrobeItemRecord.category, func.lower(WardrobeItemRecord.name))
        async with self.sessionmaker() as session:
            res = await session.execute(stmt)
            return [_row_to_item(r) for r in res.scalars().all()]

    async def wardrobe_count(self) -> int:
        async with self.sessionmaker() as session:
            res = await session.execute(
                select(func.count()).select_from(WardrobeItemRecord).where(WardrobeItemRecord.is_active.is_(True))
            )
            return int(res.scalar_one())

    async def record_item_wear(self, item_id: str, worn_at: datetime) -> WardrobeItem:
        async with self.sessionmaker() as session:
            row = await self._get_item_row(session, item_id)
            row.worn_count = (row.worn_count or 0) + 1
            if row.last_worn is None or as_utc(worn_at) > as_utc(row.last_worn):
                row.last_worn = worn_at
            await session.commit()
            await session.refresh(row)
            return _row_to_item(row)
