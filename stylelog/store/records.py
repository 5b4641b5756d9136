from datetime import datetime, timezone
from uuid import uuid4

from stylelog.core.tags import current_season
from stylelog.schemas.outfits import Outfit, OutfitContext, OutfitCreate, WeatherData
from stylelog.schemas.wardrobe import WardrobeItemUpdate
from stylelog.store.types import OutfitQuery


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def build_outfit(data: OutfitCreate, now: datetime | None = None) -> Outfit:
    """Materialize a new outfit, filling the season and weather defaults."""
    now = now or utcnow()
    timestamp = as_utc(data.timestamp) if data.timestamp else now
    tags = data.tags.model_copy(deep=True)
    if not tags.season:
        tags.season = [current_season(timestamp)]
    return Outfit(
        id=str(uuid4()),
        timestamp=timestamp,
        photo_references=list(data.photo_references),
        tags=tags,
        context=OutfitContext(
            weather=data.weather or WeatherData(),
            location=data.location,
            duration=data.duration,
            event_type=data.event_type,
        ),
        notes=data.notes,
        created_at=now,
        updated_at=now,
    )


def _contains(values: list[str], needle: str) -> bool:
    return any(needle in v for v in values)


def matches_query(outfit: Outfit, query: OutfitQuery) -> bool:
    tags = outfit.tags
    for tag in query.tags:
        if not (_contains(tags.occasion, tag) or _contains(tags.style, tag)):
            return False
    if query.occasion and not _contains(tags.occasion, query.occasion):
        return False
    if query.season and query.season not in tags.season:
        return False
    ratings = outfit.ratings
    for attr in ("confidence", "comfort", "success"):
        threshold = getattr(query, f"min_{attr}")
        if threshold is None:
            continue
        if ratings is None or getattr(ratings, attr) < threshold:
            return False
    ts = as_utc(outfit.timestamp)
    if query.start and ts < as_utc(query.start):
        return False
    if query.end and ts > as_utc(query.end):
        return False
    return True


def item_changes(data: WardrobeItemUpdate) -> dict:
    changes = data.model_dump(exclude_unset=True)
    for required in ("name", "category"):
        if changes.get(required) is None:
            changes.pop(required, None)
    return changes
