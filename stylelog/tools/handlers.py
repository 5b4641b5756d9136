from datetime import date, datetime, time, timezone
from typing import Any, Awaitable, Callable, Dict, Optional

from stylelog.schemas.analysis import GapCriteria, PatternCriteria
from stylelog.schemas.outfits import OutfitCreate, OutfitRatings, OutfitTags, WeatherData
from stylelog.schemas.recs import RecommendationContext
from stylelog.schemas.wardrobe import WardrobeItemCreate
from stylelog.services import outfits as outfit_service
from stylelog.services import wardrobe as wardrobe_service
from stylelog.services.style import StyleService
from stylelog.store.base import OutfitStore
from stylelog.store.types import OutfitQuery
from stylelog.tools import formatting

Args = Dict[str, Any]
Handler = Callable[[OutfitStore, Args], Awaitable[str]]


def _weather(raw: Optional[dict]) -> Optional[WeatherData]:
    if not raw:
        return None
    return WeatherData.model_validate({k: v for k, v in raw.items() if v is not None})


def _day(value: Optional[str], end: bool = False) -> Optional[datetime]:
    if not value:
        return None
    d = date.fromisoformat(value)
    return datetime.combine(d, time.max if end else time.min, tzinfo=timezone.utc)


async def log_outfit(store: OutfitStore, args: Args) -> str:
    photos = list(args.get("photo_paths") or [])
    if args.get("photo_path"):
        photos.insert(0, args["photo_path"])
    season = args.get("season")
    data = OutfitCreate(
        photo_references=photos,
        tags=OutfitTags(
            occasion=args.get("occasion") or [],
            style=args.get("style_tags") or [],
            season=[season] if season else [],
            mood=args.get("mood") or "",
            colors=args.get("colors") or [],
            garments=args.get("garments") or [],
            formality_level=args.get("formality_level"),
            effort_level=args.get("effort_level"),
        ),
        weather=_weather(args.get("weather_context")),
        location=args.get("location"),
        duration=args.get("duration"),
        event_type=args.get("event_type"),
        notes=args.get("notes"),
    )
    outfit, matched = await outfit_service.log_outfit(store, data)
    return formatting.logged_outfit(outfit, outfit.ai_analysis, len(matched))


async def rate_outfit(store: OutfitStore, args: Args) -> str:
    ratings = OutfitRatings.model_validate({k: v for k, v in args.items() if k != "outfit_id"})
    _, insights = await outfit_service.rate_outfit(store, args["outfit_id"], ratings)
    return formatting.rated_outfit(ratings, insights)


async def get_outfit_recommendations(store: OutfitStore, args: Args) -> str:
    style = args.get("style_preference")
    if isinstance(style, list):
        style = style[0] if style else None
    ctx = RecommendationContext(
        occasion=args.get("occasion"),
        weather=_weather(args.get("weather")),
        mood_preference=args.get("mood_preference"),
        style_preference=style,
        time_of_day=args.get("time_of_day"),
        duration=args.get("duration"),
        limit=args.get("limit") or 5,
    )
    recs = await StyleService(store).recommendations(ctx)
    return formatting.recommendations(recs, ctx)


async def search_outfits(store: OutfitStore, args: Args) -> str:
    rng = args.get("date_range") or {}
    query = OutfitQuery(
        tags=list(args.get("tags") or []),
        occasion=args.get("occasion"),
        season=args.get("season"),
        min_confidence=args.get("min_confidence"),
        min_comfort=args.get("min_comfort"),
        min_success=args.get("min_success"),
        start=_day(rng.get("start")),
        end=_day(rng.get("end"), end=True),
        limit=args.get("limit") or 20,
    )
    return formatting.search_results(await store.search_outfits(query))


async def analyze_style_patterns(store: OutfitStore, args: Args) -> str:
    criteria = PatternCriteria.model_validate({k: v for k, v in args.items() if v is not None})
    return formatting.style_pattern(await StyleService(store).patterns(criteria))


async def add_wardrobe_item(store: OutfitStore, args: Args) -> str:
    item = await store.add_wardrobe_item(WardrobeItemCreate.model_validate(args))
    return formatting.wardrobe_item(item, await store.wardrobe_count())


async def wardrobe_gap_analysis(store: OutfitStore, args: Args) -> str:
    criteria = GapCriteria.model_validate({k: v for k, v in args.items() if v is not None})
    gaps = await StyleService(store).gaps(criteria)
    return formatting.wardrobe_gaps(gaps, criteria.focus_area)


async def calculate_cost_per_wear(store: OutfitStore, args: Args) -> str:
    items = await store.list_wardrobe_items(args.get("category"))
    return formatting.cost_per_wear(wardrobe_service.cost_per_wear(items))


async def identify_go_to_outfits(store: OutfitStore, args: Args) -> str:
    metric = args.get("success_metric") or "overall"
    picks = await StyleService(store).go_to(
        metric=metric,
        min_rating=args.get("min_rating") or 7,
        occasion=args.get("occasion_filter"),
    )
    return formatting.go_to_outfits(picks, metric)


HANDLERS: Dict[str, Handler] = {
    "log_outfit": log_outfit,
    "rate_outfit": rate_outfit,
    "get_outfit_recommendations": get_outfit_recommendations,
    "search_outfits": search_outfits,
    "analyze_style_patterns": analyze_style_patterns,
    "add_wardrobe_item": add_wardrobe_item,
    "wardrobe_gap_analysis": wardrobe_gap_analysis,
    "calculate_cost_per_wear": calculate_cost_per_wear,
    "identify_go_to_outfits": identify_go_to_outfits,
}
