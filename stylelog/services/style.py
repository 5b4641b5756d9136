from datetime import datetime
from typing import List, Optional

from stylelog.core.config import settings
from stylelog.schemas.analysis import (
    GapCriteria,
    GoToOutfit,
    PatternCriteria,
    PredictOut,
    StyleReport,
    StylePattern,
    WardrobeGap,
)
from stylelog.schemas.outfits import OutfitTags, WeatherData
from stylelog.schemas.recs import OutfitRecommendation, RecommendationContext
from stylelog.services.analysis import (
    analyze_style_patterns,
    analyze_wardrobe_gaps,
    generate_monthly_report,
    go_to_outfits,
    predict_outfit_success,
)
from stylelog.services.analysis.patterns import window_for
from stylelog.services.analysis.reports import month_bounds
from stylelog.services.recs.service import RecommendationService
from stylelog.store.base import OutfitStore
from stylelog.store.records import as_utc, utcnow
from stylelog.store.types import OutfitQuery


class StyleService:
    """Loads history windows from the store and hands them to the pure engine.

    Read-only: nothing here writes to the store.
    """

    def __init__(self, store: OutfitStore, recs: Optional[RecommendationService] = None):
        self.store = store
        self.recs = recs or RecommendationService()

    async def recommendations(self, context: RecommendationContext, now: Optional[datetime] = None) -> List[OutfitRecommendation]:
        history = await self.store.recent_outfits(settings.RECS_HISTORY_DAYS, now=now)
        return self.recs.recommend(context, history)

    async def patterns(self, criteria: PatternCriteria, now: Optional[datetime] = None) -> StylePattern:
        now = now or utcnow()
        start, end = window_for(criteria.time_period, now)
        outfits = await self.store.outfits_between(start, end)
        return analyze_style_patterns(outfits, criteria, now)

    async def gaps(self, criteria: GapCriteria, now: Optional[datetime] = None) -> List[WardrobeGap]:
        start, end = window_for(criteria.time_period, now or utcnow())
        outfits = await self.store.outfits_between(start, end)
        items = await self.store.list_wardrobe_items()
        return analyze_wardrobe_gaps(outfits, items, criteria)

    async def monthly_report(self, now: Optional[datetime] = None) -> StyleReport:
        now = now or utcnow()
        prev_start, start, end = month_bounds(now)
        current = await self.store.outfits_between(start, end)
        # previous month ends where this one starts
        previous = [o for o in await self.store.outfits_between(prev_start, start) if as_utc(o.timestamp) < as_utc(start)]
        items = await self.store.list_wardrobe_items()
        return generate_monthly_report(current, previous, items, now)

    async def go_to(
        self,
        metric: str = "overall",
        min_rating: float = 7,
        occasion: Optional[str] = None,
        limit: int = 10,
    ) -> List[GoToOutfit]:
        history = await self.store.search_outfits(OutfitQuery(occasion=occasion))
        return go_to_outfits(history, metric=metric, min_rating=min_rating, occasion=occasion, limit=limit)

    async def predict(self, tags: OutfitTags, weather: Optional[WeatherData] = None) -> PredictOut:
        history = await self.store.recent_outfits(settings.RECS_HISTORY_DAYS)
        return predict_outfit_success(tags, history, weather)
