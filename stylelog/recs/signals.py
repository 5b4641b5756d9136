"""Sub-scores in [0, 1] derived from the outfit history.

Each signal falls back to 0.5 when the context or history does not carry the
information it needs.
"""
from collections import Counter
from statistics import mean
from typing import List, Optional, Sequence

from stylelog.core.tags import filter_slug
from stylelog.schemas.outfits import Outfit
from stylelog.schemas.recs import RecommendationContext

NEUTRAL = 0.5
TEMPERATURE_SPAN = 40
TEMPERATURE_WEIGHT = 0.8
PRECIPITATION_WEIGHT = 0.2
OCCASION_MATCH = 1.0
OCCASION_MISS = 0.2
SUCCESSFUL_RATING = 7
PREFERRED_STYLES = 3


def _r(x: float) -> float:
    return round(max(0.0, min(1.0, x)), 4)


def occasion_matches(outfit: Outfit, occasion: str) -> bool:
    needle = filter_slug(occasion)
    if needle is None:
        return False
    return any(needle in occ for occ in outfit.tags.occasion)


def weather_score(outfit: Optional[Outfit], context: RecommendationContext) -> float:
    if outfit is None or context.weather is None:
        return NEUTRAL
    past, want = outfit.context.weather, context.weather
    closeness = max(0.0, 1 - abs(past.temperature - want.temperature) / TEMPERATURE_SPAN)
    precip = 1.0 if past.precipitation == want.precipitation else 0.0
    return _r(TEMPERATURE_WEIGHT * closeness + PRECIPITATION_WEIGHT * precip)


def occasion_score(outfit: Optional[Outfit], context: RecommendationContext) -> float:
    if outfit is None or not context.occasion:
        return NEUTRAL
    return OCCASION_MATCH if occasion_matches(outfit, context.occasion) else OCCASION_MISS


def preferred_styles(history: Sequence[Outfit]) -> List[str]:
    """Most frequent styles among successful outfits, or all outfits when none are rated."""
    liked = [o for o in history if o.ratings is not None and o.ratings.success >= SUCCESSFUL_RATING]
    pool = liked or [o for o in history if o.ratings is None]
    counts = Counter(s for o in pool for s in o.tags.style)
    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return [s for s, _ in ranked[:PREFERRED_STYLES]]


def personal_score(outfit: Optional[Outfit], history: Sequence[Outfit], context: RecommendationContext) -> float:
    if outfit is None:
        return NEUTRAL
    parts: List[float] = []
    preferred = set(preferred_styles(history))
    if preferred:
        styles = outfit.tags.style
        parts.append(sum(1 for s in styles if s in preferred) / len(styles) if styles else 0.0)
    if context.style_preference:
        parts.append(1.0 if context.style_preference in outfit.tags.style else 0.0)
    if context.mood_preference:
        parts.append(1.0 if context.mood_preference == outfit.tags.mood else 0.0)
    return _r(mean(parts)) if parts else NEUTRAL


def similar_outfits(outfit: Outfit, history: Sequence[Outfit]) -> List[Outfit]:
    styles, occasions = set(outfit.tags.style), set(outfit.tags.occasion)
    return [
        o for o in history
        if o.id != outfit.id and o.ratings is not None
        and (styles & set(o.tags.style) or occasions & set(o.tags.occasion))
    ]


def confidence_score(outfit: Optional[Outfit], history: Sequence[Outfit]) -> float:
    if outfit is None:
        return NEUTRAL
    if outfit.ratings is not None:
        return _r(outfit.ratings.confidence / 10)
    similar = similar_outfits(outfit, history)
    if not similar:
        return NEUTRAL
    return _r(mean(o.ratings.confidence for o in similar) / 10)
