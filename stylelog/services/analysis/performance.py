from statistics import mean
from typing import List, Optional, Sequence

from stylelog.core.tags import filter_slug
from stylelog.schemas.analysis import GoToOutfit, PredictOut
from stylelog.schemas.outfits import Outfit, OutfitTags, WeatherData
from stylelog.store.records import as_utc

from .engine import analyze_tags

DEFAULT_MIN_RATING = 7
GO_TO_LIMIT = 10
SIMILAR_TEMPERATURE_RANGE = 15


def metric_value(outfit: Outfit, metric: str) -> Optional[float]:
    if outfit.ratings is None:
        return None
    if metric == "overall":
        return round(outfit.ratings.overall, 2)
    return float(getattr(outfit.ratings, metric))


def go_to_outfits(
    outfits: Sequence[Outfit],
    metric: str = "overall",
    min_rating: float = DEFAULT_MIN_RATING,
    occasion: Optional[str] = None,
    limit: int = GO_TO_LIMIT,
) -> List[GoToOutfit]:
    """Best-rated outfit formulas, highest score first, newest first on ties."""
    occasion = filter_slug(occasion)
    picks = []
    for o in outfits:
        value = metric_value(o, metric)
        if value is None or value < min_rating:
            continue
        if occasion and not any(occasion in occ for occ in o.tags.occasion):
            continue
        picks.append((value, o))
    picks.sort(key=lambda p: (-p[0], -as_utc(p[1].timestamp).timestamp(), p[1].id))
    return [
        GoToOutfit(
            outfit_id=o.id,
            timestamp=o.timestamp,
            score=value,
            occasion=o.tags.occasion,
            style=o.tags.style,
            colors=o.tags.colors,
            garments=o.tags.garments,
        )
        for value, o in picks[:limit]
    ]


def _features(tags: OutfitTags) -> set[str]:
    return {*tags.style, *tags.colors, *(g.lower() for g in tags.garments)}


def is_similar(candidate: OutfitTags, past: Outfit, weather: Optional[WeatherData] = None) -> bool:
    if candidate.occasion and not set(candidate.occasion) & set(past.tags.occasion):
        return False
    if weather is not None and abs(weather.temperature - past.context.weather.temperature) > SIMILAR_TEMPERATURE_RANGE:
        return False
    return bool(_features(candidate) & _features(past.tags))


def predict_outfit_success(
    tags: OutfitTags,
    history: Sequence[Outfit],
    weather: Optional[WeatherData] = None,
) -> PredictOut:
    """Score a hypothetical outfit and estimate its ratings from similar rated outfits."""
    analysis = analyze_tags(tags)
    similar = [o for o in history if o.ratings is not None and is_similar(tags, o, weather)]

    def est(attr: str) -> Optional[float]:
        if not similar:
            return None
        return round(mean(getattr(o.ratings, attr) for o in similar), 1)

    if similar:
        notes = [f"Estimate based on {len(similar)} similar rated outfits."]
    else:
        notes = ["No similar rated outfits yet; prediction uses tag analysis only."]
    notes.extend(analysis.suggested_improvements)
    return PredictOut(
        style_coherence=analysis.style_coherence,
        color_harmony=analysis.color_harmony,
        occasion_appropriateness=analysis.occasion_appropriateness,
        summary=analysis.summary,
        similar_outfits=len(similar),
        estimated_confidence=est("confidence"),
        estimated_comfort=est("comfort"),
        estimated_success=est("success"),
        notes=notes,
    )
