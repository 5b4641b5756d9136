import uuid
from typing import List, Optional, Sequence

from stylelog.recs import signals
from stylelog.recs.config import RecsConfig, RecsWeights
from stylelog.recs.strategies import (
    ComfortStrategy,
    ExplorationStrategy,
    HighConfidenceStrategy,
    OccasionStrategy,
    Strategy,
    WeatherStrategy,
)
from stylelog.recs.types import Candidate, SubScores
from stylelog.schemas.outfits import Outfit
from stylelog.schemas.recs import OutfitRecommendation, RecommendationContext

_REC_NAMESPACE = uuid.UUID("5b0f6d0e-8c1a-4c55-9d1e-2f6a7d3c9b10")


def recommendation_id(strategy: str, outfit: Optional[Outfit]) -> str:
    return str(uuid.uuid5(_REC_NAMESPACE, f"{strategy}:{outfit.id if outfit else '-'}"))


def _notes(candidate: Candidate, context: RecommendationContext) -> List[str]:
    o = candidate.outfit
    if o is None:
        return ["No matching outfit in your history yet; log and rate outfits to sharpen this pick"]
    notes = [f"Worn on {o.timestamp:%Y-%m-%d}" + (f" for {', '.join(o.tags.occasion)}" if o.tags.occasion else "")]
    if o.ratings is not None:
        notes.append(
            f"Rated {o.ratings.confidence}/10 confidence, {o.ratings.comfort}/10 comfort, "
            f"{o.ratings.success}/10 success"
        )
    if context.weather is not None:
        notes.append(f"Last worn at {o.context.weather.temperature}°F, {o.context.weather.condition}")
    if context.duration and candidate.strategy == ComfortStrategy.name:
        notes.append(f"Comfortable enough for {context.duration}")
    if context.time_of_day and candidate.strategy == OccasionStrategy.name:
        notes.append(f"Fits {context.time_of_day} plans")
    return notes


class RecommendationService:
    """Deterministic outfit recommendations drawn from the wearer's own history.

    Every strategy contributes exactly one candidate; candidates are scored as a
    weighted sum of four sub-scores and returned best first, ties in strategy
    order.
    """

    def __init__(self, config: RecsConfig | None = None) -> None:
        self.config = config or RecsConfig(weights=RecsWeights.from_settings())
        self.strategies: List[Strategy] = [
            HighConfidenceStrategy(),
            WeatherStrategy(),
            OccasionStrategy(),
            ComfortStrategy(),
            ExplorationStrategy(),
        ]

    def sub_scores(self, outfit: Optional[Outfit], history: Sequence[Outfit], context: RecommendationContext) -> SubScores:
        return SubScores(
            weather=signals.weather_score(outfit, context),
            occasion=signals.occasion_score(outfit, context),
            personal=signals.personal_score(outfit, history, context),
            confidence=signals.confidence_score(outfit, history),
        )

    def combine(self, s: SubScores) -> float:
        w = self.config.weights
        total = w.weather * s.weather + w.occasion * s.occasion + w.personal * s.personal + w.confidence * s.confidence
        return round(total, 4)

    def candidates(self, history: Sequence[Outfit], context: RecommendationContext) -> List[Candidate]:
        return [
            Candidate(strategy=s.name, outfit=s.pick(history, context), reasons=list(s.reasons))
            for s in self.strategies
        ]

    def recommend(
        self,
        context: RecommendationContext | None = None,
        history: Sequence[Outfit] = (),
    ) -> List[OutfitRecommendation]:
        context = context or RecommendationContext()
        scored = []
        for order, cand in enumerate(self.candidates(history, context)):
            subs = self.sub_scores(cand.outfit, history, context)
            rec = OutfitRecommendation(
                id=recommendation_id(cand.strategy, cand.outfit),
                strategy=cand.strategy,
                outfit_id=cand.outfit.id if cand.outfit else None,
                score=self.combine(subs),
                reasoning=[*cand.reasons, *_notes(cand, context)],
                weather_score=subs.weather,
                occasion_score=subs.occasion,
                personal_score=subs.personal,
                confidence_score=subs.confidence,
            )
            scored.append((order, rec))
        scored.sort(key=lambda p: (-p[1].score, p[0]))
        limit = min(context.limit, self.config.max_results)
        return [rec for _, rec in scored[:limit]]


def generate_recommendations(
    context: RecommendationContext | None = None,
    history: Sequence[Outfit] = (),
    config: RecsConfig | None = None,
) -> List[OutfitRecommendation]:
    return RecommendationService(config).recommend(context, history)
