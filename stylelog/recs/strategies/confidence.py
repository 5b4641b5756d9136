from typing import Optional, Sequence

from stylelog.recs.strategies.base import rated, recency
from stylelog.schemas.outfits import Outfit
from stylelog.schemas.recs import RecommendationContext


class HighConfidenceStrategy:
    name = "high_confidence_historical"
    reasons = (
        "Based on your highest-rated outfits",
        "A proven confidence booster",
        "Similar conditions have worked well for you",
    )

    def pick(self, history: Sequence[Outfit], context: RecommendationContext) -> Optional[Outfit]:
        pool = rated(history)
        if not pool:
            return None
        return max(pool, key=lambda o: (o.ratings.confidence, o.ratings.success, *recency(o)))
