from typing import Optional, Sequence

from stylelog.recs.signals import occasion_matches
from stylelog.recs.strategies.base import recency
from stylelog.schemas.outfits import Outfit
from stylelog.schemas.recs import RecommendationContext


class OccasionStrategy:
    name = "occasion_perfect"
    reasons = (
        "Ideal for the planned occasion",
        "Meets the expected dress code",
        "Polished yet approachable",
    )

    def pick(self, history: Sequence[Outfit], context: RecommendationContext) -> Optional[Outfit]:
        pool = list(history)
        if context.occasion:
            pool = [o for o in pool if occasion_matches(o, context.occasion)]
        if not pool:
            return None
        return max(pool, key=lambda o: (o.ratings.success if o.ratings else 0, *recency(o)))
