from typing import Optional, Sequence

from stylelog.recs.strategies.base import rated, recency
from stylelog.schemas.outfits import Outfit
from stylelog.schemas.recs import RecommendationContext


class ComfortStrategy:
    name = "comfort_focused"
    reasons = (
        "Maximum comfort for all-day wear",
        "Soft, forgiving fabrics",
        "Easy movement and flexibility",
    )

    def pick(self, history: Sequence[Outfit], context: RecommendationContext) -> Optional[Outfit]:
        pool = rated(history)
        if not pool:
            return None
        return max(pool, key=lambda o: (o.ratings.comfort, *recency(o)))
