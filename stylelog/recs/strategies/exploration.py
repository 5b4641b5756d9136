from collections import Counter
from typing import Optional, Sequence

from stylelog.recs.strategies.base import recency
from stylelog.schemas.outfits import Outfit
from stylelog.schemas.recs import RecommendationContext


class ExplorationStrategy:
    """Resurfaces the outfit whose styles you wear least often."""

    name = "style_exploration"
    reasons = (
        "Something new within your style range",
        "A subtle variation on your usual look",
        "A low-risk style experiment",
    )

    def pick(self, history: Sequence[Outfit], context: RecommendationContext) -> Optional[Outfit]:
        styled = [o for o in history if o.tags.style]
        if not styled:
            return None
        freq = Counter(s for o in styled for s in o.tags.style)

        def key(o: Outfit):
            rarity = sum(freq[s] for s in o.tags.style) / len(o.tags.style)
            success = o.ratings.success if o.ratings else 0
            ts, oid = recency(o)
            return (rarity, -success, -ts, oid)

        return min(styled, key=key)
