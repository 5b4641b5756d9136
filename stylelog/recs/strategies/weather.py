from typing import Optional, Sequence

from stylelog.recs.strategies.base import recency
from stylelog.schemas.outfits import Outfit, WeatherData
from stylelog.schemas.recs import RecommendationContext


class WeatherStrategy:
    name = "weather_optimized"
    reasons = (
        "Suited to the current weather",
        "Fabrics chosen for comfort in these conditions",
        "Appropriate layering for the temperature",
    )

    def pick(self, history: Sequence[Outfit], context: RecommendationContext) -> Optional[Outfit]:
        if not history:
            return None
        want = context.weather or WeatherData()

        def key(o: Outfit):
            w = o.context.weather
            success = o.ratings.success if o.ratings else 0
            ts, oid = recency(o)
            return (abs(w.temperature - want.temperature), w.precipitation != want.precipitation, -success, -ts, oid)

        return min(history, key=key)
