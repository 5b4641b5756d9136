from dataclasses import dataclass

from stylelog.core.config import settings


@dataclass(frozen=True)
class RecsWeights:
    weather: float = 0.30
    occasion: float = 0.25
    personal: float = 0.25
    confidence: float = 0.20

    @classmethod
    def from_settings(cls) -> "RecsWeights":
        return cls(
            weather=settings.RECS_WEIGHT_WEATHER,
            occasion=settings.RECS_WEIGHT_OCCASION,
            personal=settings.RECS_WEIGHT_PERSONAL,
            confidence=settings.RECS_WEIGHT_CONFIDENCE,
        )


@dataclass(frozen=True)
class RecsConfig:
    max_results: int = 5
    weights: RecsWeights = RecsWeights()
