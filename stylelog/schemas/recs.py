from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from stylelog.core.tags import filter_slug
from stylelog.schemas.outfits import WeatherData


class RecommendationContext(BaseModel):
    occasion: Optional[str] = None
    weather: Optional[WeatherData] = None
    mood_preference: Optional[str] = None
    style_preference: Optional[str] = None
    time_of_day: Optional[str] = None
    duration: Optional[str] = None
    limit: int = Field(5, ge=1, le=5)

    @field_validator("occasion", "style_preference")
    @classmethod
    def _slugs(cls, v: Optional[str]) -> Optional[str]:
        return filter_slug(v)

    @field_validator("mood_preference")
    @classmethod
    def _mood(cls, v: Optional[str]) -> Optional[str]:
        return (v or "").strip().lower() or None


class OutfitRecommendation(BaseModel):
    id: str
    strategy: str
    outfit_id: Optional[str] = None
    score: float
    reasoning: List[str]
    weather_score: float
    occasion_score: float
    personal_score: float
    confidence_score: float


class RecsOut(BaseModel):
    items: List[OutfitRecommendation]
