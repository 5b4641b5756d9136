from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal

from stylelog.core.tags import clean_labels, normalize_many, normalize_season

EffortLevel = Literal["low", "medium", "high"]


class WeatherData(BaseModel):
    temperature: int = 70  # Fahrenheit
    condition: str = "clear"
    precipitation: bool = False
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None

    @field_validator("condition")
    @classmethod
    def _condition(cls, v: str) -> str:
        return (v or "").strip().lower() or "clear"


class OutfitTags(BaseModel):
    occasion: List[str] = Field(default_factory=list)
    season: List[str] = Field(default_factory=list)
    style: List[str] = Field(default_factory=list)
    mood: str = ""
    colors: List[str] = Field(default_factory=list)
    garments: List[str] = Field(default_factory=list)
    formality_level: Optional[int] = Field(None, ge=1, le=10)
    effort_level: Optional[EffortLevel] = None

    @field_validator("occasion", "style", "colors")
    @classmethod
    def _slugs(cls, v: List[str]) -> List[str]:
        return normalize_many(v)

    @field_validator("season")
    @classmethod
    def _seasons(cls, v: List[str]) -> List[str]:
        out: List[str] = []
        for s in v or []:
            t = normalize_season(s)
            if t not in out:
                out.append(t)
        return out

    @field_validator("garments")
    @classmethod
    def _garments(cls, v: List[str]) -> List[str]:
        return clean_labels(v)

    @field_validator("mood")
    @classmethod
    def _mood(cls, v: str) -> str:
        return (v or "").strip().lower()


class OutfitContext(BaseModel):
    weather: WeatherData = Field(default_factory=WeatherData)
    location: Optional[str] = None
    duration: Optional[str] = None
    event_type: Optional[str] = None


class OutfitRatings(BaseModel):
    confidence: int = Field(ge=1, le=10)
    comfort: int = Field(ge=1, le=10)
    success: int = Field(ge=1, le=10)
    repeat_likelihood: Optional[int] = Field(None, ge=1, le=10)
    received_compliments: Optional[bool] = None
    felt_appropriate: Optional[bool] = None
    feedback_notes: Optional[str] = None

    @property
    def overall(self) -> float:
        return (self.confidence + self.comfort + self.success) / 3


class AIAnalysis(BaseModel):
    style_coherence: float
    color_harmony: float
    occasion_appropriateness: float
    summary: str
    suggested_improvements: List[str] = Field(default_factory=list)
    confidence_factors: List[str] = Field(default_factory=list)


class Outfit(BaseModel):
    id: str
    timestamp: datetime
    photo_references: List[str] = Field(default_factory=list)
    tags: OutfitTags = Field(default_factory=OutfitTags)
    context: OutfitContext = Field(default_factory=OutfitContext)
    ratings: Optional[OutfitRatings] = None
    notes: Optional[str] = None
    ai_analysis: Optional[AIAnalysis] = None
    created_at: datetime
    updated_at: datetime


class OutfitCreate(BaseModel):
    timestamp: Optional[datetime] = None
    photo_references: List[str] = Field(default_factory=list)
    tags: OutfitTags = Field(default_factory=OutfitTags)
    weather: Optional[WeatherData] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    event_type: Optional[str] = None
    notes: Optional[str] = None


class OutfitLogOut(BaseModel):
    outfit: Outfit
    matched_item_ids: List[str] = Field(default_factory=list)


class RatingOut(BaseModel):
    outfit_id: str
    ratings: OutfitRatings
    insights: List[str]


class InsightsOut(BaseModel):
    outfit_id: str
    insights: List[str]
