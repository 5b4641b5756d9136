from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional, List, Literal, Dict

from stylelog.schemas.outfits import OutfitTags, WeatherData
from stylelog.schemas.wardrobe import WardrobeItem

Trend = Literal["increasing", "decreasing", "stable"]
Significance = Literal["high", "medium", "low"]
Priority = Literal["high", "medium", "low"]
TimePeriod = Literal["week", "month", "season", "year"]
AnalysisType = Literal[
    "confidence_trends",
    "comfort_patterns",
    "style_evolution",
    "color_preferences",
    "occasion_analysis",
]
FocusCategory = Literal["work", "casual", "formal", "seasonal", "all"]
SuccessMetric = Literal["confidence", "comfort", "success", "overall"]


class PatternInsight(BaseModel):
    category: str
    trend: Trend
    value: float
    description: str
    significance: Significance


class PatternCriteria(BaseModel):
    time_period: TimePeriod = "month"
    analysis_type: Optional[AnalysisType] = None
    focus_category: FocusCategory = "all"


class StylePattern(BaseModel):
    pattern_type: str
    time_frame: TimePeriod
    outfits_analyzed: int = 0
    insights: List[PatternInsight] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class GapCriteria(BaseModel):
    focus_area: str = "general"
    time_period: TimePeriod = "season"


class WardrobeGap(BaseModel):
    category: str
    priority: Priority
    description: str
    suggested_items: List[str] = Field(default_factory=list)
    occasions_covered: List[str] = Field(default_factory=list)
    estimated_budget: Optional[str] = None


class DateRange(BaseModel):
    start: datetime
    end: datetime


class ReportMetrics(BaseModel):
    total_outfits: int = 0
    rated_outfits: int = 0
    avg_confidence: float = 0.0
    avg_comfort: float = 0.0
    avg_success: float = 0.0
    most_worn_items: List[WardrobeItem] = Field(default_factory=list)
    top_styles: List[str] = Field(default_factory=list)
    color_preferences: Dict[str, int] = Field(default_factory=dict)


class StyleReport(BaseModel):
    id: str
    period: str
    date_range: DateRange
    metrics: ReportMetrics
    insights: List[PatternInsight] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    generated_at: datetime


class GoToOutfit(BaseModel):
    outfit_id: str
    timestamp: datetime
    score: float
    occasion: List[str] = Field(default_factory=list)
    style: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list)
    garments: List[str] = Field(default_factory=list)


class PredictIn(BaseModel):
    tags: OutfitTags
    weather: Optional[WeatherData] = None


class PredictOut(BaseModel):
    style_coherence: float
    color_harmony: float
    occasion_appropriateness: float
    summary: str
    similar_outfits: int
    estimated_confidence: Optional[float] = None
    estimated_comfort: Optional[float] = None
    estimated_success: Optional[float] = None
    notes: List[str] = Field(default_factory=list)
