from .engine import OutfitAnalyzer, analyze_outfit, analyze_tags
from .gaps import analyze_wardrobe_gaps
from .insights import generate_rating_insights
from .patterns import analyze_style_patterns
from .performance import go_to_outfits, predict_outfit_success
from .reports import generate_monthly_report
from .scorers import BaseScorer, ColorHarmonyScorer, OccasionFitScorer, StyleCoherenceScorer

__all__ = [
    "OutfitAnalyzer",
    "analyze_outfit",
    "analyze_tags",
    "analyze_wardrobe_gaps",
    "generate_rating_insights",
    "analyze_style_patterns",
    "go_to_outfits",
    "predict_outfit_success",
    "generate_monthly_report",
    "BaseScorer",
    "StyleCoherenceScorer",
    "ColorHarmonyScorer",
    "OccasionFitScorer",
]
