from typing import List, Tuple

from stylelog.schemas.outfits import AIAnalysis, Outfit, OutfitTags

from . import rules
from .scorers import BaseScorer, ColorHarmonyScorer, OccasionFitScorer, StyleCoherenceScorer


class OutfitAnalyzer:
    """Rule-based quality assessment of a single outfit.

    Pure function of the outfit's tags: no I/O, no shared state, never raises
    for missing or empty tag fields.
    """

    def __init__(self):
        self.style = StyleCoherenceScorer()
        self.color = ColorHarmonyScorer()
        self.occasion = OccasionFitScorer()

    @property
    def scorers(self) -> List[BaseScorer]:
        return [self.style, self.color, self.occasion]

    def scores(self, tags: OutfitTags) -> Tuple[float, float, float]:
        return self.style.score(tags), self.color.score(tags), self.occasion.score(tags)

    def analyze(self, tags: OutfitTags) -> AIAnalysis:
        style, color, occasion = self.scores(tags)
        return AIAnalysis(
            style_coherence=style,
            color_harmony=color,
            occasion_appropriateness=occasion,
            summary=summarize(style, color, occasion),
            suggested_improvements=improvements(tags, style, color),
            confidence_factors=confidence_factors(tags),
        )


def summarize(style: float, color: float, occasion: float) -> str:
    overall = round((style + color + occasion) / 3, rules.SCORE_PRECISION)
    if overall >= rules.SUMMARY_EXCELLENT_MIN:
        return rules.SUMMARY_EXCELLENT
    if overall >= rules.SUMMARY_GOOD_MIN:
        return rules.SUMMARY_GOOD
    return rules.SUMMARY_ADJUST


def improvements(tags: OutfitTags, style: float, color: float) -> List[str]:
    out: List[str] = []
    if style < rules.IMPROVEMENT_SCORE_MIN:
        out.append(rules.IMPROVE_STYLE)
    if color < rules.IMPROVEMENT_SCORE_MIN:
        out.append(rules.IMPROVE_COLORS)
    if len(tags.garments) > rules.MAX_GARMENTS:
        out.append(rules.IMPROVE_SIMPLIFY)
    return out


def confidence_factors(tags: OutfitTags) -> List[str]:
    out: List[str] = []
    if rules.CONFIDENCE_STYLE in tags.style:
        out.append(rules.FACTOR_CLASSIC)
    if any(dark in c.lower() for c in tags.colors for dark in rules.CONFIDENCE_COLORS):
        out.append(rules.FACTOR_DARK_COLORS)
    if rules.CONFIDENCE_OCCASION in tags.occasion:
        out.append(rules.FACTOR_WORK)
    return out


_analyzer = OutfitAnalyzer()


def analyze_tags(tags: OutfitTags) -> AIAnalysis:
    return _analyzer.analyze(tags)


def analyze_outfit(outfit: Outfit) -> AIAnalysis:
    """Score an outfit's style coherence, color harmony and occasion fit."""
    return _analyzer.analyze(outfit.tags)
