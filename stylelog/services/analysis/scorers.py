from abc import ABC, abstractmethod

from stylelog.schemas.outfits import OutfitTags

from . import rules


def _round(value: float) -> float:
    return round(value, rules.SCORE_PRECISION)


class BaseScorer(ABC):
    """Base class for the per-outfit dimension scorers. Scores are in [0, 1]."""

    @property
    @abstractmethod
    def dimension_name(self) -> str:
        pass

    @abstractmethod
    def score(self, tags: OutfitTags) -> float:
        pass

    def _clamp_score(self, value: float) -> float:
        return _round(max(0.0, min(1.0, value)))


class StyleCoherenceScorer(BaseScorer):
    """Base score minus a fixed penalty per incompatible style pair present."""

    dimension_name = "style_coherence"

    def conflicts(self, tags: OutfitTags) -> int:
        styles = set(tags.style)
        return sum(1 for a, b in rules.CONFLICTING_STYLES if a in styles and b in styles)

    def score(self, tags: OutfitTags) -> float:
        if not tags.style:
            return rules.NEUTRAL_SCORE
        penalty = self.conflicts(tags) * rules.STYLE_CONFLICT_PENALTY
        return self._clamp_score(rules.STYLE_BASE_SCORE - penalty)


class ColorHarmonyScorer(BaseScorer):
    """Biased toward neutrals: 0.5 + 0.4 * neutral ratio for two or more colors."""

    dimension_name = "color_harmony"

    @staticmethod
    def is_neutral(color: str) -> bool:
        c = color.lower()
        return any(n in c for n in rules.NEUTRAL_COLORS)

    def score(self, tags: OutfitTags) -> float:
        colors = tags.colors
        if not colors:
            return rules.NEUTRAL_SCORE
        if len(colors) == 1:
            return rules.SINGLE_COLOR_HARMONY
        ratio = sum(1 for c in colors if self.is_neutral(c)) / len(colors)
        return self._clamp_score(rules.COLOR_HARMONY_BASE + rules.COLOR_HARMONY_NEUTRAL_WEIGHT * ratio)


class OccasionFitScorer(BaseScorer):
    dimension_name = "occasion_appropriateness"

    def score(self, tags: OutfitTags) -> float:
        if not tags.occasion:
            return rules.NEUTRAL_SCORE
        return rules.OCCASION_FIT_SCORE
