"""Rule tables for outfit scoring and rating feedback.

Every threshold and message used by the analysis engine lives here so the
scoring contract can be read (and tested) in one place.
"""

NEUTRAL_SCORE = 0.5
SCORE_PRECISION = 4

# style coherence
STYLE_BASE_SCORE = 0.8
STYLE_CONFLICT_PENALTY = 0.2
CONFLICTING_STYLES: tuple[tuple[str, str], ...] = (
    ("formal", "casual"),
    ("minimalist", "bohemian"),
    ("edgy", "romantic"),
)

# color harmony
SINGLE_COLOR_HARMONY = 0.9
COLOR_HARMONY_BASE = 0.5
COLOR_HARMONY_NEUTRAL_WEIGHT = 0.4
NEUTRAL_COLORS: tuple[str, ...] = ("black", "white", "gray", "navy", "beige", "brown")

# occasion fit
OCCASION_FIT_SCORE = 0.8

# summary tiers, checked top-down against the mean of the three scores
SUMMARY_EXCELLENT_MIN = 0.8
SUMMARY_GOOD_MIN = 0.6
SUMMARY_EXCELLENT = "Excellent outfit choice! Styles work together and it suits the occasion."
SUMMARY_GOOD = "Good outfit with room for minor improvements."
SUMMARY_ADJUST = "Consider adjusting some elements for better overall harmony."

# improvements
IMPROVEMENT_SCORE_MIN = 0.6
MAX_GARMENTS = 6
IMPROVE_STYLE = "Choose accessories that better match the overall style."
IMPROVE_COLORS = "Try limiting the outfit to 2-3 main colors."
IMPROVE_SIMPLIFY = "Simplify the outfit by removing one accessory."

# confidence factors
CONFIDENCE_STYLE = "classic"
CONFIDENCE_COLORS: tuple[str, ...] = ("navy", "black")
CONFIDENCE_OCCASION = "work"
FACTOR_CLASSIC = "Classic style choices tend to boost confidence."
FACTOR_DARK_COLORS = "Dark colors give a polished, confident look."
FACTOR_WORK = "A work-appropriate outfit builds confidence at the office."

# rating insights
RATING_HIGH = 8
RATING_LOW = 4
NO_RATINGS = "No ratings recorded yet."
CONFIDENCE_HIGH = "High confidence outfit, a great style choice."
CONFIDENCE_LOW = "Think about what made you feel less confident in this outfit."
COMFORT_HIGH = "Very comfortable, perfect for active days."
COMFORT_LOW = "Low comfort; consider fabric and fit adjustments."
SUCCESS_HIGH = "Highly successful outfit. Save this combination!"
STYLE_OVER_COMFORT = "Style over comfort trade-off; look for more comfortable alternatives."
