from typing import List

from stylelog.schemas.outfits import Outfit

from . import rules


def generate_rating_insights(outfit: Outfit) -> List[str]:
    """Feedback notes for a rated outfit, in rule order. Unrated outfits get one note."""
    ratings = outfit.ratings
    if ratings is None:
        return [rules.NO_RATINGS]

    notes: List[str] = []
    if ratings.confidence >= rules.RATING_HIGH:
        notes.append(rules.CONFIDENCE_HIGH)
    elif ratings.confidence <= rules.RATING_LOW:
        notes.append(rules.CONFIDENCE_LOW)

    if ratings.comfort >= rules.RATING_HIGH:
        notes.append(rules.COMFORT_HIGH)
    elif ratings.comfort <= rules.RATING_LOW:
        notes.append(rules.COMFORT_LOW)

    if ratings.success >= rules.RATING_HIGH:
        notes.append(rules.SUCCESS_HIGH)

    if ratings.confidence > ratings.comfort:
        notes.append(rules.STYLE_OVER_COMFORT)
    return notes
