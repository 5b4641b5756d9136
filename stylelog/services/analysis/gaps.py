from collections import Counter
from typing import Dict, List, Optional, Sequence

from stylelog.schemas.analysis import GapCriteria, WardrobeGap
from stylelog.schemas.outfits import Outfit
from stylelog.schemas.wardrobe import WardrobeItem

from .patterns import LOW_CONFIDENCE_OCCASION, occasion_confidence

CORE_CATEGORIES = ("tops", "bottoms", "shoes", "outerwear")

CATEGORY_STAPLES: Dict[str, List[str]] = {
    "tops": ["White button-down shirt", "Neutral knit sweater"],
    "bottoms": ["Dark wash jeans", "Tailored trousers"],
    "shoes": ["Leather loafers", "Ankle boots"],
    "outerwear": ["Navy blazer", "Neutral trench coat"],
}
CATEGORY_BUDGETS: Dict[str, str] = {
    "tops": "$40-120",
    "bottoms": "$60-150",
    "shoes": "$80-200",
    "outerwear": "$100-300",
}

OCCASION_STAPLES: Dict[str, List[str]] = {
    "work": ["Navy blazer", "Neutral cardigan", "Tailored trousers"],
    "formal": ["Dark suit or dress", "Polished leather shoes"],
    "casual": ["Well-fitting jeans", "Clean white sneakers"],
    "date": ["Statement top", "Ankle boots"],
    "travel": ["Wrinkle-resistant layers", "Comfortable walking shoes"],
    "exercise": ["Moisture-wicking tops", "Supportive trainers"],
    "social": ["Versatile dark jeans", "Smart casual shirt"],
}
DEFAULT_STAPLES = ["Versatile neutral layer", "Comfortable everyday shoes"]

COLD_TEMPERATURE = 50
PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}


def _category_gaps(items: Sequence[WardrobeItem]) -> List[WardrobeGap]:
    counts = Counter(i.category for i in items)
    gaps: List[WardrobeGap] = []
    for cat in CORE_CATEGORIES:
        n = counts.get(cat, 0)
        if n > 1:
            continue
        gaps.append(
            WardrobeGap(
                category=cat,
                priority="high" if n == 0 else "medium",
                description=f"No {cat} in your wardrobe" if n == 0 else f"Only one item in {cat}",
                suggested_items=list(CATEGORY_STAPLES[cat]),
                occasions_covered=["work", "casual"],
                estimated_budget=CATEGORY_BUDGETS[cat],
            )
        )
    return gaps


def _occasion_gaps(outfits: Sequence[Outfit]) -> List[WardrobeGap]:
    gaps: List[WardrobeGap] = []
    for occ, avg in occasion_confidence(outfits).items():
        if avg >= LOW_CONFIDENCE_OCCASION:
            continue
        gaps.append(
            WardrobeGap(
                category=f"{occ} outfits",
                priority="high" if avg <= 4 else "medium",
                description=f"Average confidence for '{occ}' outfits is {avg:.1f}/10",
                suggested_items=list(OCCASION_STAPLES.get(occ, DEFAULT_STAPLES)),
                occasions_covered=[occ],
            )
        )
    return gaps


def _cold_weather_gap(outfits: Sequence[Outfit], items: Sequence[WardrobeItem]) -> Optional[WardrobeGap]:
    cold = [o for o in outfits if o.context.weather.temperature < COLD_TEMPERATURE]
    outerwear = sum(1 for i in items if i.category == "outerwear")
    # zero outerwear is already reported as a category gap
    if not cold or outerwear != 1:
        return None
    return WardrobeGap(
        category="cold weather layers",
        priority="medium",
        description=f"{len(cold)} cold-weather outfits rely on a single outerwear piece",
        suggested_items=["Warm wool coat", "Insulated jacket"],
        occasions_covered=["casual", "work"],
        estimated_budget="$120-350",
    )


def _focus_gap(focus: str, outfits: Sequence[Outfit], period: str) -> Optional[WardrobeGap]:
    if focus not in OCCASION_STAPLES:
        return None
    if any(focus in o.tags.occasion for o in outfits):
        return None
    return WardrobeGap(
        category=f"{focus} outfits",
        priority="low",
        description=f"No '{focus}' outfits logged this {period}",
        suggested_items=list(OCCASION_STAPLES[focus]),
        occasions_covered=[focus],
    )


def analyze_wardrobe_gaps(
    outfits: Sequence[Outfit],
    items: Sequence[WardrobeItem],
    criteria: Optional[GapCriteria] = None,
) -> List[WardrobeGap]:
    """Missing categories and weak occasions, highest priority first.

    Category gaps are only reported once the wardrobe has been catalogued; an
    empty wardrobe with an empty history produces no gaps.
    """
    criteria = criteria or GapCriteria()
    if not outfits and not items:
        return []
    gaps: List[WardrobeGap] = []
    if items:
        gaps.extend(_category_gaps(items))
    gaps.extend(_occasion_gaps(outfits))
    for extra in (
        _cold_weather_gap(outfits, items),
        _focus_gap(criteria.focus_area, outfits, criteria.time_period),
    ):
        if extra is not None:
            gaps.append(extra)

    seen: set[str] = set()
    unique: List[WardrobeGap] = []
    for g in gaps:
        if g.category not in seen:
            seen.add(g.category)
            unique.append(g)
    unique.sort(key=lambda g: PRIORITY_ORDER[g.priority])
    return unique
