from collections import Counter
from datetime import datetime, timedelta
from statistics import mean
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from stylelog.core.tags import current_season
from stylelog.schemas.analysis import PatternCriteria, PatternInsight, StylePattern
from stylelog.schemas.outfits import Outfit
from stylelog.store.records import as_utc

from .scorers import ColorHarmonyScorer

PERIOD_DAYS: Dict[str, int] = {"week": 7, "month": 30, "season": 90, "year": 365}

# rating-trend thresholds, in rating points (1-10 scale)
TREND_DELTA = 0.5
HIGH_SIGNIFICANCE_DELTA = 1.5
# share-trend thresholds, as fractions
SHARE_TREND_DELTA = 0.1
LOW_CONFIDENCE_OCCASION = 6.0
COMFORT_FLOOR = 6.0
DOMINANT_STYLE_SHARE = 0.6
NEUTRAL_HEAVY = 0.7
NEUTRAL_LIGHT = 0.3

ALL_ANALYSES = (
    "confidence_trends",
    "comfort_patterns",
    "style_evolution",
    "color_preferences",
    "occasion_analysis",
)
EMPTY_HISTORY_TIP = "Log and rate a few outfits to start seeing patterns."


def window_for(period: str, now: datetime) -> Tuple[datetime, datetime]:
    return now - timedelta(days=PERIOD_DAYS.get(period, 30)), now


def chronological(outfits: Sequence[Outfit]) -> List[Outfit]:
    return sorted(outfits, key=lambda o: (as_utc(o.timestamp), o.id))


def halves(outfits: Sequence[Outfit]) -> Tuple[List[Outfit], List[Outfit]]:
    ordered = chronological(outfits)
    cut = len(ordered) // 2
    return ordered[:cut], ordered[cut:]


def _r(x: float) -> float:
    return round(x, 2)


def _trend(delta: float, threshold: float) -> str:
    if delta >= threshold:
        return "increasing"
    if delta <= -threshold:
        return "decreasing"
    return "stable"


def _rating_significance(delta: float) -> str:
    if abs(delta) >= HIGH_SIGNIFICANCE_DELTA:
        return "high"
    if abs(delta) >= TREND_DELTA:
        return "medium"
    return "low"


def _share_significance(share: float) -> str:
    if share >= 0.5:
        return "high"
    if share >= 0.25:
        return "medium"
    return "low"


def focus_filter(outfits: Sequence[Outfit], focus: str, now: datetime) -> List[Outfit]:
    if focus == "all":
        return list(outfits)
    if focus == "seasonal":
        season = current_season(now)
        return [o for o in outfits if season in o.tags.season]
    return [o for o in outfits if any(focus in occ for occ in o.tags.occasion)]


def rating_insight(outfits: Sequence[Outfit], attr: str, label: str) -> Optional[PatternInsight]:
    rated = [o for o in chronological(outfits) if o.ratings is not None]
    if not rated:
        return None
    values = [getattr(o.ratings, attr) for o in rated]
    avg = mean(values)
    early, late = values[: len(values) // 2], values[len(values) // 2:]
    delta = mean(late) - mean(early) if early and late else 0.0
    trend = _trend(delta, TREND_DELTA)
    if trend == "stable":
        text = f"{label} steady at {avg:.1f}/10 across {len(values)} rated outfits"
    else:
        text = f"{label} {trend} by {abs(delta):.1f} points, averaging {avg:.1f}/10"
    return PatternInsight(
        category=label,
        trend=trend,
        value=_r(avg),
        description=text,
        significance=_rating_significance(delta),
    )


def _top_share(outfits: Sequence[Outfit], values: Callable[[Outfit], List[str]]) -> Tuple[Optional[str], float]:
    counts: Counter = Counter()
    tagged = 0
    for o in outfits:
        vs = values(o)
        if vs:
            tagged += 1
            counts.update(set(vs))
    if not counts:
        return None, 0.0
    # ties break alphabetically
    top, n = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))[0]
    return top, n / tagged


def style_insight(outfits: Sequence[Outfit]) -> Optional[PatternInsight]:
    top, share = _top_share(outfits, lambda o: o.tags.style)
    if top is None:
        return None
    early, late = halves(outfits)
    early_share = _share_of(early, top, lambda o: o.tags.style)
    late_share = _share_of(late, top, lambda o: o.tags.style)
    trend = _trend(late_share - early_share, SHARE_TREND_DELTA) if early and late else "stable"
    return PatternInsight(
        category="Style Evolution",
        trend=trend,
        value=_r(share),
        description=f"'{top}' is your most worn style ({share:.0%} of styled outfits)",
        significance=_share_significance(share),
    )


def _share_of(outfits: Sequence[Outfit], value: str, values: Callable[[Outfit], List[str]]) -> float:
    tagged = [o for o in outfits if values(o)]
    if not tagged:
        return 0.0
    return sum(1 for o in tagged if value in values(o)) / len(tagged)


def neutral_ratio(outfits: Sequence[Outfit]) -> Optional[float]:
    colors = [c for o in outfits for c in o.tags.colors]
    if not colors:
        return None
    return sum(1 for c in colors if ColorHarmonyScorer.is_neutral(c)) / len(colors)


def color_insight(outfits: Sequence[Outfit]) -> Optional[PatternInsight]:
    ratio = neutral_ratio(outfits)
    if ratio is None:
        return None
    early, late = halves(outfits)
    er, lr = neutral_ratio(early), neutral_ratio(late)
    trend = _trend(lr - er, SHARE_TREND_DELTA) if er is not None and lr is not None else "stable"
    counts = Counter(c for o in outfits for c in o.tags.colors)
    top = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))[0][0]
    return PatternInsight(
        category="Color Preferences",
        trend=trend,
        value=_r(ratio),
        description=f"Neutral tones make up {ratio:.0%} of logged colors; '{top}' appears most",
        significance="high" if ratio >= NEUTRAL_HEAVY or ratio <= NEUTRAL_LIGHT else "medium",
    )


def occasion_confidence(outfits: Sequence[Outfit]) -> Dict[str, float]:
    """Average confidence per occasion over rated outfits."""
    buckets: Dict[str, List[int]] = {}
    for o in outfits:
        if o.ratings is None:
            continue
        for occ in o.tags.occasion:
            buckets.setdefault(occ, []).append(o.ratings.confidence)
    return {occ: mean(vs) for occ, vs in sorted(buckets.items())}


def occasion_insights(outfits: Sequence[Outfit]) -> List[PatternInsight]:
    out: List[PatternInsight] = []
    top, share = _top_share(outfits, lambda o: o.tags.occasion)
    if top is not None:
        out.append(
            PatternInsight(
                category="Occasion Mix",
                trend="stable",
                value=_r(share),
                description=f"'{top}' is your most frequent occasion ({share:.0%} of outfits)",
                significance=_share_significance(share),
            )
        )
    by_occ = occasion_confidence(outfits)
    if by_occ:
        weakest = min(by_occ, key=lambda k: (by_occ[k], k))
        avg = by_occ[weakest]
        if avg < LOW_CONFIDENCE_OCCASION:
            out.append(
                PatternInsight(
                    category="Occasion Confidence",
                    trend="stable",
                    value=_r(avg),
                    description=f"Confidence is lowest for '{weakest}' outfits ({avg:.1f}/10)",
                    significance="high" if avg <= 4 else "medium",
                )
            )
    return out


def build_insights(outfits: Sequence[Outfit], analyses: Sequence[str]) -> List[PatternInsight]:
    insights: List[PatternInsight] = []
    for kind in analyses:
        if kind == "confidence_trends":
            found = [rating_insight(outfits, "confidence", "Confidence")]
        elif kind == "comfort_patterns":
            found = [rating_insight(outfits, "comfort", "Comfort")]
        elif kind == "style_evolution":
            found = [style_insight(outfits)]
        elif kind == "color_preferences":
            found = [color_insight(outfits)]
        elif kind == "occasion_analysis":
            found = occasion_insights(outfits)
        else:
            found = []
        insights.extend(i for i in found if i is not None)
    return insights


def recommendations_for(outfits: Sequence[Outfit], insights: Sequence[PatternInsight]) -> List[str]:
    if not outfits:
        return [EMPTY_HISTORY_TIP]
    recs: List[str] = []
    by_cat = {i.category: i for i in insights}

    conf = by_cat.get("Confidence")
    if conf is not None and conf.trend == "decreasing":
        recs.append("Confidence has dipped lately; revisit your go-to outfits for a boost.")
    comfort = by_cat.get("Comfort")
    if comfort is not None and comfort.value < COMFORT_FLOOR:
        recs.append("Favor softer fabrics and relaxed fits to lift comfort ratings.")
    style = by_cat.get("Style Evolution")
    if style is not None and style.value >= DOMINANT_STYLE_SHARE:
        recs.append("Try one piece outside your usual style for a low-risk experiment.")
    color = by_cat.get("Color Preferences")
    if color is not None:
        if color.value >= NEUTRAL_HEAVY:
            recs.append("Try incorporating one bold color per outfit.")
        elif color.value <= NEUTRAL_LIGHT:
            recs.append("Anchor bold colors with a neutral base piece.")
    weak = by_cat.get("Occasion Confidence")
    if weak is not None:
        recs.append("Plan outfits for your lowest-confidence occasion ahead of time.")
    return recs


def analyze_style_patterns(
    outfits: Sequence[Outfit],
    criteria: Optional[PatternCriteria] = None,
    now: Optional[datetime] = None,
) -> StylePattern:
    """Trend insights over ``outfits``, which the caller has already limited to the window."""
    criteria = criteria or PatternCriteria()
    now = now or datetime.now().astimezone()
    scoped = focus_filter(outfits, criteria.focus_category, now)
    analyses = (criteria.analysis_type,) if criteria.analysis_type else ALL_ANALYSES
    insights = build_insights(scoped, analyses)
    return StylePattern(
        pattern_type=criteria.analysis_type or "overview",
        time_frame=criteria.time_period,
        outfits_analyzed=len(scoped),
        insights=insights,
        recommendations=recommendations_for(scoped, insights),
    )
