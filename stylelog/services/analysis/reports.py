import calendar
from collections import Counter
from datetime import datetime, timedelta
from statistics import mean
from typing import List, Optional, Sequence, Tuple

from stylelog.schemas.analysis import DateRange, PatternInsight, ReportMetrics, StyleReport
from stylelog.schemas.outfits import Outfit
from stylelog.schemas.wardrobe import WardrobeItem
from stylelog.services.wardrobe import usage_summary

from .patterns import build_insights, recommendations_for

TOP_STYLES_LIMIT = 3
# relative month-over-month change
CHANGE_TREND = 0.05
CHANGE_HIGH = 0.15


def month_bounds(now: datetime) -> Tuple[datetime, datetime, datetime]:
    """(start of previous month, start of this month, now)."""
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    prev_start = (start - timedelta(days=1)).replace(day=1)
    return prev_start, start, now


def _avg(outfits: Sequence[Outfit], attr: str) -> float:
    values = [getattr(o.ratings, attr) for o in outfits if o.ratings is not None]
    return round(mean(values), 2) if values else 0.0


def build_metrics(outfits: Sequence[Outfit], items: Sequence[WardrobeItem]) -> ReportMetrics:
    styles = Counter(s for o in outfits for s in o.tags.style)
    colors = Counter(c for o in outfits for c in o.tags.colors)
    return ReportMetrics(
        total_outfits=len(outfits),
        rated_outfits=sum(1 for o in outfits if o.ratings is not None),
        avg_confidence=_avg(outfits, "confidence"),
        avg_comfort=_avg(outfits, "comfort"),
        avg_success=_avg(outfits, "success"),
        most_worn_items=usage_summary(items).most_worn,
        top_styles=[s for s, _ in sorted(styles.items(), key=lambda kv: (-kv[1], kv[0]))[:TOP_STYLES_LIMIT]],
        color_preferences=dict(sorted(colors.items(), key=lambda kv: (-kv[1], kv[0]))),
    )


def confidence_change(current: Sequence[Outfit], previous: Sequence[Outfit]) -> Optional[PatternInsight]:
    cur, prev = _avg(current, "confidence"), _avg(previous, "confidence")
    if not cur or not prev:
        return None
    change = round((cur - prev) / prev, 2)
    if change >= CHANGE_TREND:
        trend, text = "increasing", f"Confidence up {change:.0%} on last month"
    elif change <= -CHANGE_TREND:
        trend, text = "decreasing", f"Confidence down {abs(change):.0%} on last month"
    else:
        trend, text = "stable", "Confidence about the same as last month"
    return PatternInsight(
        category="Confidence Growth",
        trend=trend,
        value=change,
        description=text,
        significance="high" if abs(change) >= CHANGE_HIGH else ("medium" if abs(change) >= CHANGE_TREND else "low"),
    )


def generate_monthly_report(
    outfits: Sequence[Outfit],
    previous: Sequence[Outfit],
    items: Sequence[WardrobeItem],
    now: datetime,
) -> StyleReport:
    """Month-to-date report. ``outfits`` covers this month, ``previous`` last month."""
    _, start, end = month_bounds(now)
    insights: List[PatternInsight] = []
    change = confidence_change(outfits, previous)
    if change is not None:
        insights.append(change)
    insights.extend(build_insights(outfits, ("style_evolution", "color_preferences", "occasion_analysis")))

    recommendations = recommendations_for(outfits, insights)
    idle = [i for i in items if i.worn_count == 0]
    if outfits and idle:
        recommendations.append(f"{len(idle)} wardrobe items have never been worn; style one of them this month.")

    return StyleReport(
        id=f"report-{now.year}-{now.month}",
        period=f"{calendar.month_name[now.month]} {now.year}",
        date_range=DateRange(start=start, end=end),
        metrics=build_metrics(outfits, items),
        insights=insights,
        recommendations=recommendations,
        generated_at=now,
    )
