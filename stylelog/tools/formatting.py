from typing import List, Sequence

from stylelog.schemas.analysis import GoToOutfit, StylePattern, WardrobeGap
from stylelog.schemas.outfits import AIAnalysis, Outfit, OutfitRatings
from stylelog.schemas.recs import OutfitRecommendation, RecommendationContext
from stylelog.schemas.wardrobe import CostPerWear, WardrobeItem


def pct(x: float) -> str:
    return f"{round(x * 100)}%"


def _join(xs: Sequence[str], empty: str = "-") -> str:
    return ", ".join(xs) if xs else empty


def logged_outfit(outfit: Outfit, analysis: AIAnalysis, matched: int) -> str:
    lines = [
        "Outfit logged.",
        "",
        f"**Outfit ID:** {outfit.id}",
        f"**Date:** {outfit.timestamp:%Y-%m-%d}",
        f"**Tags:** {_join(outfit.tags.occasion)} | {_join(outfit.tags.style)}",
        f"**Mood:** {outfit.tags.mood or '-'}",
        "",
        "**Analysis:**",
        f"- Style coherence: {pct(analysis.style_coherence)}",
        f"- Color harmony: {pct(analysis.color_harmony)}",
        f"- Occasion fit: {pct(analysis.occasion_appropriateness)}",
        "",
        analysis.summary,
    ]
    lines.extend(f"- {tip}" for tip in analysis.suggested_improvements)
    if matched:
        lines.append(f"\nRecorded a wear on {matched} wardrobe items.")
    lines.append("\n*Rate this outfit at the end of the day.*")
    return "\n".join(lines)


def rated_outfit(ratings: OutfitRatings, insights: List[str]) -> str:
    return "\n".join(
        [
            "Outfit rated.",
            "",
            f"- Confidence: {ratings.confidence}/10",
            f"- Comfort: {ratings.comfort}/10",
            f"- Success: {ratings.success}/10",
            "",
            "**Insights:**",
            *(f"- {i}" for i in insights),
        ]
    )


def recommendations(recs: Sequence[OutfitRecommendation], ctx: RecommendationContext) -> str:
    weather = ctx.weather.condition if ctx.weather else "any weather"
    head = f"**Outfit Recommendations** for {ctx.occasion or 'any occasion'} | {weather} | {ctx.mood_preference or 'your style'}"
    blocks = []
    for n, rec in enumerate(recs, 1):
        body = [f"**{n}. {rec.reasoning[0]}** (score {pct(rec.score)}, {rec.strategy})"]
        body.extend(f"- {r}" for r in rec.reasoning[1:])
        body.append(f"- Weather fit: {pct(rec.weather_score)}, personal style: {pct(rec.personal_score)}")
        blocks.append("\n".join(body))
    return head + "\n\n" + "\n\n".join(blocks)


def search_results(outfits: Sequence[Outfit], shown: int = 10) -> str:
    if not outfits:
        return "**Search Results** (0 found)\n\nNo outfits found matching your criteria."
    blocks = []
    for o in outfits[:shown]:
        rating = f"{round(o.ratings.overall)}/10" if o.ratings else "not rated"
        blocks.append(
            f"**{o.timestamp:%Y-%m-%d}** {_join(o.tags.occasion)} (`{o.id}`)\n"
            f"- Style: {_join(o.tags.style)}\n"
            f"- Mood: {o.tags.mood or '-'}\n"
            f"- Rating: {rating}\n"
            f"- Notes: {o.notes or 'none'}"
        )
    return f"**Search Results** ({len(outfits)} found)\n\n" + "\n\n".join(blocks)


def style_pattern(pattern: StylePattern) -> str:
    lines = [f"**Style Pattern Analysis** - {pattern.time_frame} ({pattern.outfits_analyzed} outfits)", ""]
    if pattern.insights:
        lines.extend(f"**{i.category}:** {i.description} ({i.trend})" for i in pattern.insights)
    else:
        lines.append("No insights yet for this period.")
    if pattern.recommendations:
        lines.extend(["", "**Recommendations:**", *(f"- {r}" for r in pattern.recommendations)])
    return "\n".join(lines)


def wardrobe_item(item: WardrobeItem, total: int) -> str:
    return (
        f"**Wardrobe item added:** {item.name} ({item.category})\n"
        f"- Colors: {_join(item.colors)}\n"
        f"- Style tags: {_join(item.style_tags)}\n\n"
        f"Your wardrobe now has {total} items."
    )


def wardrobe_gaps(gaps: Sequence[WardrobeGap], focus: str) -> str:
    if not gaps:
        return f"**Wardrobe Gap Analysis** - {focus}\n\nNo gaps found."
    blocks = [
        f"**{g.category}** ({g.priority} priority)\n{g.description}\n"
        f"Suggested: {_join(g.suggested_items)}\nBudget: {g.estimated_budget or 'variable'}"
        for g in gaps
    ]
    return f"**Wardrobe Gap Analysis** - {focus}\n\n" + "\n\n".join(blocks)


def cost_per_wear(rows: Sequence[CostPerWear]) -> str:
    if not rows:
        return "**Cost per Wear**\n\nNo wardrobe items with a cost yet."
    lines = ["**Cost per Wear**", ""]
    lines.extend(
        f"- {r.name} ({r.category}): ${r.cost_per_wear:.2f} per wear, ${r.cost:.2f} over {r.worn_count} wears"
        for r in rows
    )
    return "\n".join(lines)


def go_to_outfits(picks: Sequence[GoToOutfit], metric: str) -> str:
    if not picks:
        return f"**Go-To Outfits** ({metric})\n\nNo rated outfits meet the threshold yet."
    lines = [f"**Go-To Outfits** ({metric})", ""]
    lines.extend(
        f"{n}. **{p.score:g}/10** {_join(p.occasion)} | {_join(p.style)} | colors: {_join(p.colors)} | {_join(p.garments)}"
        for n, p in enumerate(picks, 1)
    )
    return "\n".join(lines)
