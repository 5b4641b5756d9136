import logging
from typing import List, Tuple

from stylelog.schemas.outfits import Outfit, OutfitCreate, OutfitRatings, OutfitTags
from stylelog.services.analysis import analyze_outfit, analyze_tags, generate_rating_insights
from stylelog.services.wardrobe import record_outfit_wear
from stylelog.store.base import OutfitStore

log = logging.getLogger(__name__)


async def log_outfit(store: OutfitStore, data: OutfitCreate) -> Tuple[Outfit, List[str]]:
    """Persist an outfit, attach its analysis and record wear on matching wardrobe items."""
    outfit = await store.create_outfit(data)
    analysis = analyze_outfit(outfit)
    outfit = await store.update_outfit_analysis(outfit.id, analysis)
    matched = await record_outfit_wear(store, outfit.tags.garments, outfit.timestamp)
    log.info(
        "outfit:logged id=%s occasions=%s coherence=%.2f harmony=%.2f matched=%d",
        outfit.id, ",".join(outfit.tags.occasion) or "-", analysis.style_coherence,
        analysis.color_harmony, len(matched),
    )
    return outfit, matched


async def rate_outfit(store: OutfitStore, outfit_id: str, ratings: OutfitRatings) -> Tuple[Outfit, List[str]]:
    outfit = await store.update_outfit_ratings(outfit_id, ratings)
    insights = generate_rating_insights(outfit)
    log.info(
        "outfit:rated id=%s confidence=%d comfort=%d success=%d",
        outfit_id, ratings.confidence, ratings.comfort, ratings.success,
    )
    return outfit, insights


async def retag_outfit(store: OutfitStore, outfit_id: str, tags: OutfitTags) -> Outfit:
    """Replace an outfit's tags; the stored analysis is recomputed, never merged."""
    existing = await store.get_outfit(outfit_id)
    if not tags.season:
        tags = tags.model_copy(update={"season": list(existing.tags.season)})
    outfit = await store.update_outfit_tags(outfit_id, tags, analyze_tags(tags))
    log.info("outfit:retagged id=%s", outfit_id)
    return outfit
