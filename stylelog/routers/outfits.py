import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from stylelog.auth.deps import get_current_user_id
from stylelog.core.config import settings
from stylelog.schemas.outfits import (
    InsightsOut,
    Outfit,
    OutfitCreate,
    OutfitLogOut,
    OutfitRatings,
    OutfitTags,
    RatingOut,
)
from stylelog.services import outfits as outfit_service
from stylelog.services.analysis import generate_rating_insights
from stylelog.store import OutfitQuery, OutfitStore, get_store

router = APIRouter(prefix="/outfits", tags=["outfits"], dependencies=[Depends(get_current_user_id)])
logger = logging.getLogger("uvicorn.error")


@router.post("", response_model=OutfitLogOut, status_code=201)
async def log_outfit(body: OutfitCreate, store: OutfitStore = Depends(get_store)):
    outfit, matched = await outfit_service.log_outfit(store, body)
    return OutfitLogOut(outfit=outfit, matched_item_ids=matched)


@router.get("", response_model=List[Outfit])
async def search_outfits(
    tag: List[str] = Query(default=[]),
    occasion: Optional[str] = None,
    season: Optional[str] = None,
    min_confidence: Optional[int] = Query(None, ge=1, le=10),
    min_comfort: Optional[int] = Query(None, ge=1, le=10),
    min_success: Optional[int] = Query(None, ge=1, le=10),
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    limit: int = Query(20, ge=1, le=200),
    store: OutfitStore = Depends(get_store),
):
    query = OutfitQuery(
        tags=tag,
        occasion=occasion,
        season=season,
        min_confidence=min_confidence,
        min_comfort=min_comfort,
        min_success=min_success,
        start=start,
        end=end,
        limit=limit,
    )
    return await store.search_outfits(query)


@router.get("/recent", response_model=List[Outfit])
async def recent_outfits(
    days: int = Query(settings.RECENT_OUTFITS_DAYS, ge=1, le=3650),
    store: OutfitStore = Depends(get_store),
):
    return await store.recent_outfits(days)


@router.get("/{outfit_id}", response_model=Outfit)
async def get_outfit(outfit_id: str, store: OutfitStore = Depends(get_store)):
    return await store.get_outfit(outfit_id)


@router.put("/{outfit_id}/tags", response_model=Outfit)
async def retag_outfit(outfit_id: str, body: OutfitTags, store: OutfitStore = Depends(get_store)):
    return await outfit_service.retag_outfit(store, outfit_id, body)


@router.post("/{outfit_id}/rating", response_model=RatingOut)
async def rate_outfit(outfit_id: str, body: OutfitRatings, store: OutfitStore = Depends(get_store)):
    outfit, insights = await outfit_service.rate_outfit(store, outfit_id, body)
    return RatingOut(outfit_id=outfit.id, ratings=outfit.ratings, insights=insights)


@router.get("/{outfit_id}/insights", response_model=InsightsOut)
async def outfit_insights(outfit_id: str, store: OutfitStore = Depends(get_store)):
    outfit = await store.get_outfit(outfit_id)
    return InsightsOut(outfit_id=outfit.id, insights=generate_rating_insights(outfit))
