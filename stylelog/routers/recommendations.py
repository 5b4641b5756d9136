from typing import Optional

from fastapi import APIRouter, Depends

from stylelog.auth.deps import get_current_user_id
from stylelog.schemas.recs import RecommendationContext, RecsOut
from stylelog.services.style import StyleService
from stylelog.store import OutfitStore, get_store

router = APIRouter(tags=["recommendations"], dependencies=[Depends(get_current_user_id)])


def get_style_service(store: OutfitStore = Depends(get_store)) -> StyleService:
    return StyleService(store)


@router.post("/recommendations", response_model=RecsOut)
async def recommend_outfits(
    body: Optional[RecommendationContext] = None,
    service: StyleService = Depends(get_style_service),
):
    return RecsOut(items=await service.recommendations(body or RecommendationContext()))
