from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from stylelog.auth.deps import get_current_user_id
from stylelog.core.config import settings
from stylelog.schemas.analysis import (
    AnalysisType,
    FocusCategory,
    GapCriteria,
    GoToOutfit,
    PatternCriteria,
    PredictIn,
    PredictOut,
    StylePattern,
    StyleReport,
    SuccessMetric,
    TimePeriod,
    WardrobeGap,
)
from stylelog.routers.recommendations import get_style_service
from stylelog.services.style import StyleService

router = APIRouter(prefix="/analysis", tags=["analysis"], dependencies=[Depends(get_current_user_id)])


@router.get("/patterns", response_model=StylePattern)
async def style_patterns(
    time_period: Optional[TimePeriod] = None,
    analysis_type: Optional[AnalysisType] = None,
    focus_category: FocusCategory = "all",
    service: StyleService = Depends(get_style_service),
):
    criteria = PatternCriteria(
        time_period=time_period or settings.ANALYSIS_DEFAULT_PERIOD,
        analysis_type=analysis_type,
        focus_category=focus_category,
    )
    return await service.patterns(criteria)


@router.get("/gaps", response_model=List[WardrobeGap])
async def wardrobe_gaps(
    focus_area: str = "general",
    time_period: TimePeriod = "season",
    service: StyleService = Depends(get_style_service),
):
    return await service.gaps(GapCriteria(focus_area=focus_area, time_period=time_period))


@router.get("/report/monthly", response_model=StyleReport)
async def monthly_report(service: StyleService = Depends(get_style_service)):
    return await service.monthly_report()


@router.get("/go-to", response_model=List[GoToOutfit])
async def go_to_outfits(
    metric: SuccessMetric = "overall",
    min_rating: float = Query(7, ge=1, le=10),
    occasion: Optional[str] = None,
    limit: int = Query(10, ge=1, le=50),
    service: StyleService = Depends(get_style_service),
):
    return await service.go_to(metric=metric, min_rating=min_rating, occasion=occasion, limit=limit)


@router.post("/predict", response_model=PredictOut)
async def predict(body: PredictIn, service: StyleService = Depends(get_style_service)):
    return await service.predict(body.tags, body.weather)
