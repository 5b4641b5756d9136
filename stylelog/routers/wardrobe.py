from typing import List, Optional

from fastapi import APIRouter, Depends, Response

from stylelog.auth.deps import get_current_user_id
from stylelog.schemas.wardrobe import (
    Category,
    CostPerWear,
    WardrobeItem,
    WardrobeItemCreate,
    WardrobeItemUpdate,
    WardrobeUsage,
)
from stylelog.services import wardrobe as wardrobe_service
from stylelog.store import OutfitStore, get_store

router = APIRouter(prefix="/wardrobe", tags=["wardrobe"], dependencies=[Depends(get_current_user_id)])


@router.post("", response_model=WardrobeItem, status_code=201)
async def add_item(body: WardrobeItemCreate, store: OutfitStore = Depends(get_store)):
    return await store.add_wardrobe_item(body)


@router.get("", response_model=List[WardrobeItem])
async def list_items(category: Optional[Category] = None, store: OutfitStore = Depends(get_store)):
    return await store.list_wardrobe_items(category)


@router.get("/cost-per-wear", response_model=List[CostPerWear])
async def cost_per_wear(category: Optional[Category] = None, store: OutfitStore = Depends(get_store)):
    return wardrobe_service.cost_per_wear(await store.list_wardrobe_items(category))


@router.get("/usage", response_model=WardrobeUsage)
async def usage(store: OutfitStore = Depends(get_store)):
    return wardrobe_service.usage_summary(await store.list_wardrobe_items())


@router.get("/{item_id}", response_model=WardrobeItem)
async def get_item(item_id: str, store: OutfitStore = Depends(get_store)):
    return await store.get_wardrobe_item(item_id)


@router.patch("/{item_id}", response_model=WardrobeItem)
async def update_item(item_id: str, body: WardrobeItemUpdate, store: OutfitStore = Depends(get_store)):
    return await store.update_wardrobe_item(item_id, body)


@router.delete("/{item_id}", status_code=204)
async def remove_item(item_id: str, store: OutfitStore = Depends(get_store)):
    await store.remove_wardrobe_item(item_id)
    return Response(status_code=204)
