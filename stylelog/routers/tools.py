from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from stylelog.auth.deps import get_current_user_id
from stylelog.store import OutfitStore, get_store
from stylelog.tools import call_tool, list_tools

router = APIRouter(prefix="/tools", tags=["tools"], dependencies=[Depends(get_current_user_id)])


@router.get("")
async def tools_index():
    return {"tools": list_tools()}


@router.post("/{name}")
async def run_tool(
    name: str,
    arguments: Optional[Dict[str, Any]] = Body(default=None),
    store: OutfitStore = Depends(get_store),
):
    return await call_tool(name, arguments, store)
