import logging

from botocore.exceptions import BotoCoreError, ClientError
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from stylelog.auth.deps import get_current_user_id
from stylelog.core.config import settings
from stylelog.imaging.normalize import ALLOWED_CONTENT_TYPES, ImageRejected, normalize_photo
from stylelog.schemas.outfits import Outfit
from stylelog.storage import r2
from stylelog.storage.keys import outfit_photo_key
from stylelog.store import OutfitStore, get_store

router = APIRouter(prefix="/outfits", tags=["outfit-photos"])
logger = logging.getLogger("uvicorn.error")


class PhotoUploadOut(BaseModel):
    outfit: Outfit
    keys: list[str]
    urls: list[str]


@router.post("/{outfit_id}/photos", response_model=PhotoUploadOut, status_code=201)
async def upload_outfit_photos(
    outfit_id: str,
    files: list[UploadFile] = File(...),
    user_id: str = Depends(get_current_user_id),
    store: OutfitStore = Depends(get_store),
):
    await store.get_outfit(outfit_id)
    keys: list[str] = []
    for upload in files:
        if (upload.content_type or "").lower() not in ALLOWED_CONTENT_TYPES:
            raise HTTPException(status_code=415, detail="unsupported_media_type")
        raw = await upload.read()
        if len(raw) > settings.IMAGE_MAX_UPLOAD_BYTES:
            raise HTTPException(status_code=413, detail="file_too_large")
        try:
            body = await run_in_threadpool(normalize_photo, raw)
        except ImageRejected:
            raise HTTPException(status_code=400, detail="invalid_image")
        key = outfit_photo_key(user_id, outfit_id)
        try:
            await run_in_threadpool(r2.put_object, key, body, "image/jpeg")
        except (BotoCoreError, ClientError) as exc:
            logger.warning("photos:upload failed outfit=%s key=%s err=%s", outfit_id, key, type(exc).__name__)
            raise HTTPException(status_code=502, detail="storage_unavailable")
        keys.append(key)
    outfit = await store.add_outfit_photos(outfit_id, keys)
    logger.info("photos:uploaded outfit=%s count=%d", outfit_id, len(keys))
    return PhotoUploadOut(outfit=outfit, keys=keys, urls=[r2.object_url(k) for k in keys])
