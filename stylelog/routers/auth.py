import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from stylelog.auth.jwt import mint_access
from stylelog.auth.passwords import check_gate_password, gate_hash
from stylelog.core.config import settings

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger("uvicorn.error")


class LoginIn(BaseModel):
    password: str


class TokenOut(BaseModel):
    access: str
    token_type: str = "bearer"


@router.post("/login", response_model=TokenOut)
async def login(body: LoginIn):
    if gate_hash() is None:
        raise HTTPException(status_code=503, detail="password_not_configured")
    if not check_gate_password(body.password):
        logger.info("auth:login rejected")
        raise HTTPException(status_code=401, detail="invalid_credentials")
    return TokenOut(access=mint_access(settings.APP_OWNER_ID))
