import time
from typing import Any, Dict

import jwt

from stylelog.core.config import settings

ACCESS = "access"


def mint_access(owner_id: str, ttl_s: int | None = None) -> str:
    """Bearer token for the gate owner; there is no refresh flow, log in again on expiry."""
    now = int(time.time())
    claims = {
        "sub": owner_id,
        "iss": settings.JWT_ISSUER,
        "iat": now,
        "exp": now + (ttl_s if ttl_s is not None else settings.JWT_ACCESS_TTL_SECONDS),
        "typ": ACCESS,
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def decode_token(tok: str) -> Dict[str, Any]:
    return jwt.decode(
        tok,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALG],
        issuer=settings.JWT_ISSUER,
        options={"require": ["exp", "sub", "iss"]},
    )


def access_subject(tok: str) -> str | None:
    """Owner id of a valid access token, None for any other token type."""
    data = decode_token(tok)
    if data.get("typ") != ACCESS or not data.get("sub"):
        return None
    return data["sub"]
