from functools import lru_cache
from typing import Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from stylelog.core.config import settings

_ph = PasswordHasher()


def hash_pw(pw: str) -> str:
    return _ph.hash(pw)


def verify_pw(hash_: str, pw: str) -> bool:
    try:
        _ph.verify(hash_, pw)
        return True
    except (VerificationError, InvalidHashError):
        return False


@lru_cache(maxsize=1)
def gate_hash() -> Optional[str]:
    """Argon2 hash guarding the app; a plain APP_PASSWORD is hashed once on first use."""
    if settings.APP_PASSWORD_HASH:
        return settings.APP_PASSWORD_HASH
    if settings.APP_PASSWORD:
        return hash_pw(settings.APP_PASSWORD)
    return None


def check_gate_password(pw: str) -> bool:
    h = gate_hash()
    return h is not None and verify_pw(h, pw)
