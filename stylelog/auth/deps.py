from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jwt import PyJWTError

from stylelog.auth.jwt import access_subject

bearer = HTTPBearer(auto_error=False)


def _unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="unauthorized")


def get_current_user_id(creds: HTTPAuthorizationCredentials = Depends(bearer)) -> str:
    if not creds:
        raise _unauthorized()
    try:
        owner_id = access_subject(creds.credentials)
    except PyJWTError:
        raise _unauthorized()
    if owner_id is None:
        raise _unauthorized()
    return owner_id
