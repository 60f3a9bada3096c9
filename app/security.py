from typing import Optional

from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_401_UNAUTHORIZED

from app.dependencies import get_settings
from app.settings import Settings

bearer_scheme = HTTPBearer(auto_error=False)


def get_backend_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    current_settings: Settings = Depends(get_settings),
):
    secret = current_settings.BACKEND_SECRET_KEY
    if secret and credentials is not None and credentials.credentials == secret:
        return credentials.credentials
    raise HTTPException(
        status_code=HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )
