from typing import AsyncGenerator, Optional

import httpx
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from blogapi.core import security
from blogapi.core.config import settings

# Bearer token extraction; missing or non-Bearer headers yield None
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/user/signin",
    auto_error=False,
)

def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )

def get_current_user_id(token: Optional[str] = Depends(oauth2_scheme)) -> str:
    """
    Dependency for getting the authenticated user id from the bearer token
    """
    if not token:
        raise _unauthorized()

    user_id = security.verify_access_token(token)
    if not user_id:
        raise _unauthorized()

    return user_id

async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    Dependency for an outbound HTTP client, closed when the request ends
    """
    async with httpx.AsyncClient(timeout=settings.QUOTE_TIMEOUT_SECONDS) as client:
        yield client
