"""
Bearer token authentication dependencies.

There is a single validation path (IAuthService.validate_token) used by
every route; it checks signature, expiry and the subject id format.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser
from modules.auth.exceptions import MissingTokenError
from modules.auth.interfaces import IAuthService

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}

    Raises:
        MissingTokenError, InvalidTokenError, ExpiredTokenError: Rendered
            as 401 by the API exception handlers
    """
    if credentials is None:
        raise MissingTokenError()

    return await auth.validate_token(credentials.credentials)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Use this for endpoints that work with or without authentication.
    A missing or invalid token yields None (anonymous), never an error.
    """
    if credentials is None:
        return None

    try:
        return await auth.validate_token(credentials.credentials)
    except AuthenticationError:
        return None

