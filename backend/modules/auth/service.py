"""
Authentication service implementation.

Issues and validates HS256 session tokens signed with JWT_SECRET.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import TokenClaims
from .exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)


class AuthService(IAuthService):
    """
    Implementation of the session token service.

    Tokens carry {id, email, role} and expire TOKEN_TTL_HOURS after issue.
    There is no revocation list: a token is valid exactly when its signature
    verifies and it has not expired.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def _secret(self) -> str:
        if not self._settings.jwt_secret:
            raise AuthNotConfiguredError()
        return self._settings.jwt_secret

    def ensure_configured(self) -> None:
        """Raise AuthNotConfiguredError unless tokens can be signed."""
        self._secret()

    def issue_token(
        self,
        user_id: str,
        email: str,
        role: str,
        issued_at: Optional[datetime] = None,
    ) -> str:
        """Issue a signed token for the given identity."""
        now = issued_at or datetime.now(timezone.utc)
        expires = now + timedelta(hours=self._settings.token_ttl_hours)

        payload = {
            "id": user_id,
            "email": email,
            "role": role,
            "iat": int(now.timestamp()),
            "exp": int(expires.timestamp()),
        }
        return jwt.encode(payload, self._secret(), algorithm=self._settings.jwt_algorithm)

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a token and return the authenticated user.

        The subject id must be a well-formed UUID; a correctly signed token
        with any other subject is still rejected.
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret(),
                algorithms=[self._settings.jwt_algorithm],
                options={"require": ["exp", "iat"]},
            )
            claims = TokenClaims(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")
        except PydanticValidationError:
            raise InvalidTokenError("Invalid token: malformed claims")

        try:
            uuid.UUID(claims.id)
        except ValueError:
            raise InvalidTokenError("Invalid user ID format")

        return claims.to_user()

