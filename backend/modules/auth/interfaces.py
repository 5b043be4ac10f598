"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from datetime import datetime
from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for session token operations.

    Password handling lives in modules.auth.passwords; this protocol only
    covers issuing and validating bearer tokens.
    """

    def ensure_configured(self) -> None:
        """
        Check that tokens can be issued.

        Raises:
            AuthNotConfiguredError: If no signing secret is configured
        """
        ...

    def issue_token(
        self,
        user_id: str,
        email: str,
        role: str,
        issued_at: Optional[datetime] = None,
    ) -> str:
        """
        Issue a signed session token.

        Args:
            user_id: Identity UUID (becomes the ``id`` claim)
            email: Identity email
            role: Identity role
            issued_at: Issue instant, defaults to now

        Returns:
            Encoded JWT valid for TOKEN_TTL_HOURS
        """
        ...

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a session token and return the authenticated user.

        Args:
            token: Bearer token from the Authorization header

        Returns:
            AuthenticatedUser built from verified claims

        Raises:
            MissingTokenError: If no token was presented
            InvalidTokenError: If the signature, structure or subject id is bad
            ExpiredTokenError: If the token is past its expiry
        """
        ...
