"""
Access policy exceptions.
"""

from typing import Optional

from shared.exceptions import AuthorizationError


class ProfileAccessDeniedError(AuthorizationError):
    """Raised when the policy denies an operation on a profile."""

    def __init__(self, profile_id: str, operation: str, user_id: Optional[str]):
        super().__init__(
            "Access denied",
            code="PROFILE_ACCESS_DENIED",
            details={
                "profile_id": profile_id,
                "operation": operation,
                "user_id": user_id,
            },
        )
