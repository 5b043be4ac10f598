"""
Accounts module exceptions.
"""

from typing import Optional

from shared.exceptions import ConflictError, NotFoundError


class AccountNotFoundError(NotFoundError):
    """Raised when a token's subject no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class AccountConflictError(ConflictError):
    """
    Raised when an email or username is already in use.

    Registration reports a single generic message for either field;
    settings updates name the field that collided.
    """

    def __init__(self, message: str = "User already exists", field: Optional[str] = None):
        super().__init__(
            message,
            code="ACCOUNT_CONFLICT",
            details={"field": field} if field else {},
        )
