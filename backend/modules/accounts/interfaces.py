"""
Accounts module interface.

The API layer depends on IAccountService for registration, login and
account management.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AccountDetails, AuthSession, SettingsUpdateRequest, UserSummary


@runtime_checkable
class IAccountService(Protocol):
    """Interface for identity lifecycle operations."""

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        name: Optional[str] = None,
    ) -> AuthSession:
        """
        Create an identity and issue a token for it.

        Raises:
            AccountConflictError: If the email or the username is taken
        """
        ...

    async def login(self, email: str, password: str) -> AuthSession:
        """
        Verify credentials and issue a token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password, with
                the same message for both
        """
        ...

    async def get_account(self, user: AuthenticatedUser) -> AccountDetails:
        """
        Get the caller's identity with its profiles.

        Raises:
            AccountNotFoundError: If the token's subject no longer exists
        """
        ...

    async def update_settings(
        self,
        user: AuthenticatedUser,
        request: SettingsUpdateRequest,
    ) -> UserSummary:
        """
        Change name, email or username.

        Raises:
            AccountConflictError: Naming the field that collided
            AccountNotFoundError: If the identity no longer exists
        """
        ...

    async def change_password(
        self,
        user: AuthenticatedUser,
        current_password: str,
        new_password: str,
    ) -> None:
        """
        Replace the password after verifying the current one.

        Raises:
            InvalidCredentialsError: If current_password is wrong
        """
        ...

    async def delete_account(self, user: AuthenticatedUser, password: str) -> None:
        """
        Delete the identity and all dependent records in one transaction.

        Raises:
            InvalidCredentialsError: If password is wrong
            ExternalServiceError: If the cascade failed (nothing is removed)
        """
        ...
