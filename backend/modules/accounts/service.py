"""
Account lifecycle service.

Composes the user repository, password checks and the token service into
registration, login, settings, password change and account deletion.
"""

import logging
from typing import Optional

from shared.exceptions import ConflictError
from shared.models import AuthenticatedUser
from modules.auth.interfaces import IAuthService
from modules.auth.exceptions import InvalidCredentialsError
from modules.auth.passwords import burn_verification, verify_password
from modules.profiles.repository import ProfileRepository

from .interfaces import IAccountService
from .models import (
    AccountDetails,
    AuthSession,
    SettingsUpdateRequest,
    UserRecord,
    UserSummary,
)
from .exceptions import AccountConflictError, AccountNotFoundError
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AccountService(IAccountService):
    """
    Identity lifecycle with Supabase backend.

    Implements IAccountService protocol.
    """

    def __init__(
        self,
        users: UserRepository,
        profiles: ProfileRepository,
        auth: IAuthService,
    ):
        self._users = users
        self._profiles = profiles
        self._auth = auth

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        name: Optional[str] = None,
    ) -> AuthSession:
        """Create an identity with role 'user' and log it in."""
        # No account is written unless a token can be issued for it
        self._auth.ensure_configured()

        if self._users.find_by_email_or_username(email, username) is not None:
            raise AccountConflictError()

        try:
            record = self._users.create(
                username=username,
                email=email,
                password=password,
                name=name or username,
            )
        except ConflictError:
            # Lost a race with a concurrent registration
            raise AccountConflictError()

        logger.info("Registered user %s", record.id)
        return self._session_for(record)

    async def login(self, email: str, password: str) -> AuthSession:
        """Verify credentials and issue a token."""
        record = self._users.get_by_email(email)

        if record is None:
            burn_verification()
            logger.info("Login failed: unknown account")
            raise InvalidCredentialsError()

        if not verify_password(password, record.password_hash):
            logger.info("Login failed for user %s: wrong password", record.id)
            raise InvalidCredentialsError()

        return self._session_for(record)

    async def get_account(self, user: AuthenticatedUser) -> AccountDetails:
        record = self._require_user(user.id)
        profiles = self._profiles.list_by_owner(record.id)
        return AccountDetails(**record.to_summary().model_dump(), profiles=profiles)

    async def update_settings(
        self,
        user: AuthenticatedUser,
        request: SettingsUpdateRequest,
    ) -> UserSummary:
        """Apply name/email/username changes after per-field uniqueness checks."""
        record = self._require_user(user.id)
        changes: dict[str, str] = {}

        if request.email and request.email != record.email:
            if self._users.get_by_email(request.email) is not None:
                raise AccountConflictError("Email is already taken", field="email")
            changes["email"] = request.email

        if request.username and request.username != record.username:
            if self._users.get_by_username(request.username) is not None:
                raise AccountConflictError("Username is already taken", field="username")
            changes["username"] = request.username

        if request.name and request.name != record.name:
            changes["name"] = request.name

        if not changes:
            return record.to_summary()

        try:
            updated = self._users.update(record.id, changes)
        except ConflictError:
            raise AccountConflictError("Email or username is already taken")

        if updated is None:
            raise AccountNotFoundError(record.id)
        return updated.to_summary()

    async def change_password(
        self,
        user: AuthenticatedUser,
        current_password: str,
        new_password: str,
    ) -> None:
        record = self._require_user(user.id)

        if not verify_password(current_password, record.password_hash):
            raise InvalidCredentialsError("Current password is incorrect")

        self._users.update(record.id, {"password": new_password})
        logger.info("Password changed for user %s", record.id)

    async def delete_account(self, user: AuthenticatedUser, password: str) -> None:
        """
        Delete the identity after re-verifying its password.

        The cascade runs in a single database transaction; if it fails the
        ExternalServiceError propagates and nothing has been removed.
        """
        record = self._require_user(user.id)

        if not verify_password(password, record.password_hash):
            raise InvalidCredentialsError("Password is incorrect")

        self._users.delete_account(record.id)
        logger.info("Deleted account %s", record.id)

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _require_user(self, user_id: str) -> UserRecord:
        record = self._users.get_by_id(user_id)
        if record is None:
            raise AccountNotFoundError(user_id)
        return record

    def _session_for(self, record: UserRecord) -> AuthSession:
        token = self._auth.issue_token(record.id, record.email, record.role.value)
        return AuthSession(token=token, user=record.to_summary())
