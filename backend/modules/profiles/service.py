"""
Profile service.

Profile CRUD with every arbitrary-profile operation authorized by the
access policy.
"""

import logging
import uuid
from typing import TYPE_CHECKING, Optional, Any

from shared.exceptions import ConflictError
from shared.models import AuthenticatedUser
from modules.access import Operation, authorize, filter_readable
from modules.accounts.exceptions import AccountNotFoundError

from .interfaces import IProfileService
from .models import (
    Caste,
    Gender,
    MaritalStatus,
    Profile,
    ProfileCreate,
    ProfileFilters,
    ProfileUpdate,
)
from .exceptions import InvalidProfileIdError, ProfileNotFoundError
from .repository import ProfileRepository

if TYPE_CHECKING:
    from modules.accounts.repository import UserRepository

logger = logging.getLogger(__name__)


def parse_profile_id(profile_id: str) -> str:
    """
    Validate a profile id.

    Raises:
        InvalidProfileIdError: If profile_id is not a UUID.
    """
    try:
        return str(uuid.UUID(profile_id))
    except (ValueError, TypeError, AttributeError):
        raise InvalidProfileIdError(str(profile_id))


class ProfileService(IProfileService):
    """Profile service with Supabase backend."""

    def __init__(self, profiles: ProfileRepository, users: "UserRepository"):
        self._profiles = profiles
        self._users = users

    async def list_profiles(
        self,
        requester: Optional[AuthenticatedUser],
        filters: Optional[ProfileFilters] = None,
    ) -> list[Profile]:
        return filter_readable(requester, self._profiles.list_profiles(filters))

    async def get_own_profile(self, user: AuthenticatedUser) -> Profile:
        """Return the caller's own profile, creating it on first access."""
        existing = self._profiles.get_user_profile(user.id)
        if existing is not None:
            return existing

        owner = self._users.get_by_id(user.id)
        if owner is None:
            raise AccountNotFoundError(user.id)

        seed: dict[str, Any] = {
            "owner_id": owner.id,
            "is_user_profile": True,
            "is_public": False,
            "name": owner.name,
            "email": owner.email,
            "role": owner.role.value,
            "gender": Gender.OTHER.value,
            "marital_status": MaritalStatus.SINGLE.value,
            "caste": Caste.GENERAL.value,
        }

        try:
            profile = self._profiles.create(seed)
        except ConflictError:
            # A concurrent request provisioned it first
            profile = self._profiles.get_user_profile(user.id)
            if profile is None:
                raise
            return profile

        logger.info("Provisioned own profile %s for user %s", profile.id, owner.id)
        return profile

    async def update_own_profile(
        self,
        user: AuthenticatedUser,
        changes: ProfileUpdate,
    ) -> Profile:
        profile = await self.get_own_profile(user)
        return self._apply(profile, changes)

    async def get_profile(
        self,
        requester: Optional[AuthenticatedUser],
        profile_id: str,
    ) -> Profile:
        profile = self._load(profile_id)
        authorize(requester, Operation.READ, profile, profile.id)
        return profile

    async def create_profile(self, user: AuthenticatedUser, data: ProfileCreate) -> Profile:
        row = data.model_dump(mode="json")
        row.update(owner_id=user.id, is_user_profile=False)
        return self._profiles.create(row)

    async def update_profile(
        self,
        user: AuthenticatedUser,
        profile_id: str,
        changes: ProfileUpdate,
    ) -> Profile:
        profile = self._load(profile_id)
        authorize(user, Operation.WRITE, profile, profile.id)
        return self._apply(profile, changes)

    async def delete_profile(self, user: AuthenticatedUser, profile_id: str) -> None:
        profile = self._load(profile_id)
        authorize(user, Operation.DELETE, profile, profile.id)
        self._profiles.delete(profile.id)
        logger.info("Deleted profile %s", profile.id)

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _load(self, profile_id: str) -> Profile:
        profile_id = parse_profile_id(profile_id)
        profile = self._profiles.get_by_id(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile

    def _apply(self, profile: Profile, changes: ProfileUpdate) -> Profile:
        data = changes.changes()
        if not data:
            return profile
        updated = self._profiles.update(profile.id, data)
        if updated is None:
            raise ProfileNotFoundError(profile.id)
        return updated
