"""
Profiles module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import Profile, ProfileCreate, ProfileFilters, ProfileUpdate


@runtime_checkable
class IProfileService(Protocol):
    """
    Interface for profile operations.

    Every operation on an arbitrary profile goes through the access policy.
    Own-profile operations are scoped to the caller and need no check.
    """

    async def list_profiles(
        self,
        requester: Optional[AuthenticatedUser],
        filters: Optional[ProfileFilters] = None,
    ) -> list[Profile]:
        """
        List profiles the requester may read (public ones plus their own).
        """
        ...

    async def get_own_profile(self, user: AuthenticatedUser) -> Profile:
        """
        Get the caller's own profile, provisioning it on first access.

        Raises:
            AccountNotFoundError: If the caller's identity no longer exists
        """
        ...

    async def update_own_profile(
        self,
        user: AuthenticatedUser,
        changes: ProfileUpdate,
    ) -> Profile:
        """Update the caller's own profile, provisioning it first if needed."""
        ...

    async def get_profile(
        self,
        requester: Optional[AuthenticatedUser],
        profile_id: str,
    ) -> Profile:
        """
        Get a profile by ID.

        Raises:
            InvalidProfileIdError: If profile_id is not a UUID
            ProfileNotFoundError: If no such profile exists
            ProfileAccessDeniedError: If the profile is private and not the requester's
        """
        ...

    async def create_profile(self, user: AuthenticatedUser, data: ProfileCreate) -> Profile:
        """Create a profile managed by the caller on someone else's behalf."""
        ...

    async def update_profile(
        self,
        user: AuthenticatedUser,
        profile_id: str,
        changes: ProfileUpdate,
    ) -> Profile:
        """Update a profile the caller owns."""
        ...

    async def delete_profile(self, user: AuthenticatedUser, profile_id: str) -> None:
        """Delete a profile the caller owns."""
        ...
