"""
Profile repository for database access.

Encapsulates all Supabase queries and data mapping for the profiles table.
"""

from datetime import datetime, timezone
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Profile, ProfileFilters


class ProfileRepository(BaseRepository[Profile]):
    """
    Repository for profile data access.

    Note: This repository does NOT perform authorization checks.
    The service layer runs every operation through the access policy.
    """

    TABLE = "profiles"

    def list_profiles(self, filters: Optional[ProfileFilters] = None) -> list[Profile]:
        """
        List profiles, newest first.

        Args:
            filters: Optional equality filters; name is a case-insensitive
                substring match.
        """
        query = self._db.table(self.TABLE).select("*")

        if filters is not None:
            if filters.name:
                query = query.ilike("name", f"%{filters.name}%")
            if filters.age:
                query = query.eq("age", filters.age)
            if filters.gender:
                query = query.eq("gender", filters.gender.value)
            if filters.marital_status:
                query = query.eq("marital_status", filters.marital_status.value)
            if filters.caste:
                query = query.eq("caste", filters.caste.value)

        result = self._execute(query.order("created_at", desc=True), "list profiles")
        return [self._map_to_profile(row) for row in result.data]

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        """Get a profile by ID, or None."""
        result = self._execute(
            self._db.table(self.TABLE).select("*").eq("id", profile_id),
            "fetch profile",
        )
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def get_by_ids(self, profile_ids: list[str]) -> list[Profile]:
        """Get several profiles at once. Missing ids are skipped."""
        if not profile_ids:
            return []
        result = self._execute(
            self._db.table(self.TABLE).select("*").in_("id", profile_ids),
            "fetch profiles",
        )
        return [self._map_to_profile(row) for row in result.data]

    def get_user_profile(self, owner_id: str) -> Optional[Profile]:
        """Get the owner's own profile (is_user_profile=true), or None."""
        result = self._execute(
            self._db.table(self.TABLE)
            .select("*")
            .eq("owner_id", owner_id)
            .eq("is_user_profile", True)
            .limit(1),
            "fetch user profile",
        )
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def list_by_owner(self, owner_id: str) -> list[Profile]:
        """All profiles owned by an identity, newest first."""
        result = self._execute(
            self._db.table(self.TABLE)
            .select("*")
            .eq("owner_id", owner_id)
            .order("created_at", desc=True),
            "list owned profiles",
        )
        return [self._map_to_profile(row) for row in result.data]

    def create(self, data: dict[str, Any]) -> Profile:
        """
        Insert a profile row.

        Raises:
            ConflictError: If the row would give its owner a second own
                profile (partial unique index on owner_id).
        """
        result = self._execute(
            self._db.table(self.TABLE).insert(data),
            "create profile",
            conflict_message="User already has a profile",
        )
        return self._map_to_profile(result.data[0])

    def update(self, profile_id: str, changes: dict[str, Any]) -> Optional[Profile]:
        """
        Apply column changes to a profile.

        Returns:
            The updated profile, or None if no row matched.
        """
        data = {**changes, "updated_at": datetime.now(timezone.utc).isoformat()}
        result = self._execute(
            self._db.table(self.TABLE).update(data).eq("id", profile_id),
            "update profile",
        )
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def delete(self, profile_id: str) -> None:
        """
        Delete a profile together with messages addressed to it and
        bookmarks pointing at it.

        Runs as one transaction inside the delete_profile SQL function.
        """
        self._execute(
            self._db.rpc("delete_profile", {"target_profile_id": profile_id}),
            "delete profile",
        )

    def _map_to_profile(self, data: dict[str, Any]) -> Profile:
        """Map database row to Profile model."""
        return Profile.model_validate({**data, "id": str(data["id"]), "owner_id": str(data["owner_id"])})
