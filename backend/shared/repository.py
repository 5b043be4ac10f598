"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating PostgREST failures into
application exceptions.
"""

import logging
from typing import TypeVar, Generic, Any, Optional

from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ConflictError, ExternalServiceError


T = TypeVar("T")

logger = logging.getLogger(__name__)

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() wrapper mapping database errors to AppError subclasses

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ProfileRepository(BaseRepository[Profile]):
            def get_by_id(self, profile_id: str) -> Optional[Profile]:
                result = self._execute(
                    self._db.table("profiles").select("*").eq("id", profile_id),
                    "fetch profile",
                )
                if not result.data:
                    return None
                return self._map_to_profile(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(
        self,
        query: Any,
        action: str,
        conflict_message: Optional[str] = None,
    ) -> Any:
        """
        Execute a PostgREST query builder.

        Args:
            query: Any builder exposing execute().
            action: Short description used in error messages.
            conflict_message: Message for unique violations. When omitted a
                unique violation is treated like any other database failure.

        Raises:
            ConflictError: On a unique violation when conflict_message is set.
            ExternalServiceError: On any other database failure.
        """
        try:
            return query.execute()
        except APIError as e:
            if conflict_message is not None and e.code == UNIQUE_VIOLATION:
                raise ConflictError(conflict_message, code="CONFLICT") from e
            logger.error("Database error during %s: %s", action, e.message)
            raise ExternalServiceError(
                f"Failed to {action}",
                service="supabase",
                code="DATABASE_ERROR",
                details={"original_error": e.message},
            ) from e
