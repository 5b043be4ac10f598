"""
Messaging module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class BookmarkExistsError(ConflictError):
    """Raised when a user bookmarks the same profile twice."""

    def __init__(self, profile_id: str):
        super().__init__(
            "Profile already bookmarked",
            code="BOOKMARK_EXISTS",
            details={"profile_id": profile_id},
        )


class BookmarkNotFoundError(NotFoundError):
    """Raised when removing a bookmark that does not exist."""

    def __init__(self, profile_id: str):
        super().__init__(
            "Bookmark not found",
            code="BOOKMARK_NOT_FOUND",
            details={"profile_id": profile_id},
        )
