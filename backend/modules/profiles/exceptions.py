"""
Profiles module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class ProfileNotFoundError(NotFoundError):
    """Raised when a profile is not found."""

    def __init__(self, profile_id: str):
        super().__init__(
            "Profile not found",
            code="PROFILE_NOT_FOUND",
            details={"profile_id": profile_id},
        )


class InvalidProfileIdError(ValidationError):
    """Raised when a profile id is not a well-formed UUID."""

    def __init__(self, profile_id: str):
        super().__init__(
            "Invalid profile ID",
            code="INVALID_PROFILE_ID",
            details={"profile_id": profile_id},
        )
