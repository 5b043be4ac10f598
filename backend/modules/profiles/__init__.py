"""
Profiles module.

Public API:
- IProfileService: Interface for profile operations
- Profile, ProfileCreate, ProfileUpdate, ProfileFilters: Models
- Gender, MaritalStatus, Caste: Closed categorical sets
- ProfileNotFoundError, InvalidProfileIdError: Exceptions
"""

from .interfaces import IProfileService
from .models import (
    Profile,
    ProfileCreate,
    ProfileUpdate,
    ProfileFilters,
    Gender,
    MaritalStatus,
    Caste,
)
from .exceptions import ProfileNotFoundError, InvalidProfileIdError

__all__ = [
    "IProfileService",
    "Profile",
    "ProfileCreate",
    "ProfileUpdate",
    "ProfileFilters",
    "Gender",
    "MaritalStatus",
    "Caste",
    "ProfileNotFoundError",
    "InvalidProfileIdError",
]
