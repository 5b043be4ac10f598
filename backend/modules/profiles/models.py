"""
Profile data models.

A profile is either an identity's own profile (is_user_profile=True, at most
one per owner) or an entry the owner manages on behalf of someone else.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from shared.models import APIModel
from modules.access import ProfileAccess

# Columns a partial update may set back to NULL
NULLABLE_FIELDS = frozenset({"bio", "experience", "notes"})


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class MaritalStatus(str, Enum):
    SINGLE = "Single"
    MARRIED = "Married"
    DIVORCED = "Divorced"
    WIDOWED = "Widowed"


class Caste(str, Enum):
    GENERAL = "General"
    OBC = "OBC"
    SC = "SC"
    ST = "ST"
    OTHER = "Other"


class ProfileFields(APIModel):
    """Editable profile attributes with their defaults."""

    name: str = Field(..., min_length=1, max_length=255)
    age: str = ""
    gender: Gender = Gender.OTHER
    marital_status: MaritalStatus = MaritalStatus.SINGLE
    caste: Caste = Caste.GENERAL
    education: str = ""
    occupation: str = ""
    location: str = ""
    contact: str = ""
    email: str = ""
    role: str = ""
    bio: Optional[str] = None
    phone_number: str = ""
    website: str = ""
    social_links: str = ""
    skills: str = ""
    experience: Optional[str] = None
    notes: Optional[str] = None
    is_public: bool = False


class Profile(ProfileFields, ProfileAccess):
    """A stored profile."""

    id: str
    owner_id: str
    is_user_profile: bool = False
    created_at: datetime
    updated_at: datetime


class ProfileCreate(ProfileFields):
    """Request body for creating a third-party profile."""

    pass


class ProfileUpdate(APIModel):
    """
    Partial profile update.

    Only fields present in the request body are applied; ownership and the
    own-profile flag cannot be changed. An explicit null clears one of the
    nullable text columns and is ignored for every other field.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    age: Optional[str] = None
    gender: Optional[Gender] = None
    marital_status: Optional[MaritalStatus] = None
    caste: Optional[Caste] = None
    education: Optional[str] = None
    occupation: Optional[str] = None
    location: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    bio: Optional[str] = None
    phone_number: Optional[str] = None
    website: Optional[str] = None
    social_links: Optional[str] = None
    skills: Optional[str] = None
    experience: Optional[str] = None
    notes: Optional[str] = None
    is_public: Optional[bool] = None

    def changes(self) -> dict:
        """Fields supplied by the caller, keyed by column name."""
        data = self.model_dump(mode="json", exclude_unset=True)
        return {
            key: value
            for key, value in data.items()
            if value is not None or key in NULLABLE_FIELDS
        }


class ProfileFilters(APIModel):
    """Search filters for the profile listing."""

    name: Optional[str] = None
    age: Optional[str] = None
    gender: Optional[Gender] = None
    marital_status: Optional[MaritalStatus] = None
    caste: Optional[Caste] = None
