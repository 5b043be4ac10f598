import pytest
from pydantic import ValidationError

from modules.access import ProfileAccess
from modules.profiles.models import (
    Caste,
    Gender,
    MaritalStatus,
    Profile,
    ProfileCreate,
    ProfileUpdate,
)

from tests.conftest import make_profile_row


class TestProfileCreate:
    def test_defaults(self):
        data = ProfileCreate(name="Ravi")
        assert data.gender == Gender.OTHER
        assert data.marital_status == MaritalStatus.SINGLE
        assert data.caste == Caste.GENERAL
        assert data.is_public is False

    def test_requires_name(self):
        with pytest.raises(ValidationError):
            ProfileCreate(name="")

    def test_rejects_unknown_enum_value(self):
        with pytest.raises(ValidationError):
            ProfileCreate(name="Ravi", caste="Unknown")


class TestProfileUpdate:
    def test_changes_only_contains_supplied_fields(self):
        update = ProfileUpdate.model_validate({"maritalStatus": "Married", "bio": "Hi"})
        assert update.changes() == {"marital_status": "Married", "bio": "Hi"}

    def test_explicit_null_is_dropped(self):
        update = ProfileUpdate.model_validate({"name": None, "isPublic": False})
        assert update.changes() == {"is_public": False}

    def test_explicit_null_clears_nullable_columns(self):
        update = ProfileUpdate.model_validate(
            {"bio": None, "experience": None, "notes": None, "gender": None}
        )
        assert update.changes() == {"bio": None, "experience": None, "notes": None}

    def test_cannot_change_owner(self):
        update = ProfileUpdate.model_validate({"ownerId": "someone", "isUserProfile": True})
        assert update.changes() == {}


class TestProfile:
    def test_is_policy_target(self):
        profile = Profile.model_validate(make_profile_row(is_public=True))
        assert isinstance(profile, ProfileAccess)
        assert profile.is_public is True

    def test_serializes_camel_case(self):
        profile = Profile.model_validate(make_profile_row())
        data = profile.model_dump(by_alias=True)
        assert "ownerId" in data
        assert "isUserProfile" in data
        assert "phoneNumber" in data
