"""
Account data models.

UserRecord is the stored identity including its password hash and never
leaves the service layer; UserSummary is what the API returns.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from shared.models import APIModel, Role
from modules.profiles.models import Profile


class UserRecord(BaseModel):
    """A row of the users table."""

    id: str
    username: str
    email: str
    name: str
    role: Role = Role.USER
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def to_summary(self) -> "UserSummary":
        return UserSummary(
            id=self.id,
            username=self.username,
            email=self.email,
            name=self.name,
            role=self.role,
        )


class UserSummary(APIModel):
    """Public view of an identity."""

    id: str
    username: str
    email: str
    name: str
    role: Role


class AccountDetails(UserSummary):
    """Identity summary plus the profiles it owns."""

    profiles: list[Profile] = Field(default_factory=list)


class AuthSession(BaseModel):
    """A freshly issued token and the identity it was issued for."""

    token: str
    user: UserSummary


# -----------------------------------------------------------------------------
# Request bodies
# -----------------------------------------------------------------------------


class RegisterRequest(APIModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=1)
    name: Optional[str] = Field(None, max_length=255)


class LoginRequest(APIModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class SettingsUpdateRequest(APIModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    username: Optional[str] = Field(None, min_length=1, max_length=50)


class PasswordChangeRequest(APIModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=1)


class DeleteAccountRequest(APIModel):
    password: str = Field(..., min_length=1)


# -----------------------------------------------------------------------------
# Response bodies
# -----------------------------------------------------------------------------


class AuthResponse(APIModel):
    message: str
    token: str
    user: UserSummary


class AccountResponse(APIModel):
    user: AccountDetails


class SettingsResponse(APIModel):
    message: str
    user: UserSummary


class ActionResponse(APIModel):
    message: str
