"""
Authentication module data models.
"""

from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser, Role


class TokenClaims(BaseModel):
    """
    Decoded session token payload.

    Claims are {id, email, role, iat, exp}; nothing here is trusted until
    the signature and expiry have been checked by the token service.
    """

    id: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    role: Role = Field(default=Role.USER, description="User role")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")

    def to_user(self) -> AuthenticatedUser:
        return AuthenticatedUser(id=self.id, email=self.email, role=self.role)
