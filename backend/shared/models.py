"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """
    Base for models exchanged over HTTP.

    Python attributes and database columns are snake_case; JSON bodies are
    camelCase. Either spelling is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Role(str, Enum):
    """Account roles."""

    USER = "user"
    ADMIN = "admin"


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Only produced by the token service after a successful validation, and
    handed to route handlers via dependency injection. Services take it as
    an explicit parameter instead of reading identity from the request.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="User's email address")
    role: Role = Field(default=Role.USER, description="User role")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra claims
    }
