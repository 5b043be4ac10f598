"""
Message and bookmark models.
"""

from datetime import datetime

from pydantic import Field, computed_field

from shared.models import APIModel

# Messages starting with this prefix are access requests
ACCESS_REQUEST_PREFIX = "Access request:"
ACCESS_REQUEST_CONTENT = f"{ACCESS_REQUEST_PREFIX} I would like to view your profile"


class Message(APIModel):
    """An immutable message from an identity to a profile."""

    id: str
    sender_id: str
    recipient_profile_id: str
    content: str
    created_at: datetime

    @computed_field
    @property
    def is_access_request(self) -> bool:
        return self.content.startswith(ACCESS_REQUEST_PREFIX)


class Bookmark(APIModel):
    id: str
    user_id: str
    profile_id: str
    created_at: datetime


class SendMessageRequest(APIModel):
    recipient_profile_id: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1, max_length=5000)


class ProfileReference(APIModel):
    """Request body naming a profile (bookmark, access request)."""

    profile_id: str = Field(..., min_length=1)
