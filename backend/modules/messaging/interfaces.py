"""
Messaging module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from modules.profiles.models import Profile

from .models import Bookmark, Message


@runtime_checkable
class IMessagingService(Protocol):
    """Interface for messages, access requests and bookmarks."""

    async def send_message(
        self,
        sender: AuthenticatedUser,
        recipient_profile_id: str,
        content: str,
    ) -> Message:
        """
        Send a message to a profile's owner.

        Raises:
            ProfileNotFoundError: If the profile does not exist
        """
        ...

    async def list_messages(self, user: AuthenticatedUser) -> list[Message]:
        """Messages the user sent or received on profiles they own."""
        ...

    async def request_access(self, requester: AuthenticatedUser, profile_id: str) -> Message:
        """
        Ask a profile's owner for access.

        Sends an access-request message. Works on profiles the requester
        cannot read and never changes the profile's visibility.

        Raises:
            ProfileNotFoundError: If the profile does not exist
        """
        ...

    async def bookmark_profile(self, user: AuthenticatedUser, profile_id: str) -> Bookmark:
        """
        Bookmark a profile.

        Raises:
            ProfileNotFoundError: If the profile does not exist
            BookmarkExistsError: If the user already bookmarked it
        """
        ...

    async def list_bookmarked_profiles(self, user: AuthenticatedUser) -> list[Profile]:
        """Bookmarked profiles the user can still read, newest bookmark first."""
        ...

    async def remove_bookmark(self, user: AuthenticatedUser, profile_id: str) -> None:
        """
        Remove a bookmark.

        Raises:
            BookmarkNotFoundError: If there is no such bookmark
        """
        ...
