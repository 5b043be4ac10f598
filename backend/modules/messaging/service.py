"""
Messaging service.

Messages, access requests and bookmarks. Access requests are plain messages
with a fixed prefix; they grant nothing by themselves.
"""

import logging

from shared.exceptions import ConflictError
from shared.models import AuthenticatedUser
from modules.access import filter_readable
from modules.profiles.exceptions import ProfileNotFoundError
from modules.profiles.models import Profile
from modules.profiles.repository import ProfileRepository
from modules.profiles.service import parse_profile_id

from .interfaces import IMessagingService
from .models import ACCESS_REQUEST_CONTENT, Bookmark, Message
from .exceptions import BookmarkExistsError, BookmarkNotFoundError
from .repository import BookmarkRepository, MessageRepository

logger = logging.getLogger(__name__)


class MessagingService(IMessagingService):
    """Messaging service with Supabase backend."""

    def __init__(
        self,
        messages: MessageRepository,
        bookmarks: BookmarkRepository,
        profiles: ProfileRepository,
    ):
        self._messages = messages
        self._bookmarks = bookmarks
        self._profiles = profiles

    async def send_message(
        self,
        sender: AuthenticatedUser,
        recipient_profile_id: str,
        content: str,
    ) -> Message:
        profile = self._require_profile(recipient_profile_id)
        return self._messages.create(sender.id, profile.id, content)

    async def list_messages(self, user: AuthenticatedUser) -> list[Message]:
        owned = [p.id for p in self._profiles.list_by_owner(user.id)]
        return self._messages.list_for_user(user.id, owned)

    async def request_access(self, requester: AuthenticatedUser, profile_id: str) -> Message:
        """
        Send an access request to the profile's owner.

        Deliberately skips the read policy: the requester typically cannot
        read the profile, and only a notification is created.
        """
        profile = self._require_profile(profile_id)
        message = self._messages.create(requester.id, profile.id, ACCESS_REQUEST_CONTENT)
        logger.info("User %s requested access to profile %s", requester.id, profile.id)
        return message

    async def bookmark_profile(self, user: AuthenticatedUser, profile_id: str) -> Bookmark:
        profile = self._require_profile(profile_id)

        if self._bookmarks.get(user.id, profile.id) is not None:
            raise BookmarkExistsError(profile.id)

        try:
            return self._bookmarks.create(user.id, profile.id)
        except ConflictError:
            raise BookmarkExistsError(profile.id)

    async def list_bookmarked_profiles(self, user: AuthenticatedUser) -> list[Profile]:
        bookmarks = self._bookmarks.list_for_user(user.id)
        profiles = {p.id: p for p in self._profiles.get_by_ids([b.profile_id for b in bookmarks])}
        ordered = [profiles[b.profile_id] for b in bookmarks if b.profile_id in profiles]
        return filter_readable(user, ordered)

    async def remove_bookmark(self, user: AuthenticatedUser, profile_id: str) -> None:
        profile_id = parse_profile_id(profile_id)
        if not self._bookmarks.delete(user.id, profile_id):
            raise BookmarkNotFoundError(profile_id)

    def _require_profile(self, profile_id: str) -> Profile:
        profile_id = parse_profile_id(profile_id)
        profile = self._profiles.get_by_id(profile_id)
        if profile is None:
            raise ProfileNotFoundError(profile_id)
        return profile
