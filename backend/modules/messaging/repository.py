"""
Message and bookmark repositories.

Messages are append-only; bookmarks are insert/delete only. Neither table
is ever updated.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Bookmark, Message


class MessageRepository(BaseRepository[Message]):
    """Repository for the messages table."""

    TABLE = "messages"

    def create(self, sender_id: str, recipient_profile_id: str, content: str) -> Message:
        result = self._execute(
            self._db.table(self.TABLE).insert({
                "sender_id": sender_id,
                "recipient_profile_id": recipient_profile_id,
                "content": content,
            }),
            "send message",
        )
        return self._map_to_message(result.data[0])

    def list_for_user(self, user_id: str, owned_profile_ids: list[str]) -> list[Message]:
        """
        Messages the user sent plus messages addressed to profiles they own,
        newest first.
        """
        sent = self._execute(
            self._db.table(self.TABLE).select("*").eq("sender_id", user_id),
            "list messages",
        ).data

        received: list[dict[str, Any]] = []
        if owned_profile_ids:
            received = self._execute(
                self._db.table(self.TABLE)
                .select("*")
                .in_("recipient_profile_id", owned_profile_ids),
                "list messages",
            ).data

        by_id = {str(row["id"]): row for row in [*sent, *received]}
        messages = [self._map_to_message(row) for row in by_id.values()]
        messages.sort(key=lambda m: m.created_at, reverse=True)
        return messages

    def _map_to_message(self, data: dict[str, Any]) -> Message:
        """Map database row to Message model."""
        return Message(
            id=str(data["id"]),
            sender_id=str(data["sender_id"]),
            recipient_profile_id=str(data["recipient_profile_id"]),
            content=data["content"],
            created_at=data["created_at"],
        )


class BookmarkRepository(BaseRepository[Bookmark]):
    """Repository for the bookmarks table (unique on user_id, profile_id)."""

    TABLE = "bookmarks"

    def get(self, user_id: str, profile_id: str) -> Optional[Bookmark]:
        result = self._execute(
            self._db.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("profile_id", profile_id),
            "fetch bookmark",
        )
        if not result.data:
            return None
        return self._map_to_bookmark(result.data[0])

    def create(self, user_id: str, profile_id: str) -> Bookmark:
        """
        Insert a bookmark.

        Raises:
            ConflictError: If the pair already exists.
        """
        result = self._execute(
            self._db.table(self.TABLE).insert({"user_id": user_id, "profile_id": profile_id}),
            "create bookmark",
            conflict_message="Profile already bookmarked",
        )
        return self._map_to_bookmark(result.data[0])

    def list_for_user(self, user_id: str) -> list[Bookmark]:
        result = self._execute(
            self._db.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True),
            "list bookmarks",
        )
        return [self._map_to_bookmark(row) for row in result.data]

    def delete(self, user_id: str, profile_id: str) -> bool:
        """
        Remove a bookmark.

        Returns:
            True if a row was deleted.
        """
        result = self._execute(
            self._db.table(self.TABLE)
            .delete()
            .eq("user_id", user_id)
            .eq("profile_id", profile_id),
            "delete bookmark",
        )
        return bool(result.data)

    def _map_to_bookmark(self, data: dict[str, Any]) -> Bookmark:
        """Map database row to Bookmark model."""
        return Bookmark(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            profile_id=str(data["profile_id"]),
            created_at=data["created_at"],
        )
