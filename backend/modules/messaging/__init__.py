"""
Messaging module.

Messages between identities and profiles, access requests, and bookmarks.

Public API:
- IMessagingService: Interface for messaging operations
- Message, Bookmark: Models
- BookmarkExistsError, BookmarkNotFoundError: Exceptions
"""

from .interfaces import IMessagingService
from .models import Message, Bookmark, ACCESS_REQUEST_PREFIX
from .exceptions import BookmarkExistsError, BookmarkNotFoundError

__all__ = [
    "IMessagingService",
    "Message",
    "Bookmark",
    "ACCESS_REQUEST_PREFIX",
    "BookmarkExistsError",
    "BookmarkNotFoundError",
]
