"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Repositories receive the database client explicitly and
services receive their repositories explicitly; nothing reaches for a
global connection on its own.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.accounts.interfaces import IAccountService
    from modules.accounts.repository import UserRepository
    from modules.profiles.interfaces import IProfileService
    from modules.profiles.repository import ProfileRepository
    from modules.messaging.interfaces import IMessagingService
    from modules.messaging.repository import BookmarkRepository, MessageRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._account_service: "IAccountService | None" = None
        self._profile_service: "IProfileService | None" = None
        self._messaging_service: "IMessagingService | None" = None
        self._user_repository: "UserRepository | None" = None
        self._profile_repository: "ProfileRepository | None" = None
        self._message_repository: "MessageRepository | None" = None
        self._bookmark_repository: "BookmarkRepository | None" = None

    # -------------------------------------------------------------------------
    # Repositories
    # -------------------------------------------------------------------------

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.accounts.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def profile_repository(self) -> "ProfileRepository":
        if self._profile_repository is None:
            from modules.profiles.repository import ProfileRepository
            from shared.database import get_supabase_client
            self._profile_repository = ProfileRepository(get_supabase_client())
        return self._profile_repository

    @property
    def message_repository(self) -> "MessageRepository":
        if self._message_repository is None:
            from modules.messaging.repository import MessageRepository
            from shared.database import get_supabase_client
            self._message_repository = MessageRepository(get_supabase_client())
        return self._message_repository

    @property
    def bookmark_repository(self) -> "BookmarkRepository":
        if self._bookmark_repository is None:
            from modules.messaging.repository import BookmarkRepository
            from shared.database import get_supabase_client
            self._bookmark_repository = BookmarkRepository(get_supabase_client())
        return self._bookmark_repository

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService()
        return self._auth_service

    @property
    def accounts(self) -> "IAccountService":
        """Get the account service instance."""
        if self._account_service is None:
            from modules.accounts.service import AccountService
            self._account_service = AccountService(
                users=self.user_repository,
                profiles=self.profile_repository,
                auth=self.auth,
            )
        return self._account_service

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.service import ProfileService
            self._profile_service = ProfileService(
                profiles=self.profile_repository,
                users=self.user_repository,
            )
        return self._profile_service

    @property
    def messaging(self) -> "IMessagingService":
        """Get the messaging service instance."""
        if self._messaging_service is None:
            from modules.messaging.service import MessagingService
            self._messaging_service = MessagingService(
                messages=self.message_repository,
                bookmarks=self.bookmark_repository,
                profiles=self.profile_repository,
            )
        return self._messaging_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self.__init__()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_account_service() -> "IAccountService":
    """FastAPI dependency for account service."""
    return get_container().accounts


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles


def get_messaging_service() -> "IMessagingService":
    """FastAPI dependency for messaging service."""
    return get_container().messaging
