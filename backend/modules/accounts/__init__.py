"""
Accounts module.

Identity lifecycle: registration, login, settings, password change and
account deletion with cascade.

Public API:
- IAccountService: Interface for account operations
- UserSummary, AccountDetails, AuthSession: Models
- AccountConflictError, AccountNotFoundError: Exceptions
"""

from .interfaces import IAccountService
from .models import UserSummary, AccountDetails, AuthSession
from .exceptions import AccountConflictError, AccountNotFoundError

__all__ = [
    "IAccountService",
    "UserSummary",
    "AccountDetails",
    "AuthSession",
    "AccountConflictError",
    "AccountNotFoundError",
]
