"""
Authentication module.

Handles password hashing, session token issue/validation, and the
authenticated-user context passed to services.

Public API:
- IAuthService: Interface for token operations
- hash_password / verify_password: Credential checks
- TokenClaims: Decoded token payload
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import TokenClaims
from .passwords import hash_password, verify_password, is_password_hash
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
    InvalidCredentialsError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "TokenClaims",
    # Passwords
    "hash_password",
    "verify_password",
    "is_password_hash",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
    "InvalidCredentialsError",
]
