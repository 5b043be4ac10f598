"""
Error hierarchy for the ProfileDesk backend.

Services raise; api.errors translates. Module exceptions (token failures,
account conflicts, denied profile access, missing bookmarks) subclass one of
the bases below, and the base decides the HTTP status:

    ValidationError, ConflictError  -> 400
    AuthenticationError             -> 401
    AuthorizationError              -> 403
    NotFoundError                   -> 404
    ExternalServiceError, others    -> 500
"""

from typing import Optional, Any


class AppError(Exception):
    """
    Root of every error a ProfileDesk service raises on purpose.

    ``code`` is a stable machine-readable name (the class name unless given)
    and is what non-production responses expose as ``error``. ``details``
    holds structured context such as the offending field.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(AppError):
    """An identity, profile or bookmark does not exist."""


class ValidationError(AppError):
    """Malformed input: a bad profile id, an unusable password."""


class ConflictError(AppError):
    """
    A write hit a unique constraint.

    Raised by repositories for PostgreSQL unique violations (23505):
    duplicate email or username, a second bookmark of the same profile.
    """


class AuthenticationError(AppError):
    """The caller is not who they claim: bad credentials or session token."""


class AuthorizationError(AppError):
    """The caller is known but the access policy denies the operation."""


class ExternalServiceError(AppError):
    """
    A dependency failed, in practice Supabase.

    The original driver message goes in ``details["original_error"]`` and is
    only shown outside production.
    """

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
