"""
Password hashing and verification.

Passwords are hashed with bcrypt. The cost factor comes from
BCRYPT_ROUNDS so it can be raised over time without touching stored hashes:
every hash records its own cost.
"""

import re
from typing import Optional

import bcrypt

from shared.config import get_settings
from shared.exceptions import ValidationError

# bcrypt ignores (or, in recent releases, rejects) input beyond 72 bytes
MAX_PASSWORD_BYTES = 72

_BCRYPT_HASH_RE = re.compile(r"^\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{53}$")

_dummy_hash: Optional[str] = None


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plaintext password with a fresh random salt.

    Args:
        password: The plaintext password.
        rounds: bcrypt cost factor. Defaults to the BCRYPT_ROUNDS setting.

    Returns:
        The bcrypt hash as a string.

    Raises:
        ValidationError: If the password is empty or too long for bcrypt.
    """
    encoded = password.encode("utf-8")
    if not encoded:
        raise ValidationError("Password must not be empty", code="INVALID_PASSWORD")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes",
            code="INVALID_PASSWORD",
        )

    salt = bcrypt.gensalt(rounds=rounds or get_settings().bcrypt_rounds)
    return bcrypt.hashpw(encoded, salt).decode("ascii")


def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """
    Check a plaintext password against a stored hash.

    Returns False (never raises) for a mismatch, an empty or malformed hash,
    or a candidate bcrypt could not have hashed.
    """
    if not password or not password_hash:
        return False

    encoded = password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False

    try:
        return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
    except ValueError:
        return False


def is_password_hash(value: Optional[str]) -> bool:
    """Whether value looks like a bcrypt hash."""
    return bool(value) and _BCRYPT_HASH_RE.match(value) is not None


def burn_verification() -> None:
    """
    Spend the same effort as a real verification.

    Called when a login names an unknown account, so response timing does
    not reveal whether the email is registered.
    """
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password("not-a-real-password")
    verify_password("not-the-password", _dummy_hash)
