"""
Profile access policy.

Decides whether a requester may read, write or delete a profile given only
the profile's owner and visibility. No I/O happens here; callers load the
profile and pass the relevant metadata in.

Rules:
    read    public profiles are world-readable; private ones only by the owner
    write   owner only, whatever the visibility
    delete  owner only, whatever the visibility
"""

from enum import Enum
from typing import Iterable, Optional, TypeVar

from pydantic import BaseModel

from shared.models import AuthenticatedUser

from .exceptions import ProfileAccessDeniedError


class Operation(str, Enum):
    """Operations the policy knows how to decide."""

    READ = "read"
    WRITE = "write"
    DELETE = "delete"


class Decision(str, Enum):
    ALLOW = "allow"
    DENY = "deny"


class ProfileAccess(BaseModel):
    """The slice of a profile the policy looks at."""

    owner_id: str
    is_public: bool = False


def is_owner(requester: Optional[AuthenticatedUser], target: ProfileAccess) -> bool:
    return requester is not None and requester.id == target.owner_id


def decide(
    requester: Optional[AuthenticatedUser],
    operation: Operation,
    target: ProfileAccess,
) -> Decision:
    """
    Decide an operation on a profile.

    Args:
        requester: The authenticated user, or None for anonymous requests.
        operation: What the requester wants to do.
        target: Owner and visibility of the profile.

    Returns:
        Decision.ALLOW or Decision.DENY
    """
    if operation is Operation.READ:
        allowed = target.is_public or is_owner(requester, target)
    else:
        allowed = is_owner(requester, target)

    return Decision.ALLOW if allowed else Decision.DENY


def authorize(
    requester: Optional[AuthenticatedUser],
    operation: Operation,
    target: ProfileAccess,
    profile_id: str,
) -> None:
    """
    Enforce decide().

    Raises:
        ProfileAccessDeniedError: If the decision is DENY. A denied read is
            reported as access denied, not as not found, so the requester
            can go on to send an access request.
    """
    if decide(requester, operation, target) is Decision.DENY:
        raise ProfileAccessDeniedError(
            profile_id,
            operation.value,
            requester.id if requester else None,
        )


P = TypeVar("P", bound=ProfileAccess)


def filter_readable(
    requester: Optional[AuthenticatedUser],
    profiles: Iterable[P],
) -> list[P]:
    """Keep only the profiles the requester may read, preserving order."""
    return [
        p for p in profiles
        if decide(requester, Operation.READ, p) is Decision.ALLOW
    ]
