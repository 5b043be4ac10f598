"""
Access policy module.

Pure decision functions for profile reads, writes and deletes.

Public API:
- decide / authorize / filter_readable
- Operation, Decision, ProfileAccess
- ProfileAccessDeniedError
"""

from .policy import (
    Operation,
    Decision,
    ProfileAccess,
    decide,
    authorize,
    filter_readable,
    is_owner,
)
from .exceptions import ProfileAccessDeniedError

__all__ = [
    "Operation",
    "Decision",
    "ProfileAccess",
    "decide",
    "authorize",
    "filter_readable",
    "is_owner",
    "ProfileAccessDeniedError",
]
