"""User domain manages account identity.

This domain handles:
- User aggregate (id, pid, username, email, password hash, reset token)
- Uniqueness and lookup rules for accounts
- Partial profile updates
"""

from tasker_identity.domain.user.aggregates import User
from tasker_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidResetTokenError,
    UsernameTakenError,
    UserNotFoundError,
)
from tasker_identity.domain.user.repositories import UserRepository
from tasker_identity.domain.user.value_objects import AccountChanges, Email

__all__ = [
    "AccountChanges",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidResetTokenError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UsernameTakenError",
]
