"""Tasker Identity - accounts, authentication and password recovery.

This module handles all identity-related concerns:
- Account management (registration, profile update, removal)
- Authentication (password login, JWT access tokens)
- Password management (Argon2 hashing, reset tokens)

The task domain only references the account's internal id, keeping identity
concerns separated.
"""

from tasker_identity.application.services import (
    AuthenticationService,
    PasswordResetService,
)
from tasker_identity.domain.user import (
    AccountChanges,
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidResetTokenError,
    User,
    UserNotFoundError,
    UserRepository,
    UsernameTakenError,
)
from tasker_identity.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    PasswordHashingError,
)
from tasker_identity.schemas import PasswordResetIssued, TokenPayload
from tasker_identity.services import (
    JWTService,
    PasswordHashingService,
)

__all__ = [
    # Domain - User
    "AccountChanges",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "InvalidResetTokenError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UsernameTakenError",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PasswordHashingError",
    # Schemas
    "PasswordResetIssued",
    "TokenPayload",
    # Services
    "JWTService",
    "PasswordHashingService",
    # Application Services
    "AuthenticationService",
    "PasswordResetService",
]
