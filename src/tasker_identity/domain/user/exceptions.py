"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from tasker.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_EMAIL)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email already registered",
            ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"field": "email"},
        )


class UsernameTakenError(ConflictError):
    """Username already taken."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(
            "Username already taken",
            ErrorCode.USERNAME_TAKEN,
            details={"field": "username"},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, identifier: object) -> None:
        self.identifier = identifier
        super().__init__(
            "User not found",
            ErrorCode.USER_NOT_FOUND,
            details={"identifier": str(identifier)},
        )


class InvalidResetTokenError(EntityNotFoundError):
    """Reset token unknown, already consumed, or expired."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid or expired reset token",
            ErrorCode.RESET_TOKEN_NOT_FOUND,
        )
