"""Identity and authentication exceptions.

These exceptions are raised by the tasker_identity package and should be
caught and handled by the application layer.

Every ``AuthError`` carries a fixed, user-facing message. The reason a token or
a login was rejected is never part of that message.
"""

from tasker.domain.shared.exceptions import DomainException, ErrorCode


class AuthError(Exception):
    """Base exception for all authentication errors."""

    code: ErrorCode = ErrorCode.INVALID_CREDENTIALS

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    code = ErrorCode.INVALID_TOKEN

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login."""

    code = ErrorCode.INVALID_CREDENTIALS

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class PasswordHashingError(DomainException):
    """Raised when the password hasher fails or is handed a malformed digest."""

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message, ErrorCode.HASHING_FAILED)
