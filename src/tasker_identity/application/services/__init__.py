"""Application services for identity management."""

from tasker_identity.application.services.authentication_service import (
    AuthenticationService,
)
from tasker_identity.application.services.password_reset_service import (
    PasswordResetService,
)

__all__ = ["AuthenticationService", "PasswordResetService"]
