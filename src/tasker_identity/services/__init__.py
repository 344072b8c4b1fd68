"""Identity services - JWT and password hashing."""

from tasker_identity.services.jwt_service import JWTService
from tasker_identity.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
