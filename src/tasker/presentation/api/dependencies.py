"""FastAPI dependency injection for the Tasker API.

Provides dependencies for:
- Database sessions
- Authentication (current user from JWT)
- Service instances
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Cookie, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from tasker.application.services import TaskService
from tasker.infrastructure.persistence.sqlalchemy.repositories import (
    TaskRepositorySQLAlchemy,
)
from tasker.presentation.api.config import get_api_settings
from tasker_config.settings import Settings
from tasker_identity import (
    AuthenticationService,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    PasswordResetService,
    User,
)
from tasker_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

# Cookie set on login, accepted when no Authorization header is sent
AUTH_TOKEN_COOKIE = "authToken"  # NOQA: S105

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request from the application's session
    maker. Uncommitted work is rolled back if the request fails.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_bytes,
        access_token_expire_seconds=settings.jwt_access_token_expire_seconds,
    )


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(
        time_cost=settings.password_hash_time_cost,
        memory_cost=settings.password_hash_memory_cost,
        parallelism=settings.password_hash_parallelism,
    )


PasswordHashingServiceDep = Annotated[
    PasswordHashingService,
    Depends(get_password_service),
]
JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTServiceDep,
    password_service: PasswordHashingServiceDep,
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates registration, login and account management.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_password_reset_service(
    session: DBSession,
    settings: SettingsDep,
    password_service: PasswordHashingServiceDep,
) -> PasswordResetService:
    """Get password reset service."""
    return PasswordResetService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        token_expire_minutes=settings.password_reset_token_expire_minutes,
    )


ResetService = Annotated[PasswordResetService, Depends(get_password_reset_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    auth_service: AuthService,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    auth_token_cookie: Annotated[str | None, Cookie(alias=AUTH_TOKEN_COOKIE)] = None,
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Reads the token from the Authorization header, falling back to the
    ``authToken`` cookie, then resolves it to an account.

    Returns
    -------
    The authenticated User

    Raises
    ------
    InvalidTokenError
        If no token is supplied, or it is invalid, expired, or its subject no
        longer exists
        (mapped to 401 by the exception handlers)
    """
    token = credentials.credentials if credentials else auth_token_cookie

    if not token:
        raise InvalidTokenError("Authentication required")

    return await auth_service.resolve_token(token)


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]


# -----------------------------------------------------------------------------
# Task Service
# -----------------------------------------------------------------------------


async def get_task_service(
    session: DBSession,
    auth_service: AuthService,
    settings: SettingsDep,
) -> TaskService:
    """Get the ownership-scoped task service."""
    return TaskService(
        task_repository=TaskRepositorySQLAlchemy(session),
        account_directory=auth_service,
        conceal_foreign_writes=settings.task_conceal_foreign_writes,
    )


TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
