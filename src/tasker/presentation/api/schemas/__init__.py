"""Pydantic request/response schemas for the API."""

from tasker.presentation.api.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    ResetPasswordRequest,
    UpdateAccountRequest,
    UserResponse,
)
from tasker.presentation.api.schemas.tasks import (
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)

__all__ = [
    "AuthResponse",
    "ChangePasswordRequest",
    "ForgotPasswordRequest",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "RegisterResponse",
    "ResetPasswordRequest",
    "TaskCreateRequest",
    "TaskResponse",
    "TaskUpdateRequest",
    "UpdateAccountRequest",
    "UserResponse",
]
