"""Authentication schemas for request/response models."""

from datetime import datetime
from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints

from tasker_identity import AccountChanges

USERNAME_MIN_LENGTH = 5
USERNAME_MAX_LENGTH = 48
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 48

# Length limits apply to the stripped username, which is what gets stored
Username = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
    ),
]


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    username: Username = Field(
        ...,
        description="Unique username (5-48 characters)",
    )
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="Password (8-48 characters)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice_01",
                "email": "alice@example.com",
                "password": "longpass1",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LENGTH)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "alice@example.com",
                "password": "longpass1",
            },
        },
    )


class ChangePasswordRequest(BaseModel):
    """Request schema for changing a user's password."""

    current_password: str
    new_password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )


class ForgotPasswordRequest(BaseModel):
    """Request schema for requesting a password reset link."""

    email: EmailStr


class ResetPasswordRequest(BaseModel):
    """Request schema for resetting a password with a token."""

    token: str = Field(..., min_length=1)
    new_password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )


class UpdateAccountRequest(BaseModel):
    """Request schema for a partial profile update.

    Only fields present in the request body are changed.
    """

    username: Username | None = None
    email: EmailStr | None = None
    password: str | None = Field(
        default=None,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
    )

    def to_changes(self) -> AccountChanges:
        # None means "not supplied" here; none of these fields can be cleared
        supplied: dict[str, Any] = {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
        return AccountChanges(**supplied)


class UserResponse(BaseModel):
    """Response schema for user data.

    ``id`` is the public identifier; the internal key is never exposed.
    """

    id: UUID
    username: str
    email: str
    created_at: datetime
    updated_at: datetime


class RegisterResponse(BaseModel):
    """Response schema for a successful registration."""

    message: str
    user: UserResponse


class AuthResponse(BaseModel):
    """Response schema for login."""

    user: UserResponse
    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "username": "alice_01",
                    "email": "alice@example.com",
                    "created_at": "2024-12-05T10:30:00Z",
                    "updated_at": "2024-12-05T10:30:00Z",
                },
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 3600,
            },
        },
    )


class MessageResponse(BaseModel):
    """Generic response carrying a human-readable message."""

    message: str
