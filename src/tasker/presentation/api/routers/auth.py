"""Authentication router for registration, login, password recovery and profile."""

import logging

from fastapi import APIRouter, Response, status

from tasker.presentation.api.dependencies import (
    AUTH_TOKEN_COOKIE,
    AuthService,
    CurrentUser,
    DBSession,
    ResetService,
    SettingsDep,
)
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
from tasker_config.settings import Settings
from tasker_identity import User, UserNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()

FORGOT_PASSWORD_MESSAGE = (
    "If an account with that email exists, a link to reset the password has been "
    "sent."
)


def _set_auth_token_cookie(
    response: Response,
    token: str,
    settings: Settings,
) -> None:
    """Set the access token as an HttpOnly cookie.

    This cookie is:
    - HttpOnly: Not accessible to JavaScript (XSS protection)
    - Secure: Only sent over HTTPS (when cookie_secure=True)
    - SameSite: Prevents CSRF attacks
    """
    response.set_cookie(
        key=AUTH_TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.api_cookie_secure,
        samesite=settings.api_cookie_samesite,
        max_age=settings.jwt_access_token_expire_seconds,
        path="/",
        domain=settings.api_cookie_domain,
    )


def _clear_auth_token_cookie(response: Response, settings: Settings) -> None:
    """Clear the access token cookie (for logout)."""
    response.delete_cookie(
        key=AUTH_TOKEN_COOKIE,
        path="/",
        domain=settings.api_cookie_domain,
    )


def _user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.pid,
        username=user.username,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def _dispatch_reset_link(email: str, reset_link: str) -> None:
    """Hand a reset link to the delivery channel.

    Mail delivery is not part of this service; the link is only logged at
    debug level so it never reaches production logs.
    """
    logger.debug("Password reset link for %s: %s", email, reset_link)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        409: {"description": "Email or username already taken"},
        422: {"description": "Invalid registration data"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> RegisterResponse:
    """Create a new account. Log in afterwards to obtain a token."""
    user = await auth_service.register(
        username=request.username,
        email=request.email,
        password=request.password,
    )
    await session.commit()

    return RegisterResponse(
        message=f"Successfully registered as user {user.username}",
        user=_user_response(user),
    )


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Returns an access token on success and also sets it as an HttpOnly
    ``authToken`` cookie. A stored digest made with outdated Argon2 cost
    parameters is replaced with a fresh one.
    """
    user, access_token = await auth_service.login(
        email=request.email,
        password=request.password,
    )
    # Commits a digest upgraded during login
    await session.commit()

    _set_auth_token_cookie(response, access_token, settings)

    return AuthResponse(
        user=_user_response(user),
        access_token=access_token,
        expires_in=settings.jwt_access_token_expire_seconds,
    )


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Logout user",
    responses={
        204: {"description": "Logged out successfully"},
    },
)
async def logout(
    response: Response,
    settings: SettingsDep,
) -> None:
    """Clear the auth cookie. Issued tokens stay valid until they expire."""
    _clear_auth_token_cookie(response, settings)
    logger.debug("User logged out (auth token cookie cleared)")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_202_ACCEPTED,
    summary="Request password reset",
    responses={
        202: {"description": "If the email exists, a reset link has been sent"},
    },
)
async def forgot_password(
    request: ForgotPasswordRequest,
    reset_service: ResetService,
    session: DBSession,
    settings: SettingsDep,
) -> MessageResponse:
    """Request a password reset link.

    The response is the same whether or not the email is registered.
    """
    try:
        issued = await reset_service.request_reset(request.email)
    except UserNotFoundError:
        return MessageResponse(message=FORGOT_PASSWORD_MESSAGE)

    await session.commit()

    base_url = settings.frontend_base_url.rstrip("/")
    _dispatch_reset_link(
        issued.user.email,
        f"{base_url}/reset-password?token={issued.token}",
    )
    return MessageResponse(message=FORGOT_PASSWORD_MESSAGE)


@router.post(
    "/reset-password",
    summary="Reset password with token",
    responses={
        200: {"description": "Password reset successfully"},
        404: {"description": "Invalid, used or expired token"},
    },
)
async def reset_password(
    request: ResetPasswordRequest,
    reset_service: ResetService,
    session: DBSession,
) -> MessageResponse:
    """Set a new password using a token from the reset link."""
    await reset_service.reset_password(
        token=request.token,
        new_password=request.new_password,
    )
    await session.commit()

    return MessageResponse(message="Password reset successfully")


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user data"},
        401: {"description": "Not authenticated"},
    },
)
async def get_me(user: CurrentUser) -> UserResponse:
    """Get the current authenticated user's information."""
    return _user_response(user)


@router.patch(
    "/me",
    summary="Update current user",
    responses={
        200: {"description": "Account updated"},
        401: {"description": "Not authenticated"},
        409: {"description": "Email or username already taken"},
    },
)
async def update_me(
    request: UpdateAccountRequest,
    user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    """Change username, email or password. Omitted fields stay as they are."""
    updated = await auth_service.update_account(user.id, request.to_changes())
    await session.commit()

    return _user_response(updated)


@router.delete(
    "/me",
    summary="Delete current user",
    responses={
        200: {"description": "Account and all its tasks deleted"},
        401: {"description": "Not authenticated"},
    },
)
async def delete_me(
    response: Response,
    user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> UserResponse:
    """Delete the account together with all of its tasks."""
    removed = await auth_service.remove_account(user.id)
    await session.commit()

    _clear_auth_token_cookie(response, settings)
    return _user_response(removed)


@router.post(
    "/change-password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change password",
    responses={
        204: {"description": "Password changed successfully"},
        401: {"description": "Current password incorrect or not authenticated"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> None:
    """Change the current user's password after checking the current one."""
    await auth_service.change_password(
        user_id=user.id,
        current_password=request.current_password,
        new_password=request.new_password,
    )
    await session.commit()
