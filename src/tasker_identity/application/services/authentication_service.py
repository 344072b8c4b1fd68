"""Authentication service for registration, login and account management."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from tasker.domain.shared.partial import UNSET
from tasker_identity.domain.user import (
    AccountChanges,
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UsernameTakenError,
    UserNotFoundError,
)
from tasker_identity.exceptions import InvalidCredentialsError, InvalidTokenError

if TYPE_CHECKING:
    from tasker_identity.domain.user import UserRepository
    from tasker_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for account identity.

    Orchestrates password hashing and JWT tokens with the User aggregate to
    provide:
    - User registration
    - Login with password
    - Resolving a token subject to an account
    - Profile update, password change and account removal

    ``resolve`` is the only place a public identifier from a token is turned
    into an account. Every other component asks this service.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._unknown_account_digest: str | None = None

    async def register(
        self,
        username: str,
        email: str,
        password: str,
    ) -> User:
        username = username.strip()
        email_obj = Email(email)

        if await self._user_repo.find_by_email(email_obj) is not None:
            raise EmailAlreadyExistsError(email_obj.value)
        if await self._user_repo.find_by_username(username) is not None:
            raise UsernameTakenError(username)

        password_hash = self._password_service.hash(password)
        user = await self._user_repo.save(
            User.create(username=username, email=email_obj, password_hash=password_hash)
        )

        logger.info("User registered: %s", user.pid)
        return user

    async def authenticate(self, email: str, password: str) -> User:
        try:
            user = await self._user_repo.find_by_email(email.strip())
        except InvalidEmailError:
            user = None
        if user is None:
            # Unknown accounts still pay for one Argon2 verification
            self._password_service.verify(password, self._dummy_digest())
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            raise InvalidCredentialsError

        if self._password_service.needs_rehash(user.password_hash):
            user.change_password(self._password_service.hash(password))
            user = await self._user_repo.save(user)
            logger.info("Password digest upgraded for user: %s", user.pid)

        return user

    async def login(self, email: str, password: str) -> tuple[User, str]:
        user = await self.authenticate(email, password)
        access_token = self._jwt_service.create_access_token(user.pid)

        logger.info("User logged in: %s", user.pid)
        return user, access_token

    async def resolve(self, pid: UUID) -> User:
        user = await self._user_repo.find_by_pid(pid)
        if user is None:
            raise UserNotFoundError(pid)
        return user

    async def resolve_token(self, token: str) -> User:
        payload = self._jwt_service.verify_token(token)
        try:
            return await self.resolve(payload.user_pid)
        except UserNotFoundError as e:
            logger.debug("Token subject no longer exists: %s", payload.user_pid)
            raise InvalidTokenError from e

    async def update_account(self, user_id: int, changes: AccountChanges) -> User:
        user = await self._get_by_id(user_id)

        if changes.email is not UNSET:
            email_obj = Email(changes.email)
            if email_obj.value != user.email:
                holder = await self._user_repo.find_by_email(email_obj)
                if holder is not None and holder.id != user.id:
                    raise EmailAlreadyExistsError(email_obj.value)
                user.change_email(email_obj)

        if changes.username is not UNSET:
            username = changes.username.strip()
            if username != user.username:
                holder = await self._user_repo.find_by_username(username)
                if holder is not None and holder.id != user.id:
                    raise UsernameTakenError(username)
                user.change_username(username)

        if changes.password is not UNSET:
            user.change_password(self._password_service.hash(changes.password))

        if changes.is_empty():
            return user

        user = await self._user_repo.save(user)
        logger.info("Account updated: %s", user.pid)
        return user

    async def change_password(
        self,
        user_id: int,
        current_password: str,
        new_password: str,
    ) -> User:
        user = await self._get_by_id(user_id)

        if not self._password_service.verify(current_password, user.password_hash):
            msg = "Current password is incorrect"
            raise InvalidCredentialsError(msg)

        user.change_password(self._password_service.hash(new_password))
        user = await self._user_repo.save(user)

        logger.info("Password changed for user: %s", user.pid)
        return user

    async def remove_account(self, user_id: int) -> User:
        """Hard-delete an account. Owned tasks go with it (FK cascade)."""
        user = await self._get_by_id(user_id)
        await self._user_repo.delete(user_id)

        logger.info("Account removed: %s", user.pid)
        return user

    def _dummy_digest(self) -> str:
        """Digest checked against when no account matches the login email."""
        if self._unknown_account_digest is None:
            self._unknown_account_digest = self._password_service.hash(
                "unknown-account-placeholder"
            )
        return self._unknown_account_digest

    async def _get_by_id(self, user_id: int) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
