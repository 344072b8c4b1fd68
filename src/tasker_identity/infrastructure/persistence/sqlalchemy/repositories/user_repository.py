"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tasker.domain.shared.time import ensure_tz_aware
from tasker_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UsernameTakenError,
    UserRepository,
)
from tasker_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

# Constraint or index names that identify a unique column of ``users``.
# SQLite reports "users.<column>", PostgreSQL names like "users_<column>_key"
# or "ix_users_<column>".
_UNIQUE_COLUMN_MARKERS = {
    "username": ("users.username", "users_username"),
    "email": ("users.email", "users_email"),
}


def _conflicting_field(error: IntegrityError) -> str | None:
    """Name the unique column an IntegrityError was raised for, if any.

    On asyncpg the violated constraint name is read from the driver error, so
    the offending value (which PostgreSQL echoes in the message) is never
    matched against.
    """
    constraint = getattr(error.orig.__cause__, "constraint_name", None)
    source = (constraint or str(error.orig)).lower()

    for field, markers in _UNIQUE_COLUMN_MARKERS.items():
        if any(marker in source for marker in markers):
            return field
    return None


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> User | None:
        return await self._find_one(UserModel.id == user_id)

    async def find_by_pid(self, pid: UUID) -> User | None:
        return await self._find_one(UserModel.pid == pid)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value
        return await self._find_one(UserModel.email == email_value)

    async def find_by_username(self, username: str) -> User | None:
        return await self._find_one(UserModel.username == username.strip())

    async def find_by_reset_token(self, token_digest: str) -> User | None:
        return await self._find_one(UserModel.reset_token == token_digest)

    async def save(self, user: User) -> User:
        existing = (
            await self._find_model_by_id(user.id) if user.id is not None else None
        )

        try:
            if existing:
                self._update_model(existing, user)
                model = existing
                logger.debug("Updated user: %s", user.pid)
            else:
                model = self._map_to_model(user)
                self._session.add(model)

            await self._session.flush()
        except IntegrityError as e:
            field = _conflicting_field(e)
            if field == "username":
                raise UsernameTakenError(user.username) from e
            if field == "email":
                raise EmailAlreadyExistsError(user.email) from e
            raise

        if not existing:
            logger.info("Created user: %s (id: %s)", model.pid, model.id)
        return self._map_to_domain(model)

    async def delete(self, user_id: int) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted user: %s", model.pid)

    async def _find_one(self, criterion) -> User | None:
        stmt = select(UserModel).where(criterion)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def _find_model_by_id(self, user_id: int) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            pid=model.pid,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            reset_token=model.reset_token,
            reset_token_sent_at=(
                ensure_tz_aware(model.reset_token_sent_at)
                if model.reset_token_sent_at
                else None
            ),
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            pid=user.pid,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            reset_token=user.reset_token,
            reset_token_sent_at=user.reset_token_sent_at,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.username = user.username
        model.email = user.email
        model.password_hash = user.password_hash
        model.reset_token = user.reset_token
        model.reset_token_sent_at = user.reset_token_sent_at
        model.updated_at = user.updated_at
