"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from tasker_identity.domain.user.aggregates.user import User
from tasker_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their internal ID."""

    @abstractmethod
    async def find_by_pid(self, pid: UUID) -> Optional[User]:
        """Find a user by their public identifier."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by their username."""

    @abstractmethod
    async def find_by_reset_token(self, token_digest: str) -> Optional[User]:
        """Find the user holding the given reset token digest."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save or update a user and return the persisted state.

        Raises EmailAlreadyExistsError or UsernameTakenError when a unique
        constraint is violated.
        """

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Delete a user by internal ID."""
