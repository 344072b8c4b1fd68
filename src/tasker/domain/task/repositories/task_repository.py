"""Task repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from tasker.domain.task.aggregates import Task


class TaskRepository(ABC):
    """Repository interface for Task aggregates."""

    @abstractmethod
    async def find_by_pid(self, pid: UUID) -> Optional[Task]:
        """Find a task by its public identifier, regardless of owner."""

    @abstractmethod
    async def list_by_owner(self, user_id: int) -> list[Task]:
        """List all tasks of one owner, ordered by internal id."""

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """Save or update a task and return the persisted state."""

    @abstractmethod
    async def delete(self, task_id: int) -> None:
        """Delete a task by internal ID."""
