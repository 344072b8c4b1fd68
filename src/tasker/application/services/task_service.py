"""Application service for ownership-scoped task management."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from tasker.domain.task import (
    AccessMode,
    Task,
    TaskChanges,
    TaskPersistenceError,
    ensure_task_access,
)

if TYPE_CHECKING:
    from tasker.domain.task import TaskRepository
    from tasker_identity import AuthenticationService

logger = logging.getLogger(__name__)


class TaskService:
    """
    Task CRUD scoped to the calling account.

    Callers are identified by their public id. The account directory turns it
    into the internal id every query is scoped to. Reads of a foreign task
    look exactly like reads of a missing one. Writes on a foreign task are
    refused with a permission error, unless ``conceal_foreign_writes`` is set.
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        account_directory: AuthenticationService,
        conceal_foreign_writes: bool = False,
    ):
        self._task_repo = task_repository
        self._accounts = account_directory
        self._conceal_foreign_writes = conceal_foreign_writes

    async def create(
        self,
        owner_pid: UUID,
        title: str,
        description: Optional[str] = None,
    ) -> Task:
        owner = await self._accounts.resolve(owner_pid)

        saved = await self._task_repo.save(
            Task.create(user_id=owner.id, title=title, description=description)
        )
        stored = await self._task_repo.find_by_pid(saved.pid)
        if stored is None:
            raise TaskPersistenceError(saved.pid)

        logger.info("Task created: %s (owner: %s)", stored.pid, owner.pid)
        return stored

    async def list_by_owner(self, owner_pid: UUID) -> list[Task]:
        owner = await self._accounts.resolve(owner_pid)
        return await self._task_repo.list_by_owner(owner.id)

    async def get_one(self, owner_pid: UUID, task_pid: UUID) -> Task:
        owner = await self._accounts.resolve(owner_pid)
        task = await self._task_repo.find_by_pid(task_pid)
        return ensure_task_access(task, owner.id, task_pid, mode=AccessMode.READ)

    async def update(
        self,
        task_pid: UUID,
        owner_pid: UUID,
        changes: TaskChanges,
    ) -> Task:
        task = await self._load_for_write(owner_pid, task_pid)

        if changes.is_empty():
            return task

        task.apply(changes)
        task = await self._task_repo.save(task)

        logger.debug("Task updated: %s", task.pid)
        return task

    async def delete(self, owner_pid: UUID, task_pid: UUID) -> Task:
        task = await self._load_for_write(owner_pid, task_pid)
        await self._task_repo.delete(task.id)

        logger.info("Task deleted: %s", task.pid)
        return task

    async def _load_for_write(self, owner_pid: UUID, task_pid: UUID) -> Task:
        owner = await self._accounts.resolve(owner_pid)
        task = await self._task_repo.find_by_pid(task_pid)
        if task is not None and not task.is_owned_by(owner.id):
            logger.warning(
                "Account %s attempted to modify task %s it does not own",
                owner.pid,
                task_pid,
            )
        return ensure_task_access(
            task,
            owner.id,
            task_pid,
            mode=AccessMode.WRITE,
            conceal_foreign=self._conceal_foreign_writes,
        )
