"""SQLAlchemy implementation of TaskRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tasker.domain.shared.time import ensure_tz_aware
from tasker.domain.task import Task, TaskRepository
from tasker.infrastructure.persistence.sqlalchemy.models import TaskModel

logger = logging.getLogger(__name__)


class TaskRepositorySQLAlchemy(TaskRepository):
    """SQLAlchemy implementation of the TaskRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_pid(self, pid: UUID) -> Task | None:
        stmt = select(TaskModel).where(TaskModel.pid == pid)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def list_by_owner(self, user_id: int) -> list[Task]:
        stmt = (
            select(TaskModel)
            .where(TaskModel.user_id == user_id)
            .order_by(TaskModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def save(self, task: Task) -> Task:
        existing = (
            await self._find_model_by_id(task.id) if task.id is not None else None
        )

        if existing:
            self._update_model(existing, task)
            model = existing
        else:
            model = self._map_to_model(task)
            self._session.add(model)

        await self._session.flush()
        logger.debug("Saved task: %s (id: %s)", model.pid, model.id)
        return self._map_to_domain(model)

    async def delete(self, task_id: int) -> None:
        model = await self._find_model_by_id(task_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.debug("Deleted task: %s", model.pid)

    async def _find_model_by_id(self, task_id: int) -> TaskModel | None:
        stmt = select(TaskModel).where(TaskModel.id == task_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: TaskModel) -> Task:
        return Task.reconstitute(
            id=model.id,
            pid=model.pid,
            user_id=model.user_id,
            title=model.title,
            description=model.description,
            done=model.done,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, task: Task) -> TaskModel:
        return TaskModel(
            pid=task.pid,
            user_id=task.user_id,
            title=task.title,
            description=task.description,
            done=task.done,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )

    def _update_model(self, model: TaskModel, task: Task) -> None:
        model.title = task.title
        model.description = task.description
        model.done = task.done
        model.updated_at = task.updated_at
