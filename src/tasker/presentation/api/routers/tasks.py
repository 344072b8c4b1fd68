"""Tasks router: CRUD over the caller's own tasks."""

import logging
from uuid import UUID

from fastapi import APIRouter, Response, status

from tasker.domain.task import Task
from tasker.presentation.api.dependencies import (
    CurrentUser,
    DBSession,
    TaskServiceDep,
)
from tasker.presentation.api.schemas.tasks import (
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _task_response(task: Task, owner_pid: UUID) -> TaskResponse:
    return TaskResponse(
        id=task.pid,
        title=task.title,
        description=task.description,
        done=task.done,
        owner_id=owner_pid,
        created_at=task.created_at,
        updated_at=task.updated_at,
    )


@router.get(
    "",
    summary="List tasks",
    responses={
        200: {"description": "All tasks of the current user"},
        401: {"description": "Not authenticated"},
    },
)
async def list_tasks(
    user: CurrentUser,
    task_service: TaskServiceDep,
) -> list[TaskResponse]:
    """List the current user's tasks in creation order."""
    tasks = await task_service.list_by_owner(user.pid)
    return [_task_response(task, user.pid) for task in tasks]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    responses={
        201: {"description": "Task created"},
        401: {"description": "Not authenticated"},
        422: {"description": "Invalid task data"},
    },
)
async def create_task(
    request: TaskCreateRequest,
    user: CurrentUser,
    task_service: TaskServiceDep,
    session: DBSession,
) -> TaskResponse:
    task = await task_service.create(
        owner_pid=user.pid,
        title=request.title,
        description=request.description,
    )
    await session.commit()

    return _task_response(task, user.pid)


@router.get(
    "/{task_pid}",
    summary="Get a task",
    responses={
        200: {"description": "The task"},
        401: {"description": "Not authenticated"},
        404: {"description": "Task not found"},
    },
)
async def get_task(
    task_pid: UUID,
    user: CurrentUser,
    task_service: TaskServiceDep,
) -> TaskResponse:
    task = await task_service.get_one(user.pid, task_pid)
    return _task_response(task, user.pid)


@router.patch(
    "/{task_pid}",
    summary="Update a task",
    responses={
        200: {"description": "Task updated"},
        401: {"description": "Not authenticated"},
        403: {"description": "Task belongs to another user"},
        404: {"description": "Task not found"},
    },
)
async def update_task(
    task_pid: UUID,
    request: TaskUpdateRequest,
    user: CurrentUser,
    task_service: TaskServiceDep,
    session: DBSession,
) -> TaskResponse:
    """Change title, description or done. Omitted fields stay as they are."""
    task = await task_service.update(task_pid, user.pid, request.to_changes())
    await session.commit()

    return _task_response(task, user.pid)


@router.delete(
    "/{task_pid}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
    responses={
        204: {"description": "Task deleted"},
        401: {"description": "Not authenticated"},
        403: {"description": "Task belongs to another user"},
        404: {"description": "Task not found"},
    },
)
async def delete_task(
    task_pid: UUID,
    user: CurrentUser,
    task_service: TaskServiceDep,
    session: DBSession,
) -> Response:
    deleted = await task_service.delete(user.pid, task_pid)
    await session.commit()

    logger.info("Deleted task %r of user %s", deleted.title, user.pid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
