"""Ownership check shared by every task operation."""

from typing import Optional
from uuid import UUID

from tasker.domain.task.aggregates import Task
from tasker.domain.task.exceptions import TaskAccessDeniedError, TaskNotFoundError
from tasker.domain.task.value_objects import AccessMode


def ensure_task_access(
    task: Optional[Task],
    user_id: int,
    task_pid: UUID,
    *,
    mode: AccessMode,
    conceal_foreign: bool = False,
) -> Task:
    """Return ``task`` if ``user_id`` may use it in the given mode.

    Parameters
    ----------
    task
        The task looked up by its public id alone, or None if it does not exist
    user_id
        Internal id of the caller
    task_pid
        The public id that was looked up (for error details)
    mode
        READ or WRITE
    conceal_foreign
        Report foreign tasks as missing on writes too

    Returns
    -------
    The task, unchanged

    Raises
    ------
    TaskNotFoundError
        If the task does not exist, or belongs to someone else and the caller
        is reading (or ``conceal_foreign`` is set)
    TaskAccessDeniedError
        If the task belongs to someone else and the caller is writing
    """
    if task is None:
        raise TaskNotFoundError(task_pid)

    if task.is_owned_by(user_id):
        return task

    if mode == AccessMode.READ or conceal_foreign:
        raise TaskNotFoundError(task_pid)
    raise TaskAccessDeniedError(task_pid)
