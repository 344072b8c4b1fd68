"""Task domain: per-account to-do items and the rules for touching them."""

from tasker.domain.task.access import ensure_task_access
from tasker.domain.task.aggregates import Task
from tasker.domain.task.exceptions import (
    TaskAccessDeniedError,
    TaskNotFoundError,
    TaskPersistenceError,
)
from tasker.domain.task.repositories import TaskRepository
from tasker.domain.task.value_objects import AccessMode, TaskChanges

__all__ = [
    "AccessMode",
    "Task",
    "TaskAccessDeniedError",
    "TaskChanges",
    "TaskNotFoundError",
    "TaskPersistenceError",
    "TaskRepository",
    "ensure_task_access",
]
