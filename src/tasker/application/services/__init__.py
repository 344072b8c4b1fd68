"""Application services orchestrating the task domain."""

from tasker.application.services.task_service import TaskService

__all__ = ["TaskService"]
