"""Value objects for the task domain."""

from tasker.domain.task.value_objects.access_mode import AccessMode
from tasker.domain.task.value_objects.task_changes import TaskChanges

__all__ = [
    "AccessMode",
    "TaskChanges",
]
