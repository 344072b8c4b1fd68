"""SQLAlchemy models for the task domain.

``TaskModel`` references ``users.id``; the identity models share ``Base``.
"""

from tasker.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from tasker.infrastructure.persistence.sqlalchemy.models.task_model import TaskModel

__all__ = ["Base", "TaskModel", "TimestampMixin"]
