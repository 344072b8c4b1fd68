from tasker.infrastructure.persistence.sqlalchemy.repositories.task_repository import (  # noqa: E501
    TaskRepositorySQLAlchemy,
)

__all__ = ["TaskRepositorySQLAlchemy"]
