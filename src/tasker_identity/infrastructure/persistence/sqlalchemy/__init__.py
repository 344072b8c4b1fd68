"""SQLAlchemy persistence for identity."""

from tasker_identity.infrastructure.persistence.sqlalchemy.models import UserModel
from tasker_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = ["UserModel", "UserRepositorySQLAlchemy"]
