"""SQLAlchemy declarative base for tasker_identity models.

Uses the same metadata as tasker's Base so tasks can reference users.
"""

from tasker.infrastructure.persistence.sqlalchemy.models.base import Base

IdentityBase = Base
