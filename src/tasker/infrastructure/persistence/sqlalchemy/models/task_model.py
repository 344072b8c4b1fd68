"""SQLAlchemy model for Task aggregate."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tasker.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class TaskModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting Task aggregates."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pid: Mapped[UUID] = mapped_column(Uuid, unique=True, nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(32), nullable=False)
    description: Mapped[str | None] = mapped_column(String(256), nullable=True)
    done: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<TaskModel(id={self.id}, pid={self.pid}, user_id={self.user_id})>"
