"""Task aggregate root."""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from tasker.domain.shared.exceptions import ValidationError
from tasker.domain.shared.partial import UNSET
from tasker.domain.shared.time import utc_now
from tasker.domain.task.value_objects import TaskChanges


class Task:
    """
    A to-do item owned by exactly one account.

    ``user_id`` is the owner's internal account id. It is fixed at creation
    and there is no way to change it afterwards.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: int,
        title: str,
        description: Optional[str] = None,
        done: bool = False,
        id: Optional[int] = None,
        pid: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id
        self._pid = pid or uuid4()
        self._user_id = user_id
        self._title = self._clean_title(title)
        self._description = description
        self._done = done
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def pid(self) -> UUID:
        return self._pid

    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def done(self) -> bool:
        return self._done

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: int) -> bool:
        return self._user_id == user_id

    def apply(self, changes: TaskChanges) -> None:
        """Apply a partial update. ``UNSET`` fields are left untouched."""
        if changes.is_empty():
            return

        if changes.title is not UNSET:
            self._title = self._clean_title(changes.title)
        if changes.description is not UNSET:
            self._description = changes.description
        if changes.done is not UNSET:
            self._done = bool(changes.done)
        self._updated_at = utc_now()

    @staticmethod
    def _clean_title(title: str) -> str:
        cleaned = title.strip()
        if not cleaned:
            msg = "Task title cannot be empty"
            raise ValidationError(msg)
        return cleaned

    @classmethod
    def create(
        cls,
        user_id: int,
        title: str,
        description: Optional[str] = None,
    ) -> "Task":
        return cls(user_id=user_id, title=title, description=description)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: int,
        pid: UUID,
        user_id: int,
        title: str,
        description: Optional[str],
        done: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Task":
        return cls(
            id=id,
            pid=pid,
            user_id=user_id,
            title=title,
            description=description,
            done=done,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self._pid == other._pid

    def __hash__(self) -> int:
        return hash(self._pid)

    def __repr__(self) -> str:
        return f"Task(pid={self._pid}, title={self._title!r}, done={self._done})"
