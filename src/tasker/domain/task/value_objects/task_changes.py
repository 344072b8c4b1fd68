"""Partial update of a task."""

from dataclasses import dataclass, fields

from tasker.domain.shared.partial import UNSET, Unset


@dataclass(frozen=True)
class TaskChanges:
    """Fields to change on a task.

    Fields left at ``UNSET`` keep their current value. ``description=None``
    clears the description.
    """

    title: str | Unset = UNSET
    description: str | None | Unset = UNSET
    done: bool | Unset = UNSET

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is UNSET for f in fields(self))
