"""Sentinel for partial updates.

A field set to ``UNSET`` was not supplied by the caller and keeps its current
value. ``None`` is a real value (e.g. clearing a task description).
"""

from enum import Enum
from typing import Final


class Unset(Enum):
    """Marker type for a field that was not supplied."""

    TOKEN = 0

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = Unset.TOKEN
