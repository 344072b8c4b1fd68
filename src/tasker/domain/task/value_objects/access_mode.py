from enum import Enum


class AccessMode(str, Enum):
    """How a caller intends to use a task."""

    READ = "read"
    WRITE = "write"
