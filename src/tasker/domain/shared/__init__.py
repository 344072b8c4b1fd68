"""Shared domain building blocks (time, exceptions, partial updates)."""

from tasker.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)
from tasker.domain.shared.partial import UNSET, Unset
from tasker.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ForbiddenError",
    "UNSET",
    "Unset",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
