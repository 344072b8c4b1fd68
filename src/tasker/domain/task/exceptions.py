"""Task domain exceptions."""

from uuid import UUID

from tasker.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
)


class TaskNotFoundError(EntityNotFoundError):
    """Raised when a task does not exist or is hidden from the caller."""

    def __init__(self, task_pid: UUID | str | None = None) -> None:
        super().__init__(
            message="Task not found",
            code=ErrorCode.TASK_NOT_FOUND,
            details={"task_pid": str(task_pid) if task_pid else None},
        )


class TaskAccessDeniedError(ForbiddenError):
    """Raised when a caller tries to modify a task owned by someone else."""

    def __init__(self, task_pid: UUID | str | None = None) -> None:
        super().__init__(
            message="Permission denied",
            code=ErrorCode.TASK_ACCESS_DENIED,
            details={"task_pid": str(task_pid) if task_pid else None},
        )


class TaskPersistenceError(DomainException):
    """Raised when a stored task cannot be read back."""

    def __init__(self, task_pid: UUID | str | None = None) -> None:
        super().__init__(
            message="Task could not be persisted",
            code=ErrorCode.PERSISTENCE_FAILED,
            details={"task_pid": str(task_pid) if task_pid else None},
        )
