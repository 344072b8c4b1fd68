"""Task schemas for request/response models."""

from datetime import datetime
from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from tasker.domain.task import TaskChanges

TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 32
DESCRIPTION_MAX_LENGTH = 256

# Length limits apply to the stripped title, which is what gets stored
TaskTitle = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
    ),
]


class TaskCreateRequest(BaseModel):
    """Request schema for creating a task."""

    title: TaskTitle
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "groceries",
                "description": "Milk, eggs, bread",
            },
        },
    )


class TaskUpdateRequest(BaseModel):
    """Request schema for a partial task update.

    Only fields present in the request body are changed. An explicit
    ``"description": null`` clears the description.
    """

    title: TaskTitle | None = None
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    done: bool | None = None

    def to_changes(self) -> TaskChanges:
        supplied: dict[str, Any] = {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key == "description"
        }
        return TaskChanges(**supplied)


class TaskResponse(BaseModel):
    """Response schema for a task.

    ``id`` is the task's public identifier.
    """

    id: UUID
    title: str
    description: str | None
    done: bool
    owner_id: UUID
    created_at: datetime
    updated_at: datetime
