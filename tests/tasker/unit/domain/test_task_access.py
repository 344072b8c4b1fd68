"""Tests for ensure_task_access."""

from uuid import uuid4

import pytest

from tasker.domain.task import (
    AccessMode,
    Task,
    TaskAccessDeniedError,
    TaskNotFoundError,
    ensure_task_access,
)

OWNER_ID = 1
OTHER_ID = 2


class TestEnsureTaskAccess:
    """Tests for the ownership rule."""

    def setup_method(self):
        self.task = Task.create(user_id=OWNER_ID, title="groceries")

    @pytest.mark.parametrize("mode", [AccessMode.READ, AccessMode.WRITE])
    def test_owner_gets_task(self, mode):
        assert ensure_task_access(self.task, OWNER_ID, self.task.pid, mode=mode) is self.task

    @pytest.mark.parametrize("mode", [AccessMode.READ, AccessMode.WRITE])
    def test_missing_task_not_found(self, mode):
        with pytest.raises(TaskNotFoundError):
            ensure_task_access(None, OWNER_ID, uuid4(), mode=mode)

    def test_foreign_read_looks_missing(self):
        with pytest.raises(TaskNotFoundError):
            ensure_task_access(self.task, OTHER_ID, self.task.pid, mode=AccessMode.READ)

    def test_foreign_write_denied(self):
        with pytest.raises(TaskAccessDeniedError):
            ensure_task_access(self.task, OTHER_ID, self.task.pid, mode=AccessMode.WRITE)

    def test_foreign_write_concealed(self):
        with pytest.raises(TaskNotFoundError):
            ensure_task_access(
                self.task,
                OTHER_ID,
                self.task.pid,
                mode=AccessMode.WRITE,
                conceal_foreign=True,
            )
