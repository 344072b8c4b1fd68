"""Tests for the Task aggregate and partial updates."""

import pytest

from tasker.domain.shared.exceptions import ValidationError
from tasker.domain.task import Task, TaskChanges


class TestTaskCreation:
    """Tests for creating tasks."""

    def test_defaults(self):
        task = Task.create(user_id=1, title="groceries")

        assert task.id is None
        assert task.description is None
        assert task.done is False
        assert task.is_owned_by(1)
        assert not task.is_owned_by(2)

    def test_title_is_stripped(self):
        assert Task.create(user_id=1, title="  groceries ").title == "groceries"

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            Task.create(user_id=1, title="   ")


class TestTaskApply:
    """Tests for applying TaskChanges."""

    def setup_method(self):
        self.task = Task.create(user_id=1, title="groceries", description="milk")

    def test_empty_changes_leave_task_untouched(self):
        before = self.task.updated_at

        self.task.apply(TaskChanges())

        assert self.task.title == "groceries"
        assert self.task.description == "milk"
        assert self.task.updated_at == before

    def test_only_supplied_fields_change(self):
        self.task.apply(TaskChanges(done=True))

        assert self.task.done is True
        assert self.task.title == "groceries"
        assert self.task.description == "milk"

    def test_description_can_be_cleared(self):
        self.task.apply(TaskChanges(description=None))

        assert self.task.description is None

    def test_title_change(self):
        self.task.apply(TaskChanges(title="laundry"))

        assert self.task.title == "laundry"

    def test_owner_never_changes(self):
        self.task.apply(TaskChanges(title="laundry", done=True))

        assert self.task.user_id == 1

    def test_is_empty(self):
        assert TaskChanges().is_empty()
        assert not TaskChanges(description=None).is_empty()
