"""Unit tests for TaskService."""

from unittest.mock import AsyncMock

import pytest

from tasker.application.services import TaskService
from tasker.domain.task import (
    Task,
    TaskAccessDeniedError,
    TaskChanges,
    TaskNotFoundError,
    TaskPersistenceError,
)
from tasker_identity import User, UserNotFoundError

ALICE = User(id=1, username="alice_01", email="alice@example.com", password_hash="h")
BOB = User(id=2, username="bob_0001", email="bob@example.com", password_hash="h")


class TestTaskService:
    """Tests for ownership-scoped task operations."""

    def setup_method(self):
        """Set up test fixtures."""
        self.task_repo = AsyncMock()
        self.task_repo.save.side_effect = lambda task: task
        self.accounts = AsyncMock()
        self.accounts.resolve.side_effect = {ALICE.pid: ALICE, BOB.pid: BOB}.__getitem__

        self.service = TaskService(
            task_repository=self.task_repo,
            account_directory=self.accounts,
        )
        self.alice_task = Task(id=10, user_id=ALICE.id, title="groceries")

    @pytest.mark.asyncio
    async def test_create_reads_back_stored_task(self):
        stored = Task(id=11, user_id=ALICE.id, title="laundry")
        self.task_repo.find_by_pid.return_value = stored

        task = await self.service.create(ALICE.pid, "laundry", "whites")

        assert task is stored
        saved = self.task_repo.save.call_args[0][0]
        assert saved.user_id == ALICE.id
        assert saved.description == "whites"

    @pytest.mark.asyncio
    async def test_create_fails_when_read_back_misses(self):
        self.task_repo.find_by_pid.return_value = None

        with pytest.raises(TaskPersistenceError):
            await self.service.create(ALICE.pid, "laundry")

    @pytest.mark.asyncio
    async def test_create_for_unknown_owner(self):
        self.accounts.resolve.side_effect = UserNotFoundError("ghost")

        with pytest.raises(UserNotFoundError):
            await self.service.create(ALICE.pid, "laundry")

        self.task_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_is_scoped_to_owner(self):
        self.task_repo.list_by_owner.return_value = [self.alice_task]

        tasks = await self.service.list_by_owner(ALICE.pid)

        assert tasks == [self.alice_task]
        self.task_repo.list_by_owner.assert_called_once_with(ALICE.id)

    @pytest.mark.asyncio
    async def test_get_one_owner(self):
        self.task_repo.find_by_pid.return_value = self.alice_task

        assert await self.service.get_one(ALICE.pid, self.alice_task.pid) is self.alice_task

    @pytest.mark.asyncio
    async def test_get_one_foreign_is_not_found(self):
        self.task_repo.find_by_pid.return_value = self.alice_task

        with pytest.raises(TaskNotFoundError):
            await self.service.get_one(BOB.pid, self.alice_task.pid)

    @pytest.mark.asyncio
    async def test_update_applies_changes(self):
        self.task_repo.find_by_pid.return_value = self.alice_task

        task = await self.service.update(
            self.alice_task.pid, ALICE.pid, TaskChanges(done=True)
        )

        assert task.done is True
        self.task_repo.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_with_no_changes_skips_save(self):
        self.task_repo.find_by_pid.return_value = self.alice_task

        await self.service.update(self.alice_task.pid, ALICE.pid, TaskChanges())

        self.task_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_foreign_denied(self):
        self.task_repo.find_by_pid.return_value = self.alice_task

        with pytest.raises(TaskAccessDeniedError):
            await self.service.update(self.alice_task.pid, BOB.pid, TaskChanges(done=True))

        assert self.alice_task.done is False
        self.task_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_foreign_concealed(self):
        service = TaskService(
            task_repository=self.task_repo,
            account_directory=self.accounts,
            conceal_foreign_writes=True,
        )
        self.task_repo.find_by_pid.return_value = self.alice_task

        with pytest.raises(TaskNotFoundError):
            await service.update(self.alice_task.pid, BOB.pid, TaskChanges(done=True))

    @pytest.mark.asyncio
    async def test_delete_returns_snapshot(self):
        self.task_repo.find_by_pid.return_value = self.alice_task

        deleted = await self.service.delete(ALICE.pid, self.alice_task.pid)

        assert deleted is self.alice_task
        self.task_repo.delete.assert_called_once_with(self.alice_task.id)

    @pytest.mark.asyncio
    async def test_delete_foreign_denied(self):
        self.task_repo.find_by_pid.return_value = self.alice_task

        with pytest.raises(TaskAccessDeniedError):
            await self.service.delete(BOB.pid, self.alice_task.pid)

        self.task_repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_missing(self):
        self.task_repo.find_by_pid.return_value = None

        with pytest.raises(TaskNotFoundError):
            await self.service.delete(ALICE.pid, self.alice_task.pid)
