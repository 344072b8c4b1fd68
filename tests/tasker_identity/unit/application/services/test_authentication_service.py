"""Unit tests for AuthenticationService."""

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from tasker_identity import (
    AccountChanges,
    AuthenticationService,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    User,
    UsernameTakenError,
    UserNotFoundError,
)

TEST_USERNAME = "alice_01"
TEST_EMAIL = "alice@example.com"
TEST_PASSWORD = "longpass1"
TEST_HASH = "$argon2id$stored"


def _user(user_id: int = 1, username: str = TEST_USERNAME, email: str = TEST_EMAIL):
    return User(id=user_id, username=username, email=email, password_hash=TEST_HASH)


class _ServiceFixture:
    def setup_method(self):
        """Set up test fixtures."""
        self.user_repo = AsyncMock()
        self.user_repo.save.side_effect = lambda user: user
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = "$argon2id$new"
        self.password_service.needs_rehash.return_value = False
        self.jwt_service = Mock(spec=JWTService)

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )


class TestRegister(_ServiceFixture):
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_success(self):
        """Stores a new account with a hashed password."""
        self.user_repo.find_by_email.return_value = None
        self.user_repo.find_by_username.return_value = None

        user = await self.service.register(TEST_USERNAME, TEST_EMAIL, TEST_PASSWORD)

        assert user.username == TEST_USERNAME
        assert user.email == TEST_EMAIL
        assert user.password_hash == "$argon2id$new"
        self.password_service.hash.assert_called_once_with(TEST_PASSWORD)
        self.user_repo.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_register_normalizes_username_and_email(self):
        self.user_repo.find_by_email.return_value = None
        self.user_repo.find_by_username.return_value = None

        user = await self.service.register("  alice_01 ", " Alice@Example.COM ", "pw  pw  1")

        assert user.username == "alice_01"
        assert user.email == "alice@example.com"
        # Passwords are taken verbatim
        self.password_service.hash.assert_called_once_with("pw  pw  1")

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self):
        self.user_repo.find_by_email.return_value = _user()

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.register("bob_0001", TEST_EMAIL, TEST_PASSWORD)

        self.user_repo.save.assert_not_called()
        self.password_service.hash.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_duplicate_username(self):
        self.user_repo.find_by_email.return_value = None
        self.user_repo.find_by_username.return_value = _user()

        with pytest.raises(UsernameTakenError):
            await self.service.register(TEST_USERNAME, "other@example.com", TEST_PASSWORD)

        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_invalid_email(self):
        with pytest.raises(InvalidEmailError):
            await self.service.register(TEST_USERNAME, "not-an-email", TEST_PASSWORD)

        self.user_repo.save.assert_not_called()


class TestLogin(_ServiceFixture):
    """Tests for authenticate and login."""

    @pytest.mark.asyncio
    async def test_login_success_returns_token(self):
        user = _user()
        self.user_repo.find_by_email.return_value = user
        self.password_service.verify.return_value = True
        self.jwt_service.create_access_token.return_value = "token"

        logged_in, token = await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        assert logged_in == user
        assert token == "token"
        self.jwt_service.create_access_token.assert_called_once_with(user.pid)
        self.password_service.verify.assert_called_once_with(TEST_PASSWORD, TEST_HASH)
        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_login_unknown_email(self):
        self.user_repo.find_by_email.return_value = None
        self.password_service.verify.return_value = False

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await self.service.login("nobody@example.com", TEST_PASSWORD)

        assert exc_info.value.message == "Invalid email or password"
        self.jwt_service.create_access_token.assert_not_called()
        self.password_service.verify.assert_called_once_with(
            TEST_PASSWORD, "$argon2id$new"
        )

    @pytest.mark.asyncio
    async def test_login_wrong_password(self):
        """Wrong password is indistinguishable from an unknown email."""
        self.user_repo.find_by_email.return_value = _user()
        self.password_service.verify.return_value = False

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await self.service.login(TEST_EMAIL, "wrongpass")

        assert exc_info.value.message == "Invalid email or password"
        self.jwt_service.create_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_login_malformed_email(self):
        self.user_repo.find_by_email.side_effect = InvalidEmailError("bad")
        self.password_service.verify.return_value = False

        with pytest.raises(InvalidCredentialsError):
            await self.service.login("garbage", TEST_PASSWORD)

        self.password_service.verify.assert_called_once()

    @pytest.mark.asyncio
    async def test_unknown_email_reuses_placeholder_digest(self):
        """The placeholder digest is computed once per service."""
        self.user_repo.find_by_email.return_value = None
        self.password_service.verify.return_value = False

        for _ in range(2):
            with pytest.raises(InvalidCredentialsError):
                await self.service.authenticate("nobody@example.com", TEST_PASSWORD)

        self.password_service.hash.assert_called_once()
        assert self.password_service.verify.call_count == 2

    @pytest.mark.asyncio
    async def test_login_upgrades_outdated_digest(self):
        user = _user()
        self.user_repo.find_by_email.return_value = user
        self.password_service.verify.return_value = True
        self.password_service.needs_rehash.return_value = True

        logged_in = await self.service.authenticate(TEST_EMAIL, TEST_PASSWORD)

        self.password_service.needs_rehash.assert_called_once_with(TEST_HASH)
        self.password_service.hash.assert_called_once_with(TEST_PASSWORD)
        self.user_repo.save.assert_called_once_with(user)
        assert logged_in.password_hash == "$argon2id$new"

    @pytest.mark.asyncio
    async def test_wrong_password_skips_rehash(self):
        self.user_repo.find_by_email.return_value = _user()
        self.password_service.verify.return_value = False
        self.password_service.needs_rehash.return_value = True

        with pytest.raises(InvalidCredentialsError):
            await self.service.authenticate(TEST_EMAIL, "wrongpass")

        self.password_service.needs_rehash.assert_not_called()
        self.user_repo.save.assert_not_called()


class TestResolveToken(_ServiceFixture):
    """Tests for resolve and resolve_token."""

    @pytest.mark.asyncio
    async def test_resolve_token_returns_user(self):
        user = _user()
        self.jwt_service.verify_token.return_value = Mock(user_pid=user.pid)
        self.user_repo.find_by_pid.return_value = user

        assert await self.service.resolve_token("token") == user
        self.user_repo.find_by_pid.assert_called_once_with(user.pid)

    @pytest.mark.asyncio
    async def test_resolve_token_deleted_subject(self):
        """A valid token whose account is gone is rejected like a bad token."""
        self.jwt_service.verify_token.return_value = Mock(user_pid=uuid4())
        self.user_repo.find_by_pid.return_value = None

        with pytest.raises(InvalidTokenError):
            await self.service.resolve_token("token")

    @pytest.mark.asyncio
    async def test_resolve_token_invalid(self):
        self.jwt_service.verify_token.side_effect = InvalidTokenError()

        with pytest.raises(InvalidTokenError):
            await self.service.resolve_token("token")

        self.user_repo.find_by_pid.assert_not_called()

    @pytest.mark.asyncio
    async def test_resolve_unknown_pid(self):
        self.user_repo.find_by_pid.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.resolve(uuid4())


class TestUpdateAccount(_ServiceFixture):
    """Tests for update_account."""

    @pytest.mark.asyncio
    async def test_empty_changes_do_not_save(self):
        user = _user()
        self.user_repo.find_by_id.return_value = user

        result = await self.service.update_account(1, AccountChanges())

        assert result == user
        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_username_and_email(self):
        self.user_repo.find_by_id.return_value = _user()
        self.user_repo.find_by_email.return_value = None
        self.user_repo.find_by_username.return_value = None

        result = await self.service.update_account(
            1, AccountChanges(username="alice_02", email="New@Example.com")
        )

        assert result.username == "alice_02"
        assert result.email == "new@example.com"
        self.user_repo.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_to_own_values_is_not_a_conflict(self):
        user = _user()
        self.user_repo.find_by_id.return_value = user

        await self.service.update_account(
            1, AccountChanges(username=TEST_USERNAME, email=TEST_EMAIL)
        )

        self.user_repo.find_by_email.assert_not_called()
        self.user_repo.find_by_username.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_email_taken_by_other(self):
        self.user_repo.find_by_id.return_value = _user()
        self.user_repo.find_by_email.return_value = _user(2, "bob_0001", "bob@example.com")

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.update_account(1, AccountChanges(email="bob@example.com"))

        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_username_taken_by_other(self):
        self.user_repo.find_by_id.return_value = _user()
        self.user_repo.find_by_username.return_value = _user(2, "bob_0001", "bob@example.com")

        with pytest.raises(UsernameTakenError):
            await self.service.update_account(1, AccountChanges(username="bob_0001"))

    @pytest.mark.asyncio
    async def test_update_password_is_hashed(self):
        self.user_repo.find_by_id.return_value = _user()

        result = await self.service.update_account(1, AccountChanges(password="newpass12"))

        self.password_service.hash.assert_called_once_with("newpass12")
        assert result.password_hash == "$argon2id$new"

    @pytest.mark.asyncio
    async def test_update_unknown_user(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.update_account(99, AccountChanges(username="someone"))


class TestChangePasswordAndRemove(_ServiceFixture):
    """Tests for change_password and remove_account."""

    @pytest.mark.asyncio
    async def test_change_password_success(self):
        self.user_repo.find_by_id.return_value = _user()
        self.password_service.verify.return_value = True

        result = await self.service.change_password(1, TEST_PASSWORD, "newpass12")

        assert result.password_hash == "$argon2id$new"
        self.user_repo.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_change_password_wrong_current(self):
        self.user_repo.find_by_id.return_value = _user()
        self.password_service.verify.return_value = False

        with pytest.raises(InvalidCredentialsError, match="Current password"):
            await self.service.change_password(1, "wrongpass", "newpass12")

        self.user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_remove_account_returns_snapshot(self):
        user = _user()
        self.user_repo.find_by_id.return_value = user

        removed = await self.service.remove_account(1)

        assert removed == user
        self.user_repo.delete.assert_called_once_with(1)

    @pytest.mark.asyncio
    async def test_remove_unknown_account(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.remove_account(99)

        self.user_repo.delete.assert_not_called()
