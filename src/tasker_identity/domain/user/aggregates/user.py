"""User aggregate for identity concerns only."""

from datetime import datetime, timedelta
from typing import Union
from uuid import UUID, uuid4

from tasker.domain.shared.time import ensure_tz_aware, utc_now
from tasker_identity.domain.user.value_objects.email import Email


class User:
    """
    User aggregate root.

    ``id`` is the storage-assigned sequential key and stays ``None`` until the
    account is first persisted. ``pid`` is the public identifier used in
    tokens and URLs.
    """

    def __init__(  # noqa: PLR0913
        self,
        username: str,
        email: Union[str, Email],
        password_hash: str,
        id: int | None = None,
        pid: UUID | None = None,
        reset_token: str | None = None,
        reset_token_sent_at: datetime | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id
        self._pid = pid or uuid4()
        self._username = username.strip()
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._reset_token = reset_token
        self._reset_token_sent_at = reset_token_sent_at
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def pid(self) -> UUID:
        return self._pid

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def reset_token(self) -> str | None:
        return self._reset_token

    @property
    def reset_token_sent_at(self) -> datetime | None:
        return self._reset_token_sent_at

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_username(self, username: str) -> None:
        self._username = username.strip()
        self._touch()

    def change_email(self, email: Union[str, Email]) -> None:
        self._email = email if isinstance(email, Email) else Email(email)
        self._touch()

    def change_password(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._touch()

    def issue_reset_token(self, token_digest: str, issued_at: datetime) -> None:
        """Store a reset token digest, replacing any earlier one."""
        self._reset_token = token_digest
        self._reset_token_sent_at = issued_at
        self._touch()

    def complete_password_reset(self, password_hash: str) -> None:
        """Set the new password and consume the reset token."""
        self._password_hash = password_hash
        self._reset_token = None
        self._reset_token_sent_at = None
        self._touch()

    def reset_token_expired(self, now: datetime, ttl: timedelta) -> bool:
        if self._reset_token is None or self._reset_token_sent_at is None:
            return True
        return ensure_tz_aware(now) >= ensure_tz_aware(self._reset_token_sent_at) + ttl

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        username: str,
        email: Union[str, Email],
        password_hash: str,
    ) -> "User":
        return cls(username=username, email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        pid: UUID,
        username: str,
        email: Union[str, Email],
        password_hash: str,
        reset_token: str | None,
        reset_token_sent_at: datetime | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            pid=pid,
            username=username,
            email=email,
            password_hash=password_hash,
            reset_token=reset_token,
            reset_token_sent_at=reset_token_sent_at,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._pid == other._pid

    def __hash__(self) -> int:
        return hash(self._pid)

    def __repr__(self) -> str:
        return f"User(pid={self._pid}, username={self._username})"
