"""Partial update of an account's profile."""

from dataclasses import dataclass

from tasker.domain.shared.partial import UNSET, Unset


@dataclass(frozen=True)
class AccountChanges:
    """Fields to change on an account.

    Fields left at ``UNSET`` keep their current value. ``password`` is the new
    plaintext; it is hashed before it reaches the aggregate.
    """

    username: str | Unset = UNSET
    email: str | Unset = UNSET
    password: str | Unset = UNSET

    def is_empty(self) -> bool:
        return all(
            value is UNSET for value in (self.username, self.email, self.password)
        )
