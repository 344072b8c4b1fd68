"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from tasker_identity.domain.user import User


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_pid
        The stable public identifier of the user (the ``sub`` claim)
    issued_at
        Token issuance timestamp
    expires_at
        Token expiration timestamp
    """

    user_pid: UUID
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


@dataclass(frozen=True)
class PasswordResetIssued:
    """Result of a successful password reset request.

    ``token`` is the raw reset token. Only its digest is persisted, so this is
    the one and only place the caller can read it.
    """

    user: User
    token: str
    issued_at: datetime
    expires_at: datetime
