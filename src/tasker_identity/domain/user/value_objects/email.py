"""Email value object.

Provides normalized email addresses for user identification.
"""

import re
from dataclasses import dataclass

from tasker_identity.domain.user.exceptions import InvalidEmailError

# Structural check only; full syntax validation happens at the request boundary
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class Email:
    """Value object representing a normalized email address."""

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().lower()

        if not normalized:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)

        if not EMAIL_PATTERN.match(normalized):
            msg = "Invalid email format"
            raise InvalidEmailError(msg)

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
