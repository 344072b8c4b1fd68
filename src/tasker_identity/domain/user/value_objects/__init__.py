"""Value objects for the user domain."""

from tasker_identity.domain.user.value_objects.account_changes import AccountChanges
from tasker_identity.domain.user.value_objects.email import Email

__all__ = [
    "AccountChanges",
    "Email",
]
