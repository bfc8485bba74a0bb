"""Account lifecycle value objects."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID


class AccountState(StrEnum):
    """Where a user's account stands with respect to deletion.

    ``NO_PROFILE`` is also the state left behind when account deletion
    removed the profile but not the user record.
    """

    ACTIVE = "active"
    NO_PROFILE = "no_profile"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class AccountDeletionResult:
    """Outcome of the two-step account deletion."""

    user_id: UUID
    profile_deleted: bool
    user_deleted: bool
    state: AccountState = AccountState.DELETED
