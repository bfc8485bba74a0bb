"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class User:
    """Domain entity for an account (provisioned by the identity system)."""

    name: str
    email: str
    id: UUID = field(default_factory=uuid4)
    avatar: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def identity(self) -> "UserIdentity":
        return UserIdentity(id=self.id, name=self.name, avatar=self.avatar)


@dataclass(frozen=True, slots=True)
class UserIdentity:
    """Read-only value object: the display fields of a user."""

    id: UUID
    name: str
    avatar: str | None = None
