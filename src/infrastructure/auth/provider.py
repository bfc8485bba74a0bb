"""Authentication provider protocol."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


@dataclass
class TokenUser:
    """The verified caller. ``id`` is the only field the services trust."""

    id: UUID
    email: str
    display_name: Optional[str] = None
    role: Optional[str] = None


class IAuthProvider(Protocol):
    """Verifies bearer tokens issued by the identity service."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """Return the caller for a valid token, None otherwise."""
        ...
