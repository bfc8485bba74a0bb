"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile, ProfileView


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        ...

    async def get_view_by_user(self, user_id: UUID) -> ProfileView | None:
        """Get a user's profile joined with the user's name and avatar."""
        ...

    async def list_views(self) -> list[ProfileView]:
        """Get all profiles joined with their users' name and avatar."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile; ProfileNotFoundError if it is gone."""
        ...

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete a user's profile and return whether one existed."""
        ...
