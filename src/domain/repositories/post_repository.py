"""Post repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.post import Post


class IPostRepository(Protocol):
    """Repository interface for Post documents."""

    async def get(self, id: UUID) -> Post | None:
        """Get a post (with likes and comments) by ID."""
        ...

    async def list_newest_first(self) -> list[Post]:
        """Get all posts ordered by creation time, newest first."""
        ...

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        ...

    async def save_embedded(self, post: Post, expected_version: int | None = None) -> Post:
        """Write the post's likes and comments and bump its version.

        When ``expected_version`` is given the write only applies if the
        stored version still matches; otherwise ConcurrentModificationError
        is raised. Without it, a post deleted since it was read raises
        PostNotFoundError.
        """
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a post and return success status."""
        ...
