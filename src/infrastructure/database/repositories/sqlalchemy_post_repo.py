"""SQLAlchemy implementation of Post repository."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ConcurrentModificationError, PostNotFoundError
from domain.entities.post import Comment, Like, Post
from infrastructure.database.models import PostModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository.

    Likes and comments are stored as JSON arrays on the post row, so a post
    and its embedded collections are always read and written together.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Post | None:
        """Get a post by ID."""
        stmt = select(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_newest_first(self) -> list[Post]:
        """Get all posts ordered by creation time, newest first."""
        stmt = select(PostModel).order_by(PostModel.created_at.desc(), PostModel.id.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = self._to_model(post)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def save_embedded(self, post: Post, expected_version: int | None = None) -> Post:
        """Write likes and comments, optionally guarded by the stored version."""
        stmt = update(PostModel).where(PostModel.id == post.id)
        if expected_version is not None:
            stmt = stmt.where(PostModel.version == expected_version)
        stmt = (
            stmt.values(
                likes=[_like_to_dict(like) for like in post.likes],
                comments=[_comment_to_dict(comment) for comment in post.comments],
                version=PostModel.version + 1,
            )
            .returning(PostModel.version)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        new_version = result.scalar_one_or_none()

        if new_version is None:
            if expected_version is not None:
                raise ConcurrentModificationError("post", str(post.id))
            raise PostNotFoundError(str(post.id))

        await self._session.flush()
        post.version = new_version
        return post

    async def delete(self, id: UUID) -> bool:
        """Delete a post together with its likes and comments."""
        stmt = select(PostModel).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            likes=[_like_from_dict(item) for item in model.likes or []],
            comments=[_comment_from_dict(item) for item in model.comments or []],
            created_at=model.created_at,
            version=model.version,
        )

    def _to_model(self, entity: Post) -> PostModel:
        """Convert domain entity to ORM model."""
        return PostModel(
            id=entity.id,
            user_id=entity.user_id,
            text=entity.text,
            name=entity.name,
            avatar=entity.avatar,
            likes=[_like_to_dict(like) for like in entity.likes],
            comments=[_comment_to_dict(comment) for comment in entity.comments],
            created_at=entity.created_at,
            version=entity.version,
        )


def _like_to_dict(like: Like) -> dict[str, Any]:
    return {"id": str(like.id), "user_id": str(like.user_id)}


def _like_from_dict(data: dict[str, Any]) -> Like:
    return Like(id=UUID(data["id"]), user_id=UUID(data["user_id"]))


def _comment_to_dict(comment: Comment) -> dict[str, Any]:
    return {
        "id": str(comment.id),
        "user_id": str(comment.user_id),
        "text": comment.text,
        "name": comment.name,
        "avatar": comment.avatar,
        "created_at": comment.created_at.isoformat(),
    }


def _comment_from_dict(data: dict[str, Any]) -> Comment:
    return Comment(
        id=UUID(data["id"]),
        user_id=UUID(data["user_id"]),
        text=data["text"],
        name=data["name"],
        avatar=data.get("avatar"),
        created_at=datetime.fromisoformat(data["created_at"]),
    )
