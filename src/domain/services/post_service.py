"""Post service layer: posts and their embedded likes and comments."""

from typing import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    AlreadyLikedError,
    AuthorizationError,
    CommentNotFoundError,
    NotYetLikedError,
    PostNotFoundError,
    ValidationError,
)
from core.identifiers import parse_identifier
from domain.entities.post import Comment, Like, Post
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.user_directory import UserDirectory

logger = structlog.get_logger()


class PostService:
    """Service layer for Post business logic.

    Every like/comment change is a read followed by a conditional write of the
    same post. With ``strict_writes`` the write is version-checked so a racing
    request fails with ConcurrentModificationError instead of overwriting.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        user_directory: UserDirectory,
        strict_writes: bool = False,
    ) -> None:
        self._uow_factory = uow_factory
        self._users = user_directory
        self._strict_writes = strict_writes

    async def create_post(self, author_id: UUID, text: str) -> Post:
        """Create a post stamped with the author's current name and avatar."""
        _require_text(text)
        author = await self._users.resolve_identity(author_id)

        post = Post(
            user_id=author_id,
            text=text,
            name=author.name,
            avatar=author.avatar,
        )

        async with self._uow_factory() as uow:
            created = await uow.posts.create(post)
            await uow.commit()

        logger.info("post_created", post_id=str(created.id), user_id=str(author_id))
        return created

    async def list_posts(self) -> list[Post]:
        """Get all posts, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.list_newest_first()  # type: ignore[no-any-return]

    async def get_post(self, post_id: UUID | str) -> Post:
        async with self._uow_factory() as uow:
            return await self._get_post_or_raise(uow, post_id)

    async def delete_post(self, post_id: UUID | str, requester_id: UUID) -> None:
        """Delete a post. Only its author may do so."""
        async with self._uow_factory() as uow:
            post = await self._get_post_or_raise(uow, post_id)
            if post.user_id != requester_id:
                raise AuthorizationError()

            await uow.posts.delete(post.id)
            await uow.commit()

        logger.info("post_deleted", post_id=str(post.id), user_id=str(requester_id))

    async def like_post(self, post_id: UUID | str, user_id: UUID) -> list[Like]:
        """Add the user's like to the front of the post's likes."""
        async with self._uow_factory() as uow:
            post = await self._get_post_or_raise(uow, post_id)
            if post.is_liked_by(user_id):
                raise AlreadyLikedError(str(post.id))

            read_version = post.version
            post.add_like(user_id)
            await uow.posts.save_embedded(post, self._expected(read_version))
            await uow.commit()

        logger.info("post_liked", post_id=str(post.id), user_id=str(user_id))
        return post.likes

    async def unlike_post(self, post_id: UUID | str, user_id: UUID) -> list[Like]:
        """Remove the like that belongs to ``user_id``."""
        async with self._uow_factory() as uow:
            post = await self._get_post_or_raise(uow, post_id)

            read_version = post.version
            if post.remove_like_by(user_id) is None:
                raise NotYetLikedError(str(post.id))

            await uow.posts.save_embedded(post, self._expected(read_version))
            await uow.commit()

        logger.info("post_unliked", post_id=str(post.id), user_id=str(user_id))
        return post.likes

    async def add_comment(
        self, post_id: UUID | str, author_id: UUID, text: str
    ) -> list[Comment]:
        """Add a comment to the front of the post's comments."""
        _require_text(text)
        author = await self._users.resolve_identity(author_id)

        async with self._uow_factory() as uow:
            post = await self._get_post_or_raise(uow, post_id)

            read_version = post.version
            comment = Comment(
                user_id=author_id,
                text=text,
                name=author.name,
                avatar=author.avatar,
            )
            post.add_comment(comment)
            await uow.posts.save_embedded(post, self._expected(read_version))
            await uow.commit()

        logger.info(
            "comment_added",
            post_id=str(post.id),
            comment_id=str(comment.id),
            user_id=str(author_id),
        )
        return post.comments

    async def remove_comment(
        self, post_id: UUID | str, comment_id: UUID | str, requester_id: UUID
    ) -> list[Comment]:
        """Remove one comment by id. Only the comment's author may do so."""
        async with self._uow_factory() as uow:
            post = await self._get_post_or_raise(uow, post_id)

            parsed_comment_id = parse_identifier(comment_id)
            comment = post.find_comment(parsed_comment_id) if parsed_comment_id else None
            if comment is None:
                raise CommentNotFoundError(str(comment_id))
            if comment.user_id != requester_id:
                raise AuthorizationError()

            read_version = post.version
            post.remove_comment(comment.id)
            await uow.posts.save_embedded(post, self._expected(read_version))
            await uow.commit()

        logger.info(
            "comment_removed",
            post_id=str(post.id),
            comment_id=str(comment.id),
            user_id=str(requester_id),
        )
        return post.comments

    def _expected(self, read_version: int) -> int | None:
        return read_version if self._strict_writes else None

    async def _get_post_or_raise(self, uow: IUnitOfWork, post_id: UUID | str) -> Post:
        """Load a post; malformed ids are reported as not found."""
        parsed = parse_identifier(post_id)
        post = await uow.posts.get(parsed) if parsed else None
        if not post:
            raise PostNotFoundError(str(post_id))
        return post


def _require_text(text: str | None) -> None:
    if not text or not text.strip():
        raise ValidationError("text", "Text is required")
