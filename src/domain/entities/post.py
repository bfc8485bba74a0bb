"""Post domain entity with its embedded likes and comments."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Like:
    """A user's like on a post."""

    user_id: UUID
    id: UUID = field(default_factory=uuid4)


@dataclass
class Comment:
    """A comment on a post, with the author's display fields captured at creation."""

    user_id: UUID
    text: str
    name: str
    avatar: str | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a Post.

    Likes and comments are stored newest first and have no identity outside
    the post. ``version`` increases on every write of the embedded lists.
    """

    user_id: UUID
    text: str
    name: str
    avatar: str | None = None
    id: UUID = field(default_factory=uuid4)
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    version: int = 0

    def is_liked_by(self, user_id: UUID) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def add_like(self, user_id: UUID) -> Like:
        like = Like(user_id=user_id)
        self.likes.insert(0, like)
        return like

    def remove_like_by(self, user_id: UUID) -> Like | None:
        """Remove the like whose user_id equals ``user_id``."""
        like = next((lk for lk in self.likes if lk.user_id == user_id), None)
        if like is not None:
            self.likes = [lk for lk in self.likes if lk.id != like.id]
        return like

    def find_comment(self, comment_id: UUID) -> Comment | None:
        return next((c for c in self.comments if c.id == comment_id), None)

    def add_comment(self, comment: Comment) -> None:
        self.comments.insert(0, comment)

    def remove_comment(self, comment_id: UUID) -> Comment | None:
        """Remove the comment whose id equals ``comment_id``."""
        comment = self.find_comment(comment_id)
        if comment is not None:
            self.comments = [c for c in self.comments if c.id != comment_id]
        return comment
