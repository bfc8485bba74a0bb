"""Unit tests for domain entities."""

from uuid import uuid4

from domain.entities.post import Comment, Like, Post
from domain.entities.profile import ProfileInput, parse_skills


class TestParseSkills:
    def test_splits_and_trims(self):
        assert parse_skills("go, rust ,python") == ["go", "rust", "python"]

    def test_drops_empty_segments(self):
        assert parse_skills("go,, ,rust,") == ["go", "rust"]

    def test_keeps_order(self):
        assert parse_skills("z,a,m") == ["z", "a", "m"]


class TestProfileInput:
    def test_supplied_fields_skip_missing_and_empty(self):
        data = ProfileInput(status="Dev", company="", bio="hi")

        assert data.supplied_fields() == {"status": "Dev", "bio": "hi"}

    def test_supplied_social_only_known_platforms(self):
        data = ProfileInput(twitter="https://twitter.com/x", facebook="")

        assert data.supplied_social() == {"twitter": "https://twitter.com/x"}


class TestPostLikes:
    def test_add_like_prepends(self):
        post = Post(user_id=uuid4(), text="t", name="n")
        first, second = uuid4(), uuid4()

        post.add_like(first)
        post.add_like(second)

        assert [like.user_id for like in post.likes] == [second, first]

    def test_remove_like_matches_user_id(self):
        target = uuid4()
        a, b = Like(user_id=uuid4()), Like(user_id=uuid4())
        post = Post(user_id=uuid4(), text="t", name="n", likes=[a, Like(user_id=target), b])

        removed = post.remove_like_by(target)

        assert removed is not None and removed.user_id == target
        assert post.likes == [a, b]

    def test_remove_like_for_unknown_user_changes_nothing(self):
        a = Like(user_id=uuid4())
        post = Post(user_id=uuid4(), text="t", name="n", likes=[a])

        assert post.remove_like_by(uuid4()) is None
        assert post.likes == [a]


class TestPostComments:
    def test_remove_comment_matches_id(self):
        author = uuid4()
        first = Comment(user_id=author, text="one", name="A")
        second = Comment(user_id=author, text="two", name="A")
        post = Post(user_id=uuid4(), text="t", name="n", comments=[first, second])

        removed = post.remove_comment(second.id)

        assert removed is second
        assert post.comments == [first]

    def test_find_comment_unknown(self):
        post = Post(user_id=uuid4(), text="t", name="n")

        assert post.find_comment(uuid4()) is None
