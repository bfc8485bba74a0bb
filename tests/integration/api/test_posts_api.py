"""Integration tests for Post API endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from infrastructure.auth.provider import TokenUser

POSTS = "/api/v1/posts"


async def _create_post(client: AsyncClient, text: str, **kwargs) -> dict:
    response = await client.post(POSTS, json={"text": text}, **kwargs)
    assert response.status_code == 201
    return response.json()["data"]


class TestCreatePost:
    """Tests for POST /api/v1/posts."""

    @pytest.mark.asyncio
    async def test_create_post_stamps_author(
        self, authenticated_client: AsyncClient, test_user: TokenUser
    ) -> None:
        data = await _create_post(authenticated_client, "hello")

        assert data["text"] == "hello"
        assert data["user_id"] == str(test_user.id)
        assert data["name"] == "Test User"
        assert data["avatar"] == f"https://avatars.example.com/{test_user.id}.png"
        assert data["likes"] == []
        assert data["comments"] == []

    @pytest.mark.asyncio
    async def test_create_post_requires_text(self, authenticated_client: AsyncClient) -> None:
        response = await authenticated_client.post(POSTS, json={"text": ""})

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_blank_text_is_rejected(self, authenticated_client: AsyncClient) -> None:
        response = await authenticated_client.post(POSTS, json={"text": "   "})

        assert response.status_code == 422
        assert response.json()["details"][0]["field"] == "text"

    @pytest.mark.asyncio
    async def test_requires_authentication(self, client: AsyncClient) -> None:
        response = await client.post(POSTS, json={"text": "hello"})

        assert response.status_code == 401


class TestReadPosts:
    """Tests for GET /api/v1/posts and GET /api/v1/posts/{id}."""

    @pytest.mark.asyncio
    async def test_list_is_newest_first(self, authenticated_client: AsyncClient) -> None:
        await _create_post(authenticated_client, "first")
        await _create_post(authenticated_client, "second")

        response = await authenticated_client.get(POSTS)

        assert response.status_code == 200
        assert [p["text"] for p in response.json()["data"]] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_get_post(self, authenticated_client: AsyncClient) -> None:
        created = await _create_post(authenticated_client, "hello")

        response = await authenticated_client.get(f"{POSTS}/{created['id']}")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == created["id"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("post_id", ["not-a-uuid", "12345", str(uuid4())])
    async def test_unknown_or_malformed_id_is_404(
        self, authenticated_client: AsyncClient, post_id: str
    ) -> None:
        response = await authenticated_client.get(f"{POSTS}/{post_id}")

        assert response.status_code == 404
        assert response.json()["error_code"] == "POST_NOT_FOUND"


class TestDeletePost:
    """Tests for DELETE /api/v1/posts/{id}."""

    @pytest.mark.asyncio
    async def test_author_deletes_post(self, authenticated_client: AsyncClient) -> None:
        created = await _create_post(authenticated_client, "bye")

        response = await authenticated_client.delete(f"{POSTS}/{created['id']}")
        assert response.status_code == 204

        response = await authenticated_client.get(f"{POSTS}/{created['id']}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_non_author_is_forbidden(
        self,
        authenticated_client: AsyncClient,
        other_auth_headers: dict[str, str],
    ) -> None:
        created = await _create_post(authenticated_client, "mine")

        response = await authenticated_client.delete(
            f"{POSTS}/{created['id']}", headers=other_auth_headers
        )

        assert response.status_code == 403
        assert response.json()["error_code"] == "FORBIDDEN"

        response = await authenticated_client.get(f"{POSTS}/{created['id']}")
        assert response.status_code == 200
        assert response.json()["data"]["text"] == "mine"


class TestLikes:
    """Tests for PUT /api/v1/posts/{id}/like and /unlike."""

    @pytest.mark.asyncio
    async def test_like_lifecycle(
        self,
        authenticated_client: AsyncClient,
        other_user: TokenUser,
        other_auth_headers: dict[str, str],
    ) -> None:
        created = await _create_post(authenticated_client, "hello")
        listed = (await authenticated_client.get(POSTS)).json()["data"]
        assert listed[0]["id"] == created["id"]

        like_url = f"{POSTS}/{created['id']}/like"
        unlike_url = f"{POSTS}/{created['id']}/unlike"

        response = await authenticated_client.put(like_url, headers=other_auth_headers)
        assert response.status_code == 200
        likes = response.json()["data"]
        assert len(likes) == 1
        assert likes[0]["user_id"] == str(other_user.id)

        response = await authenticated_client.put(like_url, headers=other_auth_headers)
        assert response.status_code == 409
        assert response.json()["error_code"] == "ALREADY_LIKED"
        stored = (await authenticated_client.get(f"{POSTS}/{created['id']}")).json()["data"]
        assert len(stored["likes"]) == 1

        response = await authenticated_client.put(unlike_url, headers=other_auth_headers)
        assert response.status_code == 200
        assert response.json()["data"] == []

    @pytest.mark.asyncio
    async def test_unlike_without_like_conflicts(
        self, authenticated_client: AsyncClient
    ) -> None:
        created = await _create_post(authenticated_client, "hello")

        response = await authenticated_client.put(f"{POSTS}/{created['id']}/unlike")

        assert response.status_code == 409
        assert response.json()["error_code"] == "NOT_YET_LIKED"

    @pytest.mark.asyncio
    async def test_newest_like_first(
        self,
        authenticated_client: AsyncClient,
        test_user: TokenUser,
        other_auth_headers: dict[str, str],
    ) -> None:
        created = await _create_post(authenticated_client, "hello")
        like_url = f"{POSTS}/{created['id']}/like"

        await authenticated_client.put(like_url, headers=other_auth_headers)
        response = await authenticated_client.put(like_url)

        assert response.json()["data"][0]["user_id"] == str(test_user.id)

    @pytest.mark.asyncio
    async def test_like_unknown_post(self, authenticated_client: AsyncClient) -> None:
        response = await authenticated_client.put(f"{POSTS}/{uuid4()}/like")

        assert response.status_code == 404


class TestComments:
    """Tests for comment endpoints."""

    @pytest.mark.asyncio
    async def test_comments_from_two_authors(
        self,
        authenticated_client: AsyncClient,
        test_user: TokenUser,
        other_user: TokenUser,
        other_auth_headers: dict[str, str],
    ) -> None:
        created = await _create_post(authenticated_client, "hello")
        comments_url = f"{POSTS}/{created['id']}/comments"

        response = await authenticated_client.post(comments_url, json={"text": "first"})
        assert response.status_code == 201
        mine = response.json()["data"][0]
        assert mine["name"] == "Test User"

        response = await authenticated_client.post(
            comments_url, json={"text": "second"}, headers=other_auth_headers
        )
        comments = response.json()["data"]
        assert [c["text"] for c in comments] == ["second", "first"]
        theirs = comments[0]
        assert theirs["user_id"] == str(other_user.id)

        response = await authenticated_client.delete(f"{comments_url}/{theirs['id']}")
        assert response.status_code == 403

        response = await authenticated_client.delete(f"{comments_url}/{mine['id']}")
        assert response.status_code == 200
        remaining = response.json()["data"]
        assert [c["id"] for c in remaining] == [theirs["id"]]

    @pytest.mark.asyncio
    async def test_comment_requires_text(self, authenticated_client: AsyncClient) -> None:
        created = await _create_post(authenticated_client, "hello")

        response = await authenticated_client.post(
            f"{POSTS}/{created['id']}/comments", json={"text": ""}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_remove_unknown_comment(self, authenticated_client: AsyncClient) -> None:
        created = await _create_post(authenticated_client, "hello")

        response = await authenticated_client.delete(
            f"{POSTS}/{created['id']}/comments/{uuid4()}"
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "COMMENT_NOT_FOUND"
