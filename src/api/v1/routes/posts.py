"""Post API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_post_service
from api.v1.schemas.common import error_responses
from api.v1.schemas.post import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    LikeListResponse,
    LikeResponse,
    PostCreate,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
)
from core.rate_limit import limiter
from domain.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post(
    "",
    response_model=PostDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
    responses=error_responses(404, 422),
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create_post(
    request: Request,
    body: PostCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Publish a post under the caller's current name and avatar."""
    post = await service.create_post(user.id, body.text)
    return PostDetailResponse(data=PostResponse.model_validate(post))


@router.get(
    "",
    response_model=PostListResponse,
    summary="List all posts",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_posts(
    request: Request,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostListResponse:
    """Get every post, newest first."""
    posts = await service.list_posts()
    return PostListResponse(data=[PostResponse.model_validate(post) for post in posts])


@router.get(
    "/{post_id}",
    response_model=PostDetailResponse,
    summary="Get a post",
    responses=error_responses(404),
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Get a single post with its likes and comments."""
    post = await service.get_post(post_id)
    return PostDetailResponse(data=PostResponse.model_validate(post))


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a post",
    responses=error_responses(403, 404),
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> None:
    """Delete a post. Only its author may delete it."""
    await service.delete_post(post_id, user.id)
    return None


@router.put(
    "/{post_id}/like",
    response_model=LikeListResponse,
    summary="Like a post",
    responses=error_responses(404, 409),
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def like_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> LikeListResponse:
    """Like a post once; a second like is rejected with 409."""
    likes = await service.like_post(post_id, user.id)
    return LikeListResponse(data=[LikeResponse.model_validate(like) for like in likes])


@router.put(
    "/{post_id}/unlike",
    response_model=LikeListResponse,
    summary="Remove a like from a post",
    responses=error_responses(404, 409),
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def unlike_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> LikeListResponse:
    """Remove the caller's like; 409 if the caller has not liked the post."""
    likes = await service.unlike_post(post_id, user.id)
    return LikeListResponse(data=[LikeResponse.model_validate(like) for like in likes])


@router.post(
    "/{post_id}/comments",
    response_model=CommentListResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a post",
    responses=error_responses(404, 422),
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def add_comment(
    request: Request,
    post_id: str,
    body: CommentCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> CommentListResponse:
    """Add a comment; the newest comment comes first in the response."""
    comments = await service.add_comment(post_id, user.id, body.text)
    return CommentListResponse(
        data=[CommentResponse.model_validate(comment) for comment in comments]
    )


@router.delete(
    "/{post_id}/comments/{comment_id}",
    response_model=CommentListResponse,
    summary="Delete a comment",
    responses=error_responses(403, 404),
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def remove_comment(
    request: Request,
    post_id: str,
    comment_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> CommentListResponse:
    """Delete one of the caller's own comments."""
    comments = await service.remove_comment(post_id, comment_id, user.id)
    return CommentListResponse(
        data=[CommentResponse.model_validate(comment) for comment in comments]
    )
