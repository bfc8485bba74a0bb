"""Profile API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import error_responses
from api.v1.schemas.profile import (
    AccountDeletionResponse,
    AccountStateResponse,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
    ProfileUpsert,
    ProfileUserResponse,
)
from core.rate_limit import limiter
from domain.entities.profile import Profile, ProfileInput, ProfileView
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profiles"])


def _to_response(item: Profile | ProfileView) -> ProfileResponse:
    if isinstance(item, ProfileView):
        response = ProfileResponse.model_validate(item.profile)
        response.user = ProfileUserResponse.model_validate(item.user)
        return response
    return ProfileResponse.model_validate(item)


@router.get(
    "/me",
    response_model=ProfileDetailResponse,
    summary="Get the caller's profile",
    responses=error_responses(404),
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_own_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the authenticated user's profile with their name and avatar."""
    view = await service.get_own_profile(user.id)
    return ProfileDetailResponse(data=_to_response(view))


@router.get(
    "/me/state",
    response_model=AccountStateResponse,
    summary="Get the caller's account state",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_account_state(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> AccountStateResponse:
    """Report whether the caller has a profile, or is left without one."""
    state = await service.get_account_state(user.id)
    return AccountStateResponse(user_id=user.id, state=state)


@router.post(
    "",
    response_model=ProfileDetailResponse,
    summary="Create or update the caller's profile",
    responses=error_responses(404, 409, 422),
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def upsert_profile(
    request: Request,
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Create the profile on first call; afterwards update only the fields sent."""
    profile = await service.upsert_profile(user.id, ProfileInput(**body.model_dump()))
    return ProfileDetailResponse(data=_to_response(profile))


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List all profiles",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Public list of every profile."""
    views = await service.list_profiles()
    return ProfileListResponse(data=[_to_response(view) for view in views])


@router.get(
    "/user/{user_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile by user ID",
    responses=error_responses(404),
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile_by_user_id(
    request: Request,
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Public lookup of another user's profile."""
    view = await service.get_profile_by_user_id(user_id)
    return ProfileDetailResponse(data=_to_response(view))


@router.delete(
    "",
    response_model=AccountDeletionResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete the caller's profile and account",
    responses=error_responses(404),
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_account(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> AccountDeletionResponse:
    """Delete the profile, then the user record. Posts are kept."""
    result = await service.delete_account(user.id)
    return AccountDeletionResponse.model_validate(result)
