"""Profile API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service
from api.v1.schemas.profile import (
    ProfileCreate,
    ProfileDetailResponse,
    ProfileLookupResponse,
    ProfileResponse,
    ProfileUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post(
    "",
    response_model=ProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create your profile",
    responses={
        201: {"description": "Profile created successfully"},
        400: {"description": "Username or skills out of bounds"},
        409: {"description": "You already have a profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    body: ProfileCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Create a profile owned by the authenticated caller. One per identity."""
    profile = await service.create(
        owner=user.id,
        username=body.username,
        skills=body.skills,
        location=body.location,
        bio=body.bio,
    )
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.put(
    "/me",
    response_model=ProfileDetailResponse,
    summary="Update your profile",
    responses={
        200: {"description": "Profile updated successfully"},
        400: {"description": "Skills out of bounds"},
        404: {"description": "You have no profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    body: ProfileUpdate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Replace skills, location and bio. The username cannot be changed."""
    profile = await service.update(
        owner=user.id,
        skills=body.skills,
        location=body.location,
        bio=body.bio,
    )
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.delete(
    "/me",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete your profile",
    responses={
        204: {"description": "Profile deleted successfully"},
        404: {"description": "You have no profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> None:
    """Delete the authenticated caller's profile."""
    await service.delete(user.id)
    return None


@router.get(
    "/{identity:path}",
    response_model=ProfileLookupResponse,
    summary="Look up a profile",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    identity: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileLookupResponse:
    """Get the profile owned by any identity. No authentication required."""
    profile = await service.get(identity)
    if profile is None:
        return ProfileLookupResponse(data=None)
    return ProfileLookupResponse(data=ProfileResponse.model_validate(profile))
