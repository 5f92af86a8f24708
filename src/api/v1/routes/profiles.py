"""Profile API routes."""

from typing import Any

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_github_client, get_profile_service
from api.v1.schemas.common import ErrorResponse, MessageResponse
from api.v1.schemas.profile import (
    EducationCreate,
    ExperienceCreate,
    OwnerResponse,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
    ProfileUpsert,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.profile import Education, Experience, OwnerSummary, Profile
from domain.normalization import build_profile_fields
from domain.services.profile_service import ProfileService
from infrastructure.github.client import GitHubClient

router = APIRouter(prefix="/profile", tags=["profiles"])


def _to_response(profile: Profile, owner: OwnerSummary | None = None) -> ProfileResponse:
    response = ProfileResponse.model_validate(profile)
    response.user = OwnerResponse.model_validate(owner) if owner else None
    return response


@router.get(
    "/me",
    response_model=ProfileDetailResponse,
    summary="Get the caller's profile",
    responses={404: {"model": ErrorResponse, "description": "No profile for this user"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the authenticated user's profile with their name and avatar."""
    result = await service.get_for_user(user.id)
    return ProfileDetailResponse(data=_to_response(result.profile, result.owner))


@router.post(
    "",
    response_model=ProfileDetailResponse,
    summary="Create or update the caller's profile",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upsert_profile(
    request: Request,
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Create the profile on first call; afterwards replace its fields.

    Experience and education are not touched by this endpoint.
    """
    fields = build_profile_fields(
        status=body.status,
        skills=body.skills,
        company=body.company,
        website=body.website,
        location=body.location,
        bio=body.bio,
        github_username=body.github_username,
        social={
            "youtube": body.youtube,
            "twitter": body.twitter,
            "facebook": body.facebook,
            "instagram": body.instagram,
            "linkedin": body.linkedin,
        },
    )
    profile = await service.upsert(user.id, fields)
    return ProfileDetailResponse(data=_to_response(profile))


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List all profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get every profile. Public."""
    results = await service.list_all()
    return ProfileListResponse(
        data=[_to_response(item.profile, item.owner) for item in results]
    )


@router.get(
    "/user/{user_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile by user ID",
    responses={404: {"model": ErrorResponse, "description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile_by_user(
    request: Request,
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a user's profile. Public."""
    result = await service.get_by_user_id(user_id)
    return ProfileDetailResponse(data=_to_response(result.profile, result.owner))


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete the caller's account, profile and posts",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_account(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Delete posts, then profile, then the account itself. Irreversible."""
    await service.delete_account(user.id)
    return MessageResponse(message="User deleted")


@router.put(
    "/experience",
    response_model=ProfileDetailResponse,
    summary="Add an experience entry",
    responses={404: {"model": ErrorResponse, "description": "No profile for this user"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_experience(
    request: Request,
    body: ExperienceCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an experience entry at the top of the list."""
    entry = Experience(
        title=body.title,
        company=body.company,
        location=body.location,
        from_date=body.from_date,
        to_date=body.to_date,
        current=body.current,
        description=body.description,
    )
    profile = await service.add_experience(user.id, entry)
    return ProfileDetailResponse(data=_to_response(profile))


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileDetailResponse,
    summary="Remove an experience entry",
    responses={404: {"model": ErrorResponse, "description": "No profile for this user"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_experience(
    request: Request,
    exp_id: str,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an experience entry. Unknown ids leave the profile unchanged."""
    profile = await service.remove_experience(user.id, exp_id)
    return ProfileDetailResponse(data=_to_response(profile))


@router.put(
    "/education",
    response_model=ProfileDetailResponse,
    summary="Add an education entry",
    responses={404: {"model": ErrorResponse, "description": "No profile for this user"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_education(
    request: Request,
    body: EducationCreate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Add an education entry at the top of the list."""
    entry = Education(
        school=body.school,
        degree=body.degree,
        field_of_study=body.field_of_study,
        from_date=body.from_date,
        to_date=body.to_date,
        current=body.current,
        description=body.description,
    )
    profile = await service.add_education(user.id, entry)
    return ProfileDetailResponse(data=_to_response(profile))


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileDetailResponse,
    summary="Remove an education entry",
    responses={404: {"model": ErrorResponse, "description": "No profile for this user"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_education(
    request: Request,
    edu_id: str,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Remove an education entry. Unknown ids leave the profile unchanged."""
    profile = await service.remove_education(user.id, edu_id)
    return ProfileDetailResponse(data=_to_response(profile))


@router.get(
    "/github/{username}",
    summary="Get a user's GitHub repositories",
    responses={404: {"model": ErrorResponse, "description": "No Github profile found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_github_repos(
    request: Request,
    username: str,
    client: GitHubClient = Depends(get_github_client),
) -> Any:
    """Get the five oldest public repositories, exactly as GitHub returns them."""
    return await client.get_repositories(username)
