"""Profile API routes."""

from datetime import datetime, timezone
from uuid import UUID

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import ProfileDetailResponse, ProfileResponse, ProfileUpsert
from core.exceptions import AuthorizationError
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.profile import ProfileUpdate
from domain.services.profile_service import ProfileService
from infrastructure.auth.provider import TokenUser

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _require_self(profile_id: UUID, user: TokenUser) -> None:
    if profile_id != user.id:
        raise AuthorizationError("You can only access your own profile")


@router.get(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses={
        403: {"model": ErrorResponse, "description": "Not your profile"},
        404: {"model": ErrorResponse, "description": "No profile saved yet"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: UUID,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the caller's stored profile. 404 means it has never been saved."""
    _require_self(profile_id, user)
    profile = await service.get_by_id(profile_id)
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.put(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Create or replace a profile",
    responses={
        403: {"model": ErrorResponse, "description": "Not your profile"},
        409: {"model": ErrorResponse, "description": "Email already used by another profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upsert_profile(
    request: Request,
    profile_id: UUID,
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Insert the caller's profile, or replace every field of it. Last write wins."""
    _require_self(profile_id, user)
    update = ProfileUpdate(
        email=user.email,
        updated_at=body.updated_at or datetime.now(timezone.utc),
        full_name=body.full_name,
        date_of_birth=body.date_of_birth,
        user_role=body.user_role,
        gender=body.gender,
        avatar_url=body.avatar_url,
    )
    profile = await service.upsert(profile_id, update)
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))
