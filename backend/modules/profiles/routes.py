"""
Profile API endpoints.

/profiles/user addresses the caller's own profile; /profiles/{profile_id}
addresses any profile and is subject to the access policy.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from api.middleware.auth import get_current_user, get_optional_user
from api.dependencies import get_profile_service
from shared.models import AuthenticatedUser

from .interfaces import IProfileService
from .models import (
    Caste,
    Gender,
    MaritalStatus,
    Profile,
    ProfileCreate,
    ProfileFilters,
    ProfileUpdate,
)

router = APIRouter()


@router.get("", response_model=list[Profile])
async def list_profiles(
    name: Optional[str] = Query(default=None, description="Substring of the name"),
    age: Optional[str] = Query(default=None),
    gender: Optional[Gender] = Query(default=None),
    marital_status: Optional[MaritalStatus] = Query(default=None, alias="maritalStatus"),
    caste: Optional[Caste] = Query(default=None),
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IProfileService = Depends(get_profile_service),
) -> list[Profile]:
    """
    List profiles visible to the caller.

    Anonymous callers see public profiles; authenticated callers also see
    the profiles they own.
    """
    filters = ProfileFilters(
        name=name,
        age=age,
        gender=gender,
        marital_status=marital_status,
        caste=caste,
    )
    return await service.list_profiles(user, filters)


@router.get("/user", response_model=Profile)
async def get_own_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """Get the caller's own profile, creating it on first access."""
    return await service.get_own_profile(user)


@router.put("/user", response_model=Profile)
async def update_own_profile(
    changes: ProfileUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.update_own_profile(user, changes)


@router.post("", response_model=Profile, status_code=201)
async def create_profile(
    data: ProfileCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """Create a profile the caller manages for someone else."""
    return await service.create_profile(user, data)


@router.get("/{profile_id}", response_model=Profile)
async def get_profile(
    profile_id: str,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    """
    Get a profile.

    Private profiles are only returned to their owner; everyone else gets
    403 and may send an access request instead.
    """
    return await service.get_profile(user, profile_id)


@router.put("/{profile_id}", response_model=Profile)
async def update_profile(
    profile_id: str,
    changes: ProfileUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Profile:
    return await service.update_profile(user, profile_id, changes)


@router.delete("/{profile_id}", status_code=204)
async def delete_profile(
    profile_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> Response:
    await service.delete_profile(user, profile_id)
    return Response(status_code=204)
