"""
FastAPI router for Profile endpoints.

Paths are kept compatible with the business-card frontend.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from common.utils import message_response
from profile_store.dependencies import get_profile_service
from profile_store.schemas import ProfileCreateRequest, ProfileUpdateRequest
from profile_store.services import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["profiles"])

ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]


@router.post("/api/save-profile", status_code=status.HTTP_201_CREATED)
async def save_profile(body: ProfileCreateRequest, profile_service: ProfileServiceDep):
    """Create a profile and return its profile key."""
    profile_key = await profile_service.create_profile(body.to_document())
    return message_response("Profile saved successfully", profileKey=profile_key)


@router.get("/")
async def list_profiles(profile_service: ProfileServiceDep):
    """Get all profiles."""
    return await profile_service.list_profiles()


@router.get("/profile/{profile_name}")
async def get_profile_by_name(profile_name: str, profile_service: ProfileServiceDep):
    """Get a profile by profile key (alias route used by shared links)."""
    return await profile_service.get_profile(profile_name)


@router.put("/api/update-profile/{profile_key}")
async def update_profile(
    profile_key: str,
    body: ProfileUpdateRequest,
    profile_service: ProfileServiceDep,
):
    """
    Replace a profile.

    Every field is overwritten; fields left out of the body are removed.
    """
    profile = await profile_service.update_profile(profile_key, body.to_document())
    return message_response("Profile updated successfully", profile=profile)


@router.delete("/api/profiles/{profile_key}")
async def delete_profile(profile_key: str, profile_service: ProfileServiceDep):
    """Delete a profile."""
    await profile_service.delete_profile(profile_key)
    return message_response("Profile deleted successfully")


# Registered last: matches any single path segment
@router.get("/{profile_key}")
async def get_profile(profile_key: str, profile_service: ProfileServiceDep):
    """Get a profile by profile key."""
    return await profile_service.get_profile(profile_key)
