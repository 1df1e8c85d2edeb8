"""
Pydantic schemas for request validation.
"""

from profile_store.schemas.profile import (
    ProfileCreateRequest,
    ProfileUpdateRequest,
    SocialLinks,
)

__all__ = [
    "ProfileCreateRequest",
    "ProfileUpdateRequest",
    "SocialLinks",
]
