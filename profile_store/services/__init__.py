"""
Profile store services.
"""

from profile_store.services.profile_service import ProfileService, serialize_profile
from profile_store.services.slug import slugify, profile_key_filter

__all__ = [
    "ProfileService",
    "serialize_profile",
    "slugify",
    "profile_key_filter",
]
