"""
Profile store API routers.
"""

from profile_store.routers.profile import router as profile_router

__all__ = [
    "profile_router",
]
