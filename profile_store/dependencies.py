"""
FastAPI dependencies for the profile store.

Services live on ``app.state`` (set up by the application lifespan) and are
handed to route handlers through ``Depends``.
"""

from fastapi import FastAPI, Request

from common.database import MongoDB
from common.utils.exceptions import InternalServerException
from profile_store.services.profile_service import ProfileService


def init_services(app: FastAPI, database: MongoDB, collection_name: str) -> ProfileService:
    """Build the services for a connected database and attach them to the app."""
    profile_service = ProfileService(database.get_collection(collection_name))
    app.state.profile_service = profile_service
    return profile_service


def get_profile_service(request: Request) -> ProfileService:
    """Get the ProfileService for the running application."""
    service = getattr(request.app.state, "profile_service", None)
    if service is None:
        raise InternalServerException(
            message="Profile service not initialized",
            code="SERVICE_NOT_INITIALIZED",
        )
    return service
