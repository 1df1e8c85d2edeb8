"""
Profile service for business-card profile storage.

Wraps the profiles collection: create, list, and find/update/delete by slug.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from common.utils.exceptions import (
    BadRequestException,
    InternalServerException,
    NotFoundException,
)
from profile_store.services.slug import profile_key_filter, slugify

logger = logging.getLogger(__name__)

# Oldest match wins when several profiles share a slug
_FIRST_MATCH = [("_id", ASCENDING)]


def _utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


def _replacement_slug(existing: Dict[str, Any], profile_key: str, data: Dict[str, Any]) -> str:
    name = data.get("name")
    if name and name.strip():
        return slugify(name)
    return existing.get("slug") or slugify(profile_key)


def serialize_profile(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a stored profile into a JSON-ready dict."""
    profile = dict(doc)
    if "_id" in profile:
        profile["_id"] = str(profile["_id"])
    for field in ("createdAt", "updatedAt"):
        if isinstance(profile.get(field), datetime):
            profile[field] = profile[field].isoformat()
    return profile


class ProfileService:
    """
    Manages profile documents.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize ProfileService.

        Args:
            collection: Motor collection holding profile documents
        """
        self._collection = collection

    async def ensure_indexes(self) -> None:
        """Create the (non-unique) slug index."""
        await self._collection.create_index("slug")

    async def create_profile(self, data: Dict[str, Any]) -> str:
        """
        Store a new profile.

        No duplicate check is made; two profiles may share a slug.

        Args:
            data: Profile fields; must contain ``name``

        Returns:
            The profile key (slug) derived from the name

        Raises:
            BadRequestException: The store rejected the write
        """
        profile_key = slugify(data["name"])
        now = _utcnow()
        doc = {**data, "slug": profile_key, "createdAt": now, "updatedAt": now}

        try:
            result = await self._collection.insert_one(doc)
        except PyMongoError as e:
            logger.warning(f"Failed to save profile {profile_key}: {e}")
            raise BadRequestException(message=str(e), code="PROFILE_SAVE_FAILED")

        logger.info(f"Saved profile {profile_key} ({result.inserted_id})")
        return profile_key

    async def list_profiles(self) -> List[Dict[str, Any]]:
        """
        Get every stored profile, unfiltered and unpaginated.

        Raises:
            InternalServerException: Storage failure
        """
        try:
            docs = await self._collection.find({}).to_list(length=None)
        except PyMongoError as e:
            raise InternalServerException(message=str(e), code="DATABASE_ERROR")

        return [serialize_profile(doc) for doc in docs]

    async def get_profile(self, profile_key: str) -> Dict[str, Any]:
        """
        Get the first profile matching a slug.

        Raises:
            NotFoundException: No profile matches
            InternalServerException: Storage failure
        """
        logger.debug(f"Looking up profile {profile_key}")
        try:
            doc = await self._collection.find_one(
                profile_key_filter(profile_key),
                sort=_FIRST_MATCH,
            )
        except PyMongoError as e:
            raise InternalServerException(message=str(e), code="DATABASE_ERROR")

        if not doc:
            raise NotFoundException(message="Profile not found", code="PROFILE_NOT_FOUND")

        return serialize_profile(doc)

    async def update_profile(self, profile_key: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Replace every field of the profile matching a slug.

        Fields absent from ``data`` are removed from the stored profile.
        ``createdAt`` is kept. The slug follows the new name; without a name
        the profile keeps the slug it was found by.

        Returns:
            The profile as stored after the update

        Raises:
            NotFoundException: No profile matches
            InternalServerException: Storage failure
        """
        try:
            existing = await self._collection.find_one(
                profile_key_filter(profile_key),
                sort=_FIRST_MATCH,
            )
            if not existing:
                raise NotFoundException(message="Profile not found", code="PROFILE_NOT_FOUND")

            replacement = {
                **data,
                "slug": _replacement_slug(existing, profile_key, data),
                "createdAt": existing.get("createdAt", _utcnow()),
                "updatedAt": _utcnow(),
            }
            updated = await self._collection.find_one_and_replace(
                {"_id": existing["_id"]},
                replacement,
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise InternalServerException(message=str(e), code="DATABASE_ERROR")

        # Deleted between the lookup and the replace
        if not updated:
            raise NotFoundException(message="Profile not found", code="PROFILE_NOT_FOUND")

        logger.info(f"Updated profile {profile_key} -> {replacement['slug']}")
        return serialize_profile(updated)

    async def delete_profile(self, profile_key: str) -> None:
        """
        Delete the first profile matching a slug.

        Raises:
            NotFoundException: No profile matches
            InternalServerException: Storage failure
        """
        try:
            deleted = await self._collection.find_one_and_delete(
                profile_key_filter(profile_key),
                sort=_FIRST_MATCH,
            )
        except PyMongoError as e:
            raise InternalServerException(message=str(e), code="DATABASE_ERROR")

        if not deleted:
            raise NotFoundException(message="Profile not found", code="PROFILE_NOT_FOUND")

        logger.info(f"Deleted profile {profile_key} ({deleted['_id']})")
