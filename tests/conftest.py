"""Shared test fixtures for profile store tests."""

import re

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from pymongo import ReturnDocument
from bson import ObjectId
from fastapi.testclient import TestClient

from api import create_app
from profile_store.config import Settings
from profile_store.dependencies import get_profile_service
from profile_store.services import ProfileService


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. Async methods like find_one, insert_one,
    # find_one_and_delete etc. stay as AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def profile_service(mock_collection):
    return ProfileService(mock_collection)


@pytest.fixture
def sample_profile_payload():
    return {
        "name": "Jane Doe",
        "jobTitle": "Designer",
        "profileImage": "https://cdn.example.com/jane.png",
        "headerImage": "https://cdn.example.com/jane-header.png",
        "phone": "+46701234567",
        "email": "jane@example.com",
        "socialLinks": {
            "website": "https://janedoe.example.com",
            "instagram": "https://instagram.com/janedoe",
        },
    }


@pytest.fixture
def sample_profile_doc(sample_profile_payload):
    now = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)
    return {
        "_id": ObjectId(),
        **sample_profile_payload,
        "slug": "jane-doe",
        "createdAt": now,
        "updatedAt": now,
    }


@pytest.fixture
def test_settings():
    return Settings(
        MONGODB_URI="mongodb://localhost:27017/profiles_test",
        FRONTEND_URL="https://digcard.netlify.app",
        ENVIRONMENT="testing",
    )


@pytest.fixture
def mock_profile_service():
    return AsyncMock(spec=ProfileService)


@pytest.fixture
def app(test_settings, mock_profile_service):
    # Lifespan is not run: TestClient is used without a context manager
    app = create_app(test_settings)
    app.dependency_overrides[get_profile_service] = lambda: mock_profile_service
    return app


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


# ─────────────────────────────────────────────────────────────────
# Stateful collection
# ─────────────────────────────────────────────────────────────────


def _matches(doc, query):
    """Evaluate the subset of MongoDB query operators the service uses."""
    for field, condition in query.items():
        if field == "$or":
            if not any(_matches(doc, sub) for sub in condition):
                return False
        elif isinstance(condition, dict) and "$exists" in condition:
            if (field in doc) != condition["$exists"]:
                return False
        elif isinstance(condition, dict) and "$regex" in condition:
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            value = doc.get(field)
            if not isinstance(value, str) or not re.search(condition["$regex"], value, flags):
                return False
        elif doc.get(field) != condition:
            return False
    return True


class InMemoryProfileCollection:
    """Keeps documents in insertion order, which is also ``_id`` order."""

    def __init__(self):
        self.docs = []
        self.create_index = AsyncMock()

    def _first(self, query):
        return next((doc for doc in self.docs if _matches(doc, query)), None)

    async def insert_one(self, doc):
        stored = {"_id": ObjectId(), **doc}
        self.docs.append(stored)
        return MagicMock(inserted_id=stored["_id"])

    def find(self, query):
        cursor = MagicMock()
        cursor.to_list = AsyncMock(
            return_value=[dict(doc) for doc in self.docs if _matches(doc, query)]
        )
        return cursor

    async def find_one(self, query, sort=None):
        doc = self._first(query)
        return dict(doc) if doc else None

    async def find_one_and_replace(self, query, replacement, return_document=ReturnDocument.BEFORE):
        doc = self._first(query)
        if doc is None:
            return None
        before = dict(doc)
        new_doc = {"_id": doc["_id"], **replacement}
        self.docs[self.docs.index(doc)] = new_doc
        return dict(new_doc) if return_document == ReturnDocument.AFTER else before

    async def find_one_and_delete(self, query, sort=None):
        doc = self._first(query)
        if doc is None:
            return None
        self.docs.remove(doc)
        return doc


@pytest.fixture
def memory_collection():
    return InMemoryProfileCollection()


@pytest.fixture
def memory_service(memory_collection):
    return ProfileService(memory_collection)


@pytest.fixture
def store_client(test_settings, memory_service):
    """TestClient backed by a real ProfileService over an in-memory collection."""
    app = create_app(test_settings)
    app.dependency_overrides[get_profile_service] = lambda: memory_service
    return TestClient(app, raise_server_exceptions=False)
