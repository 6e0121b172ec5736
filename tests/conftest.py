"""
Test configuration and fixtures for pytest.

The API runs in-process through httpx's ASGI transport; MongoDB is replaced
by an in-memory collection exposing the motor methods the repositories use.
"""
import copy
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from employee_api.config import Settings
from employee_api.main import create_app
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.services.employee_service import EmployeeService
from employee_api.utils.dependencies import get_employee_repository

API_PREFIX = "/api/employee/v1"


class MockCursor:
    """Mock motor cursor."""

    def __init__(self, data: List[Dict[str, Any]]):
        self.data = data

    def sort(self, key_or_list, direction=None):
        keys = key_or_list if isinstance(key_or_list, list) else [(key_or_list, direction or 1)]
        # Stable sorts applied from the least significant key
        for field, order in reversed(keys):
            self.data.sort(key=lambda doc: doc.get(field), reverse=order < 0)
        return self

    async def to_list(self, length=None):
        return list(self.data)


class MockCollection:
    """Mock motor collection backed by a list of documents."""

    def __init__(self, name: str = "employees", unique_fields=("email",)):
        self.name = name
        self.data: List[Dict[str, Any]] = []
        self.unique_fields = unique_fields
        self.indexes: List[Any] = []
        self.fail_with: Optional[Exception] = None

    def _check_failure(self):
        if self.fail_with is not None:
            raise self.fail_with

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(key) == value for key, value in (query or {}).items())

    @staticmethod
    def _apply_projection(doc, projection):
        doc = copy.deepcopy(doc)
        if not projection:
            return doc
        if all(not include for include in projection.values()):
            return {k: v for k, v in doc.items() if k not in projection}
        return {k: v for k, v in doc.items() if projection.get(k) or k == "_id"}

    async def create_index(self, keys, **kwargs):
        self._check_failure()
        self.indexes.append((keys, kwargs))
        return kwargs.get("name", "index")

    async def insert_one(self, doc):
        self._check_failure()
        for field in self.unique_fields:
            if field in doc and any(d.get(field) == doc[field] for d in self.data):
                raise DuplicateKeyError(f"E11000 duplicate key error collection: {self.name} index: {field}_1")
        doc.setdefault("_id", ObjectId())
        self.data.append(copy.deepcopy(doc))
        return MagicMock(inserted_id=doc["_id"])

    async def find_one(self, query, projection=None):
        self._check_failure()
        for doc in self.data:
            if self._matches(doc, query):
                return self._apply_projection(doc, projection)
        return None

    def find(self, query=None, projection=None):
        self._check_failure()
        return MockCursor([
            self._apply_projection(doc, projection)
            for doc in self.data
            if self._matches(doc, query)
        ])

    async def count_documents(self, query, limit=None):
        self._check_failure()
        count = sum(1 for doc in self.data if self._matches(doc, query))
        return min(count, limit) if limit else count

    async def update_one(self, query, update):
        self._check_failure()
        for doc in self.data:
            if self._matches(doc, query):
                changes = update.get("$set", {})
                modified = any(doc.get(k) != v for k, v in changes.items())
                doc.update(copy.deepcopy(changes))
                return MagicMock(matched_count=1, modified_count=int(modified))
        return MagicMock(matched_count=0, modified_count=0)

    async def delete_one(self, query):
        self._check_failure()
        for i, doc in enumerate(self.data):
            if self._matches(doc, query):
                del self.data[i]
                return MagicMock(deleted_count=1)
        return MagicMock(deleted_count=0)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def settings():
    return Settings(
        MONGO_URI="mongodb://127.0.0.1:27017/employee-test",
        LOG_LEVEL="DEBUG",
        PHONE_REGION="IN"
    )


@pytest.fixture
def collection():
    return MockCollection()


@pytest.fixture
def repository(collection):
    return EmployeeRepository(collection)


@pytest.fixture
def service(repository):
    return EmployeeService(repository, phone_region="IN")


@pytest.fixture
def app(settings, repository):
    application = create_app(settings)
    application.dependency_overrides[get_employee_repository] = lambda: repository
    return application


@pytest_asyncio.fixture
async def client(app):
    """Async HTTP client for API testing."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test", timeout=30.0) as client:
        yield client


@pytest.fixture
def api_url():
    """Return the employees collection URL."""
    return f"{API_PREFIX}/employees"
