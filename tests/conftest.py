"""Shared test fixtures"""
import os
import re

# Configure the service before any app module reads its settings
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("TELEMETRY_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.clients.auth_client import AuthVerifier
from app.core.errors import AuthError, MalformedIdError, StoreFault
from app.dependencies.auth import get_auth_verifier
from app.dependencies.product import get_product_repository
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from main import app

VALID_TOKEN = "Bearer valid-token"
TEST_USER_ID = "user-123"


class StubAuthVerifier(AuthVerifier):
    """Accepts VALID_TOKEN only and records every verification attempt"""

    def __init__(self):
        self.calls = []

    async def verify(self, authorization: Optional[str], host: Optional[str]) -> str:
        self.calls.append((authorization, host))
        if authorization != VALID_TOKEN:
            raise AuthError()
        return TEST_USER_ID


class InMemoryProductRepository:
    """ProductRepository double keeping documents in a dict keyed by ID"""

    def __init__(self):
        self.docs: Dict[str, Dict[str, Any]] = {}

    @staticmethod
    def _check_id(product_id: str) -> None:
        if not ObjectId.is_valid(product_id):
            raise MalformedIdError(details={"product_id": product_id})

    def _response(self, product_id: str) -> ProductResponse:
        return ProductResponse(id=product_id, **self.docs[product_id])

    def _all(self) -> List[ProductResponse]:
        return [self._response(product_id) for product_id in self.docs]

    async def create(self, product_data: ProductCreate) -> ProductResponse:
        product_id = str(ObjectId())
        self.docs[product_id] = product_data.model_dump(exclude_unset=True)
        return self._response(product_id)

    async def get_by_id(self, product_id: str) -> Optional[ProductResponse]:
        self._check_id(product_id)
        return self._response(product_id) if product_id in self.docs else None

    async def list_all(self) -> List[ProductResponse]:
        return self._all()

    async def search_by_name(self, pattern: str) -> List[ProductResponse]:
        try:
            regex = re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise StoreFault(details={"operation": "find"}) from e
        return [p for p in self._all() if p.name is not None and regex.search(p.name)]

    async def find_by_category(self, category: str) -> List[ProductResponse]:
        return [p for p in self._all() if p.category == category]

    async def list_sorted(self, field: str) -> List[ProductResponse]:
        def sort_key(product):
            # Missing values sort first, as in MongoDB
            value = getattr(product, field)
            return (0, 0) if value is None else (1, value)

        return sorted(self._all(), key=sort_key)

    async def find_by_ids(self, product_ids: List[str]) -> List[ProductResponse]:
        for product_id in product_ids:
            self._check_id(product_id)
        return [self._response(i) for i in self.docs if i in product_ids]

    async def distinct(self, field: str) -> List[Any]:
        values = []
        for doc in self.docs.values():
            if field in doc and doc[field] not in values:
                values.append(doc[field])
        return values

    async def replace(self, product_id: str, product_data: ProductUpdate) -> Optional[ProductResponse]:
        self._check_id(product_id)
        if product_id not in self.docs:
            return None
        self.docs[product_id] = product_data.model_dump(exclude_unset=True)
        return self._response(product_id)

    async def set_temporary_price(self, product_id: str, temporary_price: float) -> Optional[ProductResponse]:
        self._check_id(product_id)
        if product_id not in self.docs:
            return None
        self.docs[product_id]["temporaryPrice"] = temporary_price
        return self._response(product_id)

    async def delete(self, product_id: str) -> bool:
        self._check_id(product_id)
        return self.docs.pop(product_id, None) is not None


@pytest.fixture
def repository():
    """In-memory product store"""
    return InMemoryProductRepository()


@pytest.fixture
def auth_verifier():
    return StubAuthVerifier()


@pytest.fixture
def client(repository, auth_verifier):
    """TestClient wired to the in-memory store and the stub verifier"""
    app.dependency_overrides[get_product_repository] = lambda: repository
    app.dependency_overrides[get_auth_verifier] = lambda: auth_verifier
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": VALID_TOKEN}


@pytest.fixture
def sample_product():
    """Sample product payload"""
    return {
        "name": "Product1",
        "originalPrice": 1.1,
        "temporaryPrice": 1.1,
        "description": "description",
        "category": "category",
        "imgUrl": "https://example.com/product1.png",
    }


@pytest.fixture
def product_id():
    """Sample product ID for testing"""
    return "507f1f77bcf86cd799439011"
