"""Shared fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from istore.deps import get_storefront
from istore.main import app
from istore.models import Product
from istore.services.storefront import Storefront
from istore.stores import MemoryStore, StorageError


class FailingStore:
    """Store whose every operation fails, like an unreachable Redis."""

    def get(self, key: str) -> str | None:
        raise StorageError("store down")

    def set(self, key: str, value: str) -> None:
        raise StorageError("store down")

    def delete(self, key: str) -> None:
        raise StorageError("store down")


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def storefront(memory_store: MemoryStore) -> Storefront:
    return Storefront(memory_store).restore()


@pytest.fixture
def product_a() -> Product:
    return Product(
        id="phone-a",
        name="iPhone A",
        base_price=699,
        storages=(128, 256),
        colors=("black", "blue"),
        tagline="The big one",
        description="Flagship iPhone",
    )


@pytest.fixture
def product_b() -> Product:
    return Product(
        id="phone-b",
        name="iPhone B",
        base_price=499,
        storages=(64, 128),
        colors=("red",),
        tagline="The small one",
        description="Compact iPhone",
    )


@pytest.fixture
async def client(storefront: Storefront):
    """Create test client bound to an in-memory storefront."""
    app.dependency_overrides[get_storefront] = lambda: storefront
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()
