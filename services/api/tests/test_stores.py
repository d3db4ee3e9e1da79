"""Tests for key-value stores and startup storage selection."""

import pytest
import redis

from istore import main as main_module
from istore.main import app, build_storage, lifespan
from istore.services.storefront import Storefront
from istore.settings import Settings
from istore.stores import MemoryStore, StorageError
from istore.stores.redis import RedisStore


class _BrokenRedis:
    """Stand-in client whose commands fail like a dropped connection."""

    def get(self, key):
        raise redis.ConnectionError("connection reset")

    def set(self, key, value):
        raise redis.ConnectionError("connection reset")

    def delete(self, key):
        raise redis.TimeoutError("timed out")


class _DictRedis:
    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value

    def delete(self, key):
        self.data.pop(key, None)


def test_memory_store_roundtrip():
    store = MemoryStore()
    assert store.get("k") is None
    store.set("k", "v")
    assert store.get("k") == "v"
    assert "k" in store
    store.delete("k")
    store.delete("k")
    assert store.get("k") is None


def test_redis_store_delegates_to_client():
    client = _DictRedis()
    store = RedisStore(client)  # type: ignore[arg-type]
    store.set("istore_theme", "dark")
    assert client.data == {"istore_theme": "dark"}
    assert store.get("istore_theme") == "dark"
    store.delete("istore_theme")
    assert store.get("istore_theme") is None


@pytest.mark.parametrize("op", ["get", "set", "delete"])
def test_redis_errors_become_storage_errors(op: str):
    store = RedisStore(_BrokenRedis())  # type: ignore[arg-type]
    args = {"get": ("k",), "set": ("k", "v"), "delete": ("k",)}[op]
    with pytest.raises(StorageError):
        getattr(store, op)(*args)


def test_storefront_survives_broken_redis(product_a):
    from istore.models import LineConfig

    storefront = Storefront(RedisStore(_BrokenRedis())).restore()  # type: ignore[arg-type]
    storefront.add_to_cart(product_a, LineConfig(storage=128, color="black", price=699))
    assert storefront.get_cart_item_count() == 1
    assert storefront.get_theme(prefers_dark=True).value == "dark"


def test_build_storage_defaults_to_memory():
    assert isinstance(build_storage(Settings(redis_url="")), MemoryStore)


def test_build_storage_falls_back_when_redis_unreachable(monkeypatch: pytest.MonkeyPatch):
    def fake_from_url(url: str) -> RedisStore:
        raise StorageError(f"Redis unavailable: {url}")

    monkeypatch.setattr(main_module.RedisStore, "from_url", staticmethod(fake_from_url))
    assert isinstance(build_storage(Settings(redis_url="redis://nowhere:6379/0")), MemoryStore)


async def test_lifespan_builds_and_restores_storefront(monkeypatch: pytest.MonkeyPatch):
    seeded = MemoryStore(
        {
            "istore_cart": '[{"productId": "iphone-se", "name": "iPhone SE", '
            '"storage": 64, "color": "red", "price": 499, "qty": 2}]'
        }
    )
    monkeypatch.setattr(main_module, "build_storage", lambda settings: seeded)

    async with lifespan(app):
        storefront = app.state.storefront
        assert isinstance(storefront, Storefront)
        assert storefront.get_cart_item_count() == 2
        assert storefront.get_cart_total() == 998
