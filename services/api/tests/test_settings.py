"""Tests for settings parsing."""

from istore.settings import Settings


def test_defaults():
    settings = Settings(redis_url="")
    assert settings.storage_backend == "memory"
    assert settings.cart_storage_key == "istore_cart"
    assert settings.theme_storage_key == "istore_theme"
    assert settings.default_max_price == 1400


def test_redis_backend_selected_by_url():
    assert Settings(redis_url="redis://localhost:6379/0").storage_backend == "redis"


def test_cors_origins_comma_separated():
    settings = Settings(CORS_ORIGINS="https://a.com, http://localhost:5173")
    assert settings.cors_origins == ["https://a.com", "http://localhost:5173"]


def test_cors_origins_json(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", '["https://a.com"]')
    assert Settings().cors_origins == ["https://a.com"]
