"""Tests for the static catalog and product validation."""

import pytest

from istore.models import Product
from istore.services.catalog import (
    CATALOG,
    COLOR_PALETTE,
    STORAGE_TIERS,
    build_catalog,
    get_product,
)


def test_catalog_declaration_order():
    assert [p.id for p in CATALOG] == ["iphone-15-pro", "iphone-15", "iphone-14", "iphone-se"]


def test_every_catalog_color_is_in_palette():
    for product in CATALOG:
        assert set(product.colors) <= set(COLOR_PALETTE)


def test_storage_tiers():
    assert STORAGE_TIERS == (64, 128, 256, 512, 1024)


def test_get_product():
    product = get_product("iphone-se")
    assert product is not None
    assert product.base_price == 499
    assert get_product("nokia-3310") is None


def test_products_are_immutable():
    product = CATALOG[0]
    with pytest.raises(AttributeError):
        product.base_price = 1  # type: ignore[misc]
    with pytest.raises(TypeError):
        CATALOG[0] = product  # type: ignore[index]


class TestProductValidation:
    """Invalid product definitions are rejected when built."""

    def test_empty_storages(self):
        with pytest.raises(ValueError):
            Product(id="x", name="X", base_price=1, storages=(), colors=("black",))

    def test_duplicate_storages(self):
        with pytest.raises(ValueError):
            Product(id="x", name="X", base_price=1, storages=(128, 128), colors=("black",))

    def test_non_positive_storage(self):
        with pytest.raises(ValueError):
            Product(id="x", name="X", base_price=1, storages=(0,), colors=("black",))

    def test_negative_base_price(self):
        with pytest.raises(ValueError):
            Product(id="x", name="X", base_price=-1, storages=(64,), colors=("black",))

    def test_rating_out_of_range(self):
        with pytest.raises(ValueError):
            Product(id="x", name="X", base_price=1, storages=(64,), colors=("black",), rating=5.5)

    def test_empty_colors(self):
        with pytest.raises(ValueError):
            Product(id="x", name="X", base_price=1, storages=(64,), colors=())

    def test_color_outside_palette(self):
        product = Product(id="x", name="X", base_price=1, storages=(64,), colors=("purple",))
        with pytest.raises(ValueError):
            build_catalog([product])

    def test_duplicate_ids(self):
        product = Product(id="x", name="X", base_price=1, storages=(64,), colors=("black",))
        with pytest.raises(ValueError):
            build_catalog([product, product])


def test_matches_text_is_case_insensitive():
    product = get_product("iphone-15-pro")
    assert product is not None
    assert product.matches_text("TITANIUM")
    assert product.matches_text("a17")
    assert not product.matches_text("android")
