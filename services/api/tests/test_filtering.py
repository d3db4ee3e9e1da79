"""Tests for the catalog filter/sort pipeline."""

import pytest

from istore.models import Product
from istore.services.catalog import CATALOG
from istore.services.filtering import (
    FilterConfig,
    SortMode,
    build_catalog_view,
    color_stage,
    filter_catalog,
    normalize_storages,
    search_stage,
    storage_stage,
)
from istore.services.pricing import min_price


def _ids(items) -> list[str]:
    return [item.product.id for item in items]


class TestTwoProductCatalog:
    """A: 128/256, black/blue, 699. B: 64/128, red, 499."""

    @pytest.fixture
    def catalog(self, product_a: Product, product_b: Product) -> list[Product]:
        return [product_a, product_b]

    def test_storage_filter(self, catalog):
        assert _ids(filter_catalog(catalog, FilterConfig(storages=frozenset({256})))) == ["phone-a"]

    def test_storage_filter_accepts_text(self, catalog):
        assert _ids(filter_catalog(catalog, FilterConfig(storages=frozenset({"256"})))) == ["phone-a"]
        assert _ids(filter_catalog(catalog, FilterConfig(storages=frozenset({"64", 1024})))) == [
            "phone-b"
        ]

    def test_color_filter(self, catalog):
        assert _ids(filter_catalog(catalog, FilterConfig(colors=frozenset({"red"})))) == ["phone-b"]

    def test_max_price(self, catalog):
        # Both products' cheapest tiers (128 / 64) carry no surcharge.
        assert _ids(filter_catalog(catalog, FilterConfig(max_price=500))) == ["phone-b"]

    def test_max_price_is_inclusive(self, catalog):
        assert _ids(filter_catalog(catalog, FilterConfig(max_price=499))) == ["phone-b"]
        assert filter_catalog(catalog, FilterConfig(max_price=498)) == []

    def test_search_with_price_sort(self, catalog):
        config = FilterConfig(search_text="iphone", sort_mode=SortMode.PRICE_ASC)
        result = filter_catalog(catalog, config)
        assert _ids(result) == ["phone-b", "phone-a"]
        assert [item.min_price for item in result] == [499, 699]

    def test_price_desc(self, catalog):
        config = FilterConfig(sort_mode=SortMode.PRICE_DESC)
        assert _ids(filter_catalog(catalog, config)) == ["phone-a", "phone-b"]

    def test_catalog_order_preserved(self, catalog, product_a, product_b):
        assert _ids(filter_catalog([product_b, product_a], FilterConfig())) == ["phone-b", "phone-a"]

    def test_search_matches_any_field(self, catalog):
        assert _ids(filter_catalog(catalog, FilterConfig(search_text="SMALL"))) == ["phone-b"]
        assert _ids(filter_catalog(catalog, FilterConfig(search_text="flagship"))) == ["phone-a"]

    def test_blank_search_is_ignored(self, catalog):
        assert _ids(filter_catalog(catalog, FilterConfig(search_text="   "))) == ["phone-a", "phone-b"]

    def test_fully_filtered_out(self, catalog):
        config = FilterConfig(colors=frozenset({"red"}), storages=frozenset({256}))
        assert filter_catalog(catalog, config) == []


def test_min_price_annotation_matches_pricing():
    for item in filter_catalog(CATALOG, FilterConfig(max_price=10_000)):
        assert item.min_price == min_price(item.product)


def test_empty_catalog():
    assert filter_catalog([], FilterConfig(search_text="anything")) == []


def test_stable_sort_keeps_catalog_order_on_ties():
    twins = [
        Product(id=f"twin-{i}", name=f"Twin {i}", base_price=500, storages=(128,), colors=("black",))
        for i in range(3)
    ]
    config = FilterConfig(sort_mode=SortMode.PRICE_DESC)
    assert _ids(filter_catalog(twins, config)) == ["twin-0", "twin-1", "twin-2"]


def test_default_catalog_view():
    view = build_catalog_view(CATALOG, FilterConfig())
    assert view.total_count == 4
    assert view.match_count == 4
    assert view.filters_active is False
    assert _ids(view.products) == ["iphone-15-pro", "iphone-15", "iphone-14", "iphone-se"]


def test_empty_view_is_distinct_from_unfiltered():
    view = build_catalog_view(CATALOG, FilterConfig(search_text="galaxy"))
    assert view.is_empty
    assert view.filters_active is True
    assert view.total_count == 4


class TestStages:
    """Each stage can be exercised on its own."""

    def test_disabled_stages(self):
        assert search_stage("  ") is None
        assert color_stage([]) is None
        assert storage_stage([]) is None

    def test_storage_stage_with_garbage_matches_nothing(self, product_a):
        stage = storage_stage(["lots"])
        assert stage is not None
        assert filter_catalog([product_a], FilterConfig(storages=frozenset({"lots"}))) == []

    def test_normalize_storages(self):
        assert normalize_storages([128, "256", " 512 ", "abc", True]) == frozenset({128, 256, 512})

    def test_integral_floats_are_storage_tiers(self):
        assert normalize_storages([256.0, "512.0", 256.5, "64.5"]) == frozenset({256, 512})
        assert _ids(filter_catalog(CATALOG, FilterConfig(storages=frozenset({1024.0})))) == ["iphone-15-pro"]

    def test_search_matches_text_as_typed(self):
        # Surrounding spaces only decide whether the stage is enabled.
        assert filter_catalog(CATALOG, FilterConfig(search_text="se ")) == []
        assert _ids(filter_catalog(CATALOG, FilterConfig(search_text=" se"))) == ["iphone-se"]


class TestFilterConfig:
    def test_relevance_alias(self):
        assert SortMode("relevance") is SortMode.CATALOG_ORDER
        assert SortMode("price-asc") is SortMode.PRICE_ASC

    def test_unknown_sort_mode(self):
        with pytest.raises(ValueError):
            SortMode("rating")

    def test_is_active(self):
        assert not FilterConfig().is_active
        assert not FilterConfig(search_text=" ").is_active
        assert FilterConfig(max_price=900).is_active
        assert FilterConfig(sort_mode=SortMode.PRICE_ASC).is_active
        assert FilterConfig(colors=frozenset({"red"})).is_active

    def test_cleared(self):
        assert FilterConfig.cleared() == FilterConfig()
        assert FilterConfig.cleared().max_price == 1400


def test_storefront_filtered_catalog(storefront):
    result = storefront.get_filtered_catalog(FilterConfig(storages=frozenset({"1024"})))
    assert _ids(result) == ["iphone-15-pro"]
    assert _ids(storefront.get_filtered_catalog()) == [p.id for p in CATALOG]
