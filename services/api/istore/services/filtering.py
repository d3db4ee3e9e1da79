"""Catalog filter/sort pipeline.

Pipeline (order is fixed; each filter stage is an independent predicate):
1. Annotate every product with min_price (cheapest storage tier)
2. Search text (substring of name, tagline or description, case-insensitive)
3. Colors (product offers at least one selected color)
4. Storages (product offers at least one selected tier; "256" and 256 are equal)
5. Price ceiling (min_price <= max_price, always applied)
6. Sort (catalog-order keeps declaration order; price sorts are stable)

The pipeline keeps no state between calls and has no side effects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Sequence

from istore.models import Product
from istore.services.pricing import min_price
from istore.settings import get_settings


class SortMode(str, Enum):
    """Catalog view ordering."""

    CATALOG_ORDER = "catalog-order"  # declaration order, no scoring
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"

    @classmethod
    def _missing_(cls, value: object) -> "SortMode | None":
        # Older front-ends send "relevance" for declaration order.
        if isinstance(value, str) and value.strip().lower() == "relevance":
            return cls.CATALOG_ORDER
        return None


def _default_max_price() -> int:
    return get_settings().default_max_price


@dataclass(frozen=True)
class FilterConfig:
    """Complete set of user-chosen criteria applied to produce one catalog view."""

    search_text: str = ""
    colors: frozenset[str] = frozenset()
    storages: frozenset[int | str] = frozenset()
    max_price: int = field(default_factory=_default_max_price)
    sort_mode: SortMode = SortMode.CATALOG_ORDER

    @property
    def is_active(self) -> bool:
        """True when any criterion differs from the cleared configuration."""
        return bool(
            self.search_text.strip()
            or self.colors
            or self.storages
            or self.max_price != _default_max_price()
            or self.sort_mode is not SortMode.CATALOG_ORDER
        )

    @staticmethod
    def cleared() -> "FilterConfig":
        """Default configuration (no search, no color/storage filter, default ceiling)."""
        return FilterConfig()


@dataclass(frozen=True)
class PricedProduct:
    """Catalog product annotated with its minimum price."""

    product: Product
    min_price: int


@dataclass(frozen=True)
class CatalogView:
    """Result of one pipeline run.

    An empty `products` with `filters_active=True` means nothing matched;
    `filters_active=False` means the full catalog was requested.
    """

    products: list[PricedProduct]
    total_count: int
    filters_active: bool

    @property
    def match_count(self) -> int:
        return len(self.products)

    @property
    def is_empty(self) -> bool:
        return not self.products


Stage = Callable[[PricedProduct], bool]


def normalize_storages(values: Iterable[int | str]) -> frozenset[int]:
    """Normalize tier values to ints (256, "256" and 256.0 are equal); other entries are dropped."""
    tiers: set[int] = set()
    for value in values:
        if isinstance(value, bool):
            continue
        text = str(value).strip()
        try:
            tiers.add(int(text))
            continue
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            continue
        if number.is_integer():
            tiers.add(int(number))
    return frozenset(tiers)


def annotate(catalog: Iterable[Product]) -> list[PricedProduct]:
    """Stage 1: attach min_price to every product."""
    return [PricedProduct(product=p, min_price=min_price(p)) for p in catalog]


def search_stage(search_text: str) -> Stage | None:
    """Stage 2: text search. Blank queries disable the stage; others match as typed."""
    if not search_text.strip():
        return None
    return lambda item: item.product.matches_text(search_text)


def color_stage(colors: Iterable[str]) -> Stage | None:
    """Stage 3: color intersection. Returns None when no colors are selected."""
    wanted = frozenset(colors)
    if not wanted:
        return None
    return lambda item: not wanted.isdisjoint(item.product.colors)


def storage_stage(storages: Iterable[int | str]) -> Stage | None:
    """Stage 4: storage intersection. Returns None when no tiers are selected."""
    raw = list(storages)
    if not raw:
        return None
    wanted = normalize_storages(raw)
    return lambda item: not wanted.isdisjoint(item.product.storages)


def price_ceiling_stage(max_price: int) -> Stage:
    """Stage 5: drop products whose cheapest tier exceeds the ceiling."""
    return lambda item: item.min_price <= max_price


def sort_products(items: Sequence[PricedProduct], sort_mode: SortMode) -> list[PricedProduct]:
    """Stage 6: terminal sort. `sorted` is stable, so ties keep catalog order."""
    if sort_mode is SortMode.PRICE_ASC:
        return sorted(items, key=lambda item: item.min_price)
    if sort_mode is SortMode.PRICE_DESC:
        return sorted(items, key=lambda item: item.min_price, reverse=True)
    return list(items)


def build_stages(config: FilterConfig) -> list[Stage]:
    """Predicate stages enabled by a configuration, in pipeline order."""
    stages = [
        search_stage(config.search_text),
        color_stage(config.colors),
        storage_stage(config.storages),
        price_ceiling_stage(config.max_price),
    ]
    return [stage for stage in stages if stage is not None]


def filter_catalog(catalog: Iterable[Product], config: FilterConfig) -> list[PricedProduct]:
    """Run the full pipeline and return the ordered, filtered products.

    Args:
        catalog: Products in declaration order.
        config: Filter/sort configuration.

    Returns:
        Products annotated with min_price (possibly empty, never an error).
    """
    items = annotate(catalog)
    for stage in build_stages(config):
        items = [item for item in items if stage(item)]
    return sort_products(items, config.sort_mode)


def build_catalog_view(catalog: Sequence[Product], config: FilterConfig) -> CatalogView:
    """Run the pipeline and wrap the result with counts for the presentation layer."""
    return CatalogView(
        products=filter_catalog(catalog, config),
        total_count=len(catalog),
        filters_active=config.is_active,
    )
