"""Static product catalog.

The catalog is defined once at import time and never mutated:
- COLOR_PALETTE: color id -> swatch hex used by the front-end
- CATALOG: products in declaration order (this order is the "catalog-order" sort)
- STORAGE_TIERS: every tier offered in the storage filter
"""

from types import MappingProxyType
from typing import Iterable

from istore.models import Product
from istore.services.pricing import PRICE_MODIFIERS

COLOR_PALETTE: MappingProxyType[str, str] = MappingProxyType(
    {
        "black": "#0f1115",
        "titanium": "#9a9fab",
        "blue": "#3a5da8",
        "white": "#f5f5f5",
        "red": "#d12b2b",
        "green": "#18a06f",
        "gold": "#c7a35a",
    }
)

STORAGE_TIERS: tuple[int, ...] = tuple(sorted(PRICE_MODIFIERS))


def build_catalog(products: Iterable[Product]) -> tuple[Product, ...]:
    """Validate products against the palette and freeze them into a tuple.

    Raises:
        ValueError: On duplicate ids or colors missing from the palette.
    """
    catalog = tuple(products)
    seen: set[str] = set()
    for product in catalog:
        if product.id in seen:
            raise ValueError(f"Duplicate product id: {product.id}")
        seen.add(product.id)
        unknown = [c for c in product.colors if c not in COLOR_PALETTE]
        if unknown:
            raise ValueError(f"{product.id}: colors not in palette: {unknown}")
    return catalog


CATALOG: tuple[Product, ...] = build_catalog(
    [
        Product(
            id="iphone-15-pro",
            name="iPhone 15 Pro",
            base_price=999,
            storages=(128, 256, 512, 1024),
            colors=("titanium", "black", "blue", "white"),
            tagline="Titanium. Pro performance.",
            description=(
                "The iPhone 15 Pro delivers incredible performance with the A17 chip "
                "and an ultralight titanium design."
            ),
            rating=4.9,
            featured=True,
        ),
        Product(
            id="iphone-15",
            name="iPhone 15",
            base_price=799,
            storages=(128, 256, 512),
            colors=("black", "blue", "green", "red", "white"),
            tagline="Color and performance for everyone.",
            description="Super Retina XDR display and an advanced camera for stunning photos and video.",
            rating=4.7,
            featured=True,
        ),
        Product(
            id="iphone-14",
            name="iPhone 14",
            base_price=699,
            storages=(128, 256, 512),
            colors=("black", "blue", "white", "red"),
            tagline="Classic and reliable.",
            description="Great battery life and solid everyday performance.",
            rating=4.6,
            featured=False,
        ),
        Product(
            id="iphone-se",
            name="iPhone SE",
            base_price=499,
            storages=(64, 128, 256),
            colors=("black", "white", "red"),
            tagline="Small on the outside, huge on the inside.",
            description="The most affordable iPhone, with a fast chip and the Home button you love.",
            rating=4.4,
            featured=False,
        ),
    ]
)

_BY_ID: MappingProxyType[str, Product] = MappingProxyType({p.id: p for p in CATALOG})


def get_product(product_id: str) -> Product | None:
    """Look up a catalog product by id."""
    return _BY_ID.get(product_id)
