"""Pricing service.

Price of a configured product:
    price = base_price + surcharge(storage)

Surcharges come from a static modifier table. Unknown tiers cost nothing extra,
so `compute_price` is total: any storage value is accepted, including tiers a
given product does not offer.
"""

from istore.models import Product
from istore.settings import get_settings

# Storage tier (GB) -> surcharge added to the base price
PRICE_MODIFIERS: dict[int, int] = {
    64: 0,
    128: 0,
    256: 120,
    512: 320,
    1024: 620,
}


def storage_surcharge(storage: int) -> int:
    """Surcharge for a storage tier (0 when the tier is not in the table)."""
    return PRICE_MODIFIERS.get(storage, 0)


def compute_price(base_price: int, storage: int) -> int:
    """Calculate the unit price for a base price and storage tier.

    Args:
        base_price: Price at the lowest tier (non-negative).
        storage: Storage tier in GB.

    Returns:
        base_price plus the tier surcharge.
    """
    return base_price + storage_surcharge(storage)


def min_price(product: Product) -> int:
    """Lowest achievable price across every storage tier the product offers."""
    return min(compute_price(product.base_price, s) for s in product.storages)


def tier_prices(product: Product) -> dict[int, int]:
    """Price for each storage tier of a product, in the product's tier order."""
    return {s: compute_price(product.base_price, s) for s in product.storages}


def format_price(amount: int | float) -> str:
    """Format an amount in the display currency without decimals.

    Example: 1119 -> "US$1,119"
    """
    currency = get_settings().currency.upper()
    symbol = {"USD": "US$", "EUR": "€", "GBP": "£"}.get(currency, f"{currency} ")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(round(amount)):,}"
