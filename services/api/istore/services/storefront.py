"""Storefront facade.

Single collaborator object handed to the presentation layer (and to the HTTP
routes). It owns the cart and theme state and delegates to the pure catalog,
pricing and filtering services.

Lifecycle: build -> restore() -> mutate* (each mutation persists).
"""

from collections.abc import Sequence
import random

from istore.models import CartLine, LineConfig, Product
from istore.services.cart import DEFAULT_CART_KEY, CartStore
from istore.services.catalog import CATALOG
from istore.services.checkout import ContactInfo, OrderConfirmation, confirm_order
from istore.services.filtering import (
    CatalogView,
    FilterConfig,
    PricedProduct,
    build_catalog_view,
    filter_catalog,
)
from istore.services.pricing import compute_price
from istore.services.theme import DEFAULT_THEME_KEY, Theme, ThemePreference
from istore.stores import KeyValueStore


class Storefront:
    """Catalog, cart and theme operations exposed to the UI."""

    def __init__(
        self,
        storage: KeyValueStore,
        *,
        catalog: Sequence[Product] = CATALOG,
        cart_key: str = DEFAULT_CART_KEY,
        theme_key: str = DEFAULT_THEME_KEY,
    ) -> None:
        self.storage = storage
        self.catalog = tuple(catalog)
        self.cart = CartStore(storage, cart_key)
        self.theme = ThemePreference(storage, theme_key)

    def restore(self) -> "Storefront":
        """Load persisted state (empty cart on any failure)."""
        self.cart.restore()
        return self

    # Catalog
    def get_filtered_catalog(self, config: FilterConfig | None = None) -> list[PricedProduct]:
        return filter_catalog(self.catalog, config or FilterConfig())

    def get_catalog_view(self, config: FilterConfig | None = None) -> CatalogView:
        return build_catalog_view(self.catalog, config or FilterConfig())

    def get_product(self, product_id: str) -> Product | None:
        return next((p for p in self.catalog if p.id == product_id), None)

    @staticmethod
    def compute_price(base_price: int, storage: int) -> int:
        return compute_price(base_price, storage)

    # Cart
    def add_to_cart(self, product: Product, config: LineConfig) -> CartLine:
        return self.cart.add(product, config)

    def update_cart_qty(self, key: tuple[str, int, str], qty: int) -> CartLine | None:
        return self.cart.update_qty(key, qty)

    def remove_from_cart(self, key: tuple[str, int, str]) -> bool:
        return self.cart.remove(key)

    def clear_cart(self) -> None:
        self.cart.clear()

    def get_cart_items(self) -> list[CartLine]:
        return self.cart.items()

    def get_cart_total(self) -> int:
        return self.cart.total()

    def get_cart_item_count(self) -> int:
        return self.cart.item_count()

    # Checkout
    def checkout(self, contact: ContactInfo, *, rng: random.Random | None = None) -> OrderConfirmation:
        return confirm_order(self.cart, contact, rng=rng)

    # Theme
    def get_theme(self, prefers_dark: bool = False) -> Theme:
        return self.theme.get(prefers_dark)

    def set_theme(self, theme: Theme | str) -> Theme:
        return self.theme.set(theme)

    def toggle_theme(self, prefers_dark: bool = False) -> Theme:
        return self.theme.toggle(prefers_dark)
