"""Cart line models.

A line is one distinct (product, storage, color) configuration in the cart.
Its identity is the LineKey tuple itself, used directly as a mapping key.
"""

from dataclasses import dataclass
from typing import NamedTuple


class LineKey(NamedTuple):
    """Composite identity of a configured product."""

    product_id: str
    storage: int
    color: str


@dataclass(frozen=True)
class LineConfig:
    """Configuration chosen at add time; `price` is the unit price to freeze."""

    storage: int
    color: str
    price: int


@dataclass
class CartLine:
    """Cart line item.

    `product_id`, `name`, `storage`, `color` and `price` are a snapshot taken on
    first addition and are never re-derived from the catalog.
    """

    product_id: str
    name: str
    storage: int
    color: str
    price: int
    qty: int = 1

    @property
    def key(self) -> LineKey:
        return LineKey(self.product_id, self.storage, self.color)

    @property
    def subtotal(self) -> int:
        return self.price * self.qty
