"""Checkout service (demo only, no payment).

Confirming an order:
1. Captures total and item count and clears the cart in one lock hold
2. Requires the captured cart to be non-empty
3. Issues a random order number

Contact details are validated by the caller (HTTP schema); the core only
records them on the confirmation.
"""

from dataclasses import dataclass
import logging
import random

from istore.services.cart import CartStore

logger = logging.getLogger("uvicorn.error")

ORDER_NUMBER_LIMIT = 100_000


class EmptyCartError(RuntimeError):
    pass


@dataclass(frozen=True)
class ContactInfo:
    name: str
    email: str
    address: str


@dataclass(frozen=True)
class OrderConfirmation:
    order_number: int
    name: str
    email: str
    total: int
    item_count: int


def confirm_order(
    cart: CartStore,
    contact: ContactInfo,
    *,
    rng: random.Random | None = None,
) -> OrderConfirmation:
    """Confirm a demo order and clear the cart.

    Args:
        cart: Cart being checked out.
        contact: Buyer contact details (already validated by the caller).
        rng: Random source for the order number (tests pass a seeded one).

    Raises:
        EmptyCartError: If the cart has no items; the cart is left untouched.
    """
    total, item_count = cart.checkout_snapshot()
    if item_count == 0:
        raise EmptyCartError("Cannot check out an empty cart")

    order_number = (rng or random).randrange(ORDER_NUMBER_LIMIT)
    confirmation = OrderConfirmation(
        order_number=order_number,
        name=contact.name,
        email=contact.email,
        total=total,
        item_count=item_count,
    )
    logger.info(
        f"Order #{order_number} confirmed: {confirmation.item_count} items, total={confirmation.total}"
    )
    return confirmation
