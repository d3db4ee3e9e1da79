"""Checkout endpoint (demo - no payment is taken).

POST /v1/checkout - confirm the order for the current cart and clear it.
"""

from fastapi import APIRouter, Depends, HTTPException

from istore.deps import get_storefront
from istore.schemas import CheckoutRequest, OrderConfirmationResponse, error_body
from istore.services.checkout import ContactInfo, EmptyCartError
from istore.services.pricing import format_price
from istore.services.storefront import Storefront

router = APIRouter()


@router.post("", response_model=OrderConfirmationResponse)
def checkout(
    payload: CheckoutRequest,
    storefront: Storefront = Depends(get_storefront),
) -> OrderConfirmationResponse:
    """Confirm the order.

    Raises:
        HTTPException 409: If the cart is empty.
    """
    try:
        confirmation = storefront.checkout(
            ContactInfo(name=payload.name, email=payload.email, address=payload.address)
        )
    except EmptyCartError as e:
        raise HTTPException(
            status_code=409,
            detail=error_body("CART_EMPTY", str(e)),
        )

    return OrderConfirmationResponse(
        order_number=confirmation.order_number,
        name=confirmation.name,
        email=confirmation.email,
        total=confirmation.total,
        total_formatted=format_price(confirmation.total),
        item_count=confirmation.item_count,
        message=(
            f"Thanks {confirmation.name}! Your order #{confirmation.order_number} was received. "
            "(Demo only - no payment was taken.)"
        ),
    )
