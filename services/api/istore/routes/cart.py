"""Cart endpoints.

GET    /v1/cart        - items, total, item count
DELETE /v1/cart        - clear the cart
POST   /v1/cart/items  - add one unit of a configured product (priced now)
PATCH  /v1/cart/items  - set quantity (values below 1 are clamped to 1)
DELETE /v1/cart/items  - remove a line (unknown lines are ignored)

Lines are addressed by their composite key (productId, storage, color).
"""

from fastapi import APIRouter, Body, Depends, HTTPException

from istore.deps import get_storefront
from istore.models import LineConfig, LineKey
from istore.schemas import (
    AddToCartRequest,
    CartItem,
    CartResponse,
    LineKeyRequest,
    UpdateQtyRequest,
    error_body,
)
from istore.services.catalog import COLOR_PALETTE
from istore.services.pricing import compute_price, format_price
from istore.services.storefront import Storefront

router = APIRouter()


@router.get("", response_model=CartResponse)
def get_cart(storefront: Storefront = Depends(get_storefront)) -> CartResponse:
    """Get the current cart."""
    return build_cart_response(storefront)


@router.delete("", response_model=CartResponse)
def clear_cart(storefront: Storefront = Depends(get_storefront)) -> CartResponse:
    """Empty the cart."""
    storefront.clear_cart()
    return build_cart_response(storefront)


@router.post("/items", response_model=CartResponse)
def add_item(
    payload: AddToCartRequest,
    storefront: Storefront = Depends(get_storefront),
) -> CartResponse:
    """Add one unit of a product configuration.

    The unit price is computed from the catalog at this moment and frozen on
    the line; adding the same configuration again only bumps the quantity.

    Raises:
        HTTPException 404: If the product is not in the catalog.
        HTTPException 422: If the product does not offer the storage or color.
    """
    product = storefront.get_product(payload.product_id)
    if product is None:
        raise HTTPException(
            status_code=404,
            detail=error_body(
                "PRODUCT_NOT_FOUND",
                f"Product {payload.product_id} not found",
                {"product_id": payload.product_id},
            ),
        )

    if payload.storage not in product.storages or payload.color not in product.colors:
        raise HTTPException(
            status_code=422,
            detail=error_body(
                "INVALID_CONFIGURATION",
                f"{product.name} is not offered in {payload.storage} GB / {payload.color}",
                {
                    "product_id": product.id,
                    "storages": list(product.storages),
                    "colors": list(product.colors),
                },
            ),
        )

    price = compute_price(product.base_price, payload.storage)
    storefront.add_to_cart(product, LineConfig(storage=payload.storage, color=payload.color, price=price))
    return build_cart_response(storefront)


@router.patch("/items", response_model=CartResponse)
def update_item_qty(
    payload: UpdateQtyRequest,
    storefront: Storefront = Depends(get_storefront),
) -> CartResponse:
    """Set the quantity of a line. Unknown lines are left alone."""
    storefront.update_cart_qty(_line_key(payload), max(1, payload.qty))
    return build_cart_response(storefront)


@router.delete("/items", response_model=CartResponse)
def remove_item(
    payload: LineKeyRequest = Body(),
    storefront: Storefront = Depends(get_storefront),
) -> CartResponse:
    """Remove a line from the cart."""
    storefront.remove_from_cart(_line_key(payload))
    return build_cart_response(storefront)


def build_cart_response(storefront: Storefront) -> CartResponse:
    """Build the cart payload from the storefront's current state."""
    items = [
        CartItem(
            product_id=line.product_id,
            name=line.name,
            storage=line.storage,
            color=line.color,
            color_hex=COLOR_PALETTE.get(line.color),
            price=line.price,
            price_formatted=format_price(line.price),
            qty=line.qty,
            subtotal=line.subtotal,
        )
        for line in storefront.get_cart_items()
    ]
    total = storefront.get_cart_total()
    return CartResponse(
        items=items,
        item_count=storefront.get_cart_item_count(),
        total=total,
        total_formatted=format_price(total),
    )


def _line_key(payload: LineKeyRequest) -> LineKey:
    return LineKey(payload.product_id, payload.storage, payload.color)
