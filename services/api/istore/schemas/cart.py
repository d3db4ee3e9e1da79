"""Schemas for cart endpoints (/v1/cart) and the persisted cart snapshot."""

from pydantic import BaseModel, Field


class CartLineRecord(BaseModel):
    """One line of the persisted cart snapshot."""

    product_id: str = Field(alias="productId", min_length=1)
    name: str
    storage: int = Field(gt=0)
    color: str = Field(min_length=1)
    price: int = Field(ge=0)
    qty: int = Field(ge=1)

    model_config = {"populate_by_name": True}


class LineKeyRequest(BaseModel):
    """Identifies a cart line by its (productId, storage, color) composite key."""

    product_id: str = Field(alias="productId", min_length=1, max_length=100)
    storage: int = Field(gt=0)
    color: str = Field(min_length=1, max_length=50)

    model_config = {"populate_by_name": True}


class AddToCartRequest(LineKeyRequest):
    """Payload for POST /v1/cart/items. The unit price is computed server-side."""


class UpdateQtyRequest(LineKeyRequest):
    """Payload for PATCH /v1/cart/items. Quantities below 1 are clamped to 1."""

    qty: int


class CartItem(BaseModel):
    """A cart line as returned to the UI."""

    product_id: str = Field(alias="productId")
    name: str
    storage: int
    color: str
    color_hex: str | None = Field(alias="colorHex", default=None)
    price: int
    price_formatted: str = Field(alias="priceFormatted")
    qty: int = Field(ge=1)
    subtotal: int

    model_config = {"populate_by_name": True}


class CartResponse(BaseModel):
    """Response payload for cart endpoints."""

    items: list[CartItem]
    item_count: int = Field(alias="itemCount", ge=0)
    total: int = Field(ge=0)
    total_formatted: str = Field(alias="totalFormatted")

    model_config = {"populate_by_name": True}
