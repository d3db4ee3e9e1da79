"""Pydantic schemas for API request/response validation."""

from istore.schemas.cart import (
    AddToCartRequest,
    CartItem,
    CartLineRecord,
    CartResponse,
    LineKeyRequest,
    UpdateQtyRequest,
)
from istore.schemas.catalog import (
    CatalogResponse,
    ColorSwatch,
    PriceQuote,
    PriceRange,
    ProductCard,
    ProductDetail,
    StoragePrice,
)
from istore.schemas.checkout import CheckoutRequest, OrderConfirmationResponse
from istore.schemas.common import ErrorDetail, ErrorResponse, error_body
from istore.schemas.theme import ThemeRequest, ThemeResponse

__all__ = [
    "AddToCartRequest",
    "CartItem",
    "CartLineRecord",
    "CartResponse",
    "LineKeyRequest",
    "UpdateQtyRequest",
    "CatalogResponse",
    "ColorSwatch",
    "PriceQuote",
    "PriceRange",
    "ProductCard",
    "ProductDetail",
    "StoragePrice",
    "CheckoutRequest",
    "OrderConfirmationResponse",
    "ErrorDetail",
    "ErrorResponse",
    "error_body",
    "ThemeRequest",
    "ThemeResponse",
]
