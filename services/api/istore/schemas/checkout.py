"""Schemas for the checkout endpoint (/v1/checkout)."""

from pydantic import BaseModel, Field


class CheckoutRequest(BaseModel):
    """Contact details; every field is required and must be non-blank."""

    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    address: str = Field(min_length=1, max_length=500)

    model_config = {"str_strip_whitespace": True}


class OrderConfirmationResponse(BaseModel):
    order_number: int = Field(alias="orderNumber", ge=0)
    name: str
    email: str
    total: int = Field(ge=0)
    total_formatted: str = Field(alias="totalFormatted")
    item_count: int = Field(alias="itemCount", ge=1)
    message: str

    model_config = {"populate_by_name": True}
