"""API routes."""

from fastapi import APIRouter

from istore.routes import cart, catalog, checkout, theme

api_router = APIRouter()

# Catalog listing, product detail, pricing
api_router.include_router(catalog.router, prefix="/v1/catalog", tags=["catalog"])

# Cart mutations and summary
api_router.include_router(cart.router, prefix="/v1/cart", tags=["cart"])

# Demo checkout
api_router.include_router(checkout.router, prefix="/v1/checkout", tags=["checkout"])

# Theme preference
api_router.include_router(theme.router, prefix="/v1/theme", tags=["theme"])
