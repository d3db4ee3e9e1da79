"""FastAPI dependencies."""

from fastapi import Request

from istore.services.storefront import Storefront


def get_storefront(request: Request) -> Storefront:
    """Storefront built during app startup (see main.lifespan)."""
    return request.app.state.storefront
