"""Theme preference endpoints.

GET  /v1/theme         - effective theme (stored, else system preference)
PUT  /v1/theme         - store a theme
POST /v1/theme/toggle  - flip and store
"""

from fastapi import APIRouter, Depends, Query

from istore.deps import get_storefront
from istore.schemas import ThemeRequest, ThemeResponse
from istore.services.storefront import Storefront

router = APIRouter()

_PREFERS_DARK = Query(
    default=False,
    alias="prefersDark",
    description="Client's prefers-color-scheme: dark, used when nothing is stored",
)


@router.get("", response_model=ThemeResponse)
def get_theme(
    prefers_dark: bool = _PREFERS_DARK,
    storefront: Storefront = Depends(get_storefront),
) -> ThemeResponse:
    return ThemeResponse(theme=storefront.get_theme(prefers_dark))


@router.put("", response_model=ThemeResponse)
def set_theme(
    payload: ThemeRequest,
    storefront: Storefront = Depends(get_storefront),
) -> ThemeResponse:
    return ThemeResponse(theme=storefront.set_theme(payload.theme))


@router.post("/toggle", response_model=ThemeResponse)
def toggle_theme(
    prefers_dark: bool = _PREFERS_DARK,
    storefront: Storefront = Depends(get_storefront),
) -> ThemeResponse:
    return ThemeResponse(theme=storefront.toggle_theme(prefers_dark))
