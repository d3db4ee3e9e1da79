"""Catalog endpoints.

GET /v1/catalog               - filtered/sorted product listing
GET /v1/catalog/colors        - color palette
GET /v1/catalog/storages      - storage tiers offered by the filter
GET /v1/catalog/price-range   - bounds for the max-price slider
GET /v1/catalog/price         - price for (basePrice, storage)
GET /v1/catalog/products/{id} - product with per-tier prices

Routers are thin: call services for business logic.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from istore.deps import get_storefront
from istore.models import Product
from istore.schemas import (
    CatalogResponse,
    ColorSwatch,
    PriceQuote,
    PriceRange,
    ProductCard,
    ProductDetail,
    StoragePrice,
    error_body,
)
from istore.services.catalog import COLOR_PALETTE, STORAGE_TIERS
from istore.services.filtering import FilterConfig, PricedProduct, SortMode
from istore.services.pricing import compute_price, format_price, min_price, tier_prices
from istore.services.storefront import Storefront
from istore.settings import get_settings

router = APIRouter()


@router.get("", response_model=CatalogResponse)
def list_catalog(
    q: str = Query(default="", max_length=100, description="Search text"),
    color: list[str] = Query(default=[], description="Color ids (any match)"),
    storage: list[str] = Query(
        default=[],
        description="Storage tiers in GB (any match); repeat or comma-separate",
        examples=["256"],
    ),
    max_price: int | None = Query(default=None, alias="maxPrice", ge=0),
    sort: str = Query(
        default=SortMode.CATALOG_ORDER.value,
        description="catalog-order | price-asc | price-desc (relevance = catalog-order)",
    ),
    storefront: Storefront = Depends(get_storefront),
) -> CatalogResponse:
    """Get the catalog view for the given filters.

    Returns:
        CatalogResponse; an empty product list is a valid result.
    """
    try:
        sort_mode = SortMode(sort)
    except ValueError:
        raise HTTPException(
            status_code=422,
            detail=error_body(
                "INVALID_SORT",
                f"Unknown sort mode: {sort}",
                {"allowed": [m.value for m in SortMode]},
            ),
        )

    config = FilterConfig(
        search_text=q,
        colors=frozenset(color),
        storages=frozenset(part.strip() for s in storage for part in s.split(",") if part.strip()),
        max_price=max_price if max_price is not None else get_settings().default_max_price,
        sort_mode=sort_mode,
    )
    view = storefront.get_catalog_view(config)

    return CatalogResponse(
        products=[_to_card(item) for item in view.products],
        match_count=view.match_count,
        total_count=view.total_count,
        filters_active=view.filters_active,
    )


@router.get("/colors", response_model=list[ColorSwatch])
def list_colors() -> list[ColorSwatch]:
    """Get the global color palette."""
    return [ColorSwatch(id=color_id, hex=hex_) for color_id, hex_ in COLOR_PALETTE.items()]


@router.get("/storages", response_model=list[int])
def list_storages() -> list[int]:
    """Get the storage tiers offered in the storage filter."""
    return list(STORAGE_TIERS)


@router.get("/price-range", response_model=PriceRange)
def get_price_range() -> PriceRange:
    """Get bounds for the max-price slider."""
    settings = get_settings()
    return PriceRange(
        min=settings.price_slider_min,
        max=settings.default_max_price,
        step=settings.price_slider_step,
        default=settings.default_max_price,
    )


@router.get("/price", response_model=PriceQuote)
def quote_price(
    base_price: int = Query(alias="basePrice", ge=0),
    storage: int = Query(gt=0),
) -> PriceQuote:
    """Compute the price of a storage tier for a base price (unknown tiers add nothing)."""
    price = compute_price(base_price, storage)
    return PriceQuote(
        base_price=base_price,
        storage=storage,
        price=price,
        price_formatted=format_price(price),
    )


@router.get("/products/{product_id}", response_model=ProductDetail)
def get_product_detail(
    product_id: str = Path(min_length=1, max_length=100, pattern=r"^[a-zA-Z0-9_-]+$"),
    storefront: Storefront = Depends(get_storefront),
) -> ProductDetail:
    """Get a product with the price of each storage tier.

    Raises:
        HTTPException 404: If the product is not in the catalog.
    """
    product = storefront.get_product(product_id)
    if product is None:
        raise HTTPException(
            status_code=404,
            detail=error_body(
                "PRODUCT_NOT_FOUND",
                f"Product {product_id} not found",
                {"product_id": product_id},
            ),
        )

    card = _to_card(PricedProduct(product=product, min_price=min_price(product)))
    return ProductDetail(
        **card.model_dump(),
        tier_prices=[
            StoragePrice(storage=s, price=p, price_formatted=format_price(p))
            for s, p in tier_prices(product).items()
        ],
        swatches=[ColorSwatch(id=c, hex=COLOR_PALETTE[c]) for c in product.colors],
    )


def _to_card(item: PricedProduct) -> ProductCard:
    product: Product = item.product
    return ProductCard(
        id=product.id,
        name=product.name,
        tagline=product.tagline,
        description=product.description,
        base_price=product.base_price,
        min_price=item.min_price,
        min_price_formatted=format_price(item.min_price),
        storages=list(product.storages),
        colors=list(product.colors),
        rating=product.rating,
        featured=product.featured,
    )
