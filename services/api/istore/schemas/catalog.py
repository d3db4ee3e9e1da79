"""Schemas for catalog endpoints (/v1/catalog)."""

from pydantic import BaseModel, Field


class ColorSwatch(BaseModel):
    id: str
    hex: str


class StoragePrice(BaseModel):
    """Price of one storage tier for a product."""

    storage: int
    price: int
    price_formatted: str = Field(alias="priceFormatted")

    model_config = {"populate_by_name": True}


class ProductCard(BaseModel):
    """Product as listed in the catalog grid."""

    id: str
    name: str
    tagline: str
    description: str
    base_price: int = Field(alias="basePrice", ge=0)
    min_price: int = Field(alias="minPrice", ge=0)
    min_price_formatted: str = Field(alias="minPriceFormatted")
    storages: list[int]
    colors: list[str]
    rating: float = Field(ge=0, le=5)
    featured: bool

    model_config = {"populate_by_name": True}


class ProductDetail(ProductCard):
    """Product with the price of every storage tier (for the configurator)."""

    tier_prices: list[StoragePrice] = Field(alias="tierPrices", default_factory=list)
    swatches: list[ColorSwatch] = Field(default_factory=list)


class CatalogResponse(BaseModel):
    """Response payload for GET /v1/catalog.

    `filtersActive` distinguishes "nothing matched" from an unfiltered listing.
    """

    products: list[ProductCard]
    match_count: int = Field(alias="matchCount", ge=0)
    total_count: int = Field(alias="totalCount", ge=0)
    filters_active: bool = Field(alias="filtersActive")

    model_config = {"populate_by_name": True}


class PriceQuote(BaseModel):
    """Response payload for GET /v1/catalog/price."""

    base_price: int = Field(alias="basePrice")
    storage: int
    price: int
    price_formatted: str = Field(alias="priceFormatted")

    model_config = {"populate_by_name": True}


class PriceRange(BaseModel):
    """Bounds for the max-price slider."""

    min: int
    max: int
    step: int
    default: int
