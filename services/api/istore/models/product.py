"""Product model.

A Product is a catalog entry that can be configured by storage tier and color.

Example: iPhone 15 Pro, storages (128, 256, 512, 1024), colors (titanium, black, ...)
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Product:
    """Catalog product definition (read-only at runtime)."""

    id: str
    name: str
    base_price: int  # price at the lowest storage tier
    storages: tuple[int, ...]  # e.g. (128, 256, 512)
    colors: tuple[str, ...]  # palette ids, e.g. ("black", "blue")
    tagline: str = ""
    description: str = ""
    rating: float = 0.0
    featured: bool = False  # display-only

    # Search haystack, lower-cased once
    _search_fields: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Product id must not be empty")
        if self.base_price < 0:
            raise ValueError(f"{self.id}: base_price must be non-negative")
        if not self.storages:
            raise ValueError(f"{self.id}: at least one storage tier is required")
        if any(s <= 0 for s in self.storages) or len(set(self.storages)) != len(self.storages):
            raise ValueError(f"{self.id}: storages must be distinct positive integers")
        if not self.colors:
            raise ValueError(f"{self.id}: at least one color is required")
        if len(set(self.colors)) != len(self.colors):
            raise ValueError(f"{self.id}: colors must be distinct")
        if not 0 <= self.rating <= 5:
            raise ValueError(f"{self.id}: rating must be within [0, 5]")

        object.__setattr__(
            self,
            "_search_fields",
            (self.name.lower(), self.tagline.lower(), self.description.lower()),
        )

    def matches_text(self, query: str) -> bool:
        """True if `query` (case-insensitive) occurs in name, tagline or description."""
        q = query.lower()
        return any(q in text for text in self._search_fields)

    def __repr__(self) -> str:
        return f"<Product {self.id}>"
