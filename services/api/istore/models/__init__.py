"""Domain models.

Models represent the storefront state:
- Product: immutable catalog entry
- LineKey / LineConfig / CartLine: cart line identity, add-time configuration, line item
"""

from istore.models.cart import CartLine, LineConfig, LineKey
from istore.models.product import Product

__all__ = ["CartLine", "LineConfig", "LineKey", "Product"]
