"""Cart store.

Holds the cart line items and persists a JSON snapshot after every mutation.

Rules:
- Lines are keyed by LineKey(product_id, storage, color); adding an existing key
  increments qty and keeps the price frozen at first addition
- qty is always >= 1; only remove() or clear() drops a line
- total = sum(price * qty), item_count = sum(qty)

Persistence is best-effort: a failed write is logged and the in-memory cart
stays authoritative. restore() never raises; anything that does not parse as
a valid snapshot yields an empty cart.
"""

from __future__ import annotations

from dataclasses import replace
import json
import logging
import threading

from pydantic import TypeAdapter, ValidationError

from istore.models import CartLine, LineConfig, LineKey, Product
from istore.schemas.cart import CartLineRecord
from istore.stores import KeyValueStore, StorageError

logger = logging.getLogger("uvicorn.error")

DEFAULT_CART_KEY = "istore_cart"

_SNAPSHOT_ADAPTER = TypeAdapter(list[CartLineRecord])


class CartStore:
    """Mutable cart of line items backed by a key-value store."""

    def __init__(self, storage: KeyValueStore, storage_key: str = DEFAULT_CART_KEY) -> None:
        self._storage = storage
        self._storage_key = storage_key
        self._lines: dict[LineKey, CartLine] = {}
        # One logical actor; the lock keeps HTTP worker threads from interleaving.
        self._lock = threading.RLock()

    # ------------------------------------------------------------
    # Mutations (each persists afterwards)
    # ------------------------------------------------------------

    def add(self, product: Product, config: LineConfig) -> CartLine:
        """Add one unit of a configured product.

        Args:
            product: Catalog product being added.
            config: Chosen storage/color and the unit price computed at add time.

        Returns:
            Copy of the resulting line.
        """
        key = LineKey(product.id, config.storage, config.color)
        with self._lock:
            line = self._lines.get(key)
            if line is not None:
                line.qty += 1
            else:
                line = CartLine(
                    product_id=product.id,
                    name=product.name,
                    storage=config.storage,
                    color=config.color,
                    price=config.price,
                    qty=1,
                )
                self._lines[key] = line
            self._persist()
            return replace(line)

    def update_qty(self, key: tuple[str, int, str], qty: int) -> CartLine | None:
        """Set the quantity of a line, clamping values below 1 to 1.

        Returns:
            Copy of the updated line, or None if no line has that key.
        """
        key = _line_key(key)
        with self._lock:
            line = self._lines.get(key)
            if line is None:
                return None
            line.qty = max(1, int(qty))
            self._persist()
            return replace(line)

    def remove(self, key: tuple[str, int, str]) -> bool:
        """Remove a line. Returns False (and changes nothing) if the key is unknown."""
        key = _line_key(key)
        with self._lock:
            if self._lines.pop(key, None) is None:
                return False
            self._persist()
            return True

    def clear(self) -> None:
        """Empty the cart."""
        with self._lock:
            self._lines.clear()
            self._persist()

    def checkout_snapshot(self) -> tuple[int, int]:
        """Capture (total, item_count) and empty the cart in one step.

        An empty cart returns (0, 0) and is not written back.
        """
        with self._lock:
            total = sum(line.subtotal for line in self._lines.values())
            item_count = sum(line.qty for line in self._lines.values())
            if self._lines:
                self._lines.clear()
                self._persist()
            return total, item_count

    # ------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------

    def items(self) -> list[CartLine]:
        """Line items in insertion order (copies)."""
        with self._lock:
            return [replace(line) for line in self._lines.values()]

    def get(self, key: tuple[str, int, str]) -> CartLine | None:
        key = _line_key(key)
        with self._lock:
            line = self._lines.get(key)
            return replace(line) if line is not None else None

    def total(self) -> int:
        """Sum of price * qty over all lines (0 when empty)."""
        with self._lock:
            return sum(line.subtotal for line in self._lines.values())

    def item_count(self) -> int:
        """Sum of quantities (badge count), not the number of distinct lines."""
        with self._lock:
            return sum(line.qty for line in self._lines.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._lines)

    def __contains__(self, key: object) -> bool:
        try:
            line_key = _line_key(key)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        with self._lock:
            return line_key in self._lines

    # ------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------

    def snapshot(self) -> str:
        """Serialize the cart as a JSON array of line records."""
        with self._lock:
            records = [
                CartLineRecord(
                    product_id=line.product_id,
                    name=line.name,
                    storage=line.storage,
                    color=line.color,
                    price=line.price,
                    qty=line.qty,
                )
                for line in self._lines.values()
            ]
        return json.dumps([r.model_dump(by_alias=True) for r in records])

    def restore(self) -> int:
        """Load the persisted snapshot, falling back to an empty cart.

        Returns:
            Number of lines restored.
        """
        with self._lock:
            self._lines = {}
            try:
                raw = self._storage.get(self._storage_key)
            except StorageError as e:
                logger.warning(f"Cart restore skipped, storage unavailable: {e}")
                return 0
            if not raw:
                return 0

            lines = _parse_snapshot(raw)
            if lines is None:
                return 0
            self._lines = {line.key: line for line in lines}
            logger.info(f"Cart restored: {len(self._lines)} lines")
            return len(self._lines)

    def _persist(self) -> None:
        try:
            self._storage.set(self._storage_key, self.snapshot())
        except StorageError as e:
            # In-memory state remains the source of truth for this session.
            logger.warning(f"Cart persist failed: {e}")


def _line_key(key: tuple[str, int | str, str]) -> LineKey:
    """Coerce a caller-supplied key so "256" and 256 address the same line."""
    product_id, storage, color = key
    return LineKey(str(product_id), int(storage), str(color))


def _parse_snapshot(raw: str | bytes) -> list[CartLine] | None:
    """Parse a persisted snapshot; None means it must be treated as absent."""
    try:
        records = _SNAPSHOT_ADAPTER.validate_json(raw)
    except ValidationError as e:
        logger.warning(f"Discarding malformed cart snapshot ({e.error_count()} errors)")
        return None

    lines = [
        CartLine(
            product_id=r.product_id,
            name=r.name,
            storage=r.storage,
            color=r.color,
            price=r.price,
            qty=r.qty,
        )
        for r in records
    ]
    if len({line.key for line in lines}) != len(lines):
        logger.warning("Discarding cart snapshot with duplicate line keys")
        return None
    return lines

