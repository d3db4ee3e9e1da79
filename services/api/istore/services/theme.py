"""Theme preference ("dark" / "light") persisted in the key-value store.

A stored value that is missing, unreadable or not one of the two themes falls
back to the system preference supplied by the caller.
"""

from enum import Enum
import logging

from istore.stores import KeyValueStore, StorageError

logger = logging.getLogger("uvicorn.error")

DEFAULT_THEME_KEY = "istore_theme"


class Theme(str, Enum):
    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


def system_theme(prefers_dark: bool) -> Theme:
    return Theme.DARK if prefers_dark else Theme.LIGHT


class ThemePreference:
    """Read/write access to the persisted theme."""

    def __init__(self, storage: KeyValueStore, storage_key: str = DEFAULT_THEME_KEY) -> None:
        self._storage = storage
        self._storage_key = storage_key

    def stored(self) -> Theme | None:
        """Persisted theme, or None if absent or malformed."""
        try:
            raw = self._storage.get(self._storage_key)
        except StorageError as e:
            logger.warning(f"Theme read failed: {e}")
            return None
        if raw is None:
            return None
        try:
            return Theme(raw.strip().lower())
        except ValueError:
            logger.warning(f"Ignoring unknown stored theme: {raw[:20]!r}")
            return None

    def get(self, prefers_dark: bool = False) -> Theme:
        """Effective theme: stored value first, then the system preference."""
        return self.stored() or system_theme(prefers_dark)

    def set(self, theme: Theme | str) -> Theme:
        """Persist a theme (best-effort) and return it."""
        theme = Theme(theme)
        try:
            self._storage.set(self._storage_key, theme.value)
        except StorageError as e:
            logger.warning(f"Theme persist failed: {e}")
        return theme

    def toggle(self, prefers_dark: bool = False) -> Theme:
        """Flip the effective theme and persist the result."""
        return self.set(self.get(prefers_dark).toggled())
