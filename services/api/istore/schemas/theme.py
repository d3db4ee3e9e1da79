"""Schemas for theme endpoints (/v1/theme)."""

from pydantic import BaseModel

from istore.services.theme import Theme


class ThemeRequest(BaseModel):
    theme: Theme


class ThemeResponse(BaseModel):
    theme: Theme
