"""Handlers for text-based property definitions (title, rich_text)."""

from ..models.enums import PropertyType
from .base import MarkerPropertyHandler


class TitleHandler(MarkerPropertyHandler):
    """Handler for title properties."""

    tag = PropertyType.TITLE


class RichTextHandler(MarkerPropertyHandler):
    """Handler for rich text properties."""

    tag = PropertyType.RICH_TEXT
