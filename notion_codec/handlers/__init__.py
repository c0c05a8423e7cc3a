"""Variant handlers for every tagged union of the codec."""

from .base import (
    MarkerPropertyHandler,
    ParseContext,
    PropertyHandler,
    UnspecifiedPropertyHandler,
    VariantHandler,
    VariantRegistry,
    make_context,
)
from .files import file_registry, icon_registry
from .mention import mention_registry, template_mention_registry
from .parent import parent_registry
from .registry import property_registry
from .rich_text import rich_text_registry

__all__ = [
    "MarkerPropertyHandler",
    "ParseContext",
    "PropertyHandler",
    "UnspecifiedPropertyHandler",
    "VariantHandler",
    "VariantRegistry",
    "file_registry",
    "icon_registry",
    "make_context",
    "mention_registry",
    "parent_registry",
    "property_registry",
    "rich_text_registry",
    "template_mention_registry",
]
