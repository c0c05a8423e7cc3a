"""Typed codec for Notion database schemas, rich text, parents and files."""

from .codec import (
    parse_database,
    parse_file,
    parse_icon,
    parse_parent,
    parse_partial_user,
    parse_property_definition,
    parse_rich_text,
    parse_rich_text_span,
    parse_schema,
    serialize_database,
    serialize_file,
    serialize_icon,
    serialize_parent,
    serialize_property_definition,
    serialize_rich_text,
    serialize_schema,
    validate_schema,
)
from .config import AnnotationsMode, CodecConfig, ConfigManager
from .errors import ErrorKind, ValidationError, ValidationErrors

__version__ = "0.1.0"

__all__ = [
    "AnnotationsMode",
    "CodecConfig",
    "ConfigManager",
    "ErrorKind",
    "ValidationError",
    "ValidationErrors",
    "parse_database",
    "parse_file",
    "parse_icon",
    "parse_parent",
    "parse_partial_user",
    "parse_property_definition",
    "parse_rich_text",
    "parse_rich_text_span",
    "parse_schema",
    "serialize_database",
    "serialize_file",
    "serialize_icon",
    "serialize_parent",
    "serialize_property_definition",
    "serialize_rich_text",
    "serialize_schema",
    "validate_schema",
]
