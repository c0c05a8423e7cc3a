"""Parse and serialize entry points.

Single values (one property, one span, one parent...) fail fast with a
``ValidationError``. Composite values (rich text sequences, schemas, databases)
parse every item, then raise one ``ValidationErrors`` listing each failing item
in input order.
"""

import logging
from typing import Any, Dict, List, Optional

from .config import CodecConfig
from .errors.handlers import ErrorCollector, ValidationError, ValidationErrors
from .handlers.base import (
    format_timestamp,
    make_context,
    parse_timestamp,
    require_bool,
    require_field,
    require_list,
    require_literal,
    require_object,
    require_str,
)
from .handlers.files import file_registry, icon_registry
from .handlers.parent import parent_registry
from .handlers.registry import property_registry
from .handlers.rich_text import rich_text_registry
from .logging_config import summarize_errors
from .models.database import Database
from .models.properties import DatabaseSchema, PropertyDefinition
from .models.references import FileReference, Icon, ParentReference, PartialUser
from .models.rich_text import RichText, RichTextSpan

logger = logging.getLogger(__name__)


# Rich text


def parse_rich_text_span(
    raw: Any, config: Optional[CodecConfig] = None, path: str = ""
) -> RichTextSpan:
    """Parse one rich text span.

    Raises:
        ValidationError: On the first violation inside the span
    """
    return rich_text_registry.parse(raw, make_context(config, path))


def parse_rich_text(raw: Any, config: Optional[CodecConfig] = None, path: str = "") -> RichText:
    """Parse a rich text array, keeping reading order.

    Args:
        raw: JSON array of span objects
        config: Parsing policy; defaults to ``CodecConfig()``
        path: Path prefix for error locations

    Returns:
        List of spans (possibly empty)

    Raises:
        ValidationError: If ``raw`` is not an array
        ValidationErrors: One error per failing span, in index order
    """
    ctx = make_context(config, path)
    items = require_list(raw, ctx, "richText")
    collector = ErrorCollector(logger)
    spans = []
    for index, item in enumerate(items):
        with collector.collect(index):
            spans.append(rich_text_registry.parse(item, ctx.child(index)))
    collector.raise_if_errors()
    return spans


def serialize_rich_text(value: RichText) -> List[Dict[str, Any]]:
    return [rich_text_registry.serialize(span) for span in value]


# Property definitions


def _describe_property(error: ValidationError, raw: Any) -> ValidationError:
    if isinstance(raw, dict):
        if error.property_name is None and isinstance(raw.get("name"), str):
            error.property_name = raw["name"]
        if error.property_id is None and isinstance(raw.get("id"), str):
            error.property_id = raw["id"]
    return error


def parse_property_definition(
    raw: Any, config: Optional[CodecConfig] = None, path: str = ""
) -> PropertyDefinition:
    """Parse one property definition.

    Raises:
        ValidationError: On the first violation, with ``property_name`` and
            ``property_id`` set when the raw object has them
    """
    try:
        return property_registry.parse(raw, make_context(config, path))
    except ValidationError as error:
        raise _describe_property(error, raw)


def serialize_property_definition(value: PropertyDefinition) -> Dict[str, Any]:
    return property_registry.serialize(value)


def _parse_schema(raw: Any, config: Optional[CodecConfig], path: str):
    ctx = make_context(config, path)
    properties_raw = require_object(raw, ctx, "properties")
    collector = ErrorCollector(logger)
    properties = {}
    for key, value in properties_raw.items():
        with collector.collect(key):
            try:
                properties[key] = parse_property_definition(value, ctx.config, ctx.at(key))
            except ValidationError as error:
                if error.property_name is None:
                    error.property_name = key
                raise
    if collector.has_errors:
        logger.warning(
            f"Schema has {len(collector.errors)} invalid properties",
            extra={"error_counts": summarize_errors(collector.errors), "schema_path": path},
        )
    return DatabaseSchema(properties=properties), collector


def parse_schema(
    raw: Any, config: Optional[CodecConfig] = None, path: str = ""
) -> DatabaseSchema:
    """Parse the ``properties`` mapping of a database.

    Every property is parsed independently; one failing property does not stop
    the others.

    Raises:
        ValidationError: If ``raw`` is not an object
        ValidationErrors: One error per failing property, keyed by path
    """
    schema, collector = _parse_schema(raw, config, path)
    collector.raise_if_errors()
    logger.debug(f"Parsed schema with {len(schema)} properties")
    return schema


def validate_schema(
    raw: Any, config: Optional[CodecConfig] = None, path: str = ""
) -> List[ValidationError]:
    """Validate a ``properties`` mapping and return its errors without raising."""
    try:
        _, collector = _parse_schema(raw, config, path)
    except ValidationError as error:
        return [error]
    return collector.errors


def serialize_schema(value: DatabaseSchema) -> Dict[str, Any]:
    return {key: serialize_property_definition(d) for key, d in value.properties.items()}


# Parents, files and icons


def parse_parent(raw: Any, config: Optional[CodecConfig] = None, path: str = "") -> ParentReference:
    return parent_registry.parse(raw, make_context(config, path))


def serialize_parent(value: ParentReference) -> Dict[str, Any]:
    return parent_registry.serialize(value)


def parse_file(raw: Any, config: Optional[CodecConfig] = None, path: str = "") -> FileReference:
    """Parse a hosted or external file object.

    Hosted URLs expire at ``expiry_time``; callers must re-fetch rather than
    persist them.
    """
    return file_registry.parse(raw, make_context(config, path))


def serialize_file(value: FileReference) -> Dict[str, Any]:
    return file_registry.serialize(value)


def parse_icon(raw: Any, config: Optional[CodecConfig] = None, path: str = "") -> Icon:
    return icon_registry.parse(raw, make_context(config, path))


def serialize_icon(value: Icon) -> Dict[str, Any]:
    return icon_registry.serialize(value)


def parse_partial_user(
    raw: Any, config: Optional[CodecConfig] = None, path: str = ""
) -> PartialUser:
    ctx = make_context(config, path)
    obj = require_object(raw, ctx, "user")
    require_literal(obj, "object", "user", ctx)
    return PartialUser(id=require_str(obj, "id", ctx))


# Database


def parse_database(raw: Any, config: Optional[CodecConfig] = None) -> Database:
    """Parse a database object.

    Top-level fields, properties and rich text spans are all validated before
    failing, so the aggregate lists every problem found.

    Raises:
        ValidationError: If ``raw`` is not an object
        ValidationErrors: All collected errors, in field order
    """
    ctx = make_context(config)
    obj = require_object(raw, ctx, "database")
    collector = ErrorCollector(logger)
    fields: Dict[str, Any] = {}

    with collector.collect("object"):
        require_literal(obj, "object", "database", ctx)
    with collector.collect("id"):
        fields["id"] = require_str(obj, "id", ctx)
    for key in ("created_time", "last_edited_time"):
        with collector.collect(key):
            fields[key] = parse_timestamp(obj, key, ctx)
    for key in ("created_by", "last_edited_by"):
        with collector.collect(key):
            fields[key] = parse_partial_user(require_field(obj, key, ctx), ctx.config, ctx.at(key))
    with collector.collect("title"):
        fields["title"] = parse_rich_text(
            require_field(obj, "title", ctx), ctx.config, ctx.at("title")
        )
    if obj.get("description") is not None:
        with collector.collect("description"):
            fields["description"] = parse_rich_text(
                obj["description"], ctx.config, ctx.at("description")
            )
    if obj.get("icon") is not None:
        with collector.collect("icon"):
            fields["icon"] = parse_icon(obj["icon"], ctx.config, ctx.at("icon"))
    if obj.get("cover") is not None:
        with collector.collect("cover"):
            fields["cover"] = parse_file(obj["cover"], ctx.config, ctx.at("cover"))
    with collector.collect("properties"):
        fields["properties"] = parse_schema(
            require_field(obj, "properties", ctx), ctx.config, ctx.at("properties")
        )
    with collector.collect("parent"):
        fields["parent"] = parse_parent(
            require_field(obj, "parent", ctx), ctx.config, ctx.at("parent")
        )
    with collector.collect("url"):
        fields["url"] = require_str(obj, "url", ctx)
    for key in ("archived", "is_inline"):
        with collector.collect(key):
            fields[key] = require_bool(obj, key, ctx, default=False)

    if collector.has_errors:
        logger.warning(
            f"Database {obj.get('id')!r} failed validation",
            extra={"error_counts": summarize_errors(collector.errors)},
        )
        raise ValidationErrors(collector.errors)
    return Database(**fields)


def serialize_database(value: Database) -> Dict[str, Any]:
    return {
        "object": "database",
        "id": value.id,
        "created_time": format_timestamp(value.created_time),
        "created_by": {"object": "user", "id": value.created_by.id},
        "last_edited_time": format_timestamp(value.last_edited_time),
        "last_edited_by": {"object": "user", "id": value.last_edited_by.id},
        "title": serialize_rich_text(value.title),
        "description": serialize_rich_text(value.description),
        "icon": serialize_icon(value.icon) if value.icon else None,
        "cover": serialize_file(value.cover) if value.cover else None,
        "properties": serialize_schema(value.properties),
        "parent": serialize_parent(value.parent),
        "url": value.url,
        "archived": value.archived,
        "is_inline": value.is_inline,
    }
