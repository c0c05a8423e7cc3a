"""Variant handlers, discriminant dispatch and field validators."""

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar, Union

from ..config import DEFAULT_CONFIG, CodecConfig
from ..errors.handlers import ErrorKind, ValidationError
from ..models.enums import PropertyType
from ..models.properties import (
    MarkerConfig,
    OpaqueConfig,
    PropertyConfig,
    PropertyDefinition,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def join_path(path: str, segment: Union[str, int]) -> str:
    """Append a key (``a.b``) or a list index (``a[0]``) to a path."""
    if isinstance(segment, int):
        return f"{path}[{segment}]"
    return f"{path}.{segment}" if path else segment


@dataclass(frozen=True)
class ParseContext:
    """Location and policy threaded through every parser."""

    path: str = ""
    config: CodecConfig = field(default_factory=lambda: DEFAULT_CONFIG)

    def child(self, segment: Union[str, int]) -> "ParseContext":
        return ParseContext(join_path(self.path, segment), self.config)

    def at(self, segment: Union[str, int]) -> str:
        return join_path(self.path, segment)


def make_context(config: Optional[CodecConfig] = None, path: str = "") -> ParseContext:
    return ParseContext(path, config or DEFAULT_CONFIG)


# Field validators. Each raises the most specific ValidationError it can.


def require_object(value: Any, ctx: ParseContext, kind: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValidationError.shape_mismatch(ctx.path, kind, "object", value)
    return value


def require_list(value: Any, ctx: ParseContext, kind: str) -> List[Any]:
    if not isinstance(value, list):
        raise ValidationError.shape_mismatch(ctx.path, kind, "array", value)
    return value


def require_field(raw: Dict[str, Any], key: str, ctx: ParseContext) -> Any:
    if key not in raw:
        raise ValidationError.missing_field(ctx.at(key), key)
    return raw[key]


def require_payload(raw: Dict[str, Any], key: str, ctx: ParseContext) -> Dict[str, Any]:
    """The same-named payload object of a variant, e.g. ``raw["text"]``."""
    if not isinstance(raw.get(key), dict):
        raise ValidationError.shape_mismatch(ctx.at(key), key, "object", raw.get(key))
    return raw[key]


def require_str(raw: Dict[str, Any], key: str, ctx: ParseContext) -> str:
    value = require_field(raw, key, ctx)
    if not isinstance(value, str):
        raise ValidationError.shape_mismatch(ctx.at(key), key, "string", value)
    return value


def optional_str(raw: Dict[str, Any], key: str, ctx: ParseContext) -> Optional[str]:
    value = raw.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError.shape_mismatch(ctx.at(key), key, "string", value)
    return value


def require_bool(
    raw: Dict[str, Any], key: str, ctx: ParseContext, default: Optional[bool] = None
) -> bool:
    if key not in raw and default is not None:
        return default
    value = require_field(raw, key, ctx)
    if not isinstance(value, bool):
        raise ValidationError.shape_mismatch(ctx.at(key), key, "boolean", value)
    return value


def require_literal(raw: Dict[str, Any], key: str, expected: Any, ctx: ParseContext) -> Any:
    value = require_field(raw, key, ctx)
    # ``True == 1`` in Python, so compare types as well
    if type(value) is not type(expected) or value != expected:
        raise ValidationError.invalid_literal(ctx.at(key), key, expected, value)
    return value


def parse_enum(
    enum_cls: Type[E], value: Any, ctx: ParseContext, enum_name: Optional[str] = None
) -> E:
    """Look up a wire value in a closed enumeration."""
    if isinstance(value, str):
        try:
            return enum_cls(value)
        except ValueError:
            pass
    raise ValidationError.unknown_enum_value(ctx.path, enum_name or enum_cls.__name__, value)


def parse_enum_union(
    enum_classes: Iterable[Type[Enum]], value: Any, ctx: ParseContext, enum_name: str
) -> Enum:
    """Look up a wire value in the first of several enumerations that has it."""
    if isinstance(value, str):
        for enum_cls in enum_classes:
            try:
                return enum_cls(value)
            except ValueError:
                continue
    raise ValidationError.unknown_enum_value(ctx.path, enum_name, value)


def _from_iso(value: str) -> datetime:
    # fromisoformat only accepts a trailing "Z" from Python 3.11
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def parse_timestamp(raw: Dict[str, Any], key: str, ctx: ParseContext) -> datetime:
    """Required ISO 8601 date-time field."""
    value = require_str(raw, key, ctx)
    if "T" not in value and "t" not in value:
        raise ValidationError.invalid_timestamp(ctx.at(key), key, value)
    try:
        return _from_iso(value)
    except ValueError:
        raise ValidationError.invalid_timestamp(ctx.at(key), key, value)


def check_date_or_timestamp(value: str, key: str, ctx: ParseContext) -> str:
    """Validate an ISO 8601 date with optional time; the string is returned unchanged."""
    try:
        if "T" in value or "t" in value:
            _from_iso(value)
        else:
            date.fromisoformat(value)
    except ValueError:
        raise ValidationError.invalid_timestamp(ctx.at(key), key, value)
    return value


def format_timestamp(value: datetime) -> str:
    """Render a timestamp the way the API does (UTC as ``Z``)."""
    if value.microsecond % 1000 == 0:
        text = value.isoformat(timespec="milliseconds")
    else:
        text = value.isoformat()
    return text[:-6] + "Z" if text.endswith("+00:00") else text


class VariantHandler(ABC):
    """Parses and serializes one variant of a tagged union."""

    tag: Enum

    def __init__(self):
        if not hasattr(self, "tag"):
            raise NotImplementedError("Variant handler must define tag")

    @abstractmethod
    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> Any:
        """Parse a raw object whose discriminant equals ``tag``.

        Args:
            raw: Raw wire object, already known to be a dict
            ctx: Parse context positioned at ``raw``

        Returns:
            Typed value

        Raises:
            ValidationError: On the first structural violation
        """

    @abstractmethod
    def serialize(self, value: Any) -> Dict[str, Any]:
        """Serialize a typed value back to its wire object."""


class VariantRegistry:
    """Discriminant dispatch over a closed set of variant handlers.

    Registries are filled at import time and only read afterwards, so they can
    be shared between threads.
    """

    def __init__(self, kind: str, tags: Type[Enum], field: str = "type"):
        """Initialize registry.

        Args:
            kind: Name of the union, used in UnknownVariant errors
            tags: Enumeration of valid discriminant values
            field: Name of the discriminant field
        """
        self.kind = kind
        self.tags = tags
        self.field = field
        self._handlers: Dict[Enum, VariantHandler] = {}

    def register(self, handler: VariantHandler) -> None:
        if not isinstance(handler, VariantHandler):
            raise TypeError("Handler must be a VariantHandler instance")
        if not isinstance(handler.tag, self.tags):
            raise TypeError(f"Handler tag {handler.tag!r} is not a {self.tags.__name__}")
        self._handlers[handler.tag] = handler

    def register_all(self, handlers: Iterable[VariantHandler]) -> "VariantRegistry":
        for handler in handlers:
            self.register(handler)
        return self

    def is_complete(self) -> bool:
        """Whether every tag of the enumeration has a handler."""
        return all(tag in self._handlers for tag in self.tags)

    def get_handler(self, tag: Union[Enum, str]) -> VariantHandler:
        """Get the handler for a tag.

        Raises:
            KeyError: If no handler is registered for the tag
        """
        if isinstance(tag, str) and not isinstance(tag, self.tags):
            try:
                tag = self.tags(tag)
            except ValueError:
                raise KeyError(f"Invalid {self.kind} tag: {tag}")
        if tag not in self._handlers:
            raise KeyError(f"No handler registered for {self.kind} tag: {tag.value}")
        return self._handlers[tag]

    def resolve_tag(self, raw: Any, ctx: ParseContext) -> Enum:
        """Extract and check the discriminant of a raw object."""
        obj = require_object(raw, ctx, self.kind)
        tag_path = ctx.at(self.field)
        if self.field not in obj or obj[self.field] is None:
            raise ValidationError.missing_discriminant(tag_path, self.field)
        value = obj[self.field]
        try:
            tag = self.tags(value) if isinstance(value, str) else None
        except ValueError:
            tag = None
        if tag is None or tag not in self._handlers:
            raise ValidationError.unknown_variant(tag_path, self.kind, value)
        return tag

    def parse(self, raw: Any, ctx: ParseContext) -> Any:
        """Dispatch a raw object to the handler selected by its discriminant."""
        tag = self.resolve_tag(raw, ctx)
        logger.debug(f"Parsing {self.kind} variant {tag.value} at {ctx.path or '<root>'}")
        return self._handlers[tag].parse(raw, ctx)

    def serialize(self, value: Any) -> Dict[str, Any]:
        return self.get_handler(value.type).serialize(value)


class PropertyHandler(VariantHandler):
    """Base fields of every property definition; subclasses handle the config."""

    tag: PropertyType

    @abstractmethod
    def parse_config(self, raw: Dict[str, Any], ctx: ParseContext) -> PropertyConfig:
        """Parse the type-specific configuration of a property.

        Args:
            raw: The whole raw property object
            ctx: Parse context positioned at the property

        Returns:
            Config instance of the class registered for ``tag``
        """

    @abstractmethod
    def serialize_config(self, config: PropertyConfig) -> Dict[str, Any]:
        """Wire keys carrying the configuration, merged into the property object."""

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> PropertyDefinition:
        property_id = require_str(raw, "id", ctx)
        name = require_str(raw, "name", ctx)
        if ctx.config.strict_payload_keys:
            self.check_foreign_payloads(raw, ctx)
        return PropertyDefinition(
            id=property_id,
            name=name,
            type=self.tag,
            config=self.parse_config(raw, ctx),
        )

    def check_foreign_payloads(self, raw: Dict[str, Any], ctx: ParseContext) -> None:
        """Reject payload keys that belong to another property type."""
        for other in PropertyType:
            if other != self.tag and other.value in raw:
                raise ValidationError(
                    ErrorKind.SHAPE_MISMATCH,
                    ctx.at(other.value),
                    f"{self.tag.value} property must not carry a '{other.value}' payload",
                    {"kind": self.tag.value, "expected": self.tag.value},
                )

    def serialize(self, value: PropertyDefinition) -> Dict[str, Any]:
        data = {"id": value.id, "name": value.name, "type": self.tag.value}
        data.update(self.serialize_config(value.config))
        return data


class MarkerPropertyHandler(PropertyHandler):
    """Property type configured by an empty marker object, e.g. ``"title": {}``."""

    def parse_config(self, raw: Dict[str, Any], ctx: ParseContext) -> MarkerConfig:
        return MarkerConfig(raw=copy.deepcopy(require_payload(raw, self.tag.value, ctx)))

    def serialize_config(self, config: MarkerConfig) -> Dict[str, Any]:
        return {self.tag.value: copy.deepcopy(config.raw)}


class UnspecifiedPropertyHandler(PropertyHandler):
    """Property type whose configuration shape is not specified yet.

    Only the base fields are validated. The payload under the type's key, if
    any, is carried as-is and never interpreted or coerced.
    """

    def parse_config(self, raw: Dict[str, Any], ctx: ParseContext) -> OpaqueConfig:
        key = self.tag.value
        logger.debug(f"Passing through unspecified {key} payload at {ctx.path or '<root>'}")
        if key not in raw:
            return OpaqueConfig()
        return OpaqueConfig(raw=copy.deepcopy(raw[key]))

    def serialize_config(self, config: OpaqueConfig) -> Dict[str, Any]:
        if "raw" not in config.model_fields_set:
            return {}
        return {self.tag.value: copy.deepcopy(config.raw)}
