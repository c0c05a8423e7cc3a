"""Validation errors with path context and fail-soft collection."""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union


class ErrorKind(str, Enum):
    """Kinds of validation failure."""

    MISSING_DISCRIMINANT = "missing_discriminant"
    UNKNOWN_VARIANT = "unknown_variant"
    UNKNOWN_ENUM_VALUE = "unknown_enum_value"
    MISSING_FIELD = "missing_field"
    INVALID_LITERAL = "invalid_literal"
    INVALID_TIMESTAMP = "invalid_timestamp"
    SHAPE_MISMATCH = "shape_mismatch"


def _describe(value: Any) -> str:
    """Short JSON-ish type name used in error details."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class BaseCodecError(Exception):
    """Base exception for all codec errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "error_message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "timestamp": self.timestamp.isoformat(),
        }


class ValidationError(BaseCodecError):
    """A single structural violation at a known path.

    Attributes:
        path: Dotted location of the offending field, e.g. ``Status.type`` or
            ``[3].mention.type``. Empty for the root value.
        kind: The ErrorKind.
        detail: Human readable description.
        params: Structured arguments of the kind (``enum``, ``value``, ``tag``...).
        property_name: Name of the property being parsed, if any.
        property_id: Id of the property being parsed, if any.
    """

    def __init__(
        self,
        kind: ErrorKind,
        path: str,
        detail: str,
        params: Optional[Dict[str, Any]] = None,
        property_name: Optional[str] = None,
        property_id: Optional[str] = None,
    ):
        super().__init__(f"{path or '<root>'}: {detail}")
        self.kind = kind
        self.path = path
        self.detail = detail
        self.params = params or {}
        self.property_name = property_name
        self.property_id = property_id

    @classmethod
    def missing_discriminant(cls, path: str, field: str = "type") -> "ValidationError":
        return cls(
            ErrorKind.MISSING_DISCRIMINANT,
            path,
            f"Missing discriminant field '{field}'",
            {"field": field},
        )

    @classmethod
    def unknown_variant(cls, path: str, kind: str, tag: Any) -> "ValidationError":
        return cls(
            ErrorKind.UNKNOWN_VARIANT,
            path,
            f"Unknown {kind} variant {tag!r}",
            {"kind": kind, "tag": tag},
        )

    @classmethod
    def unknown_enum_value(cls, path: str, enum: str, value: Any) -> "ValidationError":
        return cls(
            ErrorKind.UNKNOWN_ENUM_VALUE,
            path,
            f"{value!r} is not a member of {enum}",
            {"enum": enum, "value": value},
        )

    @classmethod
    def missing_field(cls, path: str, field: str) -> "ValidationError":
        return cls(
            ErrorKind.MISSING_FIELD,
            path,
            f"Missing required field '{field}'",
            {"field": field},
        )

    @classmethod
    def invalid_literal(
        cls, path: str, field: str, expected: Any, actual: Any
    ) -> "ValidationError":
        return cls(
            ErrorKind.INVALID_LITERAL,
            path,
            f"Field '{field}' must be {expected!r}, got {actual!r}",
            {"field": field, "expected": expected, "actual": actual},
        )

    @classmethod
    def invalid_timestamp(cls, path: str, field: str, value: Any) -> "ValidationError":
        return cls(
            ErrorKind.INVALID_TIMESTAMP,
            path,
            f"Field '{field}' is not a valid ISO 8601 timestamp: {value!r}",
            {"field": field, "value": value},
        )

    @classmethod
    def shape_mismatch(
        cls, path: str, kind: str, expected: str, actual: Any = None
    ) -> "ValidationError":
        detail = f"Expected {expected} for {kind}"
        if actual is not None:
            detail += f", got {_describe(actual)}"
        return cls(
            ErrorKind.SHAPE_MISMATCH,
            path,
            detail,
            {"kind": kind, "expected": expected},
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "path": self.path,
                "kind": self.kind.value,
                "detail": self.detail,
                "params": self.params,
                "property_name": self.property_name,
                "property_id": self.property_id,
            }
        )
        return data


class ValidationErrors(BaseCodecError):
    """Ordered aggregate of validation errors from a composite value."""

    def __init__(self, errors: List[ValidationError], message: Optional[str] = None):
        self.errors = list(errors)
        super().__init__(message or self._summarize(self.errors))

    @staticmethod
    def _summarize(errors: List[ValidationError]) -> str:
        lines = [f"{len(errors)} validation error(s)"]
        lines.extend(f"  {error.message}" for error in errors)
        return "\n".join(lines)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def by_kind(self, kind: ErrorKind) -> List[ValidationError]:
        return [error for error in self.errors if error.kind == kind]

    def to_list(self) -> List[Dict[str, Any]]:
        """Path, kind and detail of every error, in order."""
        return [
            {"path": error.path, "kind": error.kind.value, "detail": error.detail}
            for error in self.errors
        ]


class ErrorCollector:
    """Accumulates errors from independent items of a composite value.

    Each item is parsed inside ``collect``; a failure is recorded under the
    item's key and parsing moves on to the next item.

    Usage:
        collector = ErrorCollector()
        for key, raw in properties.items():
            with collector.collect(key):
                parsed[key] = parse_property_definition(raw, ctx.child(key))
        collector.raise_if_errors()
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._errors: List[ValidationError] = []
        self._keys: List[Union[str, int]] = []
        self._error_counts: Dict[str, int] = {}

    @contextmanager
    def collect(self, key: Union[str, int]):
        try:
            yield
        except ValidationErrors as errors:
            for error in errors:
                self._record(key, error)
        except ValidationError as error:
            self._record(key, error)

    def _record(self, key: Union[str, int], error: ValidationError) -> None:
        self._errors.append(error)
        self._keys.append(key)
        self._error_counts[error.kind.value] = self._error_counts.get(error.kind.value, 0) + 1
        self.logger.info(f"Validation failed: {error.message}", extra=error.to_dict())

    @property
    def errors(self) -> List[ValidationError]:
        return list(self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def errors_by_key(self) -> Dict[Union[str, int], List[ValidationError]]:
        """Errors grouped by item key, keys in first-failure order."""
        grouped: Dict[Union[str, int], List[ValidationError]] = {}
        for key, error in zip(self._keys, self._errors):
            grouped.setdefault(key, []).append(error)
        return grouped

    def get_error_stats(self) -> Dict[str, Any]:
        return {
            "total_errors": len(self._errors),
            "error_counts": self._error_counts.copy(),
            "failed_items": len(set(self._keys)),
        }

    def raise_if_errors(self) -> None:
        if self._errors:
            raise ValidationErrors(self._errors)
