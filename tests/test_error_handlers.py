"""Unit tests for validation errors and error collection."""

import logging
from unittest.mock import Mock

import pytest

from notion_codec.errors import (
    BaseCodecError,
    ErrorCollector,
    ErrorKind,
    ValidationError,
    ValidationErrors,
)


class TestValidationError:
    """Test single validation errors."""

    def test_message_includes_path(self):
        error = ValidationError.missing_field("Status.name", "name")

        assert str(error) == "Status.name: Missing required field 'name'"
        assert error.kind == ErrorKind.MISSING_FIELD
        assert isinstance(error, BaseCodecError)

    def test_root_path(self):
        error = ValidationError.shape_mismatch("", "property", "object", [])
        assert error.message == "<root>: Expected object for property, got array"

    def test_unknown_enum_value_params(self):
        error = ValidationError.unknown_enum_value("format", "NumberFormat", "bitcoin")
        assert error.params == {"enum": "NumberFormat", "value": "bitcoin"}

    def test_unknown_variant_params(self):
        error = ValidationError.unknown_variant("[3].mention.type", "mention", "emoji")

        assert error.params == {"kind": "mention", "tag": "emoji"}
        assert error.path == "[3].mention.type"

    def test_to_dict(self):
        error = ValidationError.invalid_literal("workspace", "workspace", True, False)
        error.property_name = "Parent"

        data = error.to_dict()

        assert data["error_type"] == "ValidationError"
        assert data["kind"] == "invalid_literal"
        assert data["path"] == "workspace"
        assert data["params"] == {"field": "workspace", "expected": True, "actual": False}
        assert data["property_name"] == "Parent"
        assert "timestamp" in data


class TestValidationErrors:
    """Test aggregated errors."""

    @pytest.fixture
    def errors(self):
        return ValidationErrors(
            [
                ValidationError.missing_field("a.id", "id"),
                ValidationError.unknown_enum_value("b.format", "NumberFormat", "x"),
                ValidationError.missing_field("c.name", "name"),
            ]
        )

    def test_iteration_keeps_order(self, errors):
        assert [error.path for error in errors] == ["a.id", "b.format", "c.name"]
        assert len(errors) == 3

    def test_by_kind(self, errors):
        assert [e.path for e in errors.by_kind(ErrorKind.MISSING_FIELD)] == ["a.id", "c.name"]

    def test_message_lists_errors(self, errors):
        lines = str(errors).splitlines()

        assert lines[0] == "3 validation error(s)"
        assert lines[2] == "  b.format: 'x' is not a member of NumberFormat"


class TestErrorCollector:
    """Test fail-soft collection."""

    def test_collects_and_continues(self):
        collector = ErrorCollector()
        parsed = []

        for index, value in enumerate(["a", None, "c", None]):
            with collector.collect(index):
                if value is None:
                    raise ValidationError.missing_field(f"[{index}].text", "text")
                parsed.append(value)

        assert parsed == ["a", "c"]
        assert [e.path for e in collector.errors] == ["[1].text", "[3].text"]
        assert list(collector.errors_by_key()) == [1, 3]

    def test_flattens_nested_aggregates(self):
        collector = ErrorCollector()
        nested = ValidationErrors(
            [
                ValidationError.missing_field("title[0].plain_text", "plain_text"),
                ValidationError.missing_field("title[2].plain_text", "plain_text"),
            ]
        )

        with collector.collect("title"):
            raise nested

        assert len(collector.errors) == 2
        assert collector.errors_by_key() == {"title": nested.errors}

    def test_other_exceptions_propagate(self):
        collector = ErrorCollector()

        with pytest.raises(KeyError):
            with collector.collect("x"):
                raise KeyError("x")

        assert not collector.has_errors

    def test_error_stats(self):
        collector = ErrorCollector()
        with collector.collect("a"):
            raise ValidationError.missing_field("a.id", "id")
        with collector.collect("a"):
            raise ValidationError.missing_field("a.name", "name")
        with collector.collect("b"):
            raise ValidationError.unknown_variant("b.type", "property", "button")

        stats = collector.get_error_stats()

        assert stats["total_errors"] == 3
        assert stats["error_counts"] == {"missing_field": 2, "unknown_variant": 1}
        assert stats["failed_items"] == 2

    def test_raise_if_errors(self):
        collector = ErrorCollector()
        collector.raise_if_errors()

        with collector.collect(0):
            raise ValidationError.missing_field("[0].type", "type")

        with pytest.raises(ValidationErrors) as exc_info:
            collector.raise_if_errors()

        assert len(exc_info.value) == 1

    def test_logs_each_error(self):
        logger = Mock(spec=logging.Logger)
        collector = ErrorCollector(logger)

        with collector.collect("Price"):
            raise ValidationError.unknown_enum_value("Price.format", "NumberFormat", "bitcoin")

        logger.info.assert_called_once()
        args, kwargs = logger.info.call_args
        assert "Price.format" in args[0]
        assert kwargs["extra"]["kind"] == "unknown_enum_value"
