"""Tests for database schemas (the properties mapping)."""

import pytest

from notion_codec import (
    ErrorKind,
    ValidationError,
    ValidationErrors,
    parse_schema,
    serialize_schema,
    validate_schema,
)
from notion_codec.models import PropertyType, RollupFunction


class TestParseSchema:
    """Test parsing a whole properties mapping."""

    def test_parses_every_property(self, sample_schema):
        schema = parse_schema(sample_schema)

        assert len(schema) == 20
        assert schema["Price"].type == PropertyType.NUMBER
        assert [key for key, _ in schema] == list(sample_schema)

    def test_empty_schema(self):
        assert len(parse_schema({})) == 0

    def test_not_an_object(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_schema([])

        assert exc_info.value.kind == ErrorKind.SHAPE_MISMATCH

    def test_round_trip(self, sample_schema):
        assert serialize_schema(parse_schema(sample_schema)) == sample_schema

    def test_missing_type_path(self, sample_schema):
        sample_schema["Status"] = {"id": "st", "name": "Status"}

        with pytest.raises(ValidationErrors) as exc_info:
            parse_schema(sample_schema)

        errors = exc_info.value.errors
        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.MISSING_DISCRIMINANT
        assert errors[0].path == "Status.type"
        assert errors[0].property_name == "Status"
        assert errors[0].property_id == "st"

    def test_collects_every_failing_property(self, sample_schema):
        sample_schema["Price"]["format"] = "bitcoin"
        sample_schema["Done"] = {"id": "cb", "type": "checkbox", "checkbox": []}
        sample_schema["Stage"]["type"] = "button"

        with pytest.raises(ValidationErrors) as exc_info:
            parse_schema(sample_schema)

        errors = exc_info.value
        assert [error.path for error in errors] == ["Price.format", "Stage.type", "Done.name"]
        assert [error.kind for error in errors] == [
            ErrorKind.UNKNOWN_ENUM_VALUE,
            ErrorKind.UNKNOWN_VARIANT,
            ErrorKind.MISSING_FIELD,
        ]
        # Falls back to the mapping key when the raw object has no name
        assert errors.errors[2].property_name == "Done"

    def test_validate_schema_returns_errors(self, sample_schema):
        sample_schema["Price"]["format"] = "bitcoin"

        errors = validate_schema(sample_schema)

        assert len(errors) == 1
        assert errors[0].params == {"enum": "NumberFormat", "value": "bitcoin"}

    def test_validate_schema_valid(self, sample_schema):
        assert validate_schema(sample_schema) == []

    def test_validate_schema_not_an_object(self):
        errors = validate_schema("properties")

        assert len(errors) == 1
        assert errors[0].kind == ErrorKind.SHAPE_MISMATCH


class TestSchemaLookups:
    """Test DatabaseSchema helpers."""

    @pytest.fixture
    def schema(self, sample_schema):
        return parse_schema(sample_schema)

    def test_get_by_id(self, schema):
        assert schema.get_by_id("num").name == "Price"
        assert schema.get_by_id("missing") is None

    def test_get_by_name(self, schema):
        assert schema.get_by_name("Tags").type == PropertyType.MULTI_SELECT
        assert schema.get_by_name("Nope") is None

    def test_of_type(self, schema):
        assert [d.name for d in schema.of_type(PropertyType.ROLLUP)] == ["Project count"]
        assert schema.of_type(PropertyType.PEOPLE)[0].id == "pp"

    def test_rollup_references(self, schema):
        references = schema.rollup_references()

        assert len(references) == 1
        reference = references[0]
        assert reference.rollup_id == "ru"
        assert reference.relation_property_id == "rl"
        assert reference.relation_property_name == "Projects"
        assert reference.rollup_property_id == "title"
        assert reference.function == RollupFunction.COUNT

    def test_relations_resolved(self, schema):
        assert schema.unresolved_relations() == []

    def test_unresolved_relations(self, sample_schema):
        sample_schema["Project count"]["rollup"]["relation_property_id"] = "title"
        sample_schema["Other count"] = {
            "id": "ru2",
            "name": "Other count",
            "type": "rollup",
            "rollup": {
                "rollup_property_name": "Name",
                "relation_property_name": "Gone",
                "rollup_property_id": "x",
                "relation_property_id": "gone",
                "function": "sum",
            },
        }

        schema = parse_schema(sample_schema)

        unresolved = schema.unresolved_relations()
        assert [ref.rollup_id for ref in unresolved] == ["ru", "ru2"]
