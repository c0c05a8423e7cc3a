"""Pydantic models for database property definitions."""

from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import Field, model_validator

from .base import CodecModel
from .enums import Color, NumberFormat, PropertyType, RollupFunction


class SelectOption(CodecModel):
    """Select/multi-select option."""

    id: str
    name: str
    color: Color


class MarkerConfig(CodecModel):
    """Configuration of kinds that carry no settings.

    The wire object (normally ``{}``) is kept verbatim.
    """

    raw: Dict[str, Any] = Field(default_factory=dict)


class OpaqueConfig(CodecModel):
    """Unvalidated payload of kinds whose shape is not specified yet.

    ``raw`` is whatever was found under the kind's key, or None when the key
    was absent. Nothing in the codec interprets it.
    """

    raw: Any = None


class NumberConfig(CodecModel):
    format: NumberFormat


class SelectConfig(CodecModel):
    options: List[SelectOption] = Field(default_factory=list)


class FormulaConfig(CodecModel):
    """Formula expression, an opaque interchange string."""

    expression: str


class RollupConfig(CodecModel):
    """Rollup cross-references, by name and id.

    The relation property lives in the same schema; the rollup property lives
    in the schema reached through that relation. Neither is resolved here.
    """

    rollup_property_name: str
    rollup_property_id: str
    relation_property_name: str
    relation_property_id: str
    function: RollupFunction


PropertyConfig = Union[
    NumberConfig,
    SelectConfig,
    FormulaConfig,
    RollupConfig,
    OpaqueConfig,
    MarkerConfig,
]

PROPERTY_CONFIG_TYPES = {
    PropertyType.TITLE: MarkerConfig,
    PropertyType.RICH_TEXT: MarkerConfig,
    PropertyType.NUMBER: NumberConfig,
    PropertyType.SELECT: SelectConfig,
    PropertyType.MULTI_SELECT: SelectConfig,
    PropertyType.STATUS: OpaqueConfig,
    PropertyType.DATE: MarkerConfig,
    PropertyType.PEOPLE: MarkerConfig,
    PropertyType.FILES: MarkerConfig,
    PropertyType.CHECKBOX: MarkerConfig,
    PropertyType.URL: MarkerConfig,
    PropertyType.EMAIL: MarkerConfig,
    PropertyType.PHONE_NUMBER: MarkerConfig,
    PropertyType.FORMULA: FormulaConfig,
    PropertyType.RELATION: OpaqueConfig,
    PropertyType.ROLLUP: RollupConfig,
    PropertyType.CREATED_TIME: MarkerConfig,
    PropertyType.CREATED_BY: MarkerConfig,
    PropertyType.LAST_EDITED_TIME: MarkerConfig,
    PropertyType.LAST_EDITED_BY: MarkerConfig,
}

# Kinds whose payload shape is unspecified upstream
UNSPECIFIED_PROPERTY_TYPES = frozenset(
    kind for kind, config in PROPERTY_CONFIG_TYPES.items() if config is OpaqueConfig
)


class PropertyDefinition(CodecModel):
    """One column of a database schema."""

    id: str
    name: str
    type: PropertyType
    config: PropertyConfig

    @model_validator(mode="after")
    def check_config(self):
        expected = PROPERTY_CONFIG_TYPES[self.type]
        if not isinstance(self.config, expected):
            raise ValueError(
                f"{self.type.value} property requires {expected.__name__}, "
                f"got {type(self.config).__name__}"
            )
        return self

    @property
    def is_specified(self) -> bool:
        """False for kinds whose payload is passed through unvalidated."""
        return self.type not in UNSPECIFIED_PROPERTY_TYPES


class RollupReference(CodecModel):
    """A rollup's cross-references, flattened for external resolution."""

    rollup_id: str
    rollup_name: str
    relation_property_id: str
    relation_property_name: str
    rollup_property_id: str
    rollup_property_name: str
    function: RollupFunction


class DatabaseSchema(CodecModel):
    """Property definitions of a database, keyed as on the wire."""

    properties: Dict[str, PropertyDefinition] = Field(default_factory=dict)

    def __iter__(self) -> Iterator[Tuple[str, PropertyDefinition]]:
        return iter(self.properties.items())

    def __len__(self) -> int:
        return len(self.properties)

    def __getitem__(self, key: str) -> PropertyDefinition:
        return self.properties[key]

    def get_by_id(self, property_id: str) -> Optional[PropertyDefinition]:
        for definition in self.properties.values():
            if definition.id == property_id:
                return definition
        return None

    def get_by_name(self, name: str) -> Optional[PropertyDefinition]:
        for definition in self.properties.values():
            if definition.name == name:
                return definition
        return None

    def of_type(self, property_type: PropertyType) -> List[PropertyDefinition]:
        return [d for d in self.properties.values() if d.type == property_type]

    def rollup_references(self) -> List[RollupReference]:
        """Cross-references of every rollup, for checking against a registry."""
        references = []
        for definition in self.of_type(PropertyType.ROLLUP):
            config = definition.config
            references.append(
                RollupReference(
                    rollup_id=definition.id,
                    rollup_name=definition.name,
                    relation_property_id=config.relation_property_id,
                    relation_property_name=config.relation_property_name,
                    rollup_property_id=config.rollup_property_id,
                    rollup_property_name=config.rollup_property_name,
                    function=config.function,
                )
            )
        return references

    def unresolved_relations(self) -> List[RollupReference]:
        """Rollups whose relation property is missing from this schema or is not a relation."""
        unresolved = []
        for ref in self.rollup_references():
            target = self.get_by_id(ref.relation_property_id)
            if target is None or target.type != PropertyType.RELATION:
                unresolved.append(ref)
        return unresolved
