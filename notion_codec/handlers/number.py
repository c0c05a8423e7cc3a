"""Handler for number property definitions."""

from typing import Any, Dict

from ..models.enums import NumberFormat, PropertyType
from ..models.properties import NumberConfig
from .base import ParseContext, PropertyHandler, parse_enum, require_field


class NumberHandler(PropertyHandler):
    """Handler for number properties.

    The display format sits at the top level of the property object.
    """

    tag = PropertyType.NUMBER

    def parse_config(self, raw: Dict[str, Any], ctx: ParseContext) -> NumberConfig:
        value = require_field(raw, "format", ctx)
        return NumberConfig(format=parse_enum(NumberFormat, value, ctx.child("format")))

    def serialize_config(self, config: NumberConfig) -> Dict[str, Any]:
        return {"format": config.format.value}
