"""Handler for formula property definitions."""

from typing import Any, Dict

from ..models.enums import PropertyType
from ..models.properties import FormulaConfig
from .base import ParseContext, PropertyHandler, require_payload, require_str


class FormulaHandler(PropertyHandler):
    """Handler for formula properties.

    The expression is kept as an opaque string; the formula language is not
    parsed.
    """

    tag = PropertyType.FORMULA

    def parse_config(self, raw: Dict[str, Any], ctx: ParseContext) -> FormulaConfig:
        payload = require_payload(raw, "formula", ctx)
        return FormulaConfig(expression=require_str(payload, "expression", ctx.child("formula")))

    def serialize_config(self, config: FormulaConfig) -> Dict[str, Any]:
        return {"formula": {"expression": config.expression}}
