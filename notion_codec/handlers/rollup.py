"""Handler for rollup property definitions."""

from typing import Any, Dict

from ..models.enums import PropertyType, RollupFunction
from ..models.properties import RollupConfig
from .base import (
    ParseContext,
    PropertyHandler,
    parse_enum,
    require_field,
    require_payload,
    require_str,
)

REFERENCE_FIELDS = (
    "rollup_property_name",
    "relation_property_name",
    "rollup_property_id",
    "relation_property_id",
)


class RollupHandler(PropertyHandler):
    """Handler for rollup properties.

    References are kept by name and id; whether they resolve is up to the
    caller (see ``DatabaseSchema.rollup_references``).
    """

    tag = PropertyType.ROLLUP

    def parse_config(self, raw: Dict[str, Any], ctx: ParseContext) -> RollupConfig:
        payload = require_payload(raw, "rollup", ctx)
        rollup_ctx = ctx.child("rollup")
        references = {key: require_str(payload, key, rollup_ctx) for key in REFERENCE_FIELDS}
        function = parse_enum(
            RollupFunction,
            require_field(payload, "function", rollup_ctx),
            rollup_ctx.child("function"),
        )
        return RollupConfig(function=function, **references)

    def serialize_config(self, config: RollupConfig) -> Dict[str, Any]:
        return {"rollup": config.model_dump(mode="json")}
