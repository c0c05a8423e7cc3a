"""Handlers for select-based property definitions (select, multi_select, status)."""

from typing import Any, Dict

from ..models.enums import Color, PropertyType
from ..models.properties import SelectConfig, SelectOption
from .base import (
    ParseContext,
    PropertyHandler,
    UnspecifiedPropertyHandler,
    parse_enum,
    require_field,
    require_list,
    require_object,
    require_payload,
    require_str,
)


def parse_select_option(raw: Any, ctx: ParseContext) -> SelectOption:
    option = require_object(raw, ctx, "select option")
    return SelectOption(
        id=require_str(option, "id", ctx),
        name=require_str(option, "name", ctx),
        color=parse_enum(Color, require_field(option, "color", ctx), ctx.child("color")),
    )


class SelectHandler(PropertyHandler):
    """Handler for select properties."""

    tag = PropertyType.SELECT

    def parse_config(self, raw: Dict[str, Any], ctx: ParseContext) -> SelectConfig:
        key = self.tag.value
        payload = require_payload(raw, key, ctx)
        payload_ctx = ctx.child(key)
        options_ctx = payload_ctx.child("options")
        options = require_list(
            require_field(payload, "options", payload_ctx), options_ctx, "options"
        )
        return SelectConfig(
            options=[
                parse_select_option(item, options_ctx.child(i)) for i, item in enumerate(options)
            ]
        )

    def serialize_config(self, config: SelectConfig) -> Dict[str, Any]:
        return {
            self.tag.value: {
                "options": [option.model_dump(mode="json") for option in config.options]
            }
        }


class MultiSelectHandler(SelectHandler):
    """Handler for multi-select properties."""

    tag = PropertyType.MULTI_SELECT


class StatusHandler(UnspecifiedPropertyHandler):
    """Handler for status properties.

    Status groups and options are not modelled yet; the payload is passed
    through and never read as a select configuration.
    """

    tag = PropertyType.STATUS
