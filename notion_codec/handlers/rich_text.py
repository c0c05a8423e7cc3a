"""Handlers for rich text spans (text, equation, mention)."""

from abc import abstractmethod
from typing import Any, Dict

from ..errors.handlers import ValidationError
from ..models.enums import BackgroundColor, Color, RichTextType
from ..models.rich_text import (
    Annotations,
    Equation,
    Link,
    Mention,
    RichTextSpan,
    SpanPayload,
    TextContent,
)
from .base import (
    ParseContext,
    VariantHandler,
    VariantRegistry,
    optional_str,
    parse_enum_union,
    require_bool,
    require_field,
    require_object,
    require_payload,
    require_str,
)
from .mention import mention_registry

ANNOTATION_FLAGS = ("bold", "italic", "strikethrough", "underline", "code")


def parse_annotations(raw: Dict[str, Any], ctx: ParseContext) -> Annotations:
    """Parse the annotations of a span according to the configured policy."""
    permissive = ctx.config.permissive_annotations
    if "annotations" not in raw:
        if permissive:
            return Annotations()
        raise ValidationError.missing_field(ctx.at("annotations"), "annotations")

    obj = require_payload(raw, "annotations", ctx)
    actx = ctx.child("annotations")
    default = False if permissive else None
    flags = {name: require_bool(obj, name, actx, default=default) for name in ANNOTATION_FLAGS}

    if "color" in obj or not permissive:
        color = parse_enum_union(
            (Color, BackgroundColor),
            require_field(obj, "color", actx),
            actx.child("color"),
            "Color",
        )
    else:
        color = Color.DEFAULT
    return Annotations(color=color, **flags)


def serialize_annotations(annotations: Annotations) -> Dict[str, Any]:
    return annotations.model_dump(mode="json")


class SpanHandler(VariantHandler):
    """Shared fields of every span; subclasses handle the payload."""

    tag: RichTextType

    @abstractmethod
    def parse_payload(self, payload: Dict[str, Any], ctx: ParseContext) -> SpanPayload:
        """Parse the object found under the span's type key."""

    @abstractmethod
    def serialize_payload(self, payload: SpanPayload) -> Dict[str, Any]:
        """Serialize the payload back to the object under the span's type key."""

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> RichTextSpan:
        key = self.tag.value
        payload = self.parse_payload(require_payload(raw, key, ctx), ctx.child(key))
        fields = {
            "type": self.tag,
            "payload": payload,
            "annotations": parse_annotations(raw, ctx),
            "plain_text": require_str(raw, "plain_text", ctx),
        }
        if "href" in raw:
            fields["href"] = optional_str(raw, "href", ctx)
        return RichTextSpan(**fields)

    def serialize(self, value: RichTextSpan) -> Dict[str, Any]:
        data = {
            "type": self.tag.value,
            self.tag.value: self.serialize_payload(value.payload),
            "annotations": serialize_annotations(value.annotations),
            "plain_text": value.plain_text,
        }
        if "href" in value.model_fields_set:
            data["href"] = value.href
        return data


class TextHandler(SpanHandler):
    tag = RichTextType.TEXT

    def parse_payload(self, payload: Dict[str, Any], ctx: ParseContext) -> TextContent:
        fields = {"content": require_str(payload, "content", ctx)}
        if "link" in payload:
            link = payload["link"]
            if link is not None:
                link_ctx = ctx.child("link")
                link_obj = require_object(link, link_ctx, "link")
                link = Link(url=require_str(link_obj, "url", link_ctx))
            fields["link"] = link
        return TextContent(**fields)

    def serialize_payload(self, payload: TextContent) -> Dict[str, Any]:
        data = {"content": payload.content}
        if "link" in payload.model_fields_set:
            data["link"] = {"url": payload.link.url} if payload.link else None
        return data


class EquationHandler(SpanHandler):
    tag = RichTextType.EQUATION

    def parse_payload(self, payload: Dict[str, Any], ctx: ParseContext) -> Equation:
        return Equation(expression=require_str(payload, "expression", ctx))

    def serialize_payload(self, payload: Equation) -> Dict[str, Any]:
        return {"expression": payload.expression}


class MentionHandler(SpanHandler):
    tag = RichTextType.MENTION

    def parse_payload(self, payload: Dict[str, Any], ctx: ParseContext) -> Mention:
        return mention_registry.parse(payload, ctx)

    def serialize_payload(self, payload: Mention) -> Dict[str, Any]:
        return mention_registry.serialize(payload)


rich_text_registry = VariantRegistry("richText", RichTextType).register_all(
    [TextHandler(), EquationHandler(), MentionHandler()]
)
