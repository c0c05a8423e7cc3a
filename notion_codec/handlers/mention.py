"""Handlers for mentions and template mentions."""

from typing import Any, Dict, List, Type

from ..errors.handlers import ValidationError
from ..models.enums import TEMPLATE_TOKENS, MentionType, TemplateMentionType, TemplateToken
from ..models.rich_text import (
    DatabaseMention,
    DateMention,
    LinkPreviewMention,
    Mention,
    PageMention,
    TemplateMention,
    UserMention,
)
from .base import (
    ParseContext,
    VariantHandler,
    VariantRegistry,
    check_date_or_timestamp,
    optional_str,
    require_field,
    require_literal,
    require_payload,
    require_str,
)


class TemplateTokenHandler(VariantHandler):
    """Template mention whose payload is a bare literal token."""

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> TemplateMention:
        key = self.tag.value
        value = require_field(raw, key, ctx)
        allowed: List[TemplateToken] = list(TEMPLATE_TOKENS[self.tag])
        if value not in [token.value for token in allowed]:
            raise ValidationError.invalid_literal(
                ctx.at(key), key, [token.value for token in allowed], value
            )
        return TemplateMention(type=self.tag, token=TemplateToken(value))

    def serialize(self, value: TemplateMention) -> Dict[str, Any]:
        return {"type": self.tag.value, self.tag.value: value.token.value}


class TemplateMentionDateHandler(TemplateTokenHandler):
    tag = TemplateMentionType.DATE


class TemplateMentionUserHandler(TemplateTokenHandler):
    tag = TemplateMentionType.USER


template_mention_registry = VariantRegistry("templateMention", TemplateMentionType).register_all(
    [TemplateMentionDateHandler(), TemplateMentionUserHandler()]
)


class IdMentionHandler(VariantHandler):
    """Mention of a database or page: ``{"<type>": {"id": ...}}``."""

    model: Type

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> Mention:
        key = self.tag.value
        payload = require_payload(raw, key, ctx)
        target_id = require_str(payload, "id", ctx.child(key))
        return Mention(type=self.tag, payload=self.model(id=target_id))

    def serialize(self, value: Mention) -> Dict[str, Any]:
        return {"type": self.tag.value, self.tag.value: {"id": value.payload.id}}


class DatabaseMentionHandler(IdMentionHandler):
    tag = MentionType.DATABASE
    model = DatabaseMention


class PageMentionHandler(IdMentionHandler):
    tag = MentionType.PAGE
    model = PageMention


class UserMentionHandler(VariantHandler):
    """Mention of a user, given as a partial user object."""

    tag = MentionType.USER

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> Mention:
        payload = require_payload(raw, "user", ctx)
        user_ctx = ctx.child("user")
        require_literal(payload, "object", "user", user_ctx)
        return Mention(type=self.tag, payload=UserMention(id=require_str(payload, "id", user_ctx)))

    def serialize(self, value: Mention) -> Dict[str, Any]:
        return {"type": "user", "user": {"object": "user", "id": value.payload.id}}


class DateMentionHandler(VariantHandler):
    tag = MentionType.DATE

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> Mention:
        payload = require_payload(raw, "date", ctx)
        date_ctx = ctx.child("date")
        start = require_str(payload, "start", date_ctx)
        fields = {"start": check_date_or_timestamp(start, "start", date_ctx)}
        if "end" in payload:
            end = optional_str(payload, "end", date_ctx)
            if end is not None:
                check_date_or_timestamp(end, "end", date_ctx)
            fields["end"] = end
        if "time_zone" in payload:
            fields["time_zone"] = optional_str(payload, "time_zone", date_ctx)
        return Mention(type=self.tag, payload=DateMention(**fields))

    def serialize(self, value: Mention) -> Dict[str, Any]:
        return {"type": "date", "date": value.payload.model_dump(exclude_unset=True)}


class LinkPreviewMentionHandler(VariantHandler):
    tag = MentionType.LINK_PREVIEW

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> Mention:
        payload = require_payload(raw, "link_preview", ctx)
        url = require_str(payload, "url", ctx.child("link_preview"))
        return Mention(type=self.tag, payload=LinkPreviewMention(url=url))

    def serialize(self, value: Mention) -> Dict[str, Any]:
        return {"type": "link_preview", "link_preview": {"url": value.payload.url}}


class TemplateMentionHandler(VariantHandler):
    tag = MentionType.TEMPLATE_MENTION

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> Mention:
        require_payload(raw, "template_mention", ctx)
        template = template_mention_registry.parse(
            raw["template_mention"], ctx.child("template_mention")
        )
        return Mention(type=self.tag, payload=template)

    def serialize(self, value: Mention) -> Dict[str, Any]:
        return {
            "type": "template_mention",
            "template_mention": template_mention_registry.serialize(value.payload),
        }


mention_registry = VariantRegistry("mention", MentionType).register_all(
    [
        DatabaseMentionHandler(),
        DateMentionHandler(),
        LinkPreviewMentionHandler(),
        PageMentionHandler(),
        TemplateMentionHandler(),
        UserMentionHandler(),
    ]
)
