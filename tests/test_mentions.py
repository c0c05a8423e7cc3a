"""Tests for mention and template mention spans."""

import pytest

from conftest import make_mention_span
from notion_codec import (
    ErrorKind,
    ValidationError,
    parse_rich_text_span,
    serialize_rich_text,
)
from notion_codec.models import (
    DatabaseMention,
    DateMention,
    LinkPreviewMention,
    MentionType,
    PageMention,
    TemplateMention,
    TemplateMentionType,
    TemplateToken,
    UserMention,
)

MINIMAL_MENTIONS = {
    "database": ({"type": "database", "database": {"id": "db-1"}}, DatabaseMention),
    "date": ({"type": "date", "date": {"start": "2024-01-31T09:00:00.000+02:00"}}, DateMention),
    "link_preview": (
        {"type": "link_preview", "link_preview": {"url": "https://example.com"}},
        LinkPreviewMention,
    ),
    "page": ({"type": "page", "page": {"id": "page-1"}}, PageMention),
    "template_mention": (
        {
            "type": "template_mention",
            "template_mention": {
                "type": "template_mention_user",
                "template_mention_user": "me",
            },
        },
        TemplateMention,
    ),
    "user": ({"type": "user", "user": {"object": "user", "id": "user-1"}}, UserMention),
}


def parse_mention(mention):
    return parse_rich_text_span(make_mention_span(mention, "@x")).mention


class TestMentionTypes:
    """Every mention type parses from a minimal payload."""

    @pytest.mark.parametrize("tag", sorted(MINIMAL_MENTIONS))
    def test_minimal_mention(self, tag):
        raw, payload_class = MINIMAL_MENTIONS[tag]

        mention = parse_mention(raw)

        assert mention.type == MentionType(tag)
        assert isinstance(mention.payload, payload_class)

    def test_all_types_covered(self):
        assert set(MINIMAL_MENTIONS) == {tag.value for tag in MentionType}

    @pytest.mark.parametrize("tag", sorted(MINIMAL_MENTIONS))
    def test_round_trip(self, tag):
        raw = make_mention_span(MINIMAL_MENTIONS[tag][0], "@x")
        assert serialize_rich_text([parse_rich_text_span(raw)]) == [raw]


class TestTemplateMentions:
    """Test template mention tokens."""

    def test_me_token(self):
        raw = [
            {
                "type": "mention",
                "mention": {
                    "type": "template_mention",
                    "template_mention": {
                        "type": "template_mention_user",
                        "template_mention_user": "me",
                    },
                },
                "annotations": {
                    "bold": False,
                    "italic": False,
                    "strikethrough": False,
                    "underline": False,
                    "code": False,
                    "color": "default",
                },
                "plain_text": "@me",
            }
        ]

        span = parse_rich_text_span(raw[0])

        template = span.mention.payload
        assert template.type == TemplateMentionType.USER
        assert template.token == TemplateToken.ME
        assert template.token.value == "me"

    @pytest.mark.parametrize("token", ["today", "now"])
    def test_date_tokens(self, token):
        mention = parse_mention(
            {
                "type": "template_mention",
                "template_mention": {
                    "type": "template_mention_date",
                    "template_mention_date": token,
                },
            }
        )
        assert mention.payload.token.value == token

    def test_invalid_token(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_mention(
                {
                    "type": "template_mention",
                    "template_mention": {
                        "type": "template_mention_user",
                        "template_mention_user": "today",
                    },
                }
            )

        error = exc_info.value
        assert error.kind == ErrorKind.INVALID_LITERAL
        assert error.path == "mention.template_mention.template_mention_user"
        assert error.params["expected"] == ["me"]
        assert error.params["actual"] == "today"

    def test_unknown_template_type(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_mention(
                {
                    "type": "template_mention",
                    "template_mention": {"type": "template_mention_page"},
                }
            )

        assert exc_info.value.kind == ErrorKind.UNKNOWN_VARIANT
        assert exc_info.value.path == "mention.template_mention.type"
        assert exc_info.value.params["kind"] == "templateMention"

    def test_model_rejects_mismatched_token(self):
        with pytest.raises(ValueError):
            TemplateMention(type=TemplateMentionType.DATE, token=TemplateToken.ME)


class TestMentionErrors:
    """Test structural errors inside mentions."""

    def test_missing_mention_type(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_mention({"page": {"id": "p"}})

        assert exc_info.value.kind == ErrorKind.MISSING_DISCRIMINANT
        assert exc_info.value.path == "mention.type"

    def test_missing_page_id(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_mention({"type": "page", "page": {}})

        assert exc_info.value.kind == ErrorKind.MISSING_FIELD
        assert exc_info.value.path == "mention.page.id"

    def test_user_object_literal(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_mention({"type": "user", "user": {"object": "bot", "id": "u"}})

        assert exc_info.value.kind == ErrorKind.INVALID_LITERAL
        assert exc_info.value.path == "mention.user.object"

    def test_invalid_date_start(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_mention({"type": "date", "date": {"start": "next tuesday"}})

        assert exc_info.value.kind == ErrorKind.INVALID_TIMESTAMP
        assert exc_info.value.path == "mention.date.start"

    def test_invalid_date_end(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_mention({"type": "date", "date": {"start": "2024-01-01", "end": "2024-13-01"}})

        assert exc_info.value.kind == ErrorKind.INVALID_TIMESTAMP
        assert exc_info.value.path == "mention.date.end"

    def test_date_range_with_time_zone(self):
        mention = parse_mention(
            {
                "type": "date",
                "date": {
                    "start": "2024-01-01T10:00:00",
                    "end": "2024-01-02T10:00:00",
                    "time_zone": "Europe/Paris",
                },
            }
        )

        assert mention.payload.end == "2024-01-02T10:00:00"
        assert mention.payload.time_zone == "Europe/Paris"

    def test_mention_keeps_reference_only(self):
        mention = parse_mention({"type": "page", "page": {"id": "page-1"}})
        assert mention.payload.model_dump() == {"id": "page-1"}
