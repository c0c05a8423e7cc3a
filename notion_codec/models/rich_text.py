"""Pydantic models for rich text spans and mentions."""

from typing import List, Optional, Union

from pydantic import model_validator

from .base import CodecModel
from .enums import (
    BackgroundColor,
    Color,
    MentionType,
    RichTextType,
    TEMPLATE_TOKENS,
    TemplateMentionType,
    TemplateToken,
)


class Annotations(CodecModel):
    """Styling of a rich text span."""

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: Union[Color, BackgroundColor] = Color.DEFAULT


class Link(CodecModel):
    """Inline link of a text span."""

    url: str


class TextContent(CodecModel):
    """Payload of a text span."""

    content: str
    link: Optional[Link] = None


class Equation(CodecModel):
    """Payload of an equation span (LaTeX expression)."""

    expression: str


class DatabaseMention(CodecModel):
    id: str


class PageMention(CodecModel):
    id: str


class UserMention(CodecModel):
    id: str


class LinkPreviewMention(CodecModel):
    url: str


class DateMention(CodecModel):
    """Date or date range; start and end are kept as the ISO 8601 strings received."""

    start: str
    end: Optional[str] = None
    time_zone: Optional[str] = None


class TemplateMention(CodecModel):
    """Template placeholder resolved when a template is applied."""

    type: TemplateMentionType
    token: TemplateToken

    @model_validator(mode="after")
    def check_token(self):
        if self.token not in TEMPLATE_TOKENS[self.type]:
            raise ValueError(f"Token {self.token.value!r} is not valid for {self.type.value}")
        return self


MentionPayload = Union[
    DatabaseMention,
    DateMention,
    LinkPreviewMention,
    PageMention,
    TemplateMention,
    UserMention,
]

MENTION_PAYLOAD_TYPES = {
    MentionType.DATABASE: DatabaseMention,
    MentionType.DATE: DateMention,
    MentionType.LINK_PREVIEW: LinkPreviewMention,
    MentionType.PAGE: PageMention,
    MentionType.TEMPLATE_MENTION: TemplateMention,
    MentionType.USER: UserMention,
}


class Mention(CodecModel):
    """Reference to another entity embedded in rich text."""

    type: MentionType
    payload: MentionPayload

    @model_validator(mode="after")
    def check_payload(self):
        expected = MENTION_PAYLOAD_TYPES[self.type]
        if not isinstance(self.payload, expected):
            raise ValueError(
                f"{self.type.value} mention requires {expected.__name__}, "
                f"got {type(self.payload).__name__}"
            )
        return self


SpanPayload = Union[TextContent, Equation, Mention]

SPAN_PAYLOAD_TYPES = {
    RichTextType.TEXT: TextContent,
    RichTextType.EQUATION: Equation,
    RichTextType.MENTION: Mention,
}


class RichTextSpan(CodecModel):
    """One styled run of text, equation or mention content."""

    type: RichTextType
    payload: SpanPayload
    annotations: Annotations = Annotations()
    plain_text: str
    href: Optional[str] = None

    @model_validator(mode="after")
    def check_payload(self):
        expected = SPAN_PAYLOAD_TYPES[self.type]
        if not isinstance(self.payload, expected):
            raise ValueError(
                f"{self.type.value} span requires {expected.__name__}, "
                f"got {type(self.payload).__name__}"
            )
        return self

    @classmethod
    def from_text(cls, text: str, link: Optional[str] = None) -> "RichTextSpan":
        """Create an unstyled text span."""
        return cls(
            type=RichTextType.TEXT,
            payload=TextContent(content=text, link=Link(url=link) if link else None),
            plain_text=text,
            href=link,
        )

    @property
    def mention(self) -> Optional[Mention]:
        return self.payload if isinstance(self.payload, Mention) else None


RichText = List[RichTextSpan]


def to_plain_text(rich_text: RichText) -> str:
    """Concatenate the plain text projections of a rich text sequence."""
    return "".join(span.plain_text for span in rich_text)
