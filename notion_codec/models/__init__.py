"""Typed value objects produced by the codec."""

from .enums import (
    BackgroundColor,
    Color,
    FileType,
    IconType,
    MentionType,
    NumberFormat,
    ParentType,
    PropertyType,
    RichTextType,
    RollupFunction,
    TemplateMentionType,
    TemplateToken,
)
from .rich_text import (
    Annotations,
    DatabaseMention,
    DateMention,
    Equation,
    Link,
    LinkPreviewMention,
    Mention,
    PageMention,
    RichText,
    RichTextSpan,
    TemplateMention,
    TextContent,
    UserMention,
    to_plain_text,
)
from .properties import (
    DatabaseSchema,
    FormulaConfig,
    MarkerConfig,
    NumberConfig,
    OpaqueConfig,
    PropertyDefinition,
    RollupConfig,
    RollupReference,
    SelectConfig,
    SelectOption,
)
from .references import EmojiIcon, FileReference, Icon, ParentReference, PartialUser
from .database import Database

__all__ = [
    "Annotations",
    "BackgroundColor",
    "Color",
    "Database",
    "DatabaseMention",
    "DatabaseSchema",
    "DateMention",
    "EmojiIcon",
    "Equation",
    "FileReference",
    "FileType",
    "FormulaConfig",
    "Icon",
    "IconType",
    "Link",
    "LinkPreviewMention",
    "MarkerConfig",
    "Mention",
    "MentionType",
    "NumberConfig",
    "NumberFormat",
    "OpaqueConfig",
    "PageMention",
    "ParentReference",
    "ParentType",
    "PartialUser",
    "PropertyDefinition",
    "PropertyType",
    "RichText",
    "RichTextSpan",
    "RichTextType",
    "RollupConfig",
    "RollupFunction",
    "RollupReference",
    "SelectConfig",
    "SelectOption",
    "TemplateMention",
    "TemplateMentionType",
    "TemplateToken",
    "TextContent",
    "UserMention",
    "to_plain_text",
]
