"""Pydantic model for the database resource."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CodecModel
from .properties import DatabaseSchema
from .references import FileReference, Icon, ParentReference, PartialUser
from .rich_text import RichText, to_plain_text


class Database(CodecModel):
    """A database: its metadata plus the property schema pages must conform to."""

    object: Literal["database"] = "database"
    id: str
    created_time: datetime
    created_by: PartialUser
    last_edited_time: datetime
    last_edited_by: PartialUser
    title: RichText = Field(default_factory=list)
    description: RichText = Field(default_factory=list)
    icon: Optional[Icon] = None
    cover: Optional[FileReference] = None
    properties: DatabaseSchema = Field(default_factory=DatabaseSchema)
    parent: ParentReference
    url: str
    archived: bool = False
    is_inline: bool = False

    @property
    def plain_title(self) -> str:
        return to_plain_text(self.title)
