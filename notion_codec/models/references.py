"""Pydantic models for parent references, files, icons and users."""

from datetime import datetime, timezone
from typing import Literal, Optional, Union

from pydantic import model_validator

from .base import CodecModel
from .enums import FileType, ParentType


class ParentReference(CodecModel):
    """What contains an entity.

    ``id`` is set for database, page and block parents and None for the
    workspace.
    """

    type: ParentType
    id: Optional[str] = None

    @model_validator(mode="after")
    def check_id(self):
        if self.type == ParentType.WORKSPACE and self.id is not None:
            raise ValueError("Workspace parent carries no id")
        if self.type != ParentType.WORKSPACE and self.id is None:
            raise ValueError(f"{self.type.value} parent requires an id")
        return self

    @classmethod
    def workspace(cls) -> "ParentReference":
        return cls(type=ParentType.WORKSPACE)


class FileReference(CodecModel):
    """A hosted or external file.

    Hosted (``file``) URLs are only valid until ``expiry_time``; they must not
    be persisted past that instant. External URLs are stable.
    """

    type: FileType
    url: str
    expiry_time: Optional[datetime] = None
    name: Optional[str] = None

    @model_validator(mode="after")
    def check_expiry(self):
        if self.type == FileType.FILE and self.expiry_time is None:
            raise ValueError("Hosted file requires expiry_time")
        if self.type == FileType.EXTERNAL and self.expiry_time is not None:
            raise ValueError("External file has no expiry_time")
        return self

    @property
    def is_hosted(self) -> bool:
        return self.type == FileType.FILE

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Whether a hosted URL has expired. External URLs never expire."""
        if self.expiry_time is None:
            return False
        now = now or datetime.now(timezone.utc)
        expiry = self.expiry_time
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now >= expiry


class EmojiIcon(CodecModel):
    type: Literal["emoji"] = "emoji"
    emoji: str


Icon = Union[EmojiIcon, FileReference]


class PartialUser(CodecModel):
    """User reference carrying only the id."""

    object: Literal["user"] = "user"
    id: str
