"""Handlers for file objects, icons and the files property definition."""

from typing import Any, Dict

from ..models.enums import FileType, IconType, PropertyType
from ..models.references import EmojiIcon, FileReference
from .base import (
    MarkerPropertyHandler,
    ParseContext,
    VariantHandler,
    VariantRegistry,
    format_timestamp,
    optional_str,
    parse_timestamp,
    require_payload,
    require_str,
)


class FilesHandler(MarkerPropertyHandler):
    """Handler for files property definitions."""

    tag = PropertyType.FILES


class FileObjectHandler(VariantHandler):
    """Shared parsing of the ``name`` that file objects in page values carry."""

    def parse_name(self, raw: Dict[str, Any], ctx: ParseContext) -> Dict[str, Any]:
        if "name" in raw:
            return {"name": optional_str(raw, "name", ctx)}
        return {}

    def serialize_name(self, value: FileReference, data: Dict[str, Any]) -> Dict[str, Any]:
        if "name" in value.model_fields_set:
            data["name"] = value.name
        return data


class HostedFileHandler(FileObjectHandler):
    """File uploaded to the service; its URL expires at ``expiry_time``."""

    tag = FileType.FILE

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> FileReference:
        payload = require_payload(raw, "file", ctx)
        file_ctx = ctx.child("file")
        return FileReference(
            type=self.tag,
            url=require_str(payload, "url", file_ctx),
            expiry_time=parse_timestamp(payload, "expiry_time", file_ctx),
            **self.parse_name(raw, ctx),
        )

    def serialize(self, value: FileReference) -> Dict[str, Any]:
        data = {
            "type": "file",
            "file": {"url": value.url, "expiry_time": format_timestamp(value.expiry_time)},
        }
        return self.serialize_name(value, data)


class ExternalFileHandler(FileObjectHandler):
    """File hosted elsewhere, referenced by a stable URL."""

    tag = FileType.EXTERNAL

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> FileReference:
        payload = require_payload(raw, "external", ctx)
        return FileReference(
            type=self.tag,
            url=require_str(payload, "url", ctx.child("external")),
            **self.parse_name(raw, ctx),
        )

    def serialize(self, value: FileReference) -> Dict[str, Any]:
        return self.serialize_name(value, {"type": "external", "external": {"url": value.url}})


file_registry = VariantRegistry("file", FileType).register_all(
    [HostedFileHandler(), ExternalFileHandler()]
)


class EmojiIconHandler(VariantHandler):
    tag = IconType.EMOJI

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> EmojiIcon:
        return EmojiIcon(emoji=require_str(raw, "emoji", ctx))

    def serialize(self, value: EmojiIcon) -> Dict[str, Any]:
        return {"type": "emoji", "emoji": value.emoji}


class FileIconHandler(VariantHandler):
    """Icon given as a file object; delegates to the file registry."""

    def __init__(self, tag: IconType):
        self.tag = tag
        super().__init__()

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> FileReference:
        return file_registry.get_handler(self.tag.value).parse(raw, ctx)

    def serialize(self, value: FileReference) -> Dict[str, Any]:
        return file_registry.serialize(value)


icon_registry = VariantRegistry("icon", IconType).register_all(
    [EmojiIconHandler(), FileIconHandler(IconType.FILE), FileIconHandler(IconType.EXTERNAL)]
)
