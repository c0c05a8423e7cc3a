"""Handlers for parent references."""

from typing import Any, Dict

from ..models.enums import ParentType
from ..models.references import ParentReference
from .base import ParseContext, VariantHandler, VariantRegistry, require_literal, require_str


class IdParentHandler(VariantHandler):
    """Parent identified by the id stored under the type's own key."""

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> ParentReference:
        return ParentReference(type=self.tag, id=require_str(raw, self.tag.value, ctx))

    def serialize(self, value: ParentReference) -> Dict[str, Any]:
        return {"type": self.tag.value, self.tag.value: value.id}


class DatabaseParentHandler(IdParentHandler):
    tag = ParentType.DATABASE_ID


class PageParentHandler(IdParentHandler):
    tag = ParentType.PAGE_ID


class BlockParentHandler(IdParentHandler):
    tag = ParentType.BLOCK_ID


class WorkspaceParentHandler(VariantHandler):
    """Top-level parent; ``workspace`` must be the literal ``true``."""

    tag = ParentType.WORKSPACE

    def parse(self, raw: Dict[str, Any], ctx: ParseContext) -> ParentReference:
        require_literal(raw, "workspace", True, ctx)
        return ParentReference.workspace()

    def serialize(self, value: ParentReference) -> Dict[str, Any]:
        return {"type": "workspace", "workspace": True}


parent_registry = VariantRegistry("parent", ParentType).register_all(
    [
        DatabaseParentHandler(),
        PageParentHandler(),
        BlockParentHandler(),
        WorkspaceParentHandler(),
    ]
)
