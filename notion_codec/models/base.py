"""Base model for codec value objects."""

from pydantic import BaseModel, ConfigDict


class CodecModel(BaseModel):
    """Immutable value object. Replace the whole record to change it."""

    model_config = ConfigDict(frozen=True, extra="forbid")
