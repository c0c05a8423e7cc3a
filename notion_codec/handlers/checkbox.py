"""Handler for checkbox property definitions."""

from ..models.enums import PropertyType
from .base import MarkerPropertyHandler


class CheckboxHandler(MarkerPropertyHandler):
    tag = PropertyType.CHECKBOX
