"""Handlers for date and timestamp property definitions."""

from ..models.enums import PropertyType
from .base import MarkerPropertyHandler


class DateHandler(MarkerPropertyHandler):
    tag = PropertyType.DATE


class CreatedTimeHandler(MarkerPropertyHandler):
    tag = PropertyType.CREATED_TIME


class LastEditedTimeHandler(MarkerPropertyHandler):
    tag = PropertyType.LAST_EDITED_TIME
