"""Handlers for user-valued property definitions."""

from ..models.enums import PropertyType
from .base import MarkerPropertyHandler


class PeopleHandler(MarkerPropertyHandler):
    tag = PropertyType.PEOPLE


class CreatedByHandler(MarkerPropertyHandler):
    tag = PropertyType.CREATED_BY


class LastEditedByHandler(MarkerPropertyHandler):
    tag = PropertyType.LAST_EDITED_BY
