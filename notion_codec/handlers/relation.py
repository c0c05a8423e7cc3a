"""Handler for relation property definitions."""

from ..models.enums import PropertyType
from .base import UnspecifiedPropertyHandler


class RelationHandler(UnspecifiedPropertyHandler):
    """Handler for relation properties.

    The relation configuration (target database, dual property...) has no
    agreed shape yet, so it is passed through untouched.
    """

    tag = PropertyType.RELATION
