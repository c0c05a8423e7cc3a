"""Registry of property definition handlers, one per property type."""

from ..models.enums import PropertyType
from .base import VariantRegistry
from .checkbox import CheckboxHandler
from .files import FilesHandler
from .formula import FormulaHandler
from .number import NumberHandler
from .relation import RelationHandler
from .rollup import RollupHandler
from .select import MultiSelectHandler, SelectHandler, StatusHandler
from .text import RichTextHandler, TitleHandler
from .timestamp import CreatedTimeHandler, DateHandler, LastEditedTimeHandler
from .url import EmailHandler, PhoneHandler, URLHandler
from .user import CreatedByHandler, LastEditedByHandler, PeopleHandler

property_registry = VariantRegistry("property", PropertyType).register_all(
    [
        TitleHandler(),
        RichTextHandler(),
        NumberHandler(),
        SelectHandler(),
        MultiSelectHandler(),
        StatusHandler(),
        DateHandler(),
        PeopleHandler(),
        FilesHandler(),
        CheckboxHandler(),
        URLHandler(),
        EmailHandler(),
        PhoneHandler(),
        FormulaHandler(),
        RelationHandler(),
        RollupHandler(),
        CreatedTimeHandler(),
        CreatedByHandler(),
        LastEditedTimeHandler(),
        LastEditedByHandler(),
    ]
)
