"""Closed enumerations shared by the parse and serialize paths.

Each enumeration is the single source of truth for its wire values. Adding a
member upstream is a breaking change and must be reflected here; unknown values
are rejected, never passed through.
"""

from enum import Enum


class PropertyType(str, Enum):
    """Notion property types."""

    TITLE = "title"
    RICH_TEXT = "rich_text"
    NUMBER = "number"
    SELECT = "select"
    MULTI_SELECT = "multi_select"
    STATUS = "status"
    DATE = "date"
    PEOPLE = "people"
    FILES = "files"
    CHECKBOX = "checkbox"
    URL = "url"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    FORMULA = "formula"
    RELATION = "relation"
    ROLLUP = "rollup"
    CREATED_TIME = "created_time"
    CREATED_BY = "created_by"
    LAST_EDITED_TIME = "last_edited_time"
    LAST_EDITED_BY = "last_edited_by"


class RichTextType(str, Enum):
    """Rich text span types."""

    TEXT = "text"
    EQUATION = "equation"
    MENTION = "mention"


class MentionType(str, Enum):
    """Mention types inside a mention span."""

    DATABASE = "database"
    DATE = "date"
    LINK_PREVIEW = "link_preview"
    PAGE = "page"
    TEMPLATE_MENTION = "template_mention"
    USER = "user"


class TemplateMentionType(str, Enum):
    """Template mention types."""

    DATE = "template_mention_date"
    USER = "template_mention_user"


class ParentType(str, Enum):
    """Parent reference types."""

    DATABASE_ID = "database_id"
    PAGE_ID = "page_id"
    BLOCK_ID = "block_id"
    WORKSPACE = "workspace"


class FileType(str, Enum):
    """File object types."""

    FILE = "file"
    EXTERNAL = "external"


class IconType(str, Enum):
    """Icon types (an emoji or a file object)."""

    EMOJI = "emoji"
    FILE = "file"
    EXTERNAL = "external"


class Color(str, Enum):
    """Foreground colors."""

    DEFAULT = "default"
    GRAY = "gray"
    BROWN = "brown"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    RED = "red"


class BackgroundColor(str, Enum):
    """Background colors, only valid in text annotations."""

    BLUE = "blue_background"
    BROWN = "brown_background"
    GRAY = "gray_background"
    GREEN = "green_background"
    ORANGE = "orange_background"
    PINK = "pink_background"
    PURPLE = "purple_background"
    RED = "red_background"
    YELLOW = "yellow_background"


class NumberFormat(str, Enum):
    """Display formats of number properties."""

    ARGENTINE_PESO = "argentine_peso"
    BAHT = "baht"
    CANADIAN_DOLLAR = "canadian_dollar"
    CHILEAN_PESO = "chilean_peso"
    COLOMBIAN_PESO = "colombian_peso"
    DANISH_KRONE = "danish_krone"
    DIRHAM = "dirham"
    DOLLAR = "dollar"
    EURO = "euro"
    FORINT = "forint"
    FRANC = "franc"
    HONG_KONG_DOLLAR = "hong_kong_dollar"
    KORUNA = "koruna"
    KRONA = "krona"
    LEU = "leu"
    LIRA = "lira"
    MEXICAN_PESO = "mexican_peso"
    NEW_TAIWAN_DOLLAR = "new_taiwan_dollar"
    NEW_ZEALAND_DOLLAR = "new_zealand_dollar"
    NORWEGIAN_KRONE = "norwegian_krone"
    NUMBER = "number"
    NUMBER_WITH_COMMAS = "number_with_commas"
    PERCENT = "percent"
    PHILIPPINE_PESO = "philippine_peso"
    POUND = "pound"
    PERUVIAN_SOL = "peruvian_sol"
    RAND = "rand"
    REAL = "real"
    RINGGIT = "ringgit"
    RIYAL = "riyal"
    RUBLE = "ruble"
    RUPEE = "rupee"
    RUPIAH = "rupiah"
    SHEKEL = "shekel"
    SINGAPORE_DOLLAR = "singapore_dollar"
    URUGUAYAN_PESO = "uruguayan_peso"
    YEN = "yen"
    YUAN = "yuan"
    WON = "won"
    ZLOTY = "zloty"


class RollupFunction(str, Enum):
    """Aggregation functions of rollup properties."""

    AVERAGE = "average"
    CHECKED = "checked"
    COUNT_PER_GROUP = "count_per_group"
    COUNT = "count"
    COUNT_VALUES = "count_values"
    DATE_RANGE = "date_range"
    EARLIEST_DATE = "earliest_date"
    EMPTY = "empty"
    LATEST_DATE = "latest_date"
    MAX = "max"
    MEDIAN = "median"
    MIN = "min"
    NOT_EMPTY = "not_empty"
    PERCENT_CHECKED = "percent_checked"
    PERCENT_EMPTY = "percent_empty"
    PERCENT_NOT_EMPTY = "percent_not_empty"
    PERCENT_PER_GROUP = "percent_per_group"
    PERCENT_UNCHECKED = "percent_unchecked"
    RANGE = "range"
    UNCHECKED = "unchecked"
    UNIQUE = "unique"
    SHOW_ORIGINAL = "show_original"
    SHOW_UNIQUE = "show_unique"
    SUM = "sum"


class TemplateToken(str, Enum):
    """Literal tokens of template mentions."""

    TODAY = "today"
    NOW = "now"
    ME = "me"


# Tokens allowed for each template mention type
TEMPLATE_TOKENS = {
    TemplateMentionType.DATE: (TemplateToken.TODAY, TemplateToken.NOW),
    TemplateMentionType.USER: (TemplateToken.ME,),
}
