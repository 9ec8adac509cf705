"""tablegen: plain-text table rendering with width fitting."""

from tablegen.column import (
    Alignment,
    Column,
    ColumnSet,
    Formatter,
    HeaderAlignment,
    default_formatter,
)
from tablegen.document import Document
from tablegen.errors import (
    ConfigurationError,
    InvalidArgumentError,
    TableGenError,
    WidthExceededError,
)
from tablegen.layout import LayoutEngine, LayoutPass
from tablegen.lines import HeaderCell, Line, Row, Separator, Text
from tablegen.table import TableGen
from tablegen.width import display_width, is_wide_char, wrap_to_width

__all__ = [
    "Alignment",
    "Column",
    "ColumnSet",
    "ConfigurationError",
    "Document",
    "Formatter",
    "HeaderAlignment",
    "HeaderCell",
    "InvalidArgumentError",
    "LayoutEngine",
    "LayoutPass",
    "Line",
    "Row",
    "Separator",
    "TableGen",
    "TableGenError",
    "Text",
    "WidthExceededError",
    "default_formatter",
    "display_width",
    "is_wide_char",
    "wrap_to_width",
]
