"""TableGen - aligned plain-text tables with an optional width budget."""

from __future__ import annotations

from typing import Any, Callable

from tablegen.column import Column
from tablegen.document import Document
from tablegen.errors import InvalidArgumentError
from tablegen.layout import LayoutEngine, LayoutPass
from tablegen.width import display_width


class TableGen:
    """Accumulates rows, separators and text, and renders them as a table.

    Columns are configured through :meth:`column`. When :attr:`width` is
    set, a ``stretch`` column widens to fill it and ``collapse`` columns are
    hidden as needed to fit within it.

    Example::

        table = TableGen(width=40)
        table.column(1).alignment = "right"
        table.add_header("name", "size")
        table.add_separator("-")
        table.add_row("README.md", 1024)
        print(table.render())
    """

    def __init__(self, border: str = " ", width: int | None = None) -> None:
        self.border = border
        self._document = Document()
        self._width: int | None = None
        self.width = width

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def add_row(self, *fields: Any) -> None:
        self._document.add_row(fields)

    def add_header(self, *names: Any) -> None:
        """Add a row of header labels, rendered without column formatters."""
        self._document.add_header(names)

    def add_separator(self, char: str = "=") -> None:
        self._document.add_separator(char)

    def add_text(self, text: str) -> None:
        self._document.add_text(text)

    def clear(self) -> None:
        """Remove every line, keeping column settings."""
        self._document.clear()

    def clear_all(self) -> None:
        """Remove every line and reset all columns to their defaults."""
        self._document.clear_all()

    # ------------------------------------------------------------------
    # Columns
    # ------------------------------------------------------------------

    def column(self, index: int, configure: Callable[[Column], Any] | None = None) -> Column:
        """Return the settings of column *index*, creating them if needed.

        *configure*, when given, is called with the column before it is
        returned.
        """
        col = self._document.column(index)
        if configure is not None:
            configure(col)
        return col

    def columns(
        self, *indices: int, configure: Callable[[Column], Any] | None = None
    ) -> list[Column]:
        return [self.column(index, configure) for index in indices]

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        """The width budget, or the widest rendered row when none is set."""
        if self._width is not None:
            return self._width
        return self._engine().render_pass().row_width

    @width.setter
    def width(self, value: int | None) -> None:
        if value is not None and (
            not isinstance(value, int) or isinstance(value, bool) or value < 0
        ):
            raise InvalidArgumentError(f"width must be a non-negative int or None, got {value!r}")
        self._width = value

    @property
    def real_width(self) -> int:
        """Width of the widest rendered line."""
        return max((display_width(line) for line in self._layout().lines), default=0)

    @property
    def height(self) -> int:
        """Number of lines added, before text wrapping."""
        return len(self._document.lines)

    @property
    def real_height(self) -> int:
        """Number of rendered lines, after text wrapping."""
        return len(self._layout().lines)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _engine(self) -> LayoutEngine:
        return LayoutEngine(self._document, border=self.border, width=self._width)

    def _layout(self) -> LayoutPass:
        return self._engine().fit()

    def render(self) -> str:
        """Render the table.

        Raises :class:`~tablegen.errors.ConfigurationError` for an invalid
        column setup and :class:`~tablegen.errors.WidthExceededError` when
        the table cannot be fitted into :attr:`width`.
        """
        return "\n".join(self._layout().lines)

    def __str__(self) -> str:
        return self.render()
