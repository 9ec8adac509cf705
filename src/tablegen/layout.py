"""Layout engine: column widths, single render passes and width fitting.

A :class:`LayoutEngine` is built for one render call. The set of collapsed
columns only ever lives in local variables and the :class:`LayoutPass`
values a render produces, so nothing carries over between renders.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from tablegen.column import Column
from tablegen.document import Document
from tablegen.errors import ConfigurationError, WidthExceededError
from tablegen.lines import HeaderCell, Row, Separator, Text
from tablegen.width import display_width, wrap_to_width

logger = logging.getLogger(__name__)

_ALIGNMENTS = ("left", "right", "center")


@dataclass(frozen=True)
class LayoutPass:
    """Result of rendering the document once with a given collapsed set."""

    lines: list[str]
    collapsed: frozenset[int]
    # Widest row before trailing whitespace is stripped.
    row_width: int
    # Widest row minus the width budget; zero or less means the pass fits.
    overflow: int


def align(text: str, width: int, alignment: str, padding: str) -> str:
    """Pad *text* to *width* columns using the first character of *padding*."""
    if alignment not in _ALIGNMENTS:
        raise ConfigurationError(f"invalid alignment: {alignment!r}")
    if not padding:
        raise ConfigurationError("column padding must not be empty")

    pad = max(0, width - display_width(text))
    fill = padding[0]
    if alignment == "left":
        return text + fill * pad
    if alignment == "right":
        return fill * pad + text
    lead = pad // 2
    return fill * lead + text + fill * (pad - lead)


class LayoutEngine:
    """Lays out a :class:`Document` within an optional width budget."""

    def __init__(self, document: Document, border: str = " ", width: int | None = None) -> None:
        self._document = document
        self._border = border
        self._border_width = display_width(border)
        self._budget = width
        self._rows = document.rows()
        self._column_count = document.column_count()
        self._natural: dict[int, int] = {}

    # ------------------------------------------------------------------
    # Widths
    # ------------------------------------------------------------------

    def _column(self, index: int) -> Column:
        return self._document.column(index)

    def natural_width(self, index: int) -> int:
        """Widest formatted value in column *index*, at least its min_width."""
        cached = self._natural.get(index)
        if cached is not None:
            return cached

        col = self._column(index)
        width = 0
        for row in self._rows:
            if index >= len(row.fields):
                continue
            value = row.fields[index]
            if isinstance(value, HeaderCell):
                text = value.name
            else:
                text = col.format(value, col.min_width)
            width = max(width, display_width(text))

        width = max(width, col.min_width)
        self._natural[index] = width
        return width

    def column_widths(self, collapsed: frozenset[int]) -> dict[int, int]:
        """Resolved widths of the visible columns, stretch column included."""
        widths = {
            i: self.natural_width(i)
            for i in range(self._column_count)
            if i not in collapsed
        }
        if self._budget is None:
            return widths

        stretch = next((i for i in widths if self._column(i).stretch), None)
        if stretch is not None:
            others = sum(w for i, w in widths.items() if i != stretch)
            gaps = len(widths) - 1
            available = self._budget - others - gaps * self._border_width
            widths[stretch] = max(available, widths[stretch])
        return widths

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_row(self, row: Row, widths: dict[int, int]) -> str:
        parts: list[str] = []
        for index, value in enumerate(row.fields):
            if index not in widths:
                continue
            col = self._column(index)
            width = widths[index]
            if isinstance(value, HeaderCell):
                text = value.name
                alignment = col.effective_header_alignment
            else:
                text = col.format(value, width)
                alignment = col.alignment
            parts.append(align(text, width, alignment, col.padding))
        return self._border.join(parts)

    def render_pass(self, collapsed: frozenset[int] = frozenset()) -> LayoutPass:
        """Render every line once, hiding the columns in *collapsed*."""
        widths = self.column_widths(collapsed)

        rendered_rows = [self._render_row(row, widths) for row in self._rows]
        row_widths = [display_width(text) for text in rendered_rows]
        row_width = max(row_widths, default=0)
        if self._budget is None:
            overflow = 0
        else:
            overflow = max((w - self._budget for w in row_widths), default=0)

        table_width = row_width if self._budget is None else self._budget
        pending_rows = iter(rendered_rows)
        lines: list[str] = []
        for line in self._document.lines:
            match line:
                case Row():
                    lines.append(next(pending_rows).rstrip())
                case Separator(char=char):
                    lines.append((char * table_width).rstrip())
                case Text(text=text):
                    chunks = wrap_to_width(text, self._budget or 0)
                    lines.extend(chunk.rstrip() for chunk in chunks)
                case _:
                    raise TypeError(f"unknown line type: {type(line).__name__}")

        return LayoutPass(
            lines=lines,
            collapsed=collapsed,
            row_width=row_width,
            overflow=overflow,
        )

    # ------------------------------------------------------------------
    # Fitting
    # ------------------------------------------------------------------

    def validate(self) -> None:
        stretched = [i for i, col in enumerate(self._document.columns) if col.stretch]
        if len(stretched) > 1:
            raise ConfigurationError("only one column can be stretched")
        for i, col in enumerate(self._document.columns):
            if col.min_width < 0:
                raise ConfigurationError(f"column {i} has a negative min_width: {col.min_width}")

    def fit(self) -> LayoutPass:
        """Collapse columns until the table fits the budget.

        Each round hides the collapsible column whose natural width is
        closest to the current overflow. Columns are never restored, so
        this ends after at most one round per collapsible column.
        """
        self.validate()

        collapsed: frozenset[int] = frozenset()
        while True:
            layout = self.render_pass(collapsed)
            logger.debug(
                "layout pass collapsed=%s overflow=%d", sorted(collapsed), layout.overflow
            )
            if layout.overflow <= 0:
                return layout

            candidates = [
                i
                for i in range(self._column_count)
                if self._column(i).collapse and i not in collapsed
            ]
            if not candidates:
                logger.debug(
                    "no collapsible column left, table is %d columns over %d",
                    layout.overflow,
                    self._budget,
                )
                raise WidthExceededError(self._budget, layout.overflow)

            choice = min(candidates, key=lambda i: abs(self.natural_width(i) - layout.overflow))
            logger.debug(
                "collapsing column %d (natural width %d, overflow %d)",
                choice,
                self.natural_width(choice),
                layout.overflow,
            )
            collapsed = collapsed | {choice}
