"""Document: the ordered lines of a table plus its column specs."""

from __future__ import annotations

from typing import Any

from tablegen.column import Column, ColumnSet
from tablegen.errors import InvalidArgumentError
from tablegen.lines import HeaderCell, Line, Row, Separator, Text


class Document:
    """Ordered table content. Insertion order is rendering order."""

    def __init__(self) -> None:
        self.lines: list[Line] = []
        self.columns = ColumnSet()

    def add_row(self, fields: tuple[Any, ...]) -> None:
        if not fields:
            raise InvalidArgumentError("a row needs at least one field")
        self.lines.append(Row(tuple(fields)))

    def add_header(self, names: tuple[Any, ...]) -> None:
        if not names:
            raise InvalidArgumentError("a header needs at least one field")
        self.lines.append(Row(tuple(HeaderCell(str(name)) for name in names)))

    def add_separator(self, char: str) -> None:
        if not isinstance(char, str) or not char:
            raise InvalidArgumentError(f"separator needs a fill character, got {char!r}")
        self.lines.append(Separator(char[0]))

    def add_text(self, text: str) -> None:
        self.lines.append(Text(str(text)))

    def column(self, index: int) -> Column:
        return self.columns.get(index)

    def rows(self) -> list[Row]:
        return [line for line in self.lines if isinstance(line, Row)]

    def column_count(self) -> int:
        """Number of columns spanned by the widest row."""
        return max((len(row.fields) for row in self.rows()), default=0)

    def clear(self) -> None:
        self.lines = []

    def clear_all(self) -> None:
        self.clear()
        self.columns.clear()
