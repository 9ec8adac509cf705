"""Per-column configuration and the densely indexed column arena."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Literal

from tablegen.errors import InvalidArgumentError

Alignment = Literal["left", "right", "center"]
HeaderAlignment = Literal["auto", "left", "right", "center"]

# (value, width_hint) -> text. The hint is the column's min_width while
# natural widths are probed and the resolved column width when rendering.
Formatter = Callable[[Any, int], Any]


def default_formatter(value: Any, width_hint: int) -> str:
    return str(value)


@dataclass(eq=False)
class Column:
    """Layout settings for one table column.

    Instances are created by :meth:`ColumnSet.get` and handed out by
    reference; mutating a field affects every later render.
    """

    alignment: Alignment = "left"
    header_alignment: HeaderAlignment = "auto"
    padding: str = " "
    min_width: int = 0
    stretch: bool = False
    collapse: bool = False
    formatter: Formatter = default_formatter

    @property
    def effective_header_alignment(self) -> str:
        """Header alignment with ``"auto"`` resolved to the row alignment."""
        if self.header_alignment == "auto":
            return self.alignment
        return self.header_alignment

    def format(self, value: Any, width_hint: int) -> str:
        result = self.formatter(value, width_hint)
        return result if isinstance(result, str) else str(result)


class ColumnSet:
    """Growable list of :class:`Column` with no holes.

    Asking for index *n* creates default columns for every missing index up
    to and including *n*, so every index below ``len(self)`` has a column.
    """

    def __init__(self) -> None:
        self._columns: list[Column] = []

    def get(self, index: int) -> Column:
        if not isinstance(index, int) or index < 0:
            raise InvalidArgumentError(f"column index must be a non-negative int, got {index!r}")
        while len(self._columns) <= index:
            self._columns.append(Column())
        return self._columns[index]

    def clear(self) -> None:
        self._columns = []

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[Column]:
        return iter(self._columns)
