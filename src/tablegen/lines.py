"""Document line variants.

A document is an ordered list of :data:`Line` values; the layout engine
dispatches on the concrete type with ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HeaderCell:
    """A row cell holding a header label.

    Header cells bypass the column formatter and use the column's header
    alignment.
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Row:
    fields: tuple[Any, ...]


@dataclass(frozen=True)
class Separator:
    """A line filled with *char* across the whole table width."""

    char: str


@dataclass(frozen=True)
class Text:
    """Free text, wrapped to the table width when one is set."""

    text: str


Line = Row | Separator | Text
