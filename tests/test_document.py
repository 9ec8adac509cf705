"""Tests for tablegen.document -- line accumulation."""

from __future__ import annotations

import pytest

from tablegen.document import Document
from tablegen.errors import InvalidArgumentError
from tablegen.lines import HeaderCell, Row, Separator, Text


class TestDocumentLines:
    """Lines are stored in insertion order as typed values."""

    def test_keeps_insertion_order(self) -> None:
        doc = Document()
        doc.add_row(("a", 1))
        doc.add_separator("-")
        doc.add_text("note")
        assert doc.lines == [Row(("a", 1)), Separator("-"), Text("note")]

    def test_header_wraps_names(self) -> None:
        doc = Document()
        doc.add_header(("name", "size"))
        assert doc.lines == [Row((HeaderCell("name"), HeaderCell("size")))]

    def test_separator_keeps_first_character(self) -> None:
        doc = Document()
        doc.add_separator("-=")
        assert doc.lines == [Separator("-")]

    def test_column_count_uses_widest_row(self) -> None:
        doc = Document()
        doc.add_row(("a",))
        doc.add_row(("a", "b", "c"))
        doc.add_text("not a row")
        assert doc.column_count() == 3


class TestDocumentValidation:
    """Invalid input raises before anything is stored."""

    def test_empty_row_rejected(self) -> None:
        doc = Document()
        with pytest.raises(InvalidArgumentError):
            doc.add_row(())
        assert doc.lines == []

    def test_empty_header_rejected(self) -> None:
        doc = Document()
        with pytest.raises(InvalidArgumentError):
            doc.add_header(())
        assert doc.lines == []

    def test_empty_separator_rejected(self) -> None:
        doc = Document()
        with pytest.raises(InvalidArgumentError):
            doc.add_separator("")
        assert doc.lines == []


class TestDocumentClear:
    """clear drops lines; clear_all also drops column settings."""

    def test_clear_keeps_columns(self) -> None:
        doc = Document()
        doc.add_row(("a",))
        doc.column(0).padding = "_"
        doc.clear()
        assert doc.lines == []
        assert doc.column(0).padding == "_"

    def test_clear_all_resets_columns(self) -> None:
        doc = Document()
        doc.add_row(("a",))
        doc.column(0).padding = "_"
        doc.clear_all()
        assert doc.lines == []
        assert doc.column(0).padding == " "
