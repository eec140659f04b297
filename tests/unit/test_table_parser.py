#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for pipe table parsing and paste detection."""

import pytest

from notedoc.ast import Mark, Paragraph, TableCell, TableHeaderCell, Text
from notedoc.parsers.table import is_markdown_table, is_separator_row, parse_table, split_table_row


def _cell_texts(row) -> list[str]:
    return ["".join(run.value for run in cell.children[0].children) for cell in row.children]


@pytest.mark.unit
class TestSplitTableRow:
    """Test splitting a line into cells."""

    def test_outer_pipes_removed(self) -> None:
        """Leading and trailing pipes do not create empty cells."""
        assert split_table_row("| a | b |") == ["a", "b"]

    def test_without_outer_pipes(self) -> None:
        """Rows without a trailing pipe still split."""
        assert split_table_row("| a | b") == ["a", "b"]

    def test_escaped_pipe_kept(self) -> None:
        """An escaped pipe stays inside the cell."""
        assert split_table_row(r"| a \| b | c |") == ["a | b", "c"]

    def test_empty_cells_kept(self) -> None:
        """Empty cells in the middle are preserved."""
        assert split_table_row("| a |  | c |") == ["a", "", "c"]


@pytest.mark.unit
class TestSeparatorRow:
    """Test separator row detection."""

    @pytest.mark.parametrize("cells", [["---", "---"], [":--", "--:"], [":-:"]])
    def test_separator(self, cells: list[str]) -> None:
        """Dashes and colons form a separator."""
        assert is_separator_row(cells)

    @pytest.mark.parametrize("cells", [[], ["a", "---"], ["1"]])
    def test_not_separator(self, cells: list[str]) -> None:
        """Any other content is not a separator."""
        assert not is_separator_row(cells)


@pytest.mark.unit
class TestParseTable:
    """Test table construction from line batches."""

    def test_fewer_than_two_lines(self) -> None:
        """A single line is not a table."""
        assert parse_table(["| a |"]) is None
        assert parse_table([]) is None

    def test_header_row_first(self) -> None:
        """The row before the separator becomes the header row."""
        table = parse_table(["| A | B |", "|---|---|", "| 1 | 2 |", "| 3 | 4 |"])
        assert table is not None
        assert len(table.children) == 3
        assert table.has_header
        assert _cell_texts(table.children[0]) == ["A", "B"]
        assert _cell_texts(table.children[2]) == ["3", "4"]
        assert all(isinstance(cell, TableHeaderCell) for cell in table.children[0].children)
        assert all(isinstance(cell, TableCell) for row in table.children[1:] for cell in row.children)

    def test_separator_dropped(self) -> None:
        """The separator row does not appear in the output."""
        table = parse_table(["| A |", "|---|"])
        assert len(table.children) == 1
        assert table.has_header

    def test_leading_separator_gives_no_header(self) -> None:
        """A separator on the first line has no row before it."""
        table = parse_table(["|---|---|", "| 1 | 2 |"])
        assert not table.has_header
        assert len(table.children) == 1

    def test_cells_are_inline_parsed(self) -> None:
        """Cell text goes through the inline parser."""
        table = parse_table(["| **a** | b |", "| c | d |"])
        assert table.children[0].children[0].children[0].children == (Text("a", marks={Mark.BOLD}),)

    def test_empty_cell_has_empty_paragraph(self) -> None:
        """An empty cell holds one empty paragraph."""
        table = parse_table(["| a |  |", "| b | c |"])
        assert table.children[0].children[1].children == (Paragraph(),)

    def test_custom_inline_parser(self) -> None:
        """The inline parser can be swapped."""
        table = parse_table(["| **a** |", "| b |"], inline_parser=lambda text: (Text(text.upper()),))
        assert _cell_texts(table.children[0]) == ["**A**"]

    def test_ragged_rows_kept(self) -> None:
        """Rows keep their own number of cells."""
        table = parse_table(["| a | b | c |", "| d |"])
        assert [len(row.children) for row in table.children] == [3, 1]


@pytest.mark.unit
class TestIsMarkdownTable:
    """Test clipboard table detection."""

    def test_table_with_separator(self) -> None:
        """A pipe table with a header separator is detected."""
        assert is_markdown_table("| A | B |\n|---|---|\n| 1 | 2 |")

    def test_surrounding_whitespace_ignored(self) -> None:
        """Leading and trailing blank lines do not matter."""
        assert is_markdown_table("\n  | A |\n  |---|\n")

    def test_single_line(self) -> None:
        """One line is never a table."""
        assert not is_markdown_table("| A | B |")

    def test_without_separator(self) -> None:
        """Pipe rows without a separator are not detected."""
        assert not is_markdown_table("| 1 | 2 |\n| 3 | 4 |")

    def test_line_without_closing_pipe(self) -> None:
        """Every line must start and end with a pipe."""
        assert not is_markdown_table("| A | B\n|---|---|")

    def test_prose(self) -> None:
        """Ordinary text is not a table."""
        assert not is_markdown_table("hello\nworld")
