#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/parsers/table.py
"""Pipe table parser.

A table is a contiguous batch of lines starting with ``|``. Rows are split on
unescaped pipes; a row whose cells consist only of dashes, colons and spaces is
a separator row and marks the row before it as the header.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from notedoc.ast.nodes import Paragraph, Table, TableCell, TableHeaderCell, TableRow, Text
from notedoc.constants import ESCAPED_PIPE, SEPARATOR_CELL_PATTERN, TABLE_LINE_PREFIX, UNESCAPED_PIPE_PATTERN
from notedoc.parsers.inline import parse_inline

logger = logging.getLogger(__name__)

InlineParser = Callable[[str], Sequence[Text]]


def split_table_row(line: str) -> list[str]:
    r"""Split a table line into trimmed cell texts.

    One leading and one trailing pipe are removed; ``\|`` is kept as a
    literal pipe inside a cell.

    Examples
    --------
    >>> split_table_row("| a | b \\| c |")
    ['a', 'b | c']

    """
    body = line.strip()
    if body.startswith(TABLE_LINE_PREFIX):
        body = body[1:]
    if body.endswith(TABLE_LINE_PREFIX) and not body.endswith(ESCAPED_PIPE):
        body = body[:-1]
    return [cell.strip().replace(ESCAPED_PIPE, TABLE_LINE_PREFIX) for cell in UNESCAPED_PIPE_PATTERN.split(body)]


def is_separator_row(cells: Sequence[str]) -> bool:
    """Return True if every cell is made only of dashes, colons and spaces."""
    return bool(cells) and all(SEPARATOR_CELL_PATTERN.match(cell) for cell in cells)


def is_markdown_table(text: str) -> bool:
    """Detect whether pasted text is a Markdown table.

    The text must have at least two lines, every line must start and end
    with a pipe, and one line must be a separator row.

    Parameters
    ----------
    text : str
        Candidate text, e.g. from the clipboard

    Returns
    -------
    bool
        True if the text looks like a pipe table with a header separator

    """
    lines = text.strip().split("\n")
    if len(lines) < 2:
        return False

    if not all(line.strip().startswith("|") and line.strip().endswith("|") for line in lines):
        return False

    for line in lines:
        cells = [cell.strip() for cell in line.split("|") if cell.strip()]
        if is_separator_row(cells):
            return True
    return False


def _cell_paragraph(text: str, inline_parser: InlineParser) -> Paragraph:
    if not text:
        return Paragraph()
    return Paragraph(children=tuple(inline_parser(text)))


def parse_table(lines: Sequence[str], inline_parser: InlineParser = parse_inline) -> Table | None:
    """Parse a batch of pipe-table lines into a table node.

    Parameters
    ----------
    lines : sequence of str
        Consecutive lines that each start with a pipe
    inline_parser : callable, default parse_inline
        Function turning cell text into text runs

    Returns
    -------
    Table or None
        The table, or None when fewer than two lines were given

    Notes
    -----
    The first separator row decides the header: the row immediately before
    it becomes the header row (made of header cells and emitted first), and
    the separator itself is dropped. Without a separator row, every row is
    a data row. Each cell holds one paragraph; an empty cell holds an empty
    paragraph.

    """
    if len(lines) < 2:
        logger.debug("Ignoring table batch with %d line(s)", len(lines))
        return None

    rows = [split_table_row(line) for line in lines]
    separator_index = next((i for i, cells in enumerate(rows) if is_separator_row(cells)), None)

    header_index: int | None = None
    if separator_index is not None and separator_index > 0:
        header_index = separator_index - 1

    table_rows: list[TableRow] = []
    if header_index is not None:
        table_rows.append(
            TableRow(
                children=tuple(
                    TableHeaderCell(children=(_cell_paragraph(cell, inline_parser),)) for cell in rows[header_index]
                )
            )
        )

    for index, cells in enumerate(rows):
        if index == separator_index or index == header_index:
            continue
        table_rows.append(
            TableRow(children=tuple(TableCell(children=(_cell_paragraph(cell, inline_parser),)) for cell in cells))
        )

    return Table(children=tuple(table_rows))
