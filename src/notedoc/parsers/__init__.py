#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/parsers/__init__.py
"""Parsers turning Markdown text into document trees.

- inline: emphasis, code and strikethrough runs within a line
- table: pipe tables and paste detection
- markdown: the line-by-line block segmenter
"""

from notedoc.parsers.inline import InlineMatch, find_inline_matches, parse_inline
from notedoc.parsers.markdown import MarkdownParser, markdown_to_document, split_lines
from notedoc.parsers.table import is_markdown_table, is_separator_row, parse_table, split_table_row

__all__ = [
    "InlineMatch",
    "MarkdownParser",
    "find_inline_matches",
    "is_markdown_table",
    "is_separator_row",
    "markdown_to_document",
    "parse_inline",
    "parse_table",
    "split_lines",
    "split_table_row",
]
