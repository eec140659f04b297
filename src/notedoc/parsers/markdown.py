#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/parsers/markdown.py
"""Markdown to document tree converter.

This module converts the Markdown produced by the note assistant (and typed by
users) into the editor's document tree. It is a single forward pass over the
input lines, not a general CommonMark implementation: each line is classified
by the first rule that matches, in this order:

1. blank line: ends the current paragraph
2. heading: ``#`` to ``######`` followed by a space
3. bullet list item: ``-`` or ``*`` followed by a space
4. ordered list item: digits, ``.`` and a space
5. fenced code block: a line starting with three backticks; following lines
   are taken verbatim up to the closing fence or the end of input
6. block quote: ``>`` followed by a space, one quote per line
7. table: a line starting with ``|``, together with every following line that
   also starts with ``|``
8. anything else is paragraph text

A list item only joins the previous block when that block is a list of the
same kind, so any other block or a blank line starts a new list.

"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from notedoc.ast.builder import DocumentBuilder
from notedoc.ast.nodes import Document, Text
from notedoc.constants import (
    BLOCKQUOTE_PATTERN,
    CODE_FENCE,
    HEADING_PATTERN,
    ORDERED_ITEM_PATTERN,
    TABLE_LINE_PREFIX,
    UNORDERED_ITEM_PATTERN,
)
from notedoc.options.base import ensure_options
from notedoc.options.markdown import MarkdownParserOptions
from notedoc.parsers.inline import parse_inline
from notedoc.parsers.table import parse_table

logger = logging.getLogger(__name__)


def _list_start(digits: str) -> int:
    try:
        return int(digits)
    except ValueError:
        logger.debug("Ordered list number with %d digits is too long; starting at 1", len(digits))
        return 1


def split_lines(text: str) -> list[str]:
    """Split text into physical lines, normalizing Windows and old Mac endings."""
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


class MarkdownParser:
    r"""Convert Markdown text into a document tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\n\nThis is **bold**.")
        >>> [child.kind.value for child in doc.children]
        ['heading', 'paragraph']

    Keep pipe lines as text:

        >>> parser = MarkdownParser(MarkdownParserOptions(parse_tables=False))

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the parser with options."""
        self.options: MarkdownParserOptions = ensure_options(options, MarkdownParserOptions, "markdown")

    def parse_inline(self, text: str) -> tuple[Text, ...]:
        """Parse inline runs, honouring the ``parse_inline`` option."""
        if not self.options.parse_inline:
            return (Text(text),)
        return parse_inline(text)

    def parse(self, text: str) -> Document:
        """Parse Markdown text into a document.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        Document
            New document; empty when the text is empty or only whitespace

        """
        if not text or not text.strip():
            return Document()

        lines = split_lines(text)
        builder = DocumentBuilder()
        paragraph: list[str] = []

        def flush_paragraph() -> None:
            joined = "\n".join(paragraph).strip()
            paragraph.clear()
            if joined:
                builder.add_paragraph(self.parse_inline(joined))

        index = 0
        while index < len(lines):
            line = lines[index]
            stripped = line.strip()

            if not stripped:
                flush_paragraph()
                builder.end_list()
                index += 1
                continue

            heading = HEADING_PATTERN.match(stripped)
            if heading:
                flush_paragraph()
                level = min(len(heading.group(1)), self.options.max_heading_level)
                builder.add_heading(level, self.parse_inline(heading.group(2).strip()))
                index += 1
                continue

            bullet = UNORDERED_ITEM_PATTERN.match(stripped)
            if bullet:
                flush_paragraph()
                builder.add_list_item(self.parse_inline(bullet.group(1)), ordered=False)
                index += 1
                continue

            numbered = ORDERED_ITEM_PATTERN.match(stripped)
            if numbered:
                flush_paragraph()
                start = _list_start(numbered.group(1))
                builder.add_list_item(self.parse_inline(numbered.group(2)), ordered=True, start=start)
                index += 1
                continue

            if stripped.startswith(CODE_FENCE):
                flush_paragraph()
                index = self._consume_code_block(lines, index, builder)
                continue

            quote = BLOCKQUOTE_PATTERN.match(stripped)
            if quote:
                flush_paragraph()
                builder.add_block_quote(self.parse_inline(quote.group(1)))
                index += 1
                continue

            if self.options.parse_tables and stripped.startswith(TABLE_LINE_PREFIX):
                flush_paragraph()
                index = self._consume_table(lines, index, builder)
                continue

            paragraph.append(line)
            index += 1

        flush_paragraph()
        document = builder.get_document()
        logger.debug("Converted %d line(s) into %d block(s)", len(lines), len(document.children))
        return document

    def _consume_code_block(self, lines: Sequence[str], index: int, builder: DocumentBuilder) -> int:
        language: Optional[str] = lines[index].strip()[len(CODE_FENCE) :].strip() or None
        index += 1
        code_lines: list[str] = []
        while index < len(lines) and not lines[index].strip().startswith(CODE_FENCE):
            code_lines.append(lines[index])
            index += 1
        if index >= len(lines):
            logger.debug("Code block opened without a closing fence; taking the rest of the input")
        builder.add_code_block("\n".join(code_lines), language=language)
        # Skip the closing fence, if there is one.
        return index + 1

    def _consume_table(self, lines: Sequence[str], index: int, builder: DocumentBuilder) -> int:
        batch: list[str] = []
        while index < len(lines) and lines[index].strip().startswith(TABLE_LINE_PREFIX):
            batch.append(lines[index])
            index += 1
        table = parse_table(batch, inline_parser=self.parse_inline)
        if table is not None:
            builder.add_node(table)
        return index


def markdown_to_document(text: str, options: MarkdownParserOptions | None = None) -> Document:
    """Convert Markdown text into a document tree.

    Parameters
    ----------
    text : str
        Markdown source
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Returns
    -------
    Document
        New document tree

    """
    return MarkdownParser(options).parse(text)
