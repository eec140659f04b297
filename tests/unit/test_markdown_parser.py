#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for Markdown to document tree conversion."""

import pytest

from notedoc import convert
from notedoc.ast import (
    BlockQuote,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    ListItem,
    Mark,
    OrderedList,
    Paragraph,
    Table,
    TableCell,
    TableHeaderCell,
    Text,
)
from notedoc.options import MarkdownParserOptions
from notedoc.parsers.markdown import MarkdownParser, markdown_to_document, split_lines


@pytest.mark.unit
class TestEmptyInput:
    """Test empty and blank input."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", " \t \n  "])
    def test_blank_input_gives_empty_document(self, text: str) -> None:
        """Whitespace-only input converts to an empty document."""
        assert convert(text) == Document()


@pytest.mark.unit
class TestHeadings:
    """Test heading lines."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading_levels(self, level: int) -> None:
        """The number of hashes gives the level."""
        doc = convert("#" * level + " Title")
        heading = doc.children[0]
        assert isinstance(heading, Heading)
        assert heading.level == level
        assert heading.children == (Text("Title"),)

    def test_heading_with_inline_marks(self) -> None:
        """Heading text goes through the inline parser."""
        heading = convert("## A **bold** plan").children[0]
        assert heading.children[1] == Text("bold", marks={Mark.BOLD})

    def test_excess_hashes_clamped(self) -> None:
        """More than six hashes clamp to the configured maximum."""
        assert convert("######## Deep").children[0].level == 6
        options = MarkdownParserOptions(max_heading_level=3)
        assert convert("##### Deep", parser_options=options).children[0].level == 3

    def test_hash_without_space_is_paragraph(self) -> None:
        """A hash not followed by a space is paragraph text."""
        assert isinstance(convert("#hashtag").children[0], Paragraph)

    def test_hash_then_tab_is_paragraph(self) -> None:
        """Only spaces separate the hashes from the heading text."""
        assert isinstance(convert("#\tTitle").children[0], Paragraph)
        assert convert("#   Title").children[0] == Heading(level=1, children=(Text("Title"),))

    def test_heading_ends_paragraph(self) -> None:
        """A heading line closes the open paragraph."""
        doc = convert("intro\n# Title")
        assert [type(child) for child in doc.children] == [Paragraph, Heading]


@pytest.mark.unit
class TestParagraphs:
    """Test paragraph grouping."""

    def test_consecutive_lines_share_a_paragraph(self) -> None:
        """Lines without a blank line between them form one paragraph."""
        doc = convert("first line\nsecond line")
        assert doc.children == (Paragraph(children=(Text("first line\nsecond line"),)),)

    def test_blank_line_separates_paragraphs(self) -> None:
        """A blank line starts a new paragraph."""
        doc = convert("one\n\ntwo")
        assert len(doc.children) == 2

    def test_windows_line_endings(self) -> None:
        """CRLF input is split like LF input."""
        assert convert("one\r\n\r\ntwo") == convert("one\n\ntwo")

    def test_no_empty_paragraphs_emitted(self) -> None:
        """Multiple blank lines do not produce empty paragraphs."""
        doc = convert("a\n\n\n\nb")
        assert all(child.children for child in doc.children)


@pytest.mark.unit
class TestLists:
    """Test list grouping and interruption."""

    def test_consecutive_items_form_one_list(self) -> None:
        """Three bullet lines give one list with three items."""
        doc = convert("- a\n- b\n- c")
        assert len(doc.children) == 1
        bullet_list = doc.children[0]
        assert isinstance(bullet_list, BulletList)
        assert len(bullet_list.children) == 3
        assert all(isinstance(item, ListItem) for item in bullet_list.children)

    def test_blank_line_interrupts_list(self) -> None:
        """A blank line between items gives two lists."""
        doc = convert("- a\n\n- b")
        assert len(doc.children) == 2
        assert all(isinstance(child, BulletList) and len(child.children) == 1 for child in doc.children)

    def test_blank_line_interrupts_ordered_list(self) -> None:
        """Numbered items separated by a blank line give two ordered lists."""
        doc = convert("1. a\n\n2. b")
        assert [type(child) for child in doc.children] == [OrderedList, OrderedList]
        assert [child.start for child in doc.children] == [1, 2]

    def test_whitespace_line_interrupts_list(self) -> None:
        """A line holding only spaces counts as blank."""
        assert len(convert("- a\n   \n- b").children) == 2

    def test_very_long_list_number(self) -> None:
        """A number too long to convert still gives an ordered item."""
        ordered = convert("9" * 5000 + ". item").children[0]
        assert isinstance(ordered, OrderedList)
        assert ordered.start == 1
        assert ordered.children[0].children[0].children == (Text("item"),)

    def test_asterisk_bullets(self) -> None:
        """Asterisk bullets are list items too."""
        assert isinstance(convert("* item").children[0], BulletList)

    def test_ordered_list(self) -> None:
        """Numbered lines give an ordered list."""
        ordered = convert("1. one\n2. two").children[0]
        assert isinstance(ordered, OrderedList)
        assert len(ordered.children) == 2
        assert ordered.start == 1

    def test_ordered_list_start(self) -> None:
        """The first number becomes the list start."""
        assert convert("3. three\n4. four").children[0].start == 3

    def test_kind_change_starts_new_list(self) -> None:
        """A numbered item after bullets starts an ordered list."""
        doc = convert("- a\n1. b")
        assert [type(child) for child in doc.children] == [BulletList, OrderedList]

    def test_item_content_is_paragraph(self) -> None:
        """Each item holds one paragraph of inline runs."""
        item = convert("- *x*").children[0].children[0]
        assert item.children == (Paragraph(children=(Text("x", marks={Mark.ITALIC}),)),)

    def test_indented_items_are_flattened(self) -> None:
        """Indentation is ignored, so nested items join the same list."""
        doc = convert("- a\n  - b")
        assert len(doc.children) == 1
        assert len(doc.children[0].children) == 2


@pytest.mark.unit
class TestCodeBlocks:
    """Test fenced code blocks."""

    def test_code_contents_verbatim(self) -> None:
        """Fence contents are never inline-parsed."""
        code = convert("```\n**not bold**\n```").children[0]
        assert isinstance(code, CodeBlock)
        assert code.children == (Text("**not bold**"),)

    def test_language_tag(self) -> None:
        """The opening fence's tag becomes the language."""
        code = convert("```python\nx = 1\n```").children[0]
        assert code.language == "python"
        assert code.code == "x = 1"

    def test_no_language(self) -> None:
        """A bare fence has no language."""
        assert convert("```\nx\n```").children[0].language is None

    def test_indentation_and_blank_lines_kept(self) -> None:
        """Code keeps its indentation and inner blank lines."""
        code = convert("```\ndef f():\n\n    return 1\n```").children[0]
        assert code.code == "def f():\n\n    return 1"

    def test_unclosed_fence_takes_rest(self) -> None:
        """A missing closing fence runs to the end of input."""
        doc = convert("```\n# not a heading\n- not a list")
        assert len(doc.children) == 1
        assert doc.children[0].code == "# not a heading\n- not a list"

    def test_empty_code_block(self) -> None:
        """An empty fence pair gives a code block without children."""
        code = convert("```\n```").children[0]
        assert isinstance(code, CodeBlock)
        assert code.children == ()

    def test_text_after_fence_continues(self) -> None:
        """Parsing resumes after the closing fence."""
        doc = convert("```\nx\n```\nafter")
        assert [type(child) for child in doc.children] == [CodeBlock, Paragraph]


@pytest.mark.unit
class TestBlockQuotes:
    """Test block quote lines."""

    def test_quote_wraps_paragraph(self) -> None:
        """A quote line gives a block quote holding one paragraph."""
        quote = convert("> wise words").children[0]
        assert quote == BlockQuote(children=(Paragraph(children=(Text("wise words"),)),))

    def test_each_quote_line_is_separate(self) -> None:
        """Consecutive quote lines are not merged."""
        doc = convert("> one\n> two")
        assert len(doc.children) == 2


@pytest.mark.unit
class TestTables:
    """Test table detection inside documents."""

    def test_table_with_header(self) -> None:
        """A separator row makes the first row a header row."""
        table = convert("| A | B |\n|---|---|\n| 1 | 2 |").children[0]
        assert isinstance(table, Table)
        header, body = table.children
        assert all(isinstance(cell, TableHeaderCell) for cell in header.children)
        assert all(isinstance(cell, TableCell) for cell in body.children)
        assert [cell.children[0].children[0].value for cell in header.children] == ["A", "B"]
        assert [cell.children[0].children[0].value for cell in body.children] == ["1", "2"]

    def test_table_without_separator(self) -> None:
        """Without a separator all rows are data rows."""
        table = convert("| 1 | 2 |\n| 3 | 4 |").children[0]
        assert len(table.children) == 2
        assert not table.has_header
        assert all(isinstance(cell, TableCell) for row in table.children for cell in row.children)

    def test_single_pipe_line_dropped(self) -> None:
        """A lone pipe line is not a table and emits nothing."""
        doc = convert("before\n\n| lonely |\n\nafter")
        assert [type(child) for child in doc.children] == [Paragraph, Paragraph]

    def test_tables_disabled(self) -> None:
        """With table parsing off, pipe lines are paragraph text."""
        doc = convert("| a |\n| b |", parse_tables=False)
        assert doc.children == (Paragraph(children=(Text("| a |\n| b |"),)),)


@pytest.mark.unit
class TestParserOptions:
    """Test MarkdownParser configuration."""

    def test_inline_parsing_disabled(self) -> None:
        """With inline parsing off, markers stay literal."""
        parser = MarkdownParser(MarkdownParserOptions(parse_inline=False))
        doc = parser.parse("**bold**")
        assert doc.children[0].children == (Text("**bold**"),)

    def test_markdown_to_document_matches_parser(self) -> None:
        """The functional entry point uses the same parser."""
        assert markdown_to_document("# x") == MarkdownParser().parse("# x")

    def test_split_lines(self) -> None:
        """Old Mac and Windows endings are normalized."""
        assert split_lines("a\rb\r\nc") == ["a", "b", "c"]


@pytest.mark.unit
class TestSampleDocument:
    """Test a realistic assistant answer."""

    def test_block_sequence(self, sample_document: Document) -> None:
        """Every block kind appears in source order."""
        assert [type(child) for child in sample_document.children] == [
            Heading,
            Paragraph,
            Heading,
            BulletList,
            OrderedList,
            BlockQuote,
            CodeBlock,
            Table,
        ]

    def test_input_not_mutated(self, sample_markdown: str) -> None:
        """Converting twice gives equal documents."""
        assert convert(sample_markdown) == convert(sample_markdown)
