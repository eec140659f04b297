#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for document node classes, the builder and visitors."""

from dataclasses import FrozenInstanceError

import pytest

from notedoc.ast import (
    MARK_ORDER,
    NODE_CLASSES,
    BlockQuote,
    BulletList,
    CodeBlock,
    Document,
    DocumentBuilder,
    Heading,
    ListItem,
    Mark,
    NodeKind,
    NodeVisitor,
    OrderedList,
    Paragraph,
    PlainTextExtractor,
    Table,
    TableCell,
    TableHeaderCell,
    TableRow,
    Text,
    get_node_children,
    is_block_node,
    replace_node_children,
)


@pytest.mark.unit
class TestNodeKinds:
    """Test node kind tags."""

    def test_every_class_has_distinct_kind(self) -> None:
        """The thirteen node classes map to thirteen kinds."""
        kinds = {cls.kind for cls in NODE_CLASSES}
        assert len(kinds) == len(NODE_CLASSES) == len(NodeKind)

    def test_editor_type_names(self) -> None:
        """Kinds carry the editor JSON type names."""
        assert Document.kind.value == "doc"
        assert TableHeaderCell.kind.value == "tableHeader"
        assert BlockQuote.kind.value == "blockquote"


@pytest.mark.unit
class TestNodeConstruction:
    """Test node invariants."""

    def test_children_stored_as_tuple(self) -> None:
        """Lists passed as children become tuples."""
        para = Paragraph(children=[Text("a")])
        assert para.children == (Text("a"),)

    def test_nodes_are_frozen(self) -> None:
        """Nodes cannot be modified after creation."""
        doc = Document()
        with pytest.raises(FrozenInstanceError):
            doc.children = (Paragraph(),)  # type: ignore[misc]

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_heading_level_range(self, level: int) -> None:
        """Heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError):
            Heading(level=level)

    def test_text_marks_from_strings(self) -> None:
        """Mark names are converted to Mark members."""
        text = Text("x", marks={"bold", "code"})
        assert text.marks == frozenset({Mark.BOLD, Mark.CODE})

    def test_unknown_mark_rejected(self) -> None:
        """Unknown mark names raise."""
        with pytest.raises(ValueError):
            Text("x", marks={"underline"})

    def test_ordered_marks(self) -> None:
        """Marks are listed in canonical order."""
        text = Text("x", marks={Mark.STRIKE, Mark.BOLD, Mark.CODE})
        assert text.ordered_marks == (Mark.BOLD, Mark.CODE, Mark.STRIKE)
        assert MARK_ORDER[0] is Mark.BOLD

    def test_code_block_from_code(self) -> None:
        """Code blocks hold their code in one run."""
        block = CodeBlock.from_code("x = 1", language="python")
        assert block.children == (Text("x = 1"),)
        assert block.code == "x = 1"
        assert CodeBlock.from_code("").children == ()

    def test_table_has_header(self) -> None:
        """A table has a header when its first row has header cells."""
        header = Table(children=(TableRow(children=(TableHeaderCell(),)),))
        data = Table(children=(TableRow(children=(TableCell(),)),))
        assert header.has_header
        assert not data.has_header
        assert not Table().has_header

    def test_document_is_empty(self) -> None:
        """Empty documents report it."""
        assert Document().is_empty
        assert not Document(children=(Paragraph(),)).is_empty


@pytest.mark.unit
class TestNodeHelpers:
    """Test tree helper functions."""

    def test_get_node_children(self) -> None:
        """Text runs have no children."""
        para = Paragraph(children=(Text("a"), Text("b")))
        assert get_node_children(para) == [Text("a"), Text("b")]
        assert get_node_children(Text("a")) == []

    def test_replace_node_children_copies(self) -> None:
        """Replacing children builds a new node and keeps attributes."""
        heading = Heading(level=2, children=(Text("a"),))
        updated = replace_node_children(heading, [Text("b")])
        assert updated == Heading(level=2, children=(Text("b"),))
        assert heading.children == (Text("a"),)

    def test_is_block_node(self) -> None:
        """Everything but text runs is a block."""
        assert is_block_node(Paragraph())
        assert is_block_node(ListItem())
        assert not is_block_node(Text("a"))


@pytest.mark.unit
class TestDocumentBuilder:
    """Test incremental document construction."""

    def test_list_items_grouped(self) -> None:
        """Consecutive items of the same kind share one list."""
        doc = (
            DocumentBuilder()
            .add_list_item([Text("a")], ordered=True, start=4)
            .add_list_item([Text("b")], ordered=True, start=9)
            .get_document()
        )
        ordered = doc.children[0]
        assert isinstance(ordered, OrderedList)
        assert len(ordered.children) == 2
        assert ordered.start == 4

    def test_other_block_breaks_list(self) -> None:
        """A non-list block between items starts a new list."""
        doc = (
            DocumentBuilder()
            .add_list_item([Text("a")], ordered=False)
            .add_paragraph([Text("p")])
            .add_list_item([Text("b")], ordered=False)
            .get_document()
        )
        assert [type(child) for child in doc.children] == [BulletList, Paragraph, BulletList]

    def test_end_list_starts_new_list(self) -> None:
        """An item after end_list starts a new list of the same kind."""
        doc = (
            DocumentBuilder()
            .add_list_item([Text("a")], ordered=False)
            .end_list()
            .add_list_item([Text("b")], ordered=False)
            .add_list_item([Text("c")], ordered=False)
            .get_document()
        )
        assert [len(child.children) for child in doc.children] == [1, 2]

    def test_extending_list_keeps_earlier_node(self) -> None:
        """The list node seen before an extension is not modified."""
        builder = DocumentBuilder().add_list_item([Text("a")], ordered=False)
        first = builder.last_block
        builder.add_list_item([Text("b")], ordered=False)
        assert len(first.children) == 1
        assert len(builder.last_block.children) == 2

    def test_block_quote_and_code(self) -> None:
        """Quotes wrap a paragraph and code stays verbatim."""
        doc = DocumentBuilder().add_block_quote([Text("q")]).add_code_block("*x*").get_document()
        assert doc.children[0].children == (Paragraph(children=(Text("q"),)),)
        assert doc.children[1].code == "*x*"


@pytest.mark.unit
class TestPlainTextExtractor:
    """Test plain-text flattening."""

    def test_inline_runs_concatenated(self) -> None:
        """Runs of one paragraph are joined without separators."""
        para = Paragraph(children=(Text("a "), Text("b", marks={Mark.BOLD})))
        assert para.accept(PlainTextExtractor()) == "a b"

    def test_blocks_joined_with_newlines(self) -> None:
        """Top-level blocks and list items are newline separated."""
        doc = Document(
            children=(
                Heading(level=1, children=(Text("T"),)),
                BulletList(
                    children=(
                        ListItem(children=(Paragraph(children=(Text("one"),)),)),
                        ListItem(children=(Paragraph(children=(Text("two"),)),)),
                    )
                ),
            )
        )
        assert doc.accept(PlainTextExtractor()) == "T\none\ntwo"

    def test_empty_nodes_contribute_nothing(self) -> None:
        """Childless nodes contribute an empty string."""
        doc = Document(children=(Paragraph(children=(Text("a"),)), Paragraph(), Paragraph(children=(Text("b"),))))
        assert doc.accept(PlainTextExtractor()) == "a\n\nb"

    def test_table_cells_newline_separated(self) -> None:
        """Table cells flatten to one line each."""
        row = TableRow(
            children=(
                TableCell(children=(Paragraph(children=(Text("1"),)),)),
                TableCell(children=(Paragraph(children=(Text("2"),)),)),
            )
        )
        assert Table(children=(row,)).accept(PlainTextExtractor()) == "1\n2"

    def test_visitor_is_abstract(self) -> None:
        """A visitor must implement every node kind."""
        with pytest.raises(TypeError):
            NodeVisitor()  # type: ignore[abstract]
