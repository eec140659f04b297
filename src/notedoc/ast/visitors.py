#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/ast/visitors.py
"""Visitor pattern implementation for document tree traversal.

Visitors keep tree-walking algorithms (text extraction, serialization,
validation) separate from the node classes. Because the node set is closed,
every concrete visitor must handle all thirteen kinds.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from notedoc.ast.nodes import (
    BlockQuote,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Table,
    TableCell,
    TableHeaderCell,
    TableRow,
    Text,
    get_node_children,
    is_block_node,
)


class NodeVisitor(ABC):
    """Abstract base class for document node visitors.

    Subclasses implement one ``visit_*`` method per node kind. The default
    implementations of the container kinds can simply delegate to
    :meth:`generic_visit`.

    Examples
    --------
    Count the text runs of a document:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...     def generic_visit(self, node):
        ...         for child in get_node_children(node):
        ...             child.accept(self)
        ...     visit_document = visit_paragraph = visit_heading = generic_visit
        ...     # ...and so on for the remaining containers

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_header_cell(self, node: TableHeaderCell) -> Any:
        """Visit a TableHeaderCell node."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    def generic_visit(self, node: Node) -> Any:
        """Visit every child of a node, returning the list of results.

        Parameters
        ----------
        node : Node
            The node whose children are visited

        Returns
        -------
        list
            One result per child, in order

        """
        return [child.accept(self) for child in get_node_children(node)]


class PlainTextExtractor(NodeVisitor):
    """Flatten a document tree into plain text.

    Text runs contribute their value. Inline siblings are concatenated
    directly; block siblings are joined with newlines, and the top-level
    blocks of a document are always newline-separated. Nodes without
    children contribute an empty string.

    Examples
    --------
    >>> doc = Document(children=(Paragraph(children=(Text("a"),)), Paragraph(children=(Text("b"),))))
    >>> doc.accept(PlainTextExtractor())
    'a\\nb'

    """

    def _join_children(self, node: Node) -> str:
        children = get_node_children(node)
        joiner = "\n" if any(is_block_node(child) for child in children) else ""
        return joiner.join(child.accept(self) for child in children)

    def visit_document(self, node: Document) -> str:
        """Join top-level blocks with newlines."""
        return "\n".join(child.accept(self) for child in node.children)

    def visit_paragraph(self, node: Paragraph) -> str:
        """Concatenate the paragraph's runs."""
        return self._join_children(node)

    def visit_heading(self, node: Heading) -> str:
        """Concatenate the heading's runs."""
        return self._join_children(node)

    def visit_bullet_list(self, node: BulletList) -> str:
        """Join list items with newlines."""
        return self._join_children(node)

    def visit_ordered_list(self, node: OrderedList) -> str:
        """Join list items with newlines."""
        return self._join_children(node)

    def visit_list_item(self, node: ListItem) -> str:
        """Join the item's blocks with newlines."""
        return self._join_children(node)

    def visit_block_quote(self, node: BlockQuote) -> str:
        """Join the quoted blocks with newlines."""
        return self._join_children(node)

    def visit_code_block(self, node: CodeBlock) -> str:
        """Return the verbatim code."""
        return self._join_children(node)

    def visit_table(self, node: Table) -> str:
        """Join rows with newlines."""
        return self._join_children(node)

    def visit_table_row(self, node: TableRow) -> str:
        """Join cells with newlines."""
        return self._join_children(node)

    def visit_table_header_cell(self, node: TableHeaderCell) -> str:
        """Flatten the cell content."""
        return self._join_children(node)

    def visit_table_cell(self, node: TableCell) -> str:
        """Flatten the cell content."""
        return self._join_children(node)

    def visit_text(self, node: Text) -> str:
        """Return the run's text, or an empty string for a non-str value."""
        return node.value if isinstance(node.value, str) else ""
