#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/ast/nodes.py
"""Node classes for the note document tree.

This module defines the closed set of node kinds that make up a note body.
The tree mirrors the rich-text editor's JSON content model, so a ``Document``
serializes directly into the ``content`` field of a stored note.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Paragraph, Heading, CodeBlock, BlockQuote
    - BulletList, OrderedList, ListItem
    - Table, TableRow, TableHeaderCell, TableCell

Inline nodes are text runs:
    - Text (carrying a set of marks: bold, italic, code, strike)

Every node is a frozen dataclass whose children are stored as a tuple. Trees
are values: operations that "modify" a document build new nodes and leave the
caller's tree untouched.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, ClassVar, Iterable, Optional, Union

from notedoc.constants import DEFAULT_TABLE_CELL_SPAN, MAX_HEADING_LEVEL, MIN_HEADING_LEVEL


class NodeKind(str, Enum):
    """Node kind tags, valued with the editor's JSON ``type`` names."""

    DOC = "doc"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    BLOCKQUOTE = "blockquote"
    CODE_BLOCK = "codeBlock"
    TABLE = "table"
    TABLE_ROW = "tableRow"
    TABLE_HEADER_CELL = "tableHeader"
    TABLE_CELL = "tableCell"
    TEXT = "text"


class Mark(str, Enum):
    """Style marks that can be attached to a text run."""

    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    STRIKE = "strike"


# Canonical order used when marks are listed (serialization, repr).
MARK_ORDER: tuple[Mark, ...] = (Mark.BOLD, Mark.ITALIC, Mark.CODE, Mark.STRIKE)


def _freeze_children(node: Node, children: Iterable[Node]) -> None:
    object.__setattr__(node, "children", tuple(children))


class Node(ABC):
    """Base class for all document nodes.

    Subclasses declare their ``kind`` as a class variable and store their
    children (if any) in a ``children`` tuple.

    """

    kind: ClassVar[NodeKind]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Document(Node):
    """Root document node.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Block-level nodes in the document

    """

    kind: ClassVar[NodeKind] = NodeKind.DOC

    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        """Store children as a tuple."""
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)

    @property
    def is_empty(self) -> bool:
        """Whether the document has no blocks at all."""
        return not self.children


@dataclass(frozen=True)
class Paragraph(Node):
    """Paragraph node holding inline text runs.

    An empty paragraph (no children) is used as a spacer between blocks.

    Parameters
    ----------
    children : tuple of Text, default = ()
        Inline runs of the paragraph

    """

    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH

    children: tuple[Text, ...] = ()

    def __post_init__(self) -> None:
        """Store children as a tuple."""
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass(frozen=True)
class Heading(Node):
    """Heading node with a level between 1 and 6.

    Parameters
    ----------
    level : int
        Heading level (1-6)
    children : tuple of Text, default = ()
        Inline runs of the heading

    Raises
    ------
    ValueError
        If level is outside 1-6

    """

    kind: ClassVar[NodeKind] = NodeKind.HEADING

    level: int = 1
    children: tuple[Text, ...] = ()

    def __post_init__(self) -> None:
        """Validate the level and store children as a tuple."""
        if not MIN_HEADING_LEVEL <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be {MIN_HEADING_LEVEL}-{MAX_HEADING_LEVEL}, got {self.level}")
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass(frozen=True)
class CodeBlock(Node):
    """Fenced code block.

    The code is stored verbatim in a single unmarked text child; an empty
    block has no children.

    Parameters
    ----------
    children : tuple of Text, default = ()
        The code text
    language : str or None, default = None
        Language tag taken from the opening fence

    """

    kind: ClassVar[NodeKind] = NodeKind.CODE_BLOCK

    children: tuple[Text, ...] = ()
    language: Optional[str] = None

    def __post_init__(self) -> None:
        """Store children as a tuple."""
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)

    @classmethod
    def from_code(cls, code: str, language: Optional[str] = None) -> CodeBlock:
        """Build a code block from raw code text."""
        return cls(children=(Text(code),) if code else (), language=language)

    @property
    def code(self) -> str:
        """The raw code text."""
        return "".join(child.value for child in self.children)


@dataclass(frozen=True)
class BlockQuote(Node):
    """Block quote containing block-level children.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Quoted blocks, typically one paragraph

    """

    kind: ClassVar[NodeKind] = NodeKind.BLOCKQUOTE

    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        """Store children as a tuple."""
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass(frozen=True)
class BulletList(Node):
    """Unordered list of list items.

    Parameters
    ----------
    children : tuple of ListItem, default = ()
        The list items

    """

    kind: ClassVar[NodeKind] = NodeKind.BULLET_LIST

    children: tuple[ListItem, ...] = ()

    def __post_init__(self) -> None:
        """Store children as a tuple."""
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_bullet_list(self)


@dataclass(frozen=True)
class OrderedList(Node):
    """Ordered list of list items.

    Parameters
    ----------
    children : tuple of ListItem, default = ()
        The list items
    start : int, default = 1
        Number of the first item

    """

    kind: ClassVar[NodeKind] = NodeKind.ORDERED_LIST

    children: tuple[ListItem, ...] = ()
    start: int = 1

    def __post_init__(self) -> None:
        """Store children as a tuple."""
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_ordered_list(self)


@dataclass(frozen=True)
class ListItem(Node):
    """List item containing block-level children.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Block content of the item, typically one paragraph

    """

    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM

    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        """Store children as a tuple."""
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass(frozen=True)
class Table(Node):
    """Table made of rows.

    Header cells, when present, only appear in the first row.

    Parameters
    ----------
    children : tuple of TableRow, default = ()
        Table rows in display order

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE

    children: tuple[TableRow, ...] = ()

    def __post_init__(self) -> None:
        """Store children as a tuple."""
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)

    @property
    def has_header(self) -> bool:
        """Whether the first row is made of header cells."""
        return bool(self.children) and any(isinstance(cell, TableHeaderCell) for cell in self.children[0].children)


@dataclass(frozen=True)
class TableRow(Node):
    """Table row containing header or data cells.

    Parameters
    ----------
    children : tuple of TableHeaderCell or TableCell, default = ()
        Cells of the row

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE_ROW

    children: tuple[CellNode, ...] = ()

    def __post_init__(self) -> None:
        """Store children as a tuple."""
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass(frozen=True)
class TableHeaderCell(Node):
    """Header cell of a table.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Block content of the cell, one paragraph for parsed tables
    colspan : int, default = 1
        Number of columns this cell spans
    rowspan : int, default = 1
        Number of rows this cell spans

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE_HEADER_CELL

    children: tuple[Node, ...] = ()
    colspan: int = DEFAULT_TABLE_CELL_SPAN
    rowspan: int = DEFAULT_TABLE_CELL_SPAN

    def __post_init__(self) -> None:
        """Store children as a tuple."""
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this header cell."""
        return visitor.visit_table_header_cell(self)


@dataclass(frozen=True)
class TableCell(Node):
    """Data cell of a table.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Block content of the cell, one paragraph for parsed tables
    colspan : int, default = 1
        Number of columns this cell spans
    rowspan : int, default = 1
        Number of rows this cell spans

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE_CELL

    children: tuple[Node, ...] = ()
    colspan: int = DEFAULT_TABLE_CELL_SPAN
    rowspan: int = DEFAULT_TABLE_CELL_SPAN

    def __post_init__(self) -> None:
        """Store children as a tuple."""
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this data cell."""
        return visitor.visit_table_cell(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Text run with an unordered set of style marks.

    Parameters
    ----------
    value : str
        The text content
    marks : frozenset of Mark, default = empty
        Style marks applied to the whole run. Plain strings such as
        ``"bold"`` are accepted and converted to ``Mark`` members.

    Examples
    --------
    >>> Text("hello", marks={Mark.BOLD}).marks
    frozenset({<Mark.BOLD: 'bold'>})

    """

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    value: str = ""
    marks: frozenset[Mark] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Normalize marks into a frozenset of Mark members."""
        object.__setattr__(self, "marks", frozenset(Mark(mark) for mark in self.marks))

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text run."""
        return visitor.visit_text(self)

    @property
    def ordered_marks(self) -> tuple[Mark, ...]:
        """Marks in canonical order (bold, italic, code, strike)."""
        return tuple(mark for mark in MARK_ORDER if mark in self.marks)


BlockNode = Union[Paragraph, Heading, BulletList, OrderedList, BlockQuote, CodeBlock, Table]
ListNode = Union[BulletList, OrderedList]
CellNode = Union[TableHeaderCell, TableCell]
InlineNode = Text

NODE_CLASSES: tuple[type[Node], ...] = (
    Document,
    Paragraph,
    Heading,
    BulletList,
    OrderedList,
    ListItem,
    BlockQuote,
    CodeBlock,
    Table,
    TableRow,
    TableHeaderCell,
    TableCell,
    Text,
)


def is_block_node(node: Node) -> bool:
    """Return True for every node kind except text runs."""
    return not isinstance(node, Text)


def get_node_children(node: Node) -> list[Node]:
    """Get the child nodes of a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list for text runs)

    Examples
    --------
    >>> heading = Heading(level=1, children=(Text("Hello"), Text("world", marks={Mark.BOLD})))
    >>> len(get_node_children(heading))
    2

    """
    if isinstance(node, Text):
        return []
    return list(node.children)  # type: ignore[attr-defined]


def replace_node_children(node: Node, new_children: Iterable[Node]) -> Node:
    """Create a copy of a node with replaced children.

    Parameters
    ----------
    node : Node
        The node to copy
    new_children : iterable of Node
        New children to use in the copy

    Returns
    -------
    Node
        New node of the same kind; text runs are returned as-is

    """
    if isinstance(node, Text):
        return node
    return replace(node, children=tuple(new_children))  # type: ignore[type-var]
