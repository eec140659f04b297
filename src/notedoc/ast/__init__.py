#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/ast/__init__.py
"""Document tree module for note content.

The document tree is the structured form of a note body and the format shared
by the editor, the note storage layer and the AI chat tools.

The module consists of several components:

- nodes: the closed set of node classes
- visitors: visitor base class and plain-text extraction
- serialization: editor JSON reading and writing
- validation: normalization of untrusted document values
- transforms: append, replace, delete and placeholder edits
- builder: incremental document construction used by the parser

Examples
--------
Basic usage:

    >>> from notedoc.ast import Document, Heading, Paragraph, Text, to_json
    >>> doc = Document(children=(
    ...     Heading(level=1, children=(Text("Title"),)),
    ...     Paragraph(children=(Text("Hello world"),)),
    ... ))
    >>> json_str = to_json(doc)

"""

from __future__ import annotations

from notedoc.ast.builder import DocumentBuilder
from notedoc.ast.nodes import (
    MARK_ORDER,
    NODE_CLASSES,
    BlockNode,
    BlockQuote,
    BulletList,
    CellNode,
    CodeBlock,
    Document,
    Heading,
    InlineNode,
    ListItem,
    ListNode,
    Mark,
    Node,
    NodeKind,
    OrderedList,
    Paragraph,
    Table,
    TableCell,
    TableHeaderCell,
    TableRow,
    Text,
    get_node_children,
    is_block_node,
    replace_node_children,
)
from notedoc.ast.serialization import dict_to_node, from_json, node_to_dict, to_json
from notedoc.ast.transforms import (
    EditResult,
    append_text,
    create_content_from_text,
    delete_text,
    extract_plain_text,
    find_placeholder,
    replace_placeholder,
    replace_text,
    update_placeholder,
)
from notedoc.ast.validation import create_empty_content, validate
from notedoc.ast.visitors import NodeVisitor, PlainTextExtractor

__all__ = [
    # Nodes
    "BlockNode",
    "BlockQuote",
    "BulletList",
    "CellNode",
    "CodeBlock",
    "Document",
    "Heading",
    "InlineNode",
    "ListItem",
    "ListNode",
    "MARK_ORDER",
    "Mark",
    "NODE_CLASSES",
    "Node",
    "NodeKind",
    "OrderedList",
    "Paragraph",
    "Table",
    "TableCell",
    "TableHeaderCell",
    "TableRow",
    "Text",
    "get_node_children",
    "is_block_node",
    "replace_node_children",
    # Builder
    "DocumentBuilder",
    # Visitors
    "NodeVisitor",
    "PlainTextExtractor",
    # Serialization
    "dict_to_node",
    "from_json",
    "node_to_dict",
    "to_json",
    # Validation
    "create_empty_content",
    "validate",
    # Edits
    "EditResult",
    "append_text",
    "create_content_from_text",
    "delete_text",
    "extract_plain_text",
    "find_placeholder",
    "replace_placeholder",
    "replace_text",
    "update_placeholder",
]
