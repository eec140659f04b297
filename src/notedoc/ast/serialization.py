#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/ast/serialization.py
"""JSON serialization and deserialization for document trees.

The wire format is the rich-text editor's JSON content model, which is also
what the note storage layer persists verbatim in a note's ``content`` field:

    {"type": "doc", "content": [
        {"type": "heading", "attrs": {"level": 1}, "content": [
            {"type": "text", "text": "Title", "marks": [{"type": "bold"}]}
        ]}
    ]}

Rules:
- ``doc`` always carries a ``content`` list; other nodes omit empty content
- text runs carry ``text`` and, when styled, a ``marks`` list in canonical
  order (bold, italic, code, strike)
- node attributes live under ``attrs``

Examples
--------
Serialize a tree to JSON:

    >>> from notedoc.ast import Document, Paragraph, Text
    >>> doc = Document(children=(Paragraph(children=(Text("Hello"),)),))
    >>> to_json(doc)
    '{"type": "doc", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Hello"}]}]}'

Read it back:

    >>> from_json(to_json(doc)) == doc
    True

"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from notedoc.ast.nodes import (
    BlockQuote,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    ListItem,
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
)
from notedoc.constants import DEFAULT_TABLE_CELL_SPAN
from notedoc.exceptions import InvalidDocumentError

logger = logging.getLogger(__name__)


# ============================================================================
# Serialization
# ============================================================================


def _with_content(result: dict[str, Any], node: Node) -> dict[str, Any]:
    children = node.children  # type: ignore[attr-defined]
    if children:
        result["content"] = [node_to_dict(child) for child in children]
    return result


def _serialize_document(node: Document) -> dict[str, Any]:
    return {"type": NodeKind.DOC.value, "content": [node_to_dict(child) for child in node.children]}


def _serialize_plain_container(node: Node) -> dict[str, Any]:
    return _with_content({"type": node.kind.value}, node)


def _serialize_heading(node: Heading) -> dict[str, Any]:
    return _with_content({"type": NodeKind.HEADING.value, "attrs": {"level": node.level}}, node)


def _serialize_ordered_list(node: OrderedList) -> dict[str, Any]:
    return _with_content({"type": NodeKind.ORDERED_LIST.value, "attrs": {"start": node.start}}, node)


def _serialize_code_block(node: CodeBlock) -> dict[str, Any]:
    return _with_content({"type": NodeKind.CODE_BLOCK.value, "attrs": {"language": node.language}}, node)


def _serialize_cell(node: TableHeaderCell | TableCell) -> dict[str, Any]:
    result: dict[str, Any] = {
        "type": node.kind.value,
        "attrs": {"colspan": node.colspan, "rowspan": node.rowspan},
    }
    return _with_content(result, node)


def _serialize_text(node: Text) -> dict[str, Any]:
    result: dict[str, Any] = {"type": NodeKind.TEXT.value, "text": node.value}
    if node.marks:
        result["marks"] = [{"type": mark.value} for mark in node.ordered_marks]
    return result


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Document: _serialize_document,
    Paragraph: _serialize_plain_container,
    Heading: _serialize_heading,
    BulletList: _serialize_plain_container,
    OrderedList: _serialize_ordered_list,
    ListItem: _serialize_plain_container,
    BlockQuote: _serialize_plain_container,
    CodeBlock: _serialize_code_block,
    Table: _serialize_plain_container,
    TableRow: _serialize_plain_container,
    TableHeaderCell: _serialize_cell,
    TableCell: _serialize_cell,
    Text: _serialize_text,
}


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node into its JSON-compatible dictionary form.

    Parameters
    ----------
    node : Node
        The node to serialize

    Returns
    -------
    dict
        Editor JSON representation of the node

    Raises
    ------
    TypeError
        If the object is not one of the document node classes

    """
    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer is None:
        raise TypeError(f"Cannot serialize object of type {type(node).__name__}")
    return serializer(node)


def to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a node to a JSON string.

    Parameters
    ----------
    node : Node
        The node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string. Unicode characters are kept unescaped.

    """
    return json.dumps(node_to_dict(node), indent=indent, ensure_ascii=False)


# ============================================================================
# Deserialization
# ============================================================================


def _fail(message: str, node_type: Optional[str] = None) -> None:
    raise InvalidDocumentError(message, node_type=node_type)


def _attrs(data: Mapping[str, Any]) -> Mapping[str, Any]:
    attrs = data.get("attrs")
    if attrs is None:
        return {}
    if not isinstance(attrs, Mapping):
        _fail(f"'attrs' of a {data.get('type')} node must be an object", data.get("type"))
    return attrs  # type: ignore[return-value]


def _deserialize_children(data: Mapping[str, Any], strict_mode: bool) -> tuple[Node, ...]:
    content = data.get("content")
    if content is None:
        return ()
    if not isinstance(content, list):
        _fail(f"'content' of a {data.get('type')} node must be a list", data.get("type"))
    children = []
    for child_data in content:
        child = dict_to_node(child_data, strict_mode=strict_mode)
        if child is not None:
            children.append(child)
    return tuple(children)


def _read_marks(data: Mapping[str, Any], strict_mode: bool) -> frozenset[Mark]:
    raw_marks = data.get("marks") or []
    if not isinstance(raw_marks, list):
        _fail("'marks' of a text node must be a list", "text")
    marks = set()
    for raw in raw_marks:
        name = raw.get("type") if isinstance(raw, Mapping) else raw
        try:
            marks.add(Mark(name))
        except (TypeError, ValueError):
            if strict_mode:
                _fail(f"Unknown mark type: {name!r}", "text")
            logger.debug("Ignoring unsupported mark %r", name)
    return frozenset(marks)


def _deserialize_text(data: Mapping[str, Any], strict_mode: bool) -> Text:
    value = data.get("text", "")
    if not isinstance(value, str):
        if strict_mode:
            _fail("'text' of a text node must be a string", "text")
        logger.warning("Replacing non-string text value of type %s with an empty string", type(value).__name__)
        value = ""
    return Text(value=value, marks=_read_marks(data, strict_mode))


def _deserialize_document(data: Mapping[str, Any], strict_mode: bool) -> Document:
    return Document(children=_deserialize_children(data, strict_mode))


def _deserialize_paragraph(data: Mapping[str, Any], strict_mode: bool) -> Paragraph:
    return Paragraph(children=_deserialize_children(data, strict_mode))  # type: ignore[arg-type]


def _deserialize_heading(data: Mapping[str, Any], strict_mode: bool) -> Heading:
    level = _attrs(data).get("level", 1)
    if not isinstance(level, int) or isinstance(level, bool):
        _fail(f"Heading level must be an integer, got {level!r}", "heading")
    return Heading(level=level, children=_deserialize_children(data, strict_mode))  # type: ignore[arg-type]


def _deserialize_bullet_list(data: Mapping[str, Any], strict_mode: bool) -> BulletList:
    return BulletList(children=_deserialize_children(data, strict_mode))  # type: ignore[arg-type]


def _deserialize_ordered_list(data: Mapping[str, Any], strict_mode: bool) -> OrderedList:
    start = _attrs(data).get("start", 1)
    if not isinstance(start, int) or isinstance(start, bool):
        _fail(f"Ordered list start must be an integer, got {start!r}", "orderedList")
    return OrderedList(children=_deserialize_children(data, strict_mode), start=start)  # type: ignore[arg-type]


def _deserialize_list_item(data: Mapping[str, Any], strict_mode: bool) -> ListItem:
    return ListItem(children=_deserialize_children(data, strict_mode))


def _deserialize_block_quote(data: Mapping[str, Any], strict_mode: bool) -> BlockQuote:
    return BlockQuote(children=_deserialize_children(data, strict_mode))


def _deserialize_code_block(data: Mapping[str, Any], strict_mode: bool) -> CodeBlock:
    language = _attrs(data).get("language")
    if language is not None and not isinstance(language, str):
        _fail(f"Code block language must be a string, got {language!r}", "codeBlock")
    return CodeBlock(children=_deserialize_children(data, strict_mode), language=language)  # type: ignore[arg-type]


def _deserialize_table(data: Mapping[str, Any], strict_mode: bool) -> Table:
    return Table(children=_deserialize_children(data, strict_mode))  # type: ignore[arg-type]


def _deserialize_table_row(data: Mapping[str, Any], strict_mode: bool) -> TableRow:
    return TableRow(children=_deserialize_children(data, strict_mode))  # type: ignore[arg-type]


def _cell_spans(data: Mapping[str, Any]) -> tuple[int, int]:
    attrs = _attrs(data)
    colspan = attrs.get("colspan", DEFAULT_TABLE_CELL_SPAN)
    rowspan = attrs.get("rowspan", DEFAULT_TABLE_CELL_SPAN)
    for name, span in (("colspan", colspan), ("rowspan", rowspan)):
        if not isinstance(span, int) or isinstance(span, bool) or span < 1:
            _fail(f"Cell {name} must be a positive integer, got {span!r}", data.get("type"))
    return colspan, rowspan


def _deserialize_table_header_cell(data: Mapping[str, Any], strict_mode: bool) -> TableHeaderCell:
    colspan, rowspan = _cell_spans(data)
    return TableHeaderCell(children=_deserialize_children(data, strict_mode), colspan=colspan, rowspan=rowspan)


def _deserialize_table_cell(data: Mapping[str, Any], strict_mode: bool) -> TableCell:
    colspan, rowspan = _cell_spans(data)
    return TableCell(children=_deserialize_children(data, strict_mode), colspan=colspan, rowspan=rowspan)


_DESERIALIZATION_DISPATCH: dict[str, Callable[[Mapping[str, Any], bool], Node]] = {
    NodeKind.DOC.value: _deserialize_document,
    NodeKind.PARAGRAPH.value: _deserialize_paragraph,
    NodeKind.HEADING.value: _deserialize_heading,
    NodeKind.BULLET_LIST.value: _deserialize_bullet_list,
    NodeKind.ORDERED_LIST.value: _deserialize_ordered_list,
    NodeKind.LIST_ITEM.value: _deserialize_list_item,
    NodeKind.BLOCKQUOTE.value: _deserialize_block_quote,
    NodeKind.CODE_BLOCK.value: _deserialize_code_block,
    NodeKind.TABLE.value: _deserialize_table,
    NodeKind.TABLE_ROW.value: _deserialize_table_row,
    NodeKind.TABLE_HEADER_CELL.value: _deserialize_table_header_cell,
    NodeKind.TABLE_CELL.value: _deserialize_table_cell,
    NodeKind.TEXT.value: _deserialize_text,
}


def dict_to_node(data: Any, strict_mode: bool = True) -> Node | None:
    """Convert an editor JSON dictionary back into a node.

    Parameters
    ----------
    data : Any
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise InvalidDocumentError on unknown node types and
        malformed nodes. If False, log a warning and return None so the
        caller can skip the node; unknown marks are ignored and non-string
        text values become empty strings.

    Returns
    -------
    Node or None
        Reconstructed node, or None for a skipped node in lenient mode

    Raises
    ------
    InvalidDocumentError
        In strict mode, if the data does not describe a supported node

    Examples
    --------
    >>> dict_to_node({"type": "text", "text": "Hello"})
    Text(value='Hello', marks=frozenset())

    """
    try:
        if not isinstance(data, Mapping):
            _fail(f"Node must be an object, got {type(data).__name__}")
        node_type = data.get("type")
        if not node_type:
            _fail("Node is missing its 'type' field")
        if not isinstance(node_type, str):
            _fail(f"Node type must be a string, got {type(node_type).__name__}")
        deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
        if deserializer is None:
            _fail(f"Unknown node type: {node_type}", node_type)
        try:
            return deserializer(data, strict_mode)  # type: ignore[misc]
        except (TypeError, ValueError) as e:
            raise InvalidDocumentError(f"Invalid {node_type} node: {e}", node_type=node_type, original_error=e) from e
    except InvalidDocumentError as e:
        if strict_mode:
            raise
        logger.warning("Skipping node: %s", e.message)
        return None


def from_json(json_str: str | bytes, strict_mode: bool = True) -> Node:
    """Deserialize a node from a JSON string.

    Parameters
    ----------
    json_str : str or bytes
        JSON text describing a node
    strict_mode : bool, default True
        Passed through to :func:`dict_to_node`

    Returns
    -------
    Node
        The reconstructed node

    Raises
    ------
    InvalidDocumentError
        If the text is not valid JSON, or (in strict mode) does not describe
        a supported node, or (in lenient mode) the root node was skipped

    """
    try:
        data = json.loads(json_str)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidDocumentError(f"Invalid JSON: {e}", original_error=e) from e

    node = dict_to_node(data, strict_mode=strict_mode)
    if node is None:
        raise InvalidDocumentError("Root node could not be read")
    return node
