#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/ast/validation.py
"""Content validation and normalization for document trees.

Documents reach the library from persisted notes, from the editor and from
AI tool calls, so their shape cannot be trusted. :func:`validate` turns any
value into a usable :class:`~notedoc.ast.nodes.Document` and never raises.

The check is deliberately shallow: the root must be a ``doc`` with a list of
children, and direct text children must hold plain strings. Nested content is
only checked as far as reading it into nodes requires; top-level children that
cannot be read, or that nest deeper than ``MAX_NESTING_DEPTH``, are dropped
with a warning.

"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from notedoc.ast.nodes import Document, Node, NodeKind, Text, get_node_children
from notedoc.ast.serialization import dict_to_node
from notedoc.constants import MAX_NESTING_DEPTH

logger = logging.getLogger(__name__)


def create_empty_content() -> Document:
    """Return a fresh document with no children."""
    return Document()


def _nesting_depth(value: Any) -> int:
    """Nesting depth of a node or editor JSON mapping, counted up to one past the limit."""
    deepest = 0
    stack = [(value, 1)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        if deepest > MAX_NESTING_DEPTH:
            break
        if isinstance(current, Node):
            children: Any = get_node_children(current)
        elif isinstance(current, Mapping) and isinstance(current.get("content"), list):
            children = current["content"]
        else:
            continue
        stack.extend((child, depth + 1) for child in children)
    return deepest


def _too_deep(child: Any) -> bool:
    if _nesting_depth(child) <= MAX_NESTING_DEPTH:
        return False
    logger.warning("Dropping a top-level block nested deeper than %d levels", MAX_NESTING_DEPTH)
    return True


def _sanitize_document(doc: Document) -> Document:
    children: list[Node] = []
    changed = False
    for child in doc.children:
        if isinstance(child, Text) and not isinstance(child.value, str):
            logger.warning("Replacing non-string text value in a top-level text node")
            children.append(Text(""))
            changed = True
        elif _too_deep(child):
            changed = True
        else:
            children.append(child)
    return Document(children=tuple(children)) if changed else doc


def _sanitize_child(child: Any) -> Any:
    if isinstance(child, Mapping) and child.get("type") == NodeKind.TEXT.value:
        if "text" in child and not isinstance(child["text"], str):
            return {"type": NodeKind.TEXT.value, "text": ""}
    return child


def _validate_mapping(candidate: Mapping[str, Any]) -> Document:
    if candidate.get("type") != NodeKind.DOC.value:
        logger.debug("Candidate root type %r is not 'doc'; using an empty document", candidate.get("type"))
        return Document()

    content = candidate.get("content")
    if not isinstance(content, list):
        logger.debug("Candidate document content is not a list; using an empty document")
        return Document()

    children = []
    for raw_child in content:
        if _too_deep(raw_child):
            continue
        child = dict_to_node(_sanitize_child(raw_child), strict_mode=False)
        if child is not None:
            children.append(child)
    return Document(children=tuple(children))


def validate(candidate: Any) -> Document:
    """Normalize any value into a valid document.

    Parameters
    ----------
    candidate : Any
        A ``Document``, an editor JSON mapping, JSON text, or anything else

    Returns
    -------
    Document
        The validated document. An empty document is returned when the
        candidate is not a ``doc`` with a list of children.

    Examples
    --------
    >>> validate(None)
    Document(children=())
    >>> validate({"type": "doc", "content": [{"type": "text", "text": {"oops": 1}}]})
    Document(children=(Text(value='', marks=frozenset()),))

    """
    if isinstance(candidate, Document):
        return _sanitize_document(candidate)

    if isinstance(candidate, (str, bytes, bytearray)):
        try:
            candidate = json.loads(candidate)
        except (ValueError, RecursionError) as e:
            logger.warning("Candidate document is not valid JSON (%s); using an empty document", e)
            return Document()

    if isinstance(candidate, Mapping):
        return _validate_mapping(candidate)

    logger.debug("Candidate of type %s is not a document; using an empty document", type(candidate).__name__)
    return Document()
