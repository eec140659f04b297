#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/ast/transforms.py
"""Document tree edit operations.

These functions implement the note edits used by the editor page and by the
AI chat tools: appending text, find-and-replace, deleting text and swapping a
placeholder paragraph for generated content.

All operations validate their ``tree`` argument first, so they accept a
``Document``, an editor JSON mapping, or any other value (which is treated as
an empty document). They never modify the tree they are given and never raise
because a search string is missing.

Replace and delete work on the document's plain text: the tree is flattened,
the substitution is made on the string, and the result is converted again as
Markdown. Formatting is therefore not preserved across these edits.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from notedoc.ast.nodes import Document, Node, Paragraph, Text
from notedoc.ast.validation import validate
from notedoc.ast.visitors import PlainTextExtractor
from notedoc.constants import (
    DELETE_ALL_MESSAGE,
    DELETE_FIRST_MESSAGE,
    REPLACE_ALL_MESSAGE,
    REPLACE_FIRST_MESSAGE,
)
from notedoc.options.base import ensure_options
from notedoc.options.edit import EditOptions
from notedoc.options.markdown import MarkdownParserOptions
from notedoc.parsers.markdown import markdown_to_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditResult:
    """Outcome of a replace or delete operation.

    Parameters
    ----------
    tree : Document
        The new document
    message : str
        Description of the edit. It is phrased as if the edit happened even
        when the search text was absent; check ``occurrences`` to know.
    occurrences : int
        Number of substitutions actually made

    """

    tree: Document
    message: str
    occurrences: int = 0

    @property
    def matched(self) -> bool:
        """Whether the search text was found at least once."""
        return self.occurrences > 0


def extract_plain_text(tree: Any) -> str:
    r"""Flatten a document (or any node) into plain text.

    Parameters
    ----------
    tree : Any
        A node, or any value accepted by :func:`~notedoc.ast.validation.validate`.
        Documents are validated first, so blocks nested too deeply are skipped.

    Returns
    -------
    str
        Text of all runs; top-level and other block siblings are separated
        by newlines

    Examples
    --------
    >>> from notedoc.parsers.markdown import markdown_to_document
    >>> extract_plain_text(markdown_to_document("# Title\n\n- **one**\n- two"))
    'Title\none\ntwo'

    """
    node = tree if isinstance(tree, Node) and not isinstance(tree, Document) else validate(tree)
    return node.accept(PlainTextExtractor())


def create_content_from_text(text: str) -> Document:
    """Wrap literal text in a one-paragraph document (empty text gives an empty document)."""
    if not text:
        return Document()
    return Document(children=(Paragraph(children=(Text(text),)),))


def append_text(tree: Any, text: str, options: EditOptions | None = None) -> Document:
    """Append literal text to a document as a new paragraph.

    The text is not parsed as Markdown: it becomes a single unmarked run.
    When the document already has content, an empty spacer paragraph is
    inserted first (unless ``options.insert_spacer`` is False).

    Parameters
    ----------
    tree : Any
        Document to append to
    text : str
        Text to append
    options : EditOptions or None, default = None
        Edit configuration options

    Returns
    -------
    Document
        New document; the validated input unchanged when ``text`` is blank

    """
    options = ensure_options(options, EditOptions, "append")
    doc = validate(tree)
    if not isinstance(text, str) or not text.strip():
        return doc

    children = list(doc.children)
    if children and options.insert_spacer:
        children.append(Paragraph())
    children.append(Paragraph(children=(Text(text),)))
    return Document(children=tuple(children))


def _substitute(plain: str, old: str, new: str, replace_all: bool) -> tuple[str, int]:
    if not old:
        return plain, 0
    found = plain.count(old)
    if replace_all:
        return plain.replace(old, new), found
    return plain.replace(old, new, 1), min(found, 1)


def _rewrite_plain_text(
    tree: Any, old: str, new: str, replace_all: bool, options: EditOptions
) -> tuple[Document, int]:
    plain = extract_plain_text(validate(tree))
    updated, occurrences = _substitute(plain, old, new, replace_all)
    if not occurrences:
        logger.info("Search text %r not found; document re-converted without changes", old)
    return markdown_to_document(updated, options.parser), occurrences


def replace_text(
    tree: Any,
    old_text: str,
    new_text: str,
    replace_all: bool = False,
    options: EditOptions | None = None,
) -> EditResult:
    """Replace literal text in a document.

    Parameters
    ----------
    tree : Any
        Document to edit
    old_text : str
        Text to search for (literal, not a pattern); an empty string matches
        nothing
    new_text : str
        Replacement text
    replace_all : bool, default False
        Replace every occurrence instead of only the first
    options : EditOptions or None, default = None
        Edit configuration options

    Returns
    -------
    EditResult
        New document, message and number of substitutions

    """
    options = ensure_options(options, EditOptions, "replace")
    new_tree, occurrences = _rewrite_plain_text(tree, old_text, new_text, replace_all, options)
    template = REPLACE_ALL_MESSAGE if replace_all else REPLACE_FIRST_MESSAGE
    return EditResult(new_tree, template.format(old=old_text, new=new_text), occurrences)


def delete_text(
    tree: Any,
    text: str,
    delete_all: bool = False,
    options: EditOptions | None = None,
) -> EditResult:
    """Delete literal text from a document.

    Same as :func:`replace_text` with an empty replacement.

    Parameters
    ----------
    tree : Any
        Document to edit
    text : str
        Text to delete
    delete_all : bool, default False
        Delete every occurrence instead of only the first
    options : EditOptions or None, default = None
        Edit configuration options

    Returns
    -------
    EditResult
        New document, message and number of deletions

    """
    options = ensure_options(options, EditOptions, "delete")
    new_tree, occurrences = _rewrite_plain_text(tree, text, "", delete_all, options)
    template = DELETE_ALL_MESSAGE if delete_all else DELETE_FIRST_MESSAGE
    return EditResult(new_tree, template.format(text=text), occurrences)


def find_placeholder(tree: Any, placeholder: str) -> Optional[int]:
    """Find the top-level paragraph used as a placeholder.

    A placeholder is a paragraph whose first child is a text run containing
    ``placeholder``, e.g. "Transcribing audio..." while a recording is being
    processed.

    Returns
    -------
    int or None
        Index of the first matching top-level block, or None

    """
    doc = validate(tree)
    for index, child in enumerate(doc.children):
        if (
            isinstance(child, Paragraph)
            and child.children
            and isinstance(child.children[0], Text)
            and placeholder in child.children[0].value
        ):
            return index
    return None


def replace_placeholder(
    tree: Any,
    placeholder: str,
    markdown: str,
    options: MarkdownParserOptions | None = None,
) -> Document:
    """Replace a placeholder paragraph with converted Markdown content.

    Parameters
    ----------
    tree : Any
        Document containing the placeholder
    placeholder : str
        Text identifying the placeholder paragraph
    markdown : str
        Generated content to convert and splice in
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Returns
    -------
    Document
        New document with the placeholder swapped for the converted blocks;
        the validated input unchanged when no placeholder exists

    """
    doc = validate(tree)
    index = find_placeholder(doc, placeholder)
    if index is None:
        logger.debug("Placeholder %r not found", placeholder)
        return doc
    blocks = markdown_to_document(markdown, options).children
    return Document(children=doc.children[:index] + blocks + doc.children[index + 1 :])


def update_placeholder(tree: Any, placeholder: str, new_text: str) -> Document:
    """Replace a placeholder paragraph's text, e.g. with a progress or failure note.

    Returns the validated input unchanged when no placeholder exists.
    """
    doc = validate(tree)
    index = find_placeholder(doc, placeholder)
    if index is None:
        logger.debug("Placeholder %r not found", placeholder)
        return doc
    updated = Paragraph(children=(Text(new_text),))
    return Document(children=doc.children[:index] + (updated,) + doc.children[index + 1 :])
