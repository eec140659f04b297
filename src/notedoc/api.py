"""The major exported API functions for note content conversion and editing."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/notedoc/api.py
import logging
from typing import Any, Optional

from notedoc.ast import transforms
from notedoc.ast.nodes import Document
from notedoc.ast.transforms import (
    EditResult,
    create_content_from_text,
    find_placeholder,
    replace_placeholder,
    update_placeholder,
)
from notedoc.ast.validation import create_empty_content, validate
from notedoc.options.edit import EditOptions
from notedoc.options.markdown import MarkdownParserOptions
from notedoc.parsers.markdown import MarkdownParser
from notedoc.parsers.table import is_markdown_table

logger = logging.getLogger(__name__)

__all__ = [
    "append",
    "convert",
    "create_content_from_text",
    "create_empty_content",
    "delete_text",
    "extract_plain_text",
    "find_placeholder",
    "is_markdown_table",
    "replace",
    "replace_placeholder",
    "update_placeholder",
    "validate",
]


def convert(
    markdown_text: str,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    **kwargs: Any,
) -> Document:
    """Convert Markdown text into an editor document tree.

    Parameters
    ----------
    markdown_text : str
        Markdown source, typically generated by the note assistant
    parser_options : MarkdownParserOptions, optional
        Pre-configured parser options
    kwargs : Any
        Individual parser options that override settings in parser_options

    Returns
    -------
    Document
        New document tree; empty for empty or whitespace-only text

    Examples
    --------
    Convert and serialize:
        >>> from notedoc import convert
        >>> from notedoc.ast import to_json
        >>> doc = convert("# Plan\\n\\n- [x] write\\n- test")
        >>> json_str = to_json(doc)

    Keep pipe lines as text:
        >>> doc = convert("| a | b |", parse_tables=False)

    """
    if kwargs:
        base = parser_options or MarkdownParserOptions()
        parser_options = base.create_updated(**kwargs)
    return MarkdownParser(parser_options).parse(markdown_text)


def extract_plain_text(tree: Any) -> str:
    """Flatten a document into plain text.

    Accepts anything :func:`validate` accepts; block siblings are joined with
    newlines and inline runs are concatenated.
    """
    return transforms.extract_plain_text(tree)


def append(tree: Any, text: str, *, edit_options: Optional[EditOptions] = None) -> Document:
    """Append literal text to the end of a document as a new paragraph.

    Parameters
    ----------
    tree : Any
        Document (or editor JSON) to append to
    text : str
        Text to append; blank text leaves the document unchanged
    edit_options : EditOptions, optional
        Edit configuration options

    Returns
    -------
    Document
        New document tree

    """
    return transforms.append_text(tree, text, edit_options)


def replace(
    tree: Any,
    old_text: str,
    new_text: str,
    replace_all: bool = False,
    *,
    edit_options: Optional[EditOptions] = None,
) -> EditResult:
    """Replace text in a document.

    The document is flattened to plain text, the substitution is made, and the
    result is converted again as Markdown, so existing formatting is lost.

    Parameters
    ----------
    tree : Any
        Document (or editor JSON) to edit
    old_text : str
        Literal text to search for
    new_text : str
        Replacement text
    replace_all : bool, default False
        Replace every occurrence instead of only the first
    edit_options : EditOptions, optional
        Edit configuration options

    Returns
    -------
    EditResult
        New document, status message and occurrence count. The message is
        phrased as a success even when nothing matched.

    """
    result = transforms.replace_text(tree, old_text, new_text, replace_all, edit_options)
    logger.debug("replace: %d occurrence(s) of %r", result.occurrences, old_text)
    return result


def delete_text(
    tree: Any,
    text: str,
    delete_all: bool = False,
    *,
    edit_options: Optional[EditOptions] = None,
) -> EditResult:
    """Delete text from a document.

    Same as :func:`replace` with an empty replacement.
    """
    result = transforms.delete_text(tree, text, delete_all, edit_options)
    logger.debug("delete: %d occurrence(s) of %r", result.occurrences, text)
    return result
