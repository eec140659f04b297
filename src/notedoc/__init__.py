"""notedoc - Markdown to editor document conversion for AI-assisted notes.

notedoc turns the Markdown written by a note-taking assistant into the
editor's structured document tree and provides the text edits the assistant
performs on a note: append, replace, delete and placeholder substitution.

Examples
--------
Convert Markdown and edit the result:

    >>> from notedoc import convert, replace, extract_plain_text
    >>> doc = convert("# Shopping\\n\\n- milk\\n- bread")
    >>> result = replace(doc, "milk", "oat milk")
    >>> extract_plain_text(result.tree)
    'Shopping\\noat milk\\nbread'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/notedoc/__init__.py

from notedoc.api import (
    append,
    convert,
    create_content_from_text,
    create_empty_content,
    delete_text,
    extract_plain_text,
    find_placeholder,
    is_markdown_table,
    replace,
    replace_placeholder,
    update_placeholder,
    validate,
)
from notedoc.ast.nodes import Document
from notedoc.ast.serialization import from_json, to_json
from notedoc.ast.transforms import EditResult
from notedoc.exceptions import (
    ConfigError,
    InvalidDocumentError,
    InvalidOptionsError,
    NoteDocError,
    UnknownToolError,
    ValidationError,
)
from notedoc.options import EditOptions, MarkdownParserOptions

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Conversion and edits
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
    # Types
    "Document",
    "EditResult",
    "from_json",
    "to_json",
    # Options
    "EditOptions",
    "MarkdownParserOptions",
    # Exceptions
    "ConfigError",
    "InvalidDocumentError",
    "InvalidOptionsError",
    "NoteDocError",
    "UnknownToolError",
    "ValidationError",
]
