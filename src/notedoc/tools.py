#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/tools.py
"""Note editing tools exposed to the chat assistant.

The assistant edits the open note through four tools: rewrite, append,
replace and delete. Each tool takes the current document, produces a new one,
hands it to the ``on_content_update`` callback and returns a short status
message for the model. Tools never raise on bad content: failures are logged
and reported back as ``Failed to <action>: <error>``.

Examples
--------
>>> tools = NoteTools()
>>> tools.rewrite_note("# Groceries\\n\\n- milk")
'Note has been completely rewritten with new content.'
>>> tools.call("replaceText", {"oldText": "milk", "newText": "eggs"})
'First occurrence of "milk" has been replaced with "eggs".'

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from notedoc.ast.nodes import Document
from notedoc.ast.transforms import append_text, delete_text, replace_text
from notedoc.ast.validation import validate
from notedoc.exceptions import UnknownToolError, ValidationError
from notedoc.options.base import ensure_options
from notedoc.options.edit import EditOptions
from notedoc.parsers.markdown import markdown_to_document

logger = logging.getLogger(__name__)

ContentCallback = Callable[[Document], None]

REWRITE_MESSAGE = "Note has been completely rewritten with new content."
APPEND_MESSAGE = "Text has been appended to the end of the note."


@dataclass(frozen=True)
class ToolParameter:
    """One argument of a note tool."""

    name: str
    type: type
    description: str
    required: bool = True


@dataclass(frozen=True)
class ToolSpec:
    """Name, description and arguments of a note tool, as advertised to the model."""

    name: str
    description: str
    parameters: tuple[ToolParameter, ...] = field(default_factory=tuple)

    def to_schema(self) -> dict[str, Any]:
        """Describe the tool as a JSON-schema style mapping."""
        type_names = {str: "string", bool: "boolean"}
        return {
            "name": self.name,
            "description": self.description,
            "parameters": {
                "type": "object",
                "properties": {
                    p.name: {"type": type_names[p.type], "description": p.description} for p in self.parameters
                },
                "required": [p.name for p in self.parameters if p.required],
            },
        }


AVAILABLE_TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="rewriteNote",
        description=(
            "Completely rewrite the entire note with new content. This replaces all existing content "
            "with the new text you provide."
        ),
        parameters=(ToolParameter("text", str, "The new content for the note (supports markdown formatting)"),),
    ),
    ToolSpec(
        name="appendToNote",
        description=(
            "Append text to the end of the note. The new content will be added after the existing "
            "content with appropriate spacing."
        ),
        parameters=(ToolParameter("text", str, "The text to append to the note"),),
    ),
    ToolSpec(
        name="replaceText",
        description=(
            "Replace specific text in the note. You can replace just the first occurrence or all "
            "occurrences of the text."
        ),
        parameters=(
            ToolParameter("oldText", str, "The text to find and replace"),
            ToolParameter("newText", str, "The replacement text"),
            ToolParameter(
                "replaceAll",
                bool,
                "Whether to replace all occurrences (true) or just the first one (false). Defaults to false.",
                required=False,
            ),
        ),
    ),
    ToolSpec(
        name="deleteText",
        description=(
            "Delete specific text from the note. You can delete just the first occurrence or all "
            "occurrences of the text."
        ),
        parameters=(
            ToolParameter("text", str, "The text to delete from the note"),
            ToolParameter(
                "deleteAll",
                bool,
                "Whether to delete all occurrences (true) or just the first one (false). Defaults to false.",
                required=False,
            ),
        ),
    ),
)


def _check_arguments(spec: ToolSpec, args: Mapping[str, Any]) -> dict[str, Any]:
    checked: dict[str, Any] = {}
    for param in spec.parameters:
        if param.name not in args:
            if param.required:
                raise ValidationError(
                    f"Tool '{spec.name}' requires argument '{param.name}'", parameter_name=param.name
                )
            continue
        value = args[param.name]
        if not isinstance(value, param.type):
            raise ValidationError(
                f"Tool '{spec.name}' argument '{param.name}' must be {param.type.__name__}, "
                f"got {type(value).__name__}",
                parameter_name=param.name,
                parameter_value=value,
            )
        checked[param.name] = value
    return checked


class NoteTools:
    """The chat assistant's editing tools bound to one note.

    Parameters
    ----------
    content : Any, optional
        Current note content: a ``Document``, editor JSON, or None for an
        empty note. It is validated on construction.
    on_content_update : callable, optional
        Called with the new ``Document`` after every successful edit
    options : EditOptions, optional
        Options for append, replace and delete, and for parsing rewrites

    """

    def __init__(
        self,
        content: Any = None,
        on_content_update: Optional[ContentCallback] = None,
        options: Optional[EditOptions] = None,
    ):
        """Initialize the tools with the note's current content."""
        self.content: Document = validate(content)
        self.on_content_update = on_content_update
        self.options: EditOptions = ensure_options(options, EditOptions, "tools")

    def _commit(self, updated: Document) -> None:
        self.content = updated
        if self.on_content_update is not None:
            self.on_content_update(updated)

    def _failure(self, action: str, error: Exception) -> str:
        logger.error("[%s] %s", action, error, exc_info=True)
        return f"Failed to {action}: {error}"

    def rewrite_note(self, text: str) -> str:
        """Replace the whole note with ``text`` converted from Markdown."""
        try:
            self._commit(markdown_to_document(text, self.options.parser))
        except Exception as e:
            return self._failure("rewrite note", e)
        return REWRITE_MESSAGE

    def append_to_note(self, text: str) -> str:
        """Append ``text`` as a literal paragraph at the end of the note."""
        try:
            self._commit(append_text(self.content, text, self.options))
        except Exception as e:
            return self._failure("append to note", e)
        return APPEND_MESSAGE

    def replace_text(self, old_text: str, new_text: str, replace_all: bool = False) -> str:
        """Replace the first (or every) occurrence of ``old_text``.

        The returned message reads as a success even if the text was not in
        the note.
        """
        try:
            result = replace_text(self.content, old_text, new_text, replace_all, self.options)
            self._commit(result.tree)
        except Exception as e:
            return self._failure("replace text", e)
        return result.message

    def delete_text(self, text: str, delete_all: bool = False) -> str:
        """Delete the first (or every) occurrence of ``text``."""
        try:
            result = delete_text(self.content, text, delete_all, self.options)
            self._commit(result.tree)
        except Exception as e:
            return self._failure("delete text", e)
        return result.message

    def call(self, name: str, args: Mapping[str, Any]) -> str:
        """Run a tool by its advertised name with model-supplied arguments.

        Parameters
        ----------
        name : str
            One of the names in :data:`AVAILABLE_TOOLS`
        args : Mapping
            Arguments keyed by the advertised parameter names

        Returns
        -------
        str
            The tool's status message

        Raises
        ------
        UnknownToolError
            If no tool has that name
        ValidationError
            If a required argument is missing or has the wrong type

        """
        specs = {spec.name: spec for spec in AVAILABLE_TOOLS}
        spec = specs.get(name)
        if spec is None:
            raise UnknownToolError(name, list(specs))

        checked = _check_arguments(spec, args)
        logger.debug("Calling tool %s with %s", name, sorted(checked))
        if name == "rewriteNote":
            return self.rewrite_note(checked["text"])
        if name == "appendToNote":
            return self.append_to_note(checked["text"])
        if name == "replaceText":
            return self.replace_text(checked["oldText"], checked["newText"], checked.get("replaceAll", False))
        return self.delete_text(checked["text"], checked.get("deleteAll", False))
