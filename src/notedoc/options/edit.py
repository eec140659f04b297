#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for document edit operations."""
# src/notedoc/options/edit.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from notedoc.constants import DEFAULT_INSERT_SPACER
from notedoc.options.base import CloneFrozenMixin
from notedoc.options.markdown import MarkdownParserOptions


@dataclass(frozen=True)
class EditOptions(CloneFrozenMixin):
    """Configuration options for append, replace and delete.

    Parameters
    ----------
    insert_spacer : bool, default True
        Whether append inserts an empty paragraph between the existing
        content and the appended paragraph.
    parser : MarkdownParserOptions
        Options for the re-conversion performed by replace and delete.

    """

    insert_spacer: bool = field(
        default=DEFAULT_INSERT_SPACER,
        metadata={"help": "Insert an empty spacer paragraph before appended text", "cli_name": "no-spacer"},
    )
    parser: MarkdownParserOptions = field(default_factory=MarkdownParserOptions)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> EditOptions:
        """Build edit options from a configuration mapping.

        A nested ``parser`` mapping is converted to :class:`MarkdownParserOptions`.
        """
        values = dict(data)
        parser = values.get("parser")
        if isinstance(parser, Mapping):
            values["parser"] = MarkdownParserOptions.from_mapping(parser)
        return super().from_mapping(values)
