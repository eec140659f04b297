#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown-to-document conversion."""
# src/notedoc/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field

from notedoc.constants import (
    DEFAULT_MAX_HEADING_LEVEL,
    DEFAULT_PARSE_INLINE,
    DEFAULT_PARSE_TABLES,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
)
from notedoc.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class MarkdownParserOptions(CloneFrozenMixin):
    """Configuration options for Markdown-to-document parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether runs of lines starting with ``|`` become tables. When False
        they are kept as paragraph text.
    parse_inline : bool, default True
        Whether emphasis, code and strikethrough markers become marks. When
        False every run is plain text with the markers left in place.
    max_heading_level : int, default 6
        Deepest heading level produced; more ``#`` characters are clamped
        to this level.

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse pipe tables", "cli_name": "no-parse-tables"},
    )
    parse_inline: bool = field(
        default=DEFAULT_PARSE_INLINE,
        metadata={"help": "Parse inline emphasis, code and strikethrough", "cli_name": "no-parse-inline"},
    )
    max_heading_level: int = field(
        default=DEFAULT_MAX_HEADING_LEVEL,
        metadata={"help": "Deepest heading level to produce (1-6)", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate the heading level range.

        Raises
        ------
        ValueError
            If max_heading_level is outside 1-6

        """
        if not MIN_HEADING_LEVEL <= self.max_heading_level <= MAX_HEADING_LEVEL:
            raise ValueError(
                f"max_heading_level must be {MIN_HEADING_LEVEL}-{MAX_HEADING_LEVEL}, got {self.max_heading_level}"
            )
