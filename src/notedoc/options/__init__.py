#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for notedoc conversion and edit operations.

Each component has its own frozen options dataclass; ``create_updated``
returns modified copies.
"""

from __future__ import annotations

from notedoc.options.base import CloneFrozenMixin, ensure_options
from notedoc.options.edit import EditOptions
from notedoc.options.markdown import MarkdownParserOptions

__all__ = [
    "CloneFrozenMixin",
    "EditOptions",
    "MarkdownParserOptions",
    "ensure_options",
]
