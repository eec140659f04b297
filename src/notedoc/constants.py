#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the notedoc library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Block Syntax - Line classification patterns used by the segmenter
3. Inline Syntax - Emphasis, code and strikethrough patterns
4. Table Syntax - Pipe table patterns
5. Defaults - Option defaults and messages
6. CLI - Configuration discovery and environment variables
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

MarkName = Literal["bold", "italic", "code", "strike"]
ConfigFormat = Literal["toml", "yaml", "json"]

# =============================================================================
# Block Syntax
# =============================================================================

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

HEADING_PATTERN = re.compile(r"^(#+) +(.+)$")
UNORDERED_ITEM_PATTERN = re.compile(r"^[-*] +(.*)$")
ORDERED_ITEM_PATTERN = re.compile(r"^(\d+)\. +(.*)$")
BLOCKQUOTE_PATTERN = re.compile(r"^> +(.*)$")
CODE_FENCE = "```"
TABLE_LINE_PREFIX = "|"

# =============================================================================
# Inline Syntax
# =============================================================================

# Scanned in this order; the order breaks ties between matches that start at
# the same offset.
BOLD_ITALIC_PATTERN = re.compile(r"\*\*\*(.+?)\*\*\*")
BOLD_PATTERN = re.compile(r"\*\*(?!\*)(.+?)\*\*")
ITALIC_PATTERN = re.compile(r"(?<!\*)\*(?!\*)(.+?)(?<!\*)\*(?!\*)")
INLINE_CODE_PATTERN = re.compile(r"`([^`]+)`")
STRIKETHROUGH_PATTERN = re.compile(r"~~(.+?)~~")

# =============================================================================
# Table Syntax
# =============================================================================

SEPARATOR_CELL_PATTERN = re.compile(r"^[-:\s]+$")
UNESCAPED_PIPE_PATTERN = re.compile(r"(?<!\\)\|")
ESCAPED_PIPE = "\\|"

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_INLINE = True
DEFAULT_MAX_HEADING_LEVEL = MAX_HEADING_LEVEL
DEFAULT_INSERT_SPACER = True
DEFAULT_TABLE_CELL_SPAN = 1

# Deepest nesting, counted from a top-level block, that validation keeps.
MAX_NESTING_DEPTH = 100

REPLACE_FIRST_MESSAGE = 'First occurrence of "{old}" has been replaced with "{new}".'
REPLACE_ALL_MESSAGE = 'All occurrences of "{old}" have been replaced with "{new}".'
DELETE_FIRST_MESSAGE = 'First occurrence of "{text}" has been deleted.'
DELETE_ALL_MESSAGE = 'All occurrences of "{text}" have been deleted.'

# =============================================================================
# CLI
# =============================================================================

ENV_PREFIX = "NOTEDOC_"
CONFIG_FILENAMES = [".notedoc.toml", ".notedoc.yaml", ".notedoc.yml", ".notedoc.json"]
PYPROJECT_TOOL_SECTION = "notedoc"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE = 2
