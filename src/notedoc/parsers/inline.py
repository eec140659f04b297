#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notedoc/parsers/inline.py
"""Inline span parser.

Turns one line (or table cell) of Markdown-ish text into a flat sequence of
text runs carrying style marks. Supported markers, in priority order:

- ``***text***`` bold and italic
- ``**text**`` bold
- ``*text*`` italic
- `` `text` `` inline code
- ``~~text~~`` strikethrough

Each pattern is scanned independently over the whole input. Matches are then
sorted by start offset and any match overlapping an already accepted one is
discarded, so the earliest match wins and accepted spans are never re-scanned.
Marks therefore never nest beyond the bold-and-italic combination, and a
marker without a closing delimiter stays in the output as literal text.

"""

from __future__ import annotations

import re
from typing import NamedTuple

from notedoc.ast.nodes import Mark, Text
from notedoc.constants import (
    BOLD_ITALIC_PATTERN,
    BOLD_PATTERN,
    INLINE_CODE_PATTERN,
    ITALIC_PATTERN,
    STRIKETHROUGH_PATTERN,
)

INLINE_RULES: tuple[tuple[re.Pattern[str], frozenset[Mark]], ...] = (
    (BOLD_ITALIC_PATTERN, frozenset({Mark.BOLD, Mark.ITALIC})),
    (BOLD_PATTERN, frozenset({Mark.BOLD})),
    (ITALIC_PATTERN, frozenset({Mark.ITALIC})),
    (INLINE_CODE_PATTERN, frozenset({Mark.CODE})),
    (STRIKETHROUGH_PATTERN, frozenset({Mark.STRIKE})),
)


class InlineMatch(NamedTuple):
    """A marker match: source span, inner text and the marks it applies."""

    start: int
    end: int
    text: str
    marks: frozenset[Mark]


def find_inline_matches(text: str) -> list[InlineMatch]:
    """Collect the non-overlapping marker matches of a line.

    Parameters
    ----------
    text : str
        A single line of text

    Returns
    -------
    list of InlineMatch
        Accepted matches ordered by start offset

    """
    candidates = [
        InlineMatch(match.start(), match.end(), match.group(1), marks)
        for pattern, marks in INLINE_RULES
        for match in pattern.finditer(text)
    ]
    # Stable sort: for equal starts the rule order above decides.
    candidates.sort(key=lambda m: m.start)

    accepted: list[InlineMatch] = []
    for candidate in candidates:
        if accepted and candidate.start < accepted[-1].end:
            continue
        accepted.append(candidate)
    return accepted


def parse_inline(text: str) -> tuple[Text, ...]:
    """Parse a line of text into marked and unmarked text runs.

    Parameters
    ----------
    text : str
        A single line or table cell, without embedded newlines

    Returns
    -------
    tuple of Text
        Runs in left-to-right order. Input without markers yields one
        unmarked run; empty input yields one empty unmarked run.

    Examples
    --------
    >>> [(run.value, sorted(run.marks)) for run in parse_inline("**bold** and `code`")]
    [('bold', [<Mark.BOLD: 'bold'>]), (' and ', []), ('code', [<Mark.CODE: 'code'>])]

    """
    matches = find_inline_matches(text)
    if not matches:
        return (Text(text),)

    runs: list[Text] = []
    position = 0
    for match in matches:
        if match.start > position:
            runs.append(Text(text[position : match.start]))
        runs.append(Text(match.text, marks=match.marks))
        position = match.end
    if position < len(text):
        runs.append(Text(text[position:]))
    return tuple(runs)
