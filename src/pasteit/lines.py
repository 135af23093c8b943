"""Classify single Markdown lines for block splitting."""

from __future__ import annotations

CODE_FENCE = "```"
TABLE_ROW_MARKER = "|"
HEADING_MARKER = "#"
MAX_HEADING_LEVEL = 6


def is_blank(line: str) -> bool:
    """Return True if the line is empty or whitespace only."""
    return not line.strip()


def is_code_fence_marker(line: str) -> bool:
    """Return True for an opening or closing code fence line.

    Opening and closing fences share this predicate; the grouper tells them
    apart by position.
    """
    return line.strip().startswith(CODE_FENCE)


def is_table_row(line: str) -> bool:
    return line.strip().startswith(TABLE_ROW_MARKER)


def is_heading(line: str) -> bool:
    return line.lstrip().startswith(HEADING_MARKER)


def heading_level(line: str) -> int:
    """Count leading '#' characters after indentation, capped at 6."""
    level = 0
    for char in line.lstrip()[:MAX_HEADING_LEVEL]:
        if char != HEADING_MARKER:
            break
        level += 1
    return level


def indent_width(line: str) -> int:
    """Number of leading whitespace characters on the raw line."""
    return len(line) - len(line.lstrip())


def depth_of(line: str, is_heading_line: bool, indent_headings: bool) -> int:
    """Return the nesting depth signal for a line.

    Headings map to ``level - 6`` when ``indent_headings`` is set, so H1 sits
    at -5 and H6 at 0, all at or below plain unindented text. Without the
    flag every heading sits at depth 0. Other lines use their indentation.
    """
    if is_heading_line and indent_headings:
        return heading_level(line) - MAX_HEADING_LEVEL
    if is_heading_line:
        return 0
    return indent_width(line)
