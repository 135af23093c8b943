"""Fuse fenced code and table runs into single units."""

from __future__ import annotations

from typing import Sequence

from pasteit.lines import is_code_fence_marker, is_table_row

CODE_LINE_PREFIX = "  "


def group_units(lines: Sequence[str]) -> list[str]:
    """Group non-blank lines into logical units.

    A fenced code block becomes one unit running up to and including the
    next fence line, or to the end of input if the fence is never closed.
    Consecutive table rows become one unit. Every other line is its own unit.
    """
    units: list[str] = []
    index = 0
    while index < len(lines):
        line = lines[index]
        if is_code_fence_marker(line):
            unit, index = group_code_fence(lines, index)
        elif is_table_row(line):
            unit, index = group_table(lines, index)
        else:
            unit, index = line, index + 1
        units.append(unit)
    return units


def group_code_fence(lines: Sequence[str], start: int) -> tuple[str, int]:
    """Collect a fenced code block starting at ``start``.

    Interior lines are prefixed with two spaces so that they nest visually
    under the fence. Returns the joined unit and the index after it.
    """
    code_lines = [lines[start]]
    index = start + 1
    while index < len(lines) and not is_code_fence_marker(lines[index]):
        code_lines.append(CODE_LINE_PREFIX + lines[index])
        index += 1
    if index < len(lines):
        code_lines.append(lines[index])
        index += 1
    return "\n".join(code_lines), index


def group_table(lines: Sequence[str], start: int) -> tuple[str, int]:
    """Collect consecutive table rows starting at ``start``."""
    table_lines = [lines[start]]
    index = start + 1
    while index < len(lines) and is_table_row(lines[index]):
        table_lines.append(lines[index])
        index += 1
    return "\n".join(table_lines), index
