"""Render block forests as outliner text."""

from __future__ import annotations

from typing import Iterable

from pasteit.schemas import BlockNode

BULLET = "- "


def format_outline(blocks: Iterable[BlockNode], indent: str = "\t") -> str:
    """Render blocks as a nested bullet list, one ``indent`` per level.

    Continuation lines of multi-line content (code fences, tables) are
    aligned under the bullet text.
    """
    lines: list[str] = []
    _render(blocks, indent, 0, lines)
    return "\n".join(lines)


def count_blocks(blocks: Iterable[BlockNode]) -> int:
    """Count total blocks in the forest."""
    total = 0
    for block in blocks:
        total += 1
        total += count_blocks(block.children)
    return total


def _render(blocks: Iterable[BlockNode], indent: str, level: int, lines: list[str]) -> None:
    prefix = indent * level
    for block in blocks:
        first, *rest = block.content.split("\n")
        lines.append(f"{prefix}{BULLET}{first}")
        lines.extend(f"{prefix}{' ' * len(BULLET)}{line}" for line in rest)
        _render(block.children, indent, level + 1, lines)
