"""Split Markdown text into a forest of outline blocks."""

from __future__ import annotations

import logging

from pasteit.grouping import group_units
from pasteit.hierarchy import build_hierarchy
from pasteit.lines import depth_of, is_blank, is_heading
from pasteit.schemas import BlockNode

logger = logging.getLogger(__name__)


def split_into_blocks(markdown: str, indent_headings: bool = True) -> list[BlockNode]:
    """Split Markdown into nested blocks.

    Returns an empty list when the text has at most one non-blank line or
    groups into at most one unit; the caller is expected to insert such
    content as-is.

    Args:
        markdown: Markdown text, typically produced from clipboard HTML.
        indent_headings: If True, headings nest by level (H2 under H1 and so
            on); otherwise every heading sits at the top level.

    Returns:
        The top-level blocks, each carrying its nested children.
    """
    if not markdown or not markdown.strip():
        return []

    lines = [line for line in markdown.split("\n") if not is_blank(line)]
    if len(lines) <= 1:
        return []

    units = group_units(lines)
    if len(units) <= 1:
        return []

    placed: list[tuple[str, int]] = []
    for unit in units:
        content = unit.lstrip()
        depth = depth_of(unit, is_heading(content), indent_headings)
        placed.append((content, depth))

    blocks = build_hierarchy(placed)
    logger.debug("Split %d lines into %d units, %d top-level blocks", len(lines), len(units), len(blocks))
    return blocks
