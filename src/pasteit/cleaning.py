"""Cosmetic Markdown cleanup driven by paste settings."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from pasteit.config import PASTEIT_MAX_CLEAN_SIZE
from pasteit.schemas import BlockNode, PasteSettings

logger = logging.getLogger(__name__)

_BOLD_RE = re.compile(r"\*\*([^*]+?)\*\*")
_HEADER_RE = re.compile(r"^#{1,6}\s*", re.M)
_HORIZONTAL_RULE_RE = re.compile(r"^---\s*$", re.M)
_EMOJI_RE = re.compile(
    "[\U0001F600-\U0001F64F]"
    "|[\U0001F300-\U0001F5FF]"
    "|[\U0001F680-\U0001F6FF]"
    "|[\U0001F1E0-\U0001F1FF]"
    "|[\u2600-\u26FF]"
    "|[\u2700-\u27BF]"
    "|[\uFE00-\uFE0F]"
)
_MIN_CLEAN_LENGTH = 10


def clean_markdown(markdown: str, settings: PasteSettings) -> str:
    """Remove bold markers, horizontal rules and emojis as configured."""
    if not settings.needs_cleaning:
        return markdown
    if len(markdown) > PASTEIT_MAX_CLEAN_SIZE:
        logger.warning(
            "Content too large (%d chars), skipping cleaning", len(markdown)
        )
        return markdown
    if len(markdown) < _MIN_CLEAN_LENGTH:
        return markdown

    result = markdown
    if settings.remove_bolds and "**" in result:
        result = _BOLD_RE.sub(r"\1", result)
    if settings.remove_horizontal_rules and "---" in result:
        result = _HORIZONTAL_RULE_RE.sub("", result)
    if settings.remove_emojis:
        result = _EMOJI_RE.sub("", result)
    return result


def remove_headers(markdown: str) -> str:
    """Strip heading markers from the start of every line."""
    if "#" not in markdown:
        return markdown
    return _HEADER_RE.sub("", markdown)


def strip_block_headers(blocks: list[BlockNode], remove: bool) -> list[BlockNode]:
    """Strip heading markers from every block in place when ``remove`` is set."""
    if remove:
        for block in _walk(blocks):
            block.content = remove_headers(block.content)
    return blocks


def _walk(blocks: Iterable[BlockNode]) -> Iterable[BlockNode]:
    for block in blocks:
        yield block
        yield from _walk(block.children)
