"""Paste pipeline: clipboard HTML -> Markdown -> outline blocks -> host."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from pasteit.cleaning import clean_markdown, remove_headers, strip_block_headers
from pasteit.config import PASTEIT_MAX_CONTENT_SIZE
from pasteit.detection import (
    clean_google_docs_format,
    extract_html_fragment,
    is_external_content,
    validate_clipboard,
)
from pasteit.exceptions import ContentTooLargeError, NoCurrentBlockError, PasteItError
from pasteit.markdown import convert_html_to_markdown
from pasteit.schemas import BlockNode, ClipboardPayload, HostBlock, PasteSettings
from pasteit.split import split_into_blocks

logger = logging.getLogger(__name__)

_CODE_BLOCK_PREFIX = "```"
_DIRECTIVE_PREFIX = "#+"


class Host(Protocol):
    """Document API of the outliner receiving the paste."""

    async def get_current_block(self) -> HostBlock | None: ...

    async def insert_at_editing_cursor(self, text: str) -> Any: ...

    async def insert_batch_block(
        self, parent_id: str, blocks: list[dict[str, Any]], *, sibling: bool = True
    ) -> Any: ...


class PasteAction(str, Enum):
    """What the pipeline did with a paste."""

    DEFAULT = "default"
    SKIPPED = "skipped"
    INSERTED_TEXT = "inserted_text"
    INSERTED_BLOCKS = "inserted_blocks"


@dataclass
class PasteResult:
    """Outcome of a paste.

    Attributes:
        action: How the paste was handled.
        markdown: The Markdown produced from the clipboard HTML, if any.
        blocks: The blocks handed to the host for a batch insert.
    """

    action: PasteAction
    markdown: str | None = None
    blocks: list[BlockNode] = field(default_factory=list)


async def handle_paste(
    payload: ClipboardPayload | None,
    host: Host,
    settings: PasteSettings | None = None,
) -> PasteResult:
    """Convert a clipboard paste and insert it into the host document.

    Args:
        payload: Clipboard data captured from the paste event.
        host: Outliner document API.
        settings: Paste behavior flags. Uses defaults if None.

    Returns:
        A PasteResult describing what was inserted. ``PasteAction.DEFAULT``
        means the host should run its own paste handling.

    Raises:
        NoClipboardDataError: If the event carried no clipboard data.
        InvalidHTMLError: If the HTML payload is not a string.
        NoCurrentBlockError: If no block is being edited.
        PasteItError: If processing fails and there is no plain text to
            fall back to.
    """
    opts = settings or PasteSettings()

    html = validate_clipboard(payload)
    if html is None:
        logger.debug("File paste, leaving it to the host")
        return PasteResult(action=PasteAction.DEFAULT)
    if not is_external_content(html):
        logger.debug("Internal content, leaving it to the host")
        return PasteResult(action=PasteAction.DEFAULT)

    current = await host.get_current_block()
    if current is None:
        raise NoCurrentBlockError("No block is being edited")
    if current.content.startswith(_CODE_BLOCK_PREFIX):
        logger.debug("Cursor is inside a code block %s, skipping paste", current.uuid)
        return PasteResult(action=PasteAction.SKIPPED)

    try:
        return await _paste_markdown(html, current, host, opts)
    except PasteItError as exc:
        fallback = payload.text if payload else None
        if not fallback:
            raise
        logger.warning("Paste processing failed, inserting plain text: %s", exc)
        await host.insert_at_editing_cursor(fallback)
        return PasteResult(action=PasteAction.INSERTED_TEXT)


async def _paste_markdown(
    html: str,
    current: HostBlock,
    host: Host,
    settings: PasteSettings,
) -> PasteResult:
    fragment = extract_html_fragment(html)
    if len(fragment) > PASTEIT_MAX_CONTENT_SIZE:
        raise ContentTooLargeError(
            f"Clipboard HTML has {len(fragment)} chars, limit is {PASTEIT_MAX_CONTENT_SIZE}"
        )

    markdown = convert_html_to_markdown(fragment)
    markdown = clean_google_docs_format(markdown)
    markdown = clean_markdown(markdown, settings)

    if current.content.startswith(_DIRECTIVE_PREFIX) or not settings.new_line_block:
        text = remove_headers(markdown) if settings.remove_headers else markdown
        await host.insert_at_editing_cursor(text.strip())
        return PasteResult(action=PasteAction.INSERTED_TEXT, markdown=markdown)

    blocks = split_into_blocks(markdown, settings.indent_headings)
    blocks = strip_block_headers(blocks, settings.remove_headers)
    if not blocks:
        await host.insert_at_editing_cursor(markdown.strip())
        return PasteResult(action=PasteAction.INSERTED_TEXT, markdown=markdown)

    await host.insert_batch_block(
        current.uuid, [block.to_batch() for block in blocks], sibling=True
    )
    logger.debug("Inserted %d top-level blocks after %s", len(blocks), current.uuid)
    return PasteResult(action=PasteAction.INSERTED_BLOCKS, markdown=markdown, blocks=blocks)
