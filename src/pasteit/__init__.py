"""pasteit: turn clipboard HTML into nested outline blocks."""

from pasteit.exceptions import (
    ClipboardError,
    ContentTooLargeError,
    ConversionError,
    InvalidHTMLError,
    NoClipboardDataError,
    NoCurrentBlockError,
    PasteItError,
)
from pasteit.markdown import ConverterOptions, convert_html_to_markdown
from pasteit.paste import Host, PasteAction, PasteResult, handle_paste
from pasteit.schemas import BlockNode, ClipboardPayload, HostBlock, PasteSettings
from pasteit.split import split_into_blocks

__all__ = [
    "BlockNode",
    "ClipboardError",
    "ClipboardPayload",
    "ContentTooLargeError",
    "ConversionError",
    "ConverterOptions",
    "Host",
    "HostBlock",
    "InvalidHTMLError",
    "NoClipboardDataError",
    "NoCurrentBlockError",
    "PasteAction",
    "PasteItError",
    "PasteResult",
    "PasteSettings",
    "convert_html_to_markdown",
    "handle_paste",
    "split_into_blocks",
]
