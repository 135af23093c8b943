"""Custom exceptions for pasteit."""


class PasteItError(Exception):
    """Base exception for pasteit operations."""


class ClipboardError(PasteItError):
    """Error reading the clipboard payload."""


class NoClipboardDataError(ClipboardError):
    """Paste event carried no clipboard data."""


class InvalidHTMLError(ClipboardError):
    """Clipboard HTML is not a string."""


class NoCurrentBlockError(PasteItError):
    """Host has no block under the editing cursor."""


class ConversionError(PasteItError):
    """Error during HTML to Markdown conversion."""


class ContentTooLargeError(PasteItError):
    """Clipboard content exceeds the configured size limit."""
