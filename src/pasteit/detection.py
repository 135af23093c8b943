"""Inspect clipboard payloads before conversion."""

from __future__ import annotations

import re

from pasteit.exceptions import InvalidHTMLError, NoClipboardDataError
from pasteit.schemas import ClipboardPayload

# Prefix the host writes when copying its own blocks.
INTERNAL_SIGN = "<meta charset='utf-8'><ul><placeholder>"
DIRECTIVE_MARKER = "<!-- directives: [] -->"
DIRECTIVE_MARKER_OFFSET = 22
MIN_EXTERNAL_CONTENT_LENGTH = 45

GOOGLE_DOCS_PREFIX = "**\n"
GOOGLE_DOCS_SUFFIX = "\n**"
MIN_GOOGLE_DOCS_LENGTH = 6

_FRAGMENT_RE = re.compile(r"<!--StartFragment-->(.*?)<!--EndFragment-->", re.S)


def is_external_content(html: str | None) -> bool:
    """Return True if the HTML did not originate from the host itself."""
    if not html:
        return False
    if len(html) < MIN_EXTERNAL_CONTENT_LENGTH:
        return True
    if html.startswith(INTERNAL_SIGN):
        return False
    if len(html) > DIRECTIVE_MARKER_OFFSET + len(DIRECTIVE_MARKER):
        return html.find(DIRECTIVE_MARKER, DIRECTIVE_MARKER_OFFSET) == -1
    return True


def is_google_docs_content(markdown: str) -> bool:
    """Detect the bold wrapper Google Docs puts around copied content."""
    return (
        len(markdown) > MIN_GOOGLE_DOCS_LENGTH
        and markdown.startswith(GOOGLE_DOCS_PREFIX)
        and markdown.endswith(GOOGLE_DOCS_SUFFIX)
    )


def clean_google_docs_format(markdown: str) -> str:
    if is_google_docs_content(markdown):
        return markdown[len(GOOGLE_DOCS_PREFIX) : -len(GOOGLE_DOCS_SUFFIX)]
    return markdown


def extract_html_fragment(html: str) -> str:
    """Return the CF_HTML fragment between StartFragment/EndFragment markers.

    Windows clipboard HTML carries a header and a full document around the
    copied selection. Input without both markers is returned unchanged.
    """
    match = _FRAGMENT_RE.search(html)
    if match:
        return match.group(1)
    return html


def validate_clipboard(payload: ClipboardPayload | None) -> str | None:
    """Return the clipboard HTML to process, or None to keep the host default.

    Raises:
        NoClipboardDataError: If the paste event carried no clipboard data.
        InvalidHTMLError: If the HTML payload is not a string.
    """
    if payload is None:
        raise NoClipboardDataError("No clipboard data available")

    if "Files" in payload.types and "text/plain" not in payload.types:
        return None

    if not isinstance(payload.html, str):
        raise InvalidHTMLError(f"Invalid HTML data type: {type(payload.html).__name__}")
    return payload.html
