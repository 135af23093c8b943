"""Clipboard payload model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ClipboardPayload(BaseModel):
    """Data captured from a paste event.

    Attributes:
        types: MIME types advertised by the clipboard (e.g. "text/html",
            "text/plain", "Files").
        html: The "text/html" payload. Typed loosely so that a host handing
            over a non-string value can be reported instead of rejected here.
        text: The "text/plain" payload, used as the last-resort fallback.
    """

    types: list[str] = Field(default_factory=list)
    html: Any = None
    text: str | None = None
