"""Shared schemas for pasteit."""

from pasteit.schemas.blocks import BlockNode, HostBlock
from pasteit.schemas.clipboard import ClipboardPayload
from pasteit.schemas.settings import SETTINGS_SCHEMA, PasteSettings

__all__ = ["BlockNode", "ClipboardPayload", "HostBlock", "PasteSettings", "SETTINGS_SCHEMA"]
