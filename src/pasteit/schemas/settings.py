"""Paste behavior settings."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class PasteSettings(BaseModel):
    """Host-provided flags controlling how a paste is inserted.

    Field aliases match the camelCase keys the host settings store uses.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    indent_headings: bool = Field(default=True, alias="indentHeaders")
    new_line_block: bool = Field(default=True, alias="newLineBlock")
    remove_headers: bool = Field(default=False, alias="removeHeaders")
    remove_bolds: bool = Field(default=False, alias="removeBolds")
    remove_horizontal_rules: bool = Field(default=False, alias="removeHorizontalRules")
    remove_emojis: bool = Field(default=False, alias="removeEmojis")

    @classmethod
    def from_host(cls, values: Mapping[str, Any] | None) -> "PasteSettings":
        """Build settings from a host mapping, falling back to defaults."""
        if not values:
            return cls()
        return cls.model_validate(dict(values))

    @property
    def needs_cleaning(self) -> bool:
        return self.remove_bolds or self.remove_horizontal_rules or self.remove_emojis


SETTINGS_SCHEMA: list[dict[str, Any]] = [
    {
        "key": "indentHeaders",
        "title": "Whether to indent headers",
        "type": "boolean",
        "default": True,
        "description": "Indent headers according to their level in the block hierarchy",
    },
    {
        "key": "newLineBlock",
        "title": "Whether create a new block for new line",
        "type": "boolean",
        "default": True,
        "description": "Create separate blocks for each line when pasting",
    },
    {
        "key": "removeHeaders",
        "title": "Whether to remove header tags (#) when pasting",
        "type": "boolean",
        "default": False,
        "description": "Remove markdown header symbols while preserving indentation",
    },
    {
        "key": "removeBolds",
        "title": "Whether to remove strong tags (**) when pasting",
        "type": "boolean",
        "default": False,
        "description": "Remove bold formatting from pasted content",
    },
    {
        "key": "removeHorizontalRules",
        "title": "Whether to remove horizontal rules (---) when pasting",
        "type": "boolean",
        "default": False,
        "description": "Remove horizontal rule separators from pasted content",
    },
    {
        "key": "removeEmojis",
        "title": "Whether to remove emojis when pasting",
        "type": "boolean",
        "default": False,
        "description": "Strip emoji characters from pasted content",
    },
]
