"""Outline block models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class BlockNode(BaseModel):
    """A block of outline content with nested child blocks."""

    content: str
    children: list["BlockNode"] = Field(default_factory=list)

    def to_batch(self) -> dict[str, Any]:
        """Return the plain dict form accepted by a host batch insert."""
        return {
            "content": self.content,
            "children": [child.to_batch() for child in self.children],
        }


class HostBlock(BaseModel):
    """The host document block currently under the editing cursor."""

    uuid: str
    content: str = ""
