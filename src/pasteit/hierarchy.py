"""Build a block forest from a flat sequence of depth-tagged units."""

from __future__ import annotations

from dataclasses import dataclass

from pasteit.schemas import BlockNode


@dataclass
class _Frame:
    depth: int
    node: BlockNode
    parent: BlockNode | None = None


class HierarchyBuilder:
    """Attach blocks as sibling, child or ancestor-sibling of the previous one.

    The stack holds one frame per open depth level. Each frame points at the
    most recently placed node at that depth and at that node's parent, so a
    dedent only pops frames and never walks the tree.
    """

    def __init__(self) -> None:
        self._stack: list[_Frame] = []
        self._roots: list[BlockNode] = []

    @property
    def roots(self) -> list[BlockNode]:
        return self._roots

    def add(self, content: str, depth: int) -> BlockNode:
        """Place a new block with ``content`` at ``depth`` and return it."""
        node = BlockNode(content=content)
        if not self._stack:
            self._add_root(node, depth)
            return node

        top = self._stack[-1]
        if depth == top.depth:
            self._add_sibling(node)
        elif depth > top.depth:
            self._add_child(node, depth)
        else:
            self._add_after_dedent(node, depth)
        return node

    def _add_root(self, node: BlockNode, depth: int) -> None:
        self._roots.append(node)
        self._stack.append(_Frame(depth=depth, node=node))

    def _add_sibling(self, node: BlockNode) -> None:
        top = self._stack[-1]
        if top.parent is not None:
            top.parent.children.append(node)
        else:
            self._roots.append(node)
        top.node = node

    def _add_child(self, node: BlockNode, depth: int) -> None:
        top = self._stack[-1]
        top.node.children.append(node)
        self._stack.append(_Frame(depth=depth, node=node, parent=top.node))

    def _add_after_dedent(self, node: BlockNode, depth: int) -> None:
        while self._stack and self._stack[-1].depth > depth:
            self._stack.pop()

        if not self._stack:
            self._add_root(node, depth)
        elif self._stack[-1].depth == depth:
            self._add_sibling(node)
        else:
            self._add_child(node, depth)


def build_hierarchy(units: list[tuple[str, int]]) -> list[BlockNode]:
    """Build a forest from ``(content, depth)`` pairs in document order."""
    builder = HierarchyBuilder()
    for content, depth in units:
        builder.add(content, depth)
    return builder.roots
