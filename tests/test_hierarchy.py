"""Tests for the stack-based hierarchy builder."""

from __future__ import annotations

from pasteit.hierarchy import HierarchyBuilder, build_hierarchy
from pasteit.schemas import BlockNode


def _shape(blocks: list[BlockNode]) -> list:
    return [(block.content, _shape(block.children)) for block in blocks]


class TestHierarchyBuilder:
    """Tests for HierarchyBuilder placement rules."""

    def test_first_block_is_root(self) -> None:
        builder = HierarchyBuilder()

        node = builder.add("a", 3)

        assert builder.roots == [node]

    def test_equal_depth_roots_are_siblings(self) -> None:
        roots = build_hierarchy([("a", 4), ("b", 4)])

        assert _shape(roots) == [("a", []), ("b", [])]

    def test_dedent_attaches_to_nearest_shallower_ancestor(self) -> None:
        roots = build_hierarchy([("n0", 0), ("n1", 2), ("n2", 4), ("n3", 1)])

        assert _shape(roots) == [
            ("n0", [("n1", [("n2", [])]), ("n3", [])]),
        ]

    def test_dedent_to_matching_depth_is_sibling(self) -> None:
        roots = build_hierarchy([("a", 0), ("b", 2), ("c", 4), ("d", 2)])

        assert _shape(roots) == [("a", [("b", [("c", [])]), ("d", [])])]

    def test_dedent_below_every_frame_starts_new_root(self) -> None:
        roots = build_hierarchy([("a", 5), ("b", 7), ("c", 2), ("d", 3)])

        assert _shape(roots) == [("a", [("b", [])]), ("c", [("d", [])])]

    def test_sibling_replaces_frame_node(self) -> None:
        roots = build_hierarchy([("a", 0), ("b", 0), ("c", 2)])

        assert _shape(roots) == [("a", []), ("b", [("c", [])])]

    def test_negative_depths_order_like_any_other(self) -> None:
        roots = build_hierarchy(
            [("# A", -5), ("## B", -4), ("text", 0), ("## C", -4), ("more", 3)]
        )

        assert _shape(roots) == [
            ("# A", [("## B", [("text", [])]), ("## C", [("more", [])])]),
        ]

    def test_non_contiguous_depths(self) -> None:
        roots = build_hierarchy([("a", 0), ("b", 10), ("c", 3), ("d", 10)])

        assert _shape(roots) == [("a", [("b", []), ("c", [("d", [])])])]

    def test_empty_input(self) -> None:
        assert build_hierarchy([]) == []
