"""Tests for the tree walker helpers."""

import pytest

from tree_generator.components.node import Node, TreeStats
from tree_generator.components.walker import (
    depths,
    iter_depth_first,
    parent_map,
    tree_stats,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_tree(children: dict[int, list[int]]) -> dict[int, Node]:
    """Build a tree from a mapping of node id -> child ids."""
    return {node_id: Node(id=node_id, child_ids=ids) for node_id, ids in children.items()}


# 0
# ├── 1
# │   ├── 3
# │   └── 4
# │       └── 5
# └── 2
SAMPLE = {0: [1, 2], 1: [3, 4], 2: [], 3: [], 4: [5], 5: []}


class TestNode:
    def test_defaults(self):
        node = Node(id=4)
        assert node.counter == 0
        assert node.expanded is True
        assert node.child_ids == []

    def test_alias_round_trip(self):
        node = Node(id=1, childIds=[2, 3])
        assert node.child_ids == [2, 3]
        assert node.model_dump(by_alias=True)["childIds"] == [2, 3]

    def test_counter_is_mutable(self):
        node = Node(id=0)
        node.counter += 1
        assert node.counter == 1


class TestIterDepthFirst:
    def test_pre_order(self):
        assert list(iter_depth_first(make_tree(SAMPLE))) == [0, 1, 3, 4, 5, 2]

    def test_from_subtree(self):
        assert list(iter_depth_first(make_tree(SAMPLE), root=4)) == [4, 5]

    def test_deep_chain_does_not_recurse(self):
        chain = {i: [i + 1] for i in range(9999)}
        chain[9999] = []
        assert list(iter_depth_first(make_tree(chain))) == list(range(10000))


class TestParentMap:
    def test_parents(self):
        assert parent_map(make_tree(SAMPLE)) == {1: 0, 2: 0, 3: 1, 4: 1, 5: 4}

    def test_duplicate_child_rejected(self):
        tree = make_tree({0: [1, 2], 1: [2], 2: []})
        with pytest.raises(ValueError, match="node 2"):
            parent_map(tree)


class TestDepths:
    def test_depths(self):
        assert depths(make_tree(SAMPLE)) == {0: 0, 1: 1, 2: 1, 3: 2, 4: 2, 5: 3}


class TestTreeStats:
    def test_sample(self):
        assert tree_stats(make_tree(SAMPLE)) == TreeStats(
            node_count=6, leaf_count=3, max_depth=3, root_children=2, max_children=2
        )

    def test_root_only(self):
        stats = tree_stats(make_tree({0: []}))
        assert stats.node_count == 1
        assert stats.leaf_count == 1
        assert stats.max_depth == 0
        assert stats.max_children == 0

    def test_empty(self):
        assert tree_stats({}).node_count == 0
