from collections.abc import Iterator

from .node import Tree, TreeStats


def iter_depth_first(tree: Tree, root: int = 0) -> Iterator[int]:
    """Yield node ids reachable from *root* in pre-order.

    Children are visited in ``child_ids`` order. Uses an explicit stack, a
    generated chain can be thousands of nodes deep.
    """
    stack = [root]
    while stack:
        node_id = stack.pop()
        yield node_id
        stack.extend(reversed(tree[node_id].child_ids))


def parent_map(tree: Tree) -> dict[int, int]:
    """Return a mapping of child id -> parent id."""
    parents: dict[int, int] = {}
    for node in tree.values():
        for child_id in node.child_ids:
            if child_id in parents:
                raise ValueError(
                    f"node {child_id} is a child of both {parents[child_id]} and {node.id}"
                )
            parents[child_id] = node.id
    return parents


def depths(tree: Tree, root: int = 0) -> dict[int, int]:
    """Return the depth of every node reachable from *root* (root is 0)."""
    result = {root: 0}
    stack = [root]
    while stack:
        node_id = stack.pop()
        for child_id in tree[node_id].child_ids:
            result[child_id] = result[node_id] + 1
            stack.append(child_id)
    return result


def tree_stats(tree: Tree) -> TreeStats:
    """Summarise the shape of *tree*."""
    if not tree:
        return TreeStats(
            node_count=0, leaf_count=0, max_depth=0, root_children=0, max_children=0
        )

    root = min(tree)
    return TreeStats(
        node_count=len(tree),
        leaf_count=sum(1 for node in tree.values() if not node.child_ids),
        max_depth=max(depths(tree, root).values()),
        root_children=len(tree[root].child_ids),
        max_children=max(len(node.child_ids) for node in tree.values()),
    )
