from .node import Node, Tree, TreeStats
from .generator import RandomSource, grow_tree
from .walker import depths, iter_depth_first, parent_map, tree_stats

__all__ = [
    "Node",
    "Tree",
    "TreeStats",
    "RandomSource",
    "grow_tree",
    "depths",
    "iter_depth_first",
    "parent_map",
    "tree_stats",
]
