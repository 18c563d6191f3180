"""
tree_generator - random trees for exercising tree-view components.
"""

from .components import (
    Node,
    RandomSource,
    Tree,
    TreeStats,
    depths,
    grow_tree,
    iter_depth_first,
    parent_map,
    tree_stats,
)
from .generate_tree import generate_tree, tree_to_dict

__all__ = [
    "Node",
    "RandomSource",
    "Tree",
    "TreeStats",
    "depths",
    "generate_tree",
    "grow_tree",
    "iter_depth_first",
    "parent_map",
    "tree_stats",
    "tree_to_dict",
]
