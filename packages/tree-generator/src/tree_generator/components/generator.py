import logging
import math
from typing import Protocol

from .node import Node, Tree

logger = logging.getLogger(__name__)

DEFAULT_TREE_SIZE = 5000


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1).

    :class:`random.Random` satisfies it.
    """

    def random(self) -> float: ...


def grow_tree(rng: RandomSource, size: int = DEFAULT_TREE_SIZE) -> Tree:
    """
    Grow a random tree of *size* nodes rooted at node 0.

    Node ``i`` is attached to parent ``floor(r**2 * i)`` where ``r`` is drawn
    from *rng*. Squaring the draw biases parents toward the root, so the
    tree is bushy near node 0 and thins out for later nodes.

    Args:
        rng:  Source of uniform draws in [0, 1). Exactly ``size - 1`` draws
              are consumed.
        size: Number of nodes to create, root included.

    Returns:
        A dict mapping node id to :class:`Node`, ids ``0 .. size - 1``.

    Raises:
        ValueError: if *size* is below 1 or *rng* yields a draw outside
                    [0, 1).
    """
    if size < 1:
        raise ValueError(f"tree size must be at least 1, got {size}")

    nodes: list[Node] = [Node(id=0)]

    for i in range(1, size):
        r = rng.random()
        if not 0.0 <= r < 1.0:
            raise ValueError(f"random draw {r!r} for node {i} is outside [0, 1)")

        parent_id = math.floor(r * r * i)
        nodes.append(Node(id=i))
        nodes[parent_id].child_ids.append(i)

    logger.info("Generated tree with %d nodes", len(nodes))
    return {node.id: node for node in nodes}
