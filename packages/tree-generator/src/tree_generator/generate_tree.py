"""
TreeGenerator - grows a random tree for exercising tree-view components.

Each node is represented as:

{
  "id": <sequential integer id, 0 is the root>,
  "counter": <integer, starts at 0>,
  "expanded": <boolean, starts true>,
  "childIds": [<ids of direct children, in creation order>]
}

The tree is a JSON object keyed by node id.

Usage (CLI):
    generate-tree [--size N] [--seed S] [--output <file.json>] [--stats]
    python -m tree_generator [--size N] ...

Usage (library):
    from tree_generator import generate_tree
    tree = generate_tree(seed=42)
"""

import argparse
import json
import logging
import random
from typing import Any

from tree_generator.components.generator import RandomSource, grow_tree
from tree_generator.components.node import Tree
from tree_generator.components.walker import tree_stats
from tree_generator.config import settings

logger = logging.getLogger(__name__)


def generate_tree(
    size: int | None = None,
    seed: int | None = None,
    rng: RandomSource | None = None,
) -> Tree:
    """Generate a random tree of *size* nodes.

    An explicit *rng* takes precedence over *seed*. Without either, the
    configured seed is used, and when that is unset too the tree is
    different on every call.
    """
    if size is None:
        size = settings.tree_size
    if rng is None:
        if seed is None:
            seed = settings.seed
        logger.debug("Seeding random source with %s", seed)
        rng = random.Random(seed)
    return grow_tree(rng, size)


def tree_to_dict(tree: Tree) -> dict[str, dict[str, Any]]:
    """Return *tree* in its JSON form: string keys, ``childIds`` alias."""
    return {str(node_id): node.model_dump(by_alias=True) for node_id, node in tree.items()}


def _tree_size(value: str) -> int:
    size = int(value)
    if size < 1:
        raise argparse.ArgumentTypeError(f"size must be at least 1, got {size}")
    return size


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Generate a random tree and output it as JSON."
    )
    parser.add_argument(
        "--size",
        "-n",
        type=_tree_size,
        default=None,
        help=f"Number of nodes, root included (default: {settings.tree_size})",
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Seed for a reproducible tree",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write JSON output to FILE instead of stdout",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Output shape statistics instead of the tree",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    tree = generate_tree(size=args.size, seed=args.seed)
    if args.stats:
        output = tree_stats(tree).model_dump_json(indent=2)
    else:
        output = json.dumps(tree_to_dict(tree), indent=2)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Tree written to {args.output} ({len(tree)} nodes)")
    else:
        print(output)


if __name__ == "__main__":
    main()
