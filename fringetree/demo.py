"""Small demonstration: build a list by repeated prepends and draw it."""

from __future__ import annotations

import argparse
import sys

from fringetree.dot import write_nodes
from fringetree.tree import Tree, prepend

__all__ = ["sample_tree", "prepend_chain", "main"]


def sample_tree() -> Tree:
    """Return the three-leaf tree ((1 2) 3)."""
    return Tree.branch(Tree.branch(Tree.leaf(1), Tree.leaf(2)), Tree.leaf(3))


def prepend_chain(count: int) -> list[Tree]:
    """Return the empty tree followed by the trees made by prepending 0, 1, ... count-1."""
    if count < 0:
        raise ValueError("count must not be negative")
    trees = [Tree.empty()]
    for value in range(count):
        trees.append(prepend(value, trees[-1]))
    return trees


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("count must not be negative")
    return value


def main(argv: list[str] | None = None) -> int:
    """Print every tree of a prepend chain into one ``digraph`` on standard output."""
    parser = argparse.ArgumentParser(
        prog="fringetree-demo",
        description="Draw the trees built by prepending values to an empty tree.",
    )
    parser.add_argument(
        "count",
        nargs="?",
        type=_non_negative,
        default=5,
        help="number of values to prepend (default: 5)",
    )
    args = parser.parse_args(argv)

    out = sys.stdout
    out.write("digraph G {\n")
    for tree in prepend_chain(args.count):
        write_nodes(out, tree)
    out.write("}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())