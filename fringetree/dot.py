"""Render fringe trees as Graphviz ``dot`` graphs.

Each node is named by its identity, so a subtree shared between several
trees is drawn once per reference but under the same name.
"""

from __future__ import annotations

from typing import TextIO

from fringetree.tree import Branch, Empty, Leaf, Tree

__all__ = ["write_nodes", "printer"]


def _node_name(node: Tree) -> str:
    return f"0x{id(node):x}"


def write_nodes(out: TextIO, tree: Tree) -> None:
    """Write the node and edge statements of ``tree`` to ``out``, without a graph header."""
    stack = [tree]
    while stack:
        node = stack.pop()
        name = _node_name(node)
        match node:
            case Empty():
                out.write(f'"{name}"\n')
            case Leaf(tag=node_tag, value=value):
                out.write(
                    f'"{name}" [shape=record label="<f1> value={value}'
                    f'\\n tag={node_tag}"]\n'
                )
            case Branch(tag=node_tag, left=left, right=right):
                out.write(
                    f'"{name}" [shape=record label="<f0> | <f1> tag={node_tag}'
                    f'| <f2>" ]\n'
                )
                out.write(f'"{name}":f0 -> "{_node_name(left)}":f1\n')
                out.write(f'"{name}":f2 -> "{_node_name(right)}":f1\n')
                stack.append(right)
                stack.append(left)
            case _:
                raise TypeError(f"not a tree: {node!r}")


def printer(out: TextIO, tree: Tree) -> None:
    """Write ``tree`` to ``out`` as a complete ``digraph``."""
    out.write("digraph G {\n")
    write_nodes(out, tree)
    out.write("}\n")