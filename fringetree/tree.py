"""Persistent fringe trees: binary trees whose leaves, read left to right, form a sequence.

Every node carries a tag.  A leaf's tag is 1 and a branch's tag is the sum of
its children's tags, so the tag of a tree counts the leaves under it.  Trees
are immutable; every operation returns a new tree that shares structure with
its input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "Tree",
    "Empty",
    "Leaf",
    "Branch",
    "View",
    "tag",
    "breadth",
    "depth",
    "flatten",
    "prepend",
    "append",
    "view_l",
    "view_r",
    "head",
    "tail",
    "last",
    "init",
    "is_empty",
    "concat",
]


class Tree:
    """Base of the three node kinds: Empty, Leaf and Branch."""

    __slots__ = ()

    tag: int

    @classmethod
    def empty(cls) -> Tree:
        """Return a tree with no leaves."""
        return Empty()

    @classmethod
    def leaf(cls, value: Any) -> Tree:
        """Return a single leaf holding ``value``, tagged 1."""
        return Leaf(1, value)

    @classmethod
    def branch(cls, left: Tree, right: Tree) -> Tree:
        """Join two trees under a branch tagged with the sum of their tags."""
        return Branch(left.tag + right.tag, left, right)

    def is_empty(self) -> bool:
        """True if this node itself is the Empty node."""
        return isinstance(self, Empty)


@dataclass(frozen=True)
class Empty(Tree):
    """The tree with nothing in it."""

    @property
    def tag(self) -> int:
        return 0


@dataclass(frozen=True)
class Leaf(Tree):
    """A node holding one value."""

    tag: int = 0
    value: Any = 0


@dataclass(frozen=True)
class Branch(Tree):
    """An inner node with two subtrees."""

    tag: int = 0
    left: Tree | None = None
    right: Tree | None = None


class View:
    """The result of splitting one value off an end of a tree.

    A view either holds the split-off value with the remaining tree, or is
    nil when there was nothing to split off.
    """

    __slots__ = ("_value", "_tree")

    def __init__(self, value: Any, tree: Tree) -> None:
        self._value = value
        self._tree = tree

    @classmethod
    def nil(cls) -> View:
        """Return the view of a tree with nothing to split off."""
        view = cls.__new__(cls)
        view._value = None
        view._tree = None
        return view

    def is_nil(self) -> bool:
        return self._tree is None

    def is_view(self) -> bool:
        return self._tree is not None

    @property
    def value(self) -> Any:
        """The split-off value; IndexError for a nil view."""
        if self._tree is None:
            raise IndexError("nil view has no value")
        return self._value

    @property
    def tree(self) -> Tree:
        """The tree that remains; IndexError for a nil view."""
        if self._tree is None:
            raise IndexError("nil view has no tree")
        return self._tree

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, View):
            return NotImplemented
        return self._tree == other._tree and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._value, self._tree))

    def __repr__(self) -> str:
        if self.is_nil():
            return "View.nil()"
        return f"View({self._value!r}, {self._tree!r})"


def tag(tree: Tree) -> int:
    """Return the tag stored at the root of ``tree``."""
    return tree.tag


def breadth(tree: Tree) -> int:
    """Count the leaves of ``tree`` by walking it."""
    count = 0
    stack = [tree]
    while stack:
        node = stack.pop()
        match node:
            case Leaf():
                count += 1
            case Branch(left=left, right=right):
                stack.append(right)
                stack.append(left)
    return count


def depth(tree: Tree) -> int:
    """Return the height of ``tree``; an Empty node adds nothing, a leaf is 1."""
    deepest = 0
    stack = [(tree, 1)]
    while stack:
        node, level = stack.pop()
        match node:
            case Empty():
                deepest = max(deepest, level - 1)
            case Leaf():
                deepest = max(deepest, level)
            case Branch(left=left, right=right):
                stack.append((right, level + 1))
                stack.append((left, level + 1))
    return deepest


def flatten(tree: Tree) -> list[Any]:
    """Return the values of the leaves, left to right."""
    values = []
    stack = [tree]
    while stack:
        node = stack.pop()
        match node:
            case Leaf(value=value):
                values.append(value)
            case Branch(left=left, right=right):
                stack.append(right)
                stack.append(left)
    return values


def prepend(value: Any, tree: Tree) -> Tree:
    """Return a tree with ``value`` placed before every leaf of ``tree``."""
    match tree:
        case Empty():
            return Tree.leaf(value)
        case Leaf(value=existing):
            return Tree.branch(Tree.leaf(value), Tree.leaf(existing))
        case Branch(left=left, right=right):
            return Tree.branch(Tree.leaf(value), Tree.branch(left, right))
    raise TypeError(f"not a tree: {tree!r}")


def append(value: Any, tree: Tree) -> Tree:
    """Return a tree with ``value`` placed after every leaf of ``tree``."""
    match tree:
        case Empty():
            return Tree.leaf(value)
        case Leaf(value=existing):
            return Tree.branch(Tree.leaf(existing), Tree.leaf(value))
        case Branch(left=left, right=right):
            return Tree.branch(Tree.branch(left, right), Tree.leaf(value))
    raise TypeError(f"not a tree: {tree!r}")


def view_l(tree: Tree) -> View:
    """Split the leftmost value off ``tree``."""
    match tree:
        case Empty():
            return View.nil()
        case Leaf(value=value):
            return View(value, Tree.empty())
        case Branch(left=left, right=right):
            if left.is_empty() and right.is_empty():
                return View.nil()
            if left.is_empty():
                return view_l(right)
            inner = view_l(left)
            return View(inner.value, Tree.branch(inner.tree, right))
    raise TypeError(f"not a tree: {tree!r}")


def view_r(tree: Tree) -> View:
    """Split the rightmost value off ``tree``."""
    match tree:
        case Empty():
            return View.nil()
        case Leaf(value=value):
            return View(value, Tree.empty())
        case Branch(left=left, right=right):
            if left.is_empty() and right.is_empty():
                return View.nil()
            if right.is_empty():
                return view_r(left)
            inner = view_r(right)
            return View(inner.value, Tree.branch(left, inner.tree))
    raise TypeError(f"not a tree: {tree!r}")


def head(tree: Tree) -> Any:
    """Return the leftmost value; IndexError if there is none."""
    return view_l(tree).value


def tail(tree: Tree) -> Tree:
    """Return ``tree`` without its leftmost value; IndexError if there is none."""
    return view_l(tree).tree


def last(tree: Tree) -> Any:
    """Return the rightmost value; IndexError if there is none."""
    return view_r(tree).value


def init(tree: Tree) -> Tree:
    """Return ``tree`` without its rightmost value; IndexError if there is none."""
    return view_r(tree).tree


def is_empty(tree: Tree) -> bool:
    """True if nothing can be split off the right end of ``tree``."""
    return view_r(tree).is_nil()


def concat(left: Tree, right: Tree) -> Tree:
    """Return a tree holding the values of ``left`` followed by those of ``right``."""
    while True:
        match right:
            case Empty():
                return left
            case Leaf(value=value):
                return append(value, left)
            case Branch():
                view = view_l(right)
                left = append(view.value, left)
                right = view.tree
            case _:
                raise TypeError(f"not a tree: {right!r}")