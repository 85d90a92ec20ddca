# fringetree

Persistent fringe trees for Python. A fringe tree keeps a sequence of
values in the leaves of a binary tree. Every node carries a tag: a leaf's
tag is 1 and a branch's tag is the sum of its children's tags, so the tag
at the root counts the leaves below it. Trees are immutable: every
operation returns a new tree that shares structure with the old one.

The package has no dependencies beyond the standard library and needs
Python 3.10 or later.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building trees

The module `fringetree.tree` holds the tree types and the operations on
them. A tree is one of three node kinds, all subclasses of `Tree`:
`Empty`, `Leaf` (with `tag` and `value`) and `Branch` (with `tag`,
`left` and `right`). They are frozen dataclasses, so they compare by
value and can be used with `match`.

```python
from fringetree.tree import Tree, flatten, breadth, depth, tag

t = Tree.branch(Tree.branch(Tree.leaf(1), Tree.leaf(2)), Tree.leaf(3))

flatten(t)   # [1, 2, 3]
breadth(t)   # 3  (leaves counted by walking the tree)
depth(t)     # 3
tag(t)       # 3  (leaf count stored at the root)
```

- `Tree.empty()` gives the empty tree, `Tree.leaf(value)` a leaf tagged 1,
  and `Tree.branch(left, right)` a branch tagged with the sum of its
  children's tags.
- `Tree.is_empty()` is true only when the node itself is an `Empty`.
- `depth` counts a leaf as 1 and an `Empty` node as nothing.

## Sequence operations

```python
from fringetree.tree import (
    prepend, append, concat, head, tail, last, init, is_empty,
    view_l, view_r,
)

flatten(prepend(0, t))   # [0, 1, 2, 3]
flatten(append(4, t))    # [1, 2, 3, 4]
flatten(concat(t, t))    # [1, 2, 3, 1, 2, 3]

head(t), last(t)         # (1, 3)
flatten(tail(t))         # [2, 3]
flatten(init(t))         # [1, 2]
is_empty(Tree.empty())   # True
```

`view_l` and `view_r` split a tree into its first (or last) value and the
rest, returning a `View` with the properties `value` and `tree`. When
there is nothing to split off, the view is nil (`View.nil()`):
`View.is_nil()` is true, `View.is_view()` is false, and reading `value`
or `tree` raises `IndexError`. So `head`, `tail`, `last` and `init` raise
`IndexError` on a tree with no values.

The function `is_empty(tree)` asks whether anything can be split off the
right end, unlike the method `Tree.is_empty()`, which only checks for an
`Empty` node.

## Drawing trees

`fringetree.dot` writes trees in Graphviz dot form:

```python
import sys
from fringetree.dot import printer

printer(sys.stdout, t)
```

`printer(out, tree)` wraps one tree in a `digraph G { ... }` block;
`write_nodes(out, tree)` writes the node and edge statements alone, so
that several trees can share one graph. Nodes are named by object
identity, so a subtree shared between trees appears under the same name.

## Greetings

`fringetree.greetings` holds a few small helpers: `add(first, second)`
returns a sum, `greeting(name, out=None)` writes `Hello, <name>!` and
`hello(name, out=None)` writes `Hello, <name>! ` (with a trailing space),
each followed by a newline, to `out` or standard output.

## Commands

```
fringetree-demo [COUNT]
```

builds the empty tree and then the trees made by prepending 0, 1, ...
COUNT-1 one at a time (COUNT defaults to 5), and prints all of them into
one dot graph on standard output. The same trees are available from
`fringetree.demo.prepend_chain(count)`; `fringetree.demo.sample_tree()`
returns the tree `((1 2) 3)`.

```
fringetree-greet [NAME] [--hello]
```

prints a greeting for NAME (default `Steve`); with `--hello` it uses the
trailing-space form.

## What it does not do

The dot output is text only: the package does not run Graphviz or render
images itself.