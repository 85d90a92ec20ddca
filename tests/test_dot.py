import io
import re

import pytest

from fringetree.dot import printer, write_nodes
from fringetree.tree import Tree, breadth


def _sample():
    return Tree.branch(Tree.branch(Tree.leaf(1), Tree.leaf(2)), Tree.leaf(3))


def _render(func, tree):
    buf = io.StringIO()
    func(buf, tree)
    return buf.getvalue()


def test_printer_wraps_in_digraph():
    text = _render(printer, _sample())
    assert text.startswith("digraph G {\n")
    assert text.endswith("}\n")


def test_write_nodes_has_no_header():
    text = _render(write_nodes, _sample())
    assert "digraph" not in text
    assert not text.endswith("}\n")


def test_empty_tree_is_a_bare_name():
    text = _render(write_nodes, Tree.empty())
    assert text.count("\n") == 1
    assert text.startswith('"0x')
    assert text.endswith('"\n')
    assert "[" not in text
    assert "->" not in text
    name = text[1:-2]
    assert re.findall(r"0x[0-9a-f]+", name) == [name]


def test_leaf_label():
    text = _render(write_nodes, Tree.leaf(7))
    assert text.endswith(' [shape=record label="<f1> value=7\\n tag=1"]\n')
    assert text.count("\n") == 1


def test_root_branch_carries_its_tag():
    tree = _sample()
    first = _render(write_nodes, tree).splitlines()[0]
    assert f"<f1> tag={tree.tag}| <f2>" in first


def test_one_value_line_per_leaf():
    tree = _sample()
    text = _render(write_nodes, tree)
    assert text.count("value=") == breadth(tree)


def test_every_edge_target_is_defined():
    text = _render(write_nodes, _sample())
    defined = set(re.findall(r'^"(0x[0-9a-f]+)"(?: \[|$)', text, re.MULTILINE))
    targets = set(re.findall(r'-> "(0x[0-9a-f]+)":f1', text))
    assert targets
    assert targets <= defined


def test_leaves_appear_in_order():
    text = _render(write_nodes, _sample())
    values = re.findall(r"value=(\d+)", text)
    assert values == ["1", "2", "3"]


def test_shared_subtree_drawn_twice_under_same_name():
    shared = Tree.leaf(5)
    text = _render(write_nodes, Tree.branch(shared, shared))
    leaf_lines = [line for line in text.splitlines() if "value=" in line]
    assert len(leaf_lines) == 2
    assert leaf_lines[0] == leaf_lines[1]


def test_rejects_non_tree():
    with pytest.raises(TypeError):
        write_nodes(io.StringIO(), object())