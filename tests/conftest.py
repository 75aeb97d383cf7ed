"""Shared fixtures: hand-built dependency trees."""

import pytest

from deptree import DepNode, DepTree


def make_tree(rows):
    """
    Build a DepTree from (form, pos, head, label) rows.
    `head` is the 1-based index of the governor, 0 for the root.
    """
    nodes = [DepNode(i, form, form.lower(), pos, label)
             for i, (form, pos, _head, label) in enumerate(rows, 1)]
    root = None
    for node, (_form, _pos, head, _label) in zip(nodes, rows):
        if head == 0:
            root = root or node
        else:
            node.set_head(nodes[head - 1])
    return DepTree(nodes, first_root=root)


@pytest.fixture
def build_tree():
    return make_tree


@pytest.fixture
def park_tree():
    """I saw him in the park ."""
    return make_tree([
        ("I", "PRP", 2, "nsubj"),
        ("saw", "VBD", 0, "root"),
        ("him", "PRP", 2, "dobj"),
        ("in", "IN", 2, "prep"),
        ("the", "DT", 6, "det"),
        ("park", "NN", 4, "pobj"),
        (".", ".", 2, "punct"),
    ])


@pytest.fixture
def dog_tree():
    """The big dog barks loudly ."""
    return make_tree([
        ("The", "DT", 3, "det"),
        ("big", "JJ", 3, "amod"),
        ("dog", "NN", 4, "nsubj"),
        ("barks", "VBZ", 0, "root"),
        ("loudly", "RB", 4, "advmod"),
        (".", ".", 4, "punct"),
    ])
