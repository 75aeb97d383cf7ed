"""Tests for the CoNLL tree reader and tree validation."""

import pytest

from conll import read_trees
from deptree import DepNode, DepTree
from document import Document
from semtypes import SemanticType

PARK = [
    "1\tI\tI\tPRP\t_\t2\tnsubj\t2:A0",
    "2\tsaw\tsee\tVBD\t_\t0\troot\t_",
    "3\thim\the\tPRP\t_\t2\tdobj\t2:A1",
    "4\tin\tin\tIN\t_\t2\tprep\t2:AM-LOC",
    "5\tthe\tthe\tDT\t_\t6\tdet\t_",
    "6\tpark\tpark\tNN\t_\t4\tpobj\t_",
    "7\t.\t.\t.\t_\t2\tpunct\t_",
]


class TestReadTrees:

    def test_single_tree(self):
        trees = read_trees(PARK)
        assert len(trees) == 1
        tree = trees[0]
        assert [n.form for n in tree] == ["I", "saw", "him", "in", "the", "park", "."]
        assert tree.first_root is tree[1]
        assert tree[1].lemma == "see"
        assert tree[5].head is tree[3]
        assert tree[1].dependents == [tree[0], tree[2], tree[3], tree[6]]

    def test_semantic_heads(self):
        tree = read_trees(PARK)[0]
        assert tree[3].semantic_heads == [("AM-LOC", tree[1])]
        assert tree[4].semantic_heads == []

    def test_multiple_trees_and_comments(self):
        lines = ["# sent 1"] + PARK + ["", "", "1\tStop\tstop\tVB\t_\t0\troot"]
        trees = read_trees(lines)
        assert [len(t) for t in trees] == [7, 1]

    def test_read_from_path(self, tmp_path):
        path = tmp_path / "park.conll"
        path.write_text("\n".join(PARK) + "\n", encoding="utf-8")
        assert len(read_trees(str(path))) == 1

    def test_srl_arguments_drive_the_graph(self):
        tree = read_trees(PARK)[0]
        doc = Document()
        doc.add_instances(tree)
        saw = doc.get_instance(tree[1])
        assert doc.arguments(saw, SemanticType.AM_LOC) == [doc.get_instance(tree[5])]

    @pytest.mark.parametrize("lines", [
        ["1\tI\tI\tPRP\t_\t2"],
        ["x\tI\tI\tPRP\t_\t0\troot"],
        ["1\tI\tI\tPRP\t_\t5\tnsubj", "2\tran\trun\tVBD\t_\t0\troot"],
        ["1\tI\tI\tPRP\t_\t0\troot\tfoo"],
    ])
    def test_malformed_input(self, lines):
        with pytest.raises(ValueError):
            read_trees(lines)

    def test_cycle_rejected(self):
        lines = ["1\ta\ta\tNN\t_\t2\tdep", "2\tb\tb\tNN\t_\t1\tdep"]
        with pytest.raises(ValueError):
            read_trees(lines)


class TestValidate:

    def test_missing_root(self):
        with pytest.raises(ValueError):
            DepTree([]).validate()

    def test_foreign_head(self):
        a, b = DepNode(1, "a"), DepNode(1, "b")
        a.set_head(b)
        with pytest.raises(ValueError):
            DepTree([a], first_root=a).validate()

    def test_valid_tree_returns_itself(self, park_tree):
        assert park_tree.validate() is park_tree
