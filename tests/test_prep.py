"""Tests for prepositional attachment resolution."""

from prep import PrepositionResolver
from registry import InstanceRegistry
from semtypes import SemanticType, AttributeType


def _resolver():
    reg = InstanceRegistry()
    visited = set()
    return PrepositionResolver(reg, visited), reg, visited


class TestPrepositionResolver:

    def test_finds_object_and_folds_the_rest(self, park_tree):
        resolver, reg, visited = _resolver()
        prep = park_tree[3]
        found = resolver.resolve(prep)

        assert found.node is park_tree[5]
        in_, the = reg.lookup(park_tree[3]), reg.lookup(park_tree[4])
        assert found.attribute_list[AttributeType.QUALITY] == [in_.index, the.index]
        assert found.argument_list[SemanticType.AUX] == [in_.index, the.index]
        assert the.predicate_list == {SemanticType.AUX: [found.index]}
        assert the.attribute_list == {AttributeType.QUALITY: [found.index]}

    def test_whole_subtree_is_visited(self, park_tree):
        resolver, reg, visited = _resolver()
        resolver.resolve(park_tree[3])
        assert visited == {park_tree[3], park_tree[4], park_tree[5]}
        assert len(reg) == 3

    def test_fallback_to_preposition(self, build_tree):
        tree = build_tree([
            ("He", "PRP", 2, "nsubj"),
            ("looked", "VBD", 0, "root"),
            ("around", "IN", 2, "prep"),
        ])
        resolver, reg, _ = _resolver()
        found = resolver.resolve(tree[2])
        assert found.node is tree[2]
        assert found.argument_list == {} and found.attribute_list == {}
        assert len(reg) == 1

    def test_fallback_folds_other_dependents(self, build_tree):
        tree = build_tree([
            ("sat", "VBD", 0, "root"),
            ("in", "IN", 1, "prep"),
            ("there", "RB", 2, "pcomp"),
        ])
        resolver, reg, _ = _resolver()
        found = resolver.resolve(tree[1])
        there = reg.lookup(tree[2])
        assert found.node is tree[1]
        assert found.attribute_list == {AttributeType.QUALITY: [there.index]}
        assert found.argument_list == {SemanticType.AUX: [there.index]}

    def test_first_object_in_breadth_first_order_wins(self, build_tree):
        # "between the house near the lake and the road"
        tree = build_tree([
            ("between", "IN", 0, "prep"),
            ("house", "NN", 1, "pobj"),
            ("near", "IN", 2, "prep"),
            ("lake", "NN", 3, "pobj"),
        ])
        resolver, reg, _ = _resolver()
        found = resolver.resolve(tree[0])
        assert found.node is tree[1]
        lake = reg.lookup(tree[3])
        # a later pobj is folded like any other candidate
        assert lake.index in found.argument_list[SemanticType.AUX]

    def test_punctuation_is_skipped(self, build_tree):
        tree = build_tree([
            ("in", "IN", 0, "prep"),
            ("park", "NN", 1, "pobj"),
            (",", ",", 2, "punct"),
        ])
        resolver, reg, visited = _resolver()
        resolver.resolve(tree[0])
        assert reg.lookup(tree[2]) is None
        assert tree[2] not in visited
