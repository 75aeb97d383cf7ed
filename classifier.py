# classifier.py

from typing import NamedTuple

from rules import extract_arguments, extract_attribute


class Argument(NamedTuple):
    """The node fills roles of other predicates: ((role, predicate node), ...)."""
    mapping: tuple


class Attribute(NamedTuple):
    """The node modifies its head under one category."""
    category: object


class Plain(NamedTuple):
    """Nothing semantic; keep the syntactic relation."""


PLAIN = Plain()


class RelationClassifier:
    def __init__(self, argument_fn=None, attribute_fn=None):
        self.argument_fn = argument_fn or extract_arguments
        self.attribute_fn = attribute_fn or extract_attribute

    def classify(self, node, head):
        """
        Argument takes precedence: when the node introduces any role, the
        attribute capability is not consulted at all.
        """
        mapping = self.argument_fn(node)
        if mapping:
            return Argument(tuple(mapping.items()))
        category = self.attribute_fn(node, head)
        if category is not None:
            return Attribute(category)
        return PLAIN
