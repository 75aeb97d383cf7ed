# instance.py


class Instance:
    """
    Semantic counterpart of one syntactic node.

    Links to other instances are arena indices into the owning registry,
    never the instances themselves.
    """
    __slots__ = ("index", "node", "argument_list", "predicate_list", "attribute_list")

    def __init__(self, index, node):
        self.index = index
        self.node = node
        self.argument_list = {}
        self.predicate_list = {}
        self.attribute_list = {}

    def put_argument(self, role, other):
        self.argument_list.setdefault(role, []).append(other.index)

    def put_predicate(self, role, other):
        self.predicate_list.setdefault(role, []).append(other.index)

    def put_attribute(self, category, other):
        self.attribute_list.setdefault(category, []).append(other.index)

    def __repr__(self):
        return f"Instance({self.index}, {self.node.form!r})"


def link_argument(predicate, role, argument):
    """Write predicate -role-> argument on both endpoints."""
    predicate.put_argument(role, argument)
    argument.put_predicate(role, predicate)


def link_attribute(a, category, b):
    a.put_attribute(category, b)
    b.put_attribute(category, a)
