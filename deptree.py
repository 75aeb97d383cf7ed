# deptree.py

"""
Syntactic dependency trees consumed by the semantic graph builder.

Nodes are compared by identity: two tokens with the same text are still two
distinct nodes, so a DepNode can be used directly as a dict key.
"""


class DepNode:
    __slots__ = ("id", "form", "lemma", "pos", "label", "head",
                 "dependents", "semantic_heads")

    def __init__(self, id, form, lemma=None, pos="", label="dep"):
        self.id = id
        self.form = form
        self.lemma = lemma if lemma is not None else form.lower()
        self.pos = pos
        self.label = label
        self.head = None
        self.dependents = []
        # (role label, predicate node) pairs from an SRL annotation
        self.semantic_heads = []

    def set_head(self, head, label=None):
        if self.head is not None:
            self.head.dependents.remove(self)
        self.head = head
        if label is not None:
            self.label = label
        if head is not None:
            head.dependents.append(self)
            head.dependents.sort(key=lambda n: n.id)

    def add_semantic_head(self, head, label):
        self.semantic_heads.append((label, head))

    def __repr__(self):
        return f"DepNode({self.id}, {self.form!r}, {self.pos}, {self.label})"


class DepTree:
    def __init__(self, nodes=None, first_root=None):
        self.nodes = list(nodes or [])
        self._first_root = first_root

    @property
    def first_root(self):
        if self._first_root is not None:
            return self._first_root
        return next((n for n in self.nodes if n.head is None), None)

    def __iter__(self):
        return iter(self.nodes)

    def __len__(self):
        return len(self.nodes)

    def __getitem__(self, i):
        return self.nodes[i]

    def text(self):
        return " ".join(n.form for n in self.nodes)

    def validate(self):
        """Raise ValueError when the tree is not a single-rooted acyclic parse."""
        root = self.first_root
        if root is None:
            raise ValueError(f"tree has no root: {self.text()!r}")
        if root not in self.nodes:
            raise ValueError(f"first root {root!r} is not part of the tree")
        members = set(map(id, self.nodes))
        for node in self.nodes:
            if node.head is not None and id(node.head) not in members:
                raise ValueError(f"{node!r} has a head outside the tree")
            seen = {id(node)}
            h = node.head
            while h is not None:
                if id(h) in seen:
                    raise ValueError(f"head cycle through {node!r}")
                seen.add(id(h))
                h = h.head
        return self


def from_span(sent):
    """
    Convert a spaCy sentence span into a DepTree.
    spaCy marks the root as its own head; here the root is headless.
    """
    nodes = [DepNode(t.i - sent.start + 1, t.text, t.lemma_.lower() or t.text.lower(),
                     t.tag_ or t.pos_, t.dep_.lower() or "dep") for t in sent]
    root = None
    for t, node in zip(sent, nodes):
        if t.head.i == t.i or not (sent.start <= t.head.i < sent.end):
            node.label = "root"
            if root is None:
                root = node
            continue
        node.set_head(nodes[t.head.i - sent.start])
    return DepTree(nodes, first_root=root)


def from_doc(doc):
    return [from_span(sent) for sent in doc.sents]
