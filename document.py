# document.py

import logging

from config import PREP_LABEL
from classifier import Argument, Attribute, RelationClassifier
from deptree import DepTree
from instance import link_argument, link_attribute
from prep import PrepositionResolver
from registry import InstanceRegistry
from semtypes import is_punctuation, label_to_semantic_type

logger = logging.getLogger(__name__)


class GraphAssembler:
    """
    Walks dependency trees and writes the semantic graph into a Document.
    The visited set lives here for the lifetime of the document, so a node
    already processed by an earlier call is never wired again.
    """

    def __init__(self, document, classifier, punct_fn, type_fn, prep_label=PREP_LABEL):
        self.document = document
        self.registry = document.registry
        self.classifier = classifier
        self.punct_fn = punct_fn
        self.type_fn = type_fn
        self.prep_label = prep_label
        self.visited = set()
        self.resolver = PrepositionResolver(self.registry, self.visited, punct_fn=punct_fn)

    def add_tree(self, tree):
        self.document.new_sentence()
        root = tree.first_root
        for node in tree:
            if self.punct_fn(node.pos) or node in self.visited:
                continue
            node_inst = self.registry.get_or_create(node)
            self.visited.add(node)

            if node is root:
                self.document.add_sentence(node_inst)

            head = node.head
            if head is None or self.punct_fn(head.pos):
                continue
            head_inst = self.registry.get_or_create(head)

            self._wire(node, node_inst, head_inst, self.classifier.classify(node, head))

    def _wire(self, node, node_inst, head_inst, relation):
        if isinstance(relation, Argument):
            source = node_inst
            if node.label == self.prep_label:
                source = self.resolver.resolve(node)
            for role, target in relation.mapping:
                target_inst = self.registry.get_or_create(target)
                link_argument(target_inst, role, source)
            return

        if isinstance(relation, Attribute):
            link_attribute(head_inst, relation.category, node_inst)

        # Attribute relations keep the syntactic edge as well
        link_argument(head_inst, self.type_fn(node.label), node_inst)


class Document:
    """
    Owns every instance built from its trees plus the sentence roots.
    Trees may be added one at a time or as a list; instances and the set of
    processed nodes are shared across all of them.
    """

    def __init__(self, is_punctuation=is_punctuation, label_to_semantic_type=label_to_semantic_type,
                 extract_arguments=None, extract_attribute=None):
        self.registry = InstanceRegistry()
        self.sentences = []
        self.sentence_count = 0
        classifier = RelationClassifier(extract_arguments, extract_attribute)
        self.assembler = GraphAssembler(self, classifier, is_punctuation, label_to_semantic_type)

    def new_sentence(self):
        self.sentence_count += 1
        logger.debug("sentence %d", self.sentence_count)

    def add_sentence(self, instance):
        self.sentences.append(instance.index)

    def add_instances(self, trees):
        if isinstance(trees, DepTree):
            trees = [trees]
        for tree in trees:
            self.assembler.add_tree(tree)

    # --- accessors ---

    def get_instance(self, node):
        return self.registry.lookup(node)

    @property
    def instances(self):
        return list(self.registry)

    @property
    def sentence_roots(self):
        return self.registry.resolve(self.sentences)

    def arguments(self, instance, role=None):
        return self._linked(instance.argument_list, role)

    def predicates(self, instance, role=None):
        return self._linked(instance.predicate_list, role)

    def attributes(self, instance, category=None):
        return self._linked(instance.attribute_list, category)

    def _linked(self, table, key):
        if key is not None:
            return self.registry.resolve(table.get(key, []))
        return {k: self.registry.resolve(v) for k, v in table.items()}

    def argument_edges(self):
        """(predicate, role, argument) triples in creation order per predicate."""
        for inst in self.registry:
            for role, idxs in inst.argument_list.items():
                for i in idxs:
                    yield inst, role, self.registry[i]

    def attribute_edges(self):
        """Attribute links as (a, category, b), each mirrored pair once with the lower index first, head or not."""
        for inst in self.registry:
            for category, idxs in inst.attribute_list.items():
                for i in idxs:
                    if inst.index <= i:
                        yield inst, category, self.registry[i]

    def to_dict(self):
        def nid(inst):
            return f"{inst.node.lemma}#{inst.index}"

        return {
            "sentences": [nid(self.registry[i]) for i in self.sentences],
            "nodes": [{
                "id": nid(inst),
                "form": inst.node.form,
                "lemma": inst.node.lemma,
                "pos": inst.node.pos,
                "label": inst.node.label,
            } for inst in self.registry],
            "arguments": [[nid(p), role.value, nid(a)] for p, role, a in self.argument_edges()],
            "attributes": [[nid(h), cat.value, nid(m)] for h, cat, m in self.attribute_edges()],
        }
