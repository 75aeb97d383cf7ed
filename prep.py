# prep.py

import logging
from collections import deque

from config import POBJ_LABEL
from instance import link_argument, link_attribute
from semtypes import SemanticType, AttributeType, is_punctuation

logger = logging.getLogger(__name__)


class PrepositionResolver:
    """
    Re-attach a prepositional phrase to its semantic object.

    The subtree is walked breadth-first in dependents order. The first node
    labelled pobj becomes the object; every other node is folded into it as
    a quality attribute plus an aux argument. Without a pobj the first
    candidate, i.e. the preposition itself, is kept.
    """

    def __init__(self, registry, visited, punct_fn=None, object_label=POBJ_LABEL):
        self.registry = registry
        self.visited = visited
        self.punct_fn = punct_fn or is_punctuation
        self.object_label = object_label

    def resolve(self, prep_node):
        q = deque([prep_node])
        found = None
        candidates = []

        while q:
            node = q.popleft()
            if self.punct_fn(node.pos):
                continue
            inst = self.registry.get_or_create(node)
            self.visited.add(node)

            if node.label == self.object_label and found is None:
                found = inst
            else:
                candidates.append(inst)

            q.extend(node.dependents)

        if found is None:
            found = candidates.pop(0)

        for c in candidates:
            link_attribute(found, AttributeType.QUALITY, c)
            link_argument(found, SemanticType.AUX, c)

        logger.debug("resolved %r to %r, folded %d", prep_node, found, len(candidates))
        return found
