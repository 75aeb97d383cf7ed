# rules.py

import re

from config import PREP_LABEL
from semtypes import SemanticType, AttributeType, canonical_label, label_to_semantic_type


def role_rules():
    """
    Prepositions are split into locative, directional and temporal families through regular expressions.
    """
    rules = {
        "locative_prep_regex":
            r"^(in|on|under|over|above|below|near|behind|beside|inside|outside|within|at|around|between|across|through|among|along|against)$",
        "directional_prep_regex":
            r"^(to|toward|towards|into|onto|from|off|out|past|up|down|away)$",
        "temporal_prep_regex":
            r"^(before|after|during|since|until|till|throughout)$",
        "manner_adverb_regex":
            r"^[a-z]+ly$",
    }
    rules["_compiled"] = {k: re.compile(
        v) for k, v in rules.items() if k.endswith("_regex")}
    return rules


ROLE_RULES = role_rules()

CORE_ROLES = {
    "nsubj": SemanticType.A0,
    "csubj": SemanticType.A0,
    "agent": SemanticType.A0,
    "nsubjpass": SemanticType.A1,
    "csubjpass": SemanticType.A1,
    "dobj": SemanticType.A1,
    "obj": SemanticType.A1,
    "dative": SemanticType.A2,
    "iobj": SemanticType.A2,
}

VERB_TAGS = {"VB", "VBD", "VBP", "VBZ", "VBG", "VBN", "VERB", "AUX"}

TEMPORAL_CUES = {
    "suddenly", "then", "after", "before", "once", "later", "soon",
    "immediately", "meanwhile", "eventually", "next", "now", "today",
    "yesterday", "tomorrow", "already", "still", "yet"
}

NUM_WORDS = {"one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
             "dozen", "dozens", "several", "many", "few", "couple", "some", "each", "every", "all",
             "both", "numerous", "multiple", "hundreds", "thousands", "lots"}


def _is_verb(node):
    return node is not None and node.pos in VERB_TAGS


def _prep_role(node, rules):
    lemma = (node.lemma or "").lower()
    comp = rules["_compiled"]
    if comp["temporal_prep_regex"].match(lemma):
        return SemanticType.AM_TMP
    if comp["directional_prep_regex"].match(lemma):
        return SemanticType.AM_DIR
    if comp["locative_prep_regex"].match(lemma):
        return SemanticType.AM_LOC
    return None


def extract_arguments(node, rules=None):
    """
    Roles this node fills, as {SemanticType: predicate node}.
    SRL semantic heads on the node take priority over dependency rules.
    """
    rules = rules or ROLE_RULES
    if node.semantic_heads:
        out = {}
        for label, head in node.semantic_heads:
            out.setdefault(label_to_semantic_type(label), head)
        return out

    head = node.head
    if not _is_verb(head):
        return {}
    label = canonical_label(node.label)
    if label in CORE_ROLES:
        return {CORE_ROLES[label]: head}
    if label == PREP_LABEL:
        role = _prep_role(node, rules)
        if role is not None:
            return {role: head}
    return {}


def extract_attribute(node, head, rules=None):
    rules = rules or ROLE_RULES
    label = canonical_label(node.label)
    lemma = (node.lemma or "").lower()

    if label in {"amod", "acomp"}:
        return AttributeType.QUALITY
    if label in {"nummod", "quantmod", "num"}:
        return AttributeType.QUANTITY
    if label == "det" and (lemma in NUM_WORDS or lemma.isdigit()):
        return AttributeType.QUANTITY
    if label == "poss":
        return AttributeType.POSSESSION
    if label == "neg":
        return AttributeType.NEGATION
    if label in {"advmod", "npadvmod"}:
        if lemma in TEMPORAL_CUES:
            return AttributeType.TIME
        if rules["_compiled"]["manner_adverb_regex"].match(lemma):
            return AttributeType.MANNER
    return None
