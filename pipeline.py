# pipeline.py

import logging

import spacy

from config import SPACY_MODEL
from deptree import from_doc
from document import Document

logger = logging.getLogger(__name__)

_NLP = {}


def get_nlp(model=SPACY_MODEL):
    """Load a spaCy pipeline once per model name."""
    if model not in _NLP:
        try:
            _NLP[model] = spacy.load(model)
        except OSError as e:
            raise RuntimeError(
                f"spaCy model '{model}' not available. Run: `python -m spacy download {model}`."
            ) from e
        logger.info("loaded spaCy model %s", model)
    return _NLP[model]


def _token_table(doc):
    rows = []
    for i, t in enumerate(doc):
        rows.append(dict(i=i, text=t.text, lemma=t.lemma_, pos=t.pos_, tag=t.tag_,
                         dep=t.dep_, head=t.head.i, head_text=t.head.text))
    return rows


def build_document(doc, **capabilities):
    document = Document(**capabilities)
    document.add_instances(from_doc(doc))
    return document


def build_semantic_graph(text, debug=False, nlp=None):
    doc = (nlp or get_nlp())(text)
    document = build_document(doc)
    graph = document.to_dict()

    if not debug:
        return graph
    dbg = {
        "tokens": _token_table(doc),
        "sentences": [s.text for s in doc.sents],
        "instances": len(document.registry),
    }
    return graph, dbg
