# conll.py

"""
Reader for dependency trees in tab-separated CoNLL form, one token per line
and a blank line between sentences:

    id  form  lemma  pos  feats  head  deprel  [sheads]

`head` is the 1-based id of the governor (0 for the root). The optional
`sheads` column holds SRL arcs such as `2:A0;5:AM-LOC`, or `_`.
"""

import logging

from deptree import DepNode, DepTree

logger = logging.getLogger(__name__)


def _parse_sheads(field, lineno):
    out = []
    if field in ("", "_"):
        return out
    for arc in field.split(";"):
        head_id, sep, label = arc.partition(":")
        if not sep or not head_id.isdigit():
            raise ValueError(f"line {lineno}: bad semantic head {arc!r}")
        out.append((int(head_id), label))
    return out


def _build_tree(rows):
    nodes = [DepNode(tid, form, lemma, pos, label)
             for tid, form, lemma, pos, _head, label, _sh, _ln in rows]
    by_id = {n.id: n for n in nodes}
    root = None
    for node, (_tid, _form, _lemma, _pos, head_id, _label, sheads, lineno) in zip(nodes, rows):
        for sid, slabel in sheads:
            if sid not in by_id:
                raise ValueError(f"line {lineno}: semantic head {sid} not in sentence")
            node.add_semantic_head(by_id[sid], slabel)
        if head_id == 0:
            if root is None:
                root = node
            continue
        if head_id not in by_id:
            raise ValueError(f"line {lineno}: head {head_id} not in sentence")
        node.set_head(by_id[head_id])
    return DepTree(nodes, first_root=root).validate()


def read_trees(source):
    """Read every tree from a path or an iterable of lines."""
    if isinstance(source, str):
        with open(source, "r", encoding="utf-8") as f:
            return read_trees(f.read().splitlines())

    trees, rows = [], []
    for lineno, line in enumerate(source, 1):
        line = line.rstrip("\n")
        if not line.strip():
            if rows:
                trees.append(_build_tree(rows))
                rows = []
            continue
        if line.startswith("#"):
            continue
        cols = line.split("\t")
        if len(cols) < 7:
            raise ValueError(f"line {lineno}: expected at least 7 columns, got {len(cols)}")
        if not cols[0].isdigit() or not cols[5].isdigit():
            raise ValueError(f"line {lineno}: id and head must be integers")
        lemma = None if cols[2] == "_" else cols[2]
        sheads = _parse_sheads(cols[7] if len(cols) > 7 else "_", lineno)
        rows.append((int(cols[0]), cols[1], lemma, cols[3], int(cols[5]),
                     cols[6], sheads, lineno))
    if rows:
        trees.append(_build_tree(rows))

    logger.info("read %d trees", len(trees))
    return trees
