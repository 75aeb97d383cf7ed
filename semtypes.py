# semtypes.py

import re
from enum import Enum


class SemanticType(Enum):
    """Role labels on predicate-argument edges."""
    # PropBank-style semantic roles
    A0 = "a0"
    A1 = "a1"
    A2 = "a2"
    A3 = "a3"
    A4 = "a4"
    AM_LOC = "am_loc"
    AM_DIR = "am_dir"
    AM_TMP = "am_tmp"
    AM_MNR = "am_mnr"
    AM_EXT = "am_ext"
    AM_PRP = "am_prp"
    AM_CAU = "am_cau"
    AM_NEG = "am_neg"
    AM_MOD = "am_mod"
    AM_ADV = "am_adv"
    AM_DIS = "am_dis"
    # syntactic relations kept as-is
    ACL = "acl"
    ACOMP = "acomp"
    ADVCL = "advcl"
    ADVMOD = "advmod"
    AGENT = "agent"
    AMOD = "amod"
    APPOS = "appos"
    ATTR = "attr"
    AUX = "aux"
    AUXPASS = "auxpass"
    CC = "cc"
    CCOMP = "ccomp"
    COMPOUND = "compound"
    CONJ = "conj"
    CSUBJ = "csubj"
    CSUBJPASS = "csubjpass"
    DATIVE = "dative"
    DEP = "dep"
    DET = "det"
    DOBJ = "dobj"
    EXPL = "expl"
    INTJ = "intj"
    MARK = "mark"
    META = "meta"
    NEG = "neg"
    NMOD = "nmod"
    NPADVMOD = "npadvmod"
    NSUBJ = "nsubj"
    NSUBJPASS = "nsubjpass"
    NUMMOD = "nummod"
    OPRD = "oprd"
    PARATAXIS = "parataxis"
    PCOMP = "pcomp"
    POBJ = "pobj"
    POSS = "poss"
    PRECONJ = "preconj"
    PREDET = "predet"
    PREP = "prep"
    PRT = "prt"
    QUANTMOD = "quantmod"
    RELCL = "relcl"
    ROOT = "root"
    XCOMP = "xcomp"


class AttributeType(Enum):
    """Modifier categories on attribute edges."""
    QUALITY = "quality"
    QUANTITY = "quantity"
    POSSESSION = "possession"
    NEGATION = "negation"
    MANNER = "manner"
    TIME = "time"


_VALUES = {t.value: t for t in SemanticType}

# UD and ClearNLP spellings folded onto the labels above
_ALIASES = {
    "nsubj_pass": "nsubjpass",
    "csubj_pass": "csubjpass",
    "aux_pass": "auxpass",
    "obj": "dobj",
    "iobj": "dative",
    "obl": "prep",
    "case": "prep",
    "num": "nummod",
    "nn": "compound",
    "rcmod": "relcl",
    "possessive": "poss",
    "partmod": "acl",
    "infmod": "acl",
    "am_pnc": "am_prp",
}

PUNCT_TAGS = {".", ",", ":", "``", "''", "\"", "-LRB-", "-RRB-", "-LCB-",
              "-RCB-", "-LSB-", "-RSB-", "HYPH", "NFP", "PUNCT", "PUNC"}


def _norm_label(label: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", (label or "").strip().lower()).strip("_")


def canonical_label(label: str) -> str:
    """Lowercased label with UD and ClearNLP spellings folded, e.g. nsubj:pass -> nsubjpass."""
    key = _norm_label(label)
    key = _ALIASES.get(key, key)
    if key in _VALUES:
        return key
    # subtyped labels such as "nmod:poss" or "am-loc-x"
    parts = key.split("_")
    for i in range(len(parts) - 1, 0, -1):
        cand = "_".join(parts[:i])
        cand = _ALIASES.get(cand, cand)
        if cand in _VALUES:
            return cand
    return key


def label_to_semantic_type(label: str) -> SemanticType:
    """Total mapping from a dependency or SRL label; unknown labels become DEP."""
    return _VALUES.get(canonical_label(label), SemanticType.DEP)


def is_punctuation(pos: str) -> bool:
    return pos in PUNCT_TAGS
