# metric.py

import re
import json
from nltk.corpus import wordnet as wn


LEM_CACHE, SYN_CACHE = {}, {}
KINDS = ("nodes", "arguments", "attributes")


def snake(s):
    return re.sub(r"[^a-z0-9_]+", "_", (s or "").lower()).strip("_")


def base_id(nid):
    return snake(str(nid).split("#", 1)[0])


def lemmatize_tok(tok):
    t = (tok or "").lower()
    if t in LEM_CACHE:
        return LEM_CACHE[t]
    out = wn.morphy(t) or t
    LEM_CACHE[t] = out
    return out


def synset(tok):
    t = (tok or "").lower()
    if t in SYN_CACHE:
        return SYN_CACHE[t]
    out = {t}
    for pos in ["n", "v", "a", "r"]:
        for syn in wn.synsets(t, pos=pos):
            for l in syn.lemmas():
                out.add(l.name().lower())
    SYN_CACHE[t] = out
    return out


def match_token(a, b, mode="exact"):
    if mode == "exact":
        return snake(a) == snake(b)
    aa, bb = lemmatize_tok(a), lemmatize_tok(b)
    if aa == bb:
        return True
    if mode == "lemma":
        return False
    return len(synset(aa) & synset(bb)) > 0


def node_set(graph):
    return {base_id(nd.get("id", "")) for nd in graph.get("nodes", [])}


def argument_set(graph):
    out = set()
    for e in graph.get("arguments", []):
        if isinstance(e, (list, tuple)) and len(e) == 3:
            out.add((base_id(e[0]), snake(e[1]), base_id(e[2])))
    return out


def attribute_set(graph):
    # attribute links are symmetric
    out = set()
    for e in graph.get("attributes", []):
        if isinstance(e, (list, tuple)) and len(e) == 3:
            a, b = sorted((base_id(e[0]), base_id(e[2])))
            out.add((a, snake(e[1]), b))
    return out


SETS = {"nodes": node_set, "arguments": argument_set, "attributes": attribute_set}


def f1_match(gold_set, pred_set, mode, kind):

    gold_list = sorted(gold_set)
    used = set()
    tp = 0

    def ok(x, y):
        if kind == "nodes":
            return match_token(x, y, mode)
        return (x[1] == y[1]) and match_token(x[0], y[0], mode) and match_token(x[2], y[2], mode)

    for y in sorted(pred_set):
        for i, x in enumerate(gold_list):
            if i in used:
                continue
            if ok(x, y):
                used.add(i)
                tp += 1
                break

    P = tp / (len(pred_set) or 1)
    R = tp / (len(gold_set) or 1)
    F = 2*P*R/(P+R) if (P+R) else 0.0
    return {
        "precision": round(P, 4), "recall": round(R, 4), "f1": round(F, 4),
        "tp": tp, "pred": len(pred_set), "gold": len(gold_set)
    }


def score_pair(gold, pred, *, mode="exact", weights=(1, 1, 1)):
    res = {k: f1_match(SETS[k](gold), SETS[k](pred), mode, k) for k in KINDS}
    denom = sum(weights) or 1
    res["score"] = round(sum(w * res[k]["f1"] for w, k in zip(weights, KINDS)) / denom, 4)
    return res


def score_graphs(gold_graphs, pred_graphs, *, mode="exact", weights=(1, 1, 1)):
    out = {"dataset_macro": 0.0, "dataset_micro": 0.0, "samples": [], "mode": mode}
    if not gold_graphs:
        return out

    micro = {k: {"tp": 0, "pred": 0, "gold": 0} for k in KINDS}
    S = 0.0
    for g, p in zip(gold_graphs, pred_graphs):
        res = score_pair(g, p, mode=mode, weights=weights)
        out["samples"].append(res)
        S += res["score"]
        for k in KINDS:
            for x in ("tp", "pred", "gold"):
                micro[k][x] += res[k][x]

    out["dataset_macro"] = round(S / len(out["samples"]), 4) if out["samples"] else 0.0

    def micro_f1(block):
        P = block["tp"]/(block["pred"] or 1)
        R = block["tp"]/(block["gold"] or 1)
        return 2*P*R/(P+R) if (P+R) else 0.0
    breakdown = {k: round(micro_f1(micro[k]), 4) for k in KINDS}
    denom = sum(weights) or 1
    out["dataset_micro"] = round(
        sum(w * breakdown[k] for w, k in zip(weights, KINDS)) / denom, 4)
    out["micro_breakdown"] = breakdown
    out["micro_counts"] = micro
    return out


def score_files(gold_path, pred_path, *, mode="exact", weights=(1, 1, 1), save_report_path=None):
    with open(gold_path, "r", encoding="utf-8") as f:
        gold = json.load(f)
    with open(pred_path, "r", encoding="utf-8") as f:
        pred = json.load(f)
    out = score_graphs(gold, pred, mode=mode, weights=weights)
    if save_report_path:
        with open(save_report_path, "w", encoding="utf-8") as f:
            json.dump(out, f, ensure_ascii=False, indent=2)
    return out
