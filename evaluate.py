# evaluate.py

import os
import json
import logging
import argparse

import pandas as pd
from tqdm import tqdm

from conll import read_trees
from document import Document
from metric import score_files, KINDS
from pipeline import build_semantic_graph, get_nlp
from config import (TEXTS_FILE, GOLD_GRAPHS_FILE, OUTPUT_PATH, EVALUATION_PATH,
                    SPACY_MODEL, MATCH_MODE, LOG_FILE, LOG_LEVEL)

logger = logging.getLogger(__name__)


def setup_logging(log_file=LOG_FILE, level=LOG_LEVEL):
    handlers = [logging.StreamHandler()]
    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )


class SemanticGraphEvaluator:
    def __init__(self, texts_path, gold_path, output_path, evaluation_path,
                 evaluate=False, conll_path=None, model=SPACY_MODEL, mode=MATCH_MODE):
        self.texts_path = texts_path
        self.gold_path = gold_path
        self.output_path = output_path
        self.evaluation_path = evaluation_path
        self.evaluate = evaluate
        self.conll_path = conll_path
        self.model = model
        self.mode = mode

        self.graphs = []

    def read_texts(self):
        with open(self.texts_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return [str(item["text"]) if isinstance(item, dict)
                and "text" in item else item for item in data]

    def predict_from_texts(self):
        nlp = get_nlp(self.model)
        texts = self.read_texts()
        logger.info("building graphs for %d texts", len(texts))
        for t in tqdm(texts):
            self.graphs.append(build_semantic_graph(t, nlp=nlp))

    def predict_from_conll(self):
        # one document and one graph per tree
        for tree in tqdm(read_trees(self.conll_path)):
            document = Document()
            document.add_instances(tree)
            self.graphs.append(document.to_dict())

    def dump_json(self, data, path):
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def evaluate_results(self):
        report = score_files(self.gold_path, self.output_path, mode=self.mode,
                             save_report_path=self.evaluation_path)
        return self.build_dataframe(report), report

    def build_dataframe(self, report):
        rows = []
        for name in KINDS:
            m = report["micro_counts"][name] if "micro_counts" in report else {
                "tp": 0, "pred": 0, "gold": 0}
            P = m["tp"] / (m["pred"] or 1)
            R = m["tp"] / (m["gold"] or 1)
            rows.append({
                "Metric": name,
                "Precision": round(P, 4),
                "Recall":    round(R, 4),
                "F1":        report.get("micro_breakdown", {}).get(name, 0.0),
                "TP":        m["tp"],
                "Pred":      m["pred"],
                "Gold":      m["gold"],
            })
        for name, key in (("macro", "dataset_macro"), ("micro", "dataset_micro")):
            rows.append({"Metric": name, "Precision": "-", "Recall": "-",
                         "F1": report.get(key, 0.0), "TP": "-", "Pred": "-", "Gold": "-"})
        return pd.DataFrame(rows, columns=["Metric", "Precision", "Recall",
                                           "F1", "TP", "Pred", "Gold"])

    def run(self):
        if self.conll_path:
            self.predict_from_conll()
        else:
            self.predict_from_texts()
        self.dump_json(self.graphs, self.output_path)
        logger.info("wrote %d graphs to %s", len(self.graphs), self.output_path)

        if self.evaluate:
            df, _report = self.evaluate_results()
            print(df)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Semantic Role Graph Generation and Evaluation")
    parser.add_argument("--texts", type=str, default=TEXTS_FILE,
                        help="JSON list of texts to parse")
    parser.add_argument("--conll", type=str,
                        help="Read parsed trees from a CoNLL file instead of texts")
    parser.add_argument("--gold", type=str, default=GOLD_GRAPHS_FILE,
                        help="Gold graphs for evaluation")
    parser.add_argument("--output", type=str, default=OUTPUT_PATH,
                        help="Path to save predicted graphs")
    parser.add_argument("--report", type=str, default=EVALUATION_PATH,
                        help="Path to save the evaluation report")
    parser.add_argument("--model", type=str, default=SPACY_MODEL,
                        help="spaCy model name")
    parser.add_argument("--mode", choices=["exact", "lemma", "synonym"], default=MATCH_MODE,
                        help="Token matching used by the evaluation")
    parser.add_argument("--evaluate", action="store_true",
                        help="Run evaluation")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_args()
    setup_logging()
    evaluator = SemanticGraphEvaluator(args.texts, args.gold, args.output, args.report,
                                       args.evaluate, args.conll, args.model, args.mode)
    evaluator.run()
