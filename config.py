# config.py

# --- Paths ---
TEXTS_FILE = "texts.json"
GOLD_GRAPHS_FILE = "gold_graphs.json"
OUTPUT_PATH = "predicted_graphs.json"
EVALUATION_PATH = "graph_report.json"

# --- Parser ---
SPACY_MODEL = "en_core_web_sm"

# --- Dependency labels ---
PREP_LABEL = "prep"
POBJ_LABEL = "pobj"

# --- Evaluation Settings ---
MATCH_MODE = "exact"

# --- Logging ---
LOG_FILE = "./logs/project.log"
LOG_LEVEL = "INFO"
