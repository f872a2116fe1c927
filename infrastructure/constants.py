from pathlib import Path

# Repo-root conventional directories/files (overrideable via search.yaml)
CONFIG_DIR = Path("configs")
SEARCH_CONFIG_FILE = CONFIG_DIR / "search.yaml"
TAGS_FILE = CONFIG_DIR / "tags.yaml"

DATA_DIR = Path("dataset")

# Environment variables consulted by the CLI
ENV_SEARCH_CONFIG = "QUESTION_SEARCH_CONFIG"
ENV_LOG_LEVEL = "QUESTION_SEARCH_LOG_LEVEL"
