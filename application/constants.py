"""Application-level constants."""

from pathlib import Path

# Submission statuses counted as solved (compared trimmed + lower-cased)
ACCEPTED_STATUSES = frozenset({"accepted", "accept", "ac"})

# Separators accepted inside a delimited tags cell
TAG_SEPARATORS = (",", ";", "|")

# Output filenames
SEARCH_RESULT_FILENAME = "search_results.json"
COVERAGE_FILENAME = "tag_coverage.csv"

# Output directory structure
OUTPUT_ROOT = Path("outputs")
LOG_FILENAME = "run.log"
