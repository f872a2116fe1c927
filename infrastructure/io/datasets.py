"""Dataset loading utilities."""

from pathlib import Path

import pandas as pd

SUPPORTED_SUFFIXES = (".xlsx", ".xls", ".csv", ".json", ".jsonl")


def read_table(path: Path) -> pd.DataFrame:
    """
    Read a question/submission/bookmark export based on file extension.

    Supported formats:
    - Excel: .xlsx, .xls
    - CSV: .csv
    - JSON: .json (list of records), .jsonl (one record per line)

    Args:
        path: Path to data file

    Returns:
        pandas DataFrame

    Raises:
        ValueError: If file format is not supported
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in (".xlsx", ".xls"):
        return pd.read_excel(path)
    if suffix == ".csv":
        # keep ids and slugs as text
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    if suffix == ".json":
        return pd.read_json(path, orient="records", dtype=False)
    if suffix == ".jsonl":
        return pd.read_json(path, orient="records", lines=True, dtype=False)
    raise ValueError(f"Unsupported file format: {suffix}. Supported formats: {', '.join(SUPPORTED_SUFFIXES)}")


def read_optional_table(path: Path | None) -> pd.DataFrame | None:
    """
    Read a table if a path is configured; a configured but missing file is an error.

    Args:
        path: Path to data file, or None when the table is not configured

    Returns:
        pandas DataFrame, or None if path is None
    """
    if path is None:
        return None
    return read_table(path)
