"""Table loading, JSON outputs and logging helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd


def ensure_dir(path: str | Path) -> None:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)


def write_json(path: str | Path, payload: dict[str, Any]) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)


def setup_logger(log_path: Path, logger_name: str) -> logging.Logger:
    ensure_dir(log_path.parent)
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.INFO)
    logger.handlers.clear()
    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
    fh = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    fh.setFormatter(formatter)
    logger.addHandler(fh)
    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    logger.addHandler(sh)
    return logger


def read_table(path: str | Path) -> pd.DataFrame:
    """Read a CSV (or TSV by extension) table."""
    table_path = Path(path)
    if not table_path.exists():
        raise FileNotFoundError(f"Input file '{table_path}' not found.")
    sep = "\t" if table_path.suffix.lower() in {".tsv", ".tab", ".txt"} else ","
    return pd.read_csv(table_path, sep=sep)


def _require_columns(df: pd.DataFrame, columns: list[str], source: str | Path) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(f"Missing required columns {missing} in '{source}'.")


def _numeric(df: pd.DataFrame, col: str) -> pd.Series:
    return pd.to_numeric(df[col], errors="coerce")


def read_value_table(
    path: str | Path,
    value_col: str,
    *,
    label_col: str | None = None,
    pvalue_col: str | None = None,
    logger: logging.Logger | None = None,
) -> tuple[np.ndarray, np.ndarray | None, np.ndarray | None]:
    """Load rank-log inputs; rows with a missing value (or p-value) are dropped."""
    df = read_table(path)
    cols = [value_col] + [c for c in (label_col, pvalue_col) if c is not None]
    _require_columns(df, cols, path)

    frame = pd.DataFrame({"value": _numeric(df, value_col)})
    if pvalue_col is not None:
        frame["p"] = _numeric(df, pvalue_col)
    if label_col is not None:
        frame["label"] = df[label_col].astype("string").str.strip()

    finite = np.isfinite(frame.drop(columns=["label"], errors="ignore").to_numpy(dtype=float))
    keep = finite.all(axis=1)
    if label_col is not None:
        keep &= frame["label"].notna().to_numpy()
    dropped = int((~keep).sum())
    if dropped and logger is not None:
        logger.warning("Dropped %d of %d rows with missing values in '%s'", dropped, len(frame), path)
    frame = frame.loc[keep]

    values = frame["value"].to_numpy(dtype=float)
    labels = frame["label"].to_numpy(dtype=object) if label_col is not None else None
    pvals = frame["p"].to_numpy(dtype=float) if pvalue_col is not None else None
    return values, labels, pvals


def read_paired_table(
    path: str | Path,
    col_a: str,
    col_b: str,
    *,
    logger: logging.Logger | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Load paired method columns; a row is dropped when either value is missing."""
    df = read_table(path)
    _require_columns(df, [col_a, col_b], path)
    a = _numeric(df, col_a).to_numpy(dtype=float)
    b = _numeric(df, col_b).to_numpy(dtype=float)
    keep = np.isfinite(a) & np.isfinite(b)
    dropped = int((~keep).sum())
    if dropped and logger is not None:
        logger.warning("Dropped %d of %d unpaired rows in '%s'", dropped, keep.size, path)
    return a[keep], b[keep]
