"""
Hand-off of a finished comparison to reporting.

Writes the AccuracyMatrix and its context to an output directory
(comparison.json plus a long-format fold_losses.csv and a summary.csv),
reads it back, and formats the console summary table. Plotting lives in
scripts/plot_feature_set_comparison.py.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from fscompare.evaluation.aggregation import AccuracyMatrix

COMPARISON_FILE = "comparison.json"
FOLD_LOSSES_FILE = "fold_losses.csv"
SUMMARY_FILE = "summary.csv"


def matrix_to_dict(matrix: AccuracyMatrix) -> Dict[str, Any]:
    """Convert to dictionary for serialization."""
    return {
        "feature_sets": list(matrix.feature_sets),
        "n_features": list(matrix.n_features),
        "values": matrix.values.tolist(),
        "n_folds": matrix.n_folds,
        "n_repeats": matrix.n_repeats,
        "loss_name": matrix.loss_name,
        "num_classes": matrix.num_classes,
        "classifier": matrix.classifier,
    }


def matrix_from_dict(d: Dict[str, Any]) -> AccuracyMatrix:
    """Create from dictionary (e.g., from comparison.json)."""
    values = np.array(d["values"], dtype=np.float64)
    values.setflags(write=False)
    return AccuracyMatrix(
        feature_sets=tuple(d["feature_sets"]),
        n_features=tuple(int(n) for n in d["n_features"]),
        values=values,
        n_folds=int(d["n_folds"]),
        n_repeats=int(d["n_repeats"]),
        loss_name=d["loss_name"],
        num_classes=int(d.get("num_classes", 0)),
        classifier=d.get("classifier", ""),
    )


def save_comparison(
    matrix: AccuracyMatrix,
    out_dir: Path | str,
    config: Optional[Dict[str, Any]] = None,
    dataset: str = "",
) -> Path:
    """Save a comparison to ``out_dir``.

    Args:
        matrix: Finalized comparison.
        out_dir: Output directory (created if missing).
        config: Run configuration to store alongside the results.
        dataset: Dataset name.

    Returns:
        Path of the written comparison.json.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    payload = {
        "dataset": dataset,
        "matrix": matrix_to_dict(matrix),
        "config": config or {},
    }
    path = out / COMPARISON_FILE
    with open(path, "w") as f:
        json.dump(payload, f, indent=2)

    matrix.to_long_frame().to_csv(out / FOLD_LOSSES_FILE, index=False)
    matrix.summary().to_csv(out / SUMMARY_FILE, index=False)
    return path


def load_comparison(path: Path | str) -> AccuracyMatrix:
    """Load an AccuracyMatrix from comparison.json (or its directory)."""
    path = Path(path)
    if path.is_dir():
        path = path / COMPARISON_FILE
    with open(path) as f:
        payload = json.load(f)
    return matrix_from_dict(payload["matrix"])


def format_summary(matrix: AccuracyMatrix) -> str:
    """Console table of per-set results, best mean first."""
    summary = matrix.summary().sort_values("mean", ascending=False)
    header = (
        f"{matrix.num_classes}-class classification with {matrix.classifier} "
        f"using {matrix.n_folds}-fold cross validation, {matrix.n_repeats} repeats "
        f"({matrix.loss_name}, %)"
    )
    lines = [header, "=" * len(header)]
    width = max(len(name) for name in matrix.feature_sets)
    lines.append(f"  {'feature set':<{width}}  {'n':>6}  {'mean':>7}  {'std':>6}")
    for row in summary.itertuples(index=False):
        lines.append(
            f"  {row.feature_set:<{width}}  {row.n_features:>6d}  "
            f"{row.mean:>7.2f}  {row.std:>6.2f}"
        )
    return "\n".join(lines)
