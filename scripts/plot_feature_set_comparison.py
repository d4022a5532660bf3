#!/usr/bin/env python
"""
Plot a saved feature-set comparison as a jittered scatter.

One column per feature set: every fold loss as a jittered point, with the
mean drawn as a horizontal bar.

Usage:
    python scripts/plot_feature_set_comparison.py experiments/compare_20260101_120000
    python scripts/plot_feature_set_comparison.py experiments/compare_x --output comparison.png
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from fscompare.evaluation.aggregation import AccuracyMatrix
from fscompare.reporting import load_comparison


def plot_jittered_scatter(matrix: AccuracyMatrix, seed: int = 0):
    """Draw one jittered column of fold losses per feature set."""
    rng = np.random.default_rng(seed)
    n_sets = len(matrix.feature_sets)
    fig, ax = plt.subplots(figsize=(max(6, 1.1 * n_sets), 5))
    colors = plt.cm.tab10(np.arange(n_sets) % 10)

    for i, values in enumerate(matrix.values):
        x = i + 1 + rng.uniform(-0.15, 0.15, size=len(values))
        ax.scatter(x, values, s=18, alpha=0.7, color=colors[i])
        ax.hlines(values.mean(), i + 0.7, i + 1.3, color="k", linewidth=2)

    ax.set_xticks(np.arange(1, n_sets + 1))
    ax.set_xticklabels(
        [f"{name} ({n})" for name, n in zip(matrix.feature_sets, matrix.n_features)],
        rotation=45,
        ha="right",
    )
    ax.set_ylabel(f"{matrix.loss_name} (%)")
    ax.set_title(
        f"{matrix.num_classes}-class classification with different feature sets "
        f"using {matrix.n_folds}-fold cross validation"
    )
    fig.tight_layout()
    return fig


def main() -> None:
    parser = argparse.ArgumentParser(description="Plot a saved feature-set comparison")
    parser.add_argument("results", type=str, help="comparison.json or its directory")
    parser.add_argument("--output", type=str, help="Output image (default: <results dir>/comparison.png)")
    args = parser.parse_args()

    results = Path(args.results)
    matrix = load_comparison(results)
    out_dir = results if results.is_dir() else results.parent
    output = Path(args.output) if args.output else out_dir / "comparison.png"

    fig = plot_jittered_scatter(matrix)
    fig.savefig(output, dpi=150)
    print(f"Saved plot to: {output}")


if __name__ == "__main__":
    main()
