"""
Aggregation of per-subset cross-validation losses into an AccuracyMatrix.

The matrix has one row per feature set and n_folds * n_repeats columns in
repeat-major order. It is only built when every row reports the same loss
metric and the same number of values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from fscompare.errors import InconsistentMetricError
from fscompare.evaluation.cross_validation import SubsetResult


@dataclass(frozen=True)
class AccuracyMatrix:
    """Finalized, read-only comparison of feature sets.

    Attributes:
        feature_sets: Feature-set names, one per row.
        n_features: Features included in each set.
        values: Loss values, shape (n_sets, n_folds * n_repeats).
        n_folds: Folds per repeat.
        n_repeats: Number of repeats.
        loss_name: Loss metric shared by every entry.
        num_classes: Number of classes in the labels.
        classifier: Classifier name.
    """

    feature_sets: Tuple[str, ...]
    n_features: Tuple[int, ...]
    values: np.ndarray
    n_folds: int
    n_repeats: int
    loss_name: str
    num_classes: int = 0
    classifier: str = ""

    def row(self, name: str) -> np.ndarray:
        """Loss values of one feature set."""
        try:
            return self.values[self.feature_sets.index(name)]
        except ValueError:
            raise KeyError(f"No feature set '{name}' in matrix") from None

    @property
    def means(self) -> np.ndarray:
        return self.values.mean(axis=1)

    def summary(self) -> pd.DataFrame:
        """Per-set summary statistics, one row per feature set."""
        return pd.DataFrame({
            "feature_set": list(self.feature_sets),
            "n_features": list(self.n_features),
            "mean": self.values.mean(axis=1),
            "std": self.values.std(axis=1, ddof=1) if self.values.shape[1] > 1
            else np.zeros(len(self.feature_sets)),
            "min": self.values.min(axis=1),
            "max": self.values.max(axis=1),
        })

    def to_long_frame(self) -> pd.DataFrame:
        """One row per (feature_set, repeat, fold) with its loss."""
        rows = []
        for i, name in enumerate(self.feature_sets):
            for j, loss in enumerate(self.values[i]):
                rows.append({
                    "feature_set": name,
                    "n_features": self.n_features[i],
                    "repeat": j // self.n_folds,
                    "fold": j % self.n_folds,
                    self.loss_name: float(loss),
                })
        return pd.DataFrame(rows)


def aggregate_results(
    results: Sequence[SubsetResult],
    n_folds: Optional[int] = None,
    n_repeats: Optional[int] = None,
    num_classes: int = 0,
    classifier: str = "",
) -> AccuracyMatrix:
    """Validate per-subset results and assemble the AccuracyMatrix.

    Args:
        results: One SubsetResult per feature set, in report order.
        n_folds: Expected folds per repeat. If None, taken from the results.
        n_repeats: Expected repeats. If None, taken from the results.
        num_classes: Number of classes, carried through for reporting.
        classifier: Classifier name, carried through for reporting.

    Raises:
        InconsistentMetricError: If loss names, fold counts or row lengths
            differ, or a feature set appears twice.
    """
    if not results:
        raise InconsistentMetricError("No feature-set results to aggregate")

    first = results[0]
    n_folds = first.n_folds if n_folds is None else n_folds
    n_repeats = first.n_repeats if n_repeats is None else n_repeats
    expected_len = n_folds * n_repeats

    names: List[str] = []
    for res in results:
        if res.name in names:
            raise InconsistentMetricError(f"Feature set '{res.name}' appears more than once")
        names.append(res.name)
        if res.loss_name != first.loss_name:
            raise InconsistentMetricError(
                f"Feature set '{res.name}' uses loss '{res.loss_name}', "
                f"but '{first.name}' uses '{first.loss_name}'"
            )
        if (res.n_folds, res.n_repeats) != (n_folds, n_repeats):
            raise InconsistentMetricError(
                f"Feature set '{res.name}' used {res.n_folds} folds x {res.n_repeats} "
                f"repeats, expected {n_folds} x {n_repeats}"
            )
        if len(res.losses) != expected_len:
            raise InconsistentMetricError(
                f"Feature set '{res.name}' has {len(res.losses)} values, "
                f"expected {expected_len}"
            )

    values = np.array([res.losses for res in results], dtype=np.float64)
    values.setflags(write=False)

    return AccuracyMatrix(
        feature_sets=tuple(names),
        n_features=tuple(res.n_features for res in results),
        values=values,
        n_folds=n_folds,
        n_repeats=n_repeats,
        loss_name=first.loss_name,
        num_classes=num_classes,
        classifier=classifier,
    )
