"""
Classification loss metrics reported per cross-validation fold.

Implements (all in percent, higher is better):
- accuracy: fraction of correctly classified samples
- balanced_accuracy: mean per-class recall, robust to class imbalance
- f1_macro: unweighted mean of per-class F1 scores
"""

from __future__ import annotations

from typing import Callable, Dict

import numpy as np
from sklearn.metrics import accuracy_score, balanced_accuracy_score, f1_score


def compute_accuracy(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Compute classification accuracy in percent."""
    return 100.0 * float(accuracy_score(y_true, y_pred))


def compute_balanced_accuracy(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Compute balanced accuracy (mean per-class recall) in percent.

    Classes absent from ``y_true`` in a fold do not contribute.
    """
    return 100.0 * float(balanced_accuracy_score(y_true, y_pred))


def compute_f1_macro(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """Compute macro-averaged F1 score in percent."""
    return 100.0 * float(f1_score(y_true, y_pred, average="macro", zero_division=0))


LOSS_FUNCS: Dict[str, Callable[[np.ndarray, np.ndarray], float]] = {
    "accuracy": compute_accuracy,
    "balanced_accuracy": compute_balanced_accuracy,
    "f1_macro": compute_f1_macro,
}


def compute_loss(y_true: np.ndarray, y_pred: np.ndarray, loss: str) -> float:
    """Compute a named loss metric.

    Args:
        y_true: True class labels.
        y_pred: Predicted class labels.
        loss: Metric name. Supported: "accuracy", "balanced_accuracy", "f1_macro".

    Returns:
        Metric value in percent.
    """
    loss_lower = loss.lower()
    if loss_lower not in LOSS_FUNCS:
        raise ValueError(f"Unknown loss: {loss}. Supported: {list(LOSS_FUNCS.keys())}")
    if len(y_true) != len(y_pred):
        raise ValueError(
            f"y_true and y_pred length mismatch: {len(y_true)} vs {len(y_pred)}"
        )
    return LOSS_FUNCS[loss_lower](np.asarray(y_true), np.asarray(y_pred))
