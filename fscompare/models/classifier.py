"""
Classifier capability used by cross-validation.

Anything with a ``train_and_score(train_X, train_y, test_X, test_y)`` method
returning ``(loss, loss_name)`` can be plugged into the evaluator. The
default implementation builds one of the model wrappers from a
ClassifierConfig, optionally z-scores the features using training-fold
statistics, and scores predictions with the configured loss metric.
"""

from __future__ import annotations

from typing import Protocol, Tuple

import numpy as np
from sklearn.neighbors import KNeighborsClassifier
from sklearn.preprocessing import StandardScaler

from fscompare.config import ClassifierConfig
from fscompare.evaluation.metrics import compute_loss
from fscompare.models.logistic_regression import LogisticRegressionModel
from fscompare.models.svm import SVMModel
from fscompare.models.xgboost_model import XGBoostModel


class Classifier(Protocol):
    """Train on one fold's training samples and score its held-out samples."""

    def train_and_score(
        self,
        train_X: np.ndarray,
        train_y: np.ndarray,
        test_X: np.ndarray,
        test_y: np.ndarray,
    ) -> Tuple[float, str]:
        ...


def build_model(cfg: ClassifierConfig):
    """Create an unfitted model (with ``fit``/``predict``) for ``cfg.name``."""
    if cfg.name == "svm_linear":
        return SVMModel(cfg, kernel="linear")
    if cfg.name == "svm_rbf":
        return SVMModel(cfg, kernel="rbf")
    if cfg.name == "logistic":
        return LogisticRegressionModel(cfg)
    if cfg.name == "knn":
        return KNeighborsClassifier(n_neighbors=cfg.n_neighbors)
    if cfg.name == "xgboost":
        return XGBoostModel(cfg)
    raise ValueError(f"Unknown classifier: {cfg.name}")


class SklearnClassifier:
    """Default classifier capability built from a ClassifierConfig."""

    def __init__(self, cfg: ClassifierConfig | None = None) -> None:
        self.cfg = cfg or ClassifierConfig()

    @property
    def name(self) -> str:
        return self.cfg.name

    def train_and_score(
        self,
        train_X: np.ndarray,
        train_y: np.ndarray,
        test_X: np.ndarray,
        test_y: np.ndarray,
    ) -> Tuple[float, str]:
        """Fit a fresh model on the training fold and score the test fold.

        Returns:
            (loss, loss_name) with the loss in percent.
        """
        if self.cfg.standardize:
            scaler = StandardScaler()
            train_X = scaler.fit_transform(train_X)
            test_X = scaler.transform(test_X)

        model = build_model(self.cfg)
        model.fit(train_X, train_y)
        y_pred = model.predict(test_X)
        return compute_loss(test_y, y_pred, self.cfg.loss), self.cfg.loss
