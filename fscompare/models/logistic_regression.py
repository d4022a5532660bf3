"""
Multinomial logistic regression classifier.

Used as a fast linear baseline for feature-set comparisons.
"""

from __future__ import annotations

import numpy as np
from sklearn.linear_model import LogisticRegression

from fscompare.config import ClassifierConfig


class LogisticRegressionModel:
    """L2-regularized logistic regression over all classes."""

    def __init__(self, cfg: ClassifierConfig | None = None):
        """Initialize model with config.

        Args:
            cfg: Configuration. Uses defaults if None.
        """
        self.cfg = cfg or ClassifierConfig(name="logistic")
        self._model = LogisticRegression(
            C=self.cfg.C,
            max_iter=self.cfg.max_iter,
            class_weight="balanced" if self.cfg.class_weight_balanced else None,
            random_state=self.cfg.random_seed,
        )

    def fit(self, X: np.ndarray, y: np.ndarray) -> None:
        """Fit model on training data.

        Args:
            X: Feature matrix (n_samples, n_features).
            y: Integer class labels.
        """
        self._model.fit(X, y)

    def predict(self, X: np.ndarray) -> np.ndarray:
        """Predict the class label of each sample."""
        return self._model.predict(X)
