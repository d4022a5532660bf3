"""
Support vector machine classifiers (linear and RBF kernels).

The linear SVM is the default classifier for feature-set comparisons.
"""

from __future__ import annotations

import numpy as np
from sklearn.svm import SVC

from fscompare.config import ClassifierConfig


class SVMModel:
    """SVC wrapper; multiclass problems are handled one-vs-one by sklearn."""

    def __init__(self, cfg: ClassifierConfig | None = None, kernel: str = "linear") -> None:
        self.cfg = cfg or ClassifierConfig()
        self.kernel = kernel
        self._model = SVC(
            kernel=kernel,
            C=self.cfg.C,
            class_weight="balanced" if self.cfg.class_weight_balanced else None,
            random_state=self.cfg.random_seed,
        )

    def fit(self, X: np.ndarray, y: np.ndarray) -> None:
        self._model.fit(X, y)

    def predict(self, X: np.ndarray) -> np.ndarray:
        return self._model.predict(X)
