"""
XGBoost model wrapper for multiclass feature-set comparison.

Provides a simple interface for XGBoost classification on integer class
labels that start at 1 (or any other non-contiguous label values).
"""

from __future__ import annotations

import numpy as np
import xgboost as xgb
from sklearn.preprocessing import LabelEncoder
from sklearn.utils.class_weight import compute_sample_weight

from fscompare.config import ClassifierConfig


class XGBoostModel:
    """XGBoost classifier wrapper.

    Wraps xgboost.XGBClassifier. XGBoost needs labels 0..K-1, so labels are
    encoded on fit and decoded on predict.
    """

    def __init__(self, cfg: ClassifierConfig) -> None:
        self.cfg = cfg
        self._model: xgb.XGBClassifier | None = None
        self._encoder: LabelEncoder | None = None

    def fit(self, X: np.ndarray, y: np.ndarray) -> None:
        """Train the model on labeled data.

        Args:
            X: Feature matrix of shape (n_samples, n_features).
            y: Class labels of shape (n_samples,).
        """
        self._encoder = LabelEncoder()
        y_enc = self._encoder.fit_transform(y)
        n_classes = len(self._encoder.classes_)

        self._model = xgb.XGBClassifier(
            n_estimators=self.cfg.n_estimators,
            max_depth=self.cfg.max_depth,
            learning_rate=self.cfg.learning_rate,
            random_state=self.cfg.random_seed,
            objective="binary:logistic" if n_classes <= 2 else "multi:softprob",
        )
        sample_weight = (
            compute_sample_weight("balanced", y_enc)
            if self.cfg.class_weight_balanced
            else None
        )
        self._model.fit(X, y_enc, sample_weight=sample_weight, verbose=False)

    def predict(self, X: np.ndarray) -> np.ndarray:
        """Return the predicted class label of each sample.

        Raises:
            RuntimeError: If model has not been fitted.
        """
        if self._model is None:
            raise RuntimeError("Model has not been fitted. Call fit() first.")
        return self._encoder.inverse_transform(self._model.predict(X).astype(int))
