"""
Abstract data backend interface and comparison data contract.

Defines the contract that both the CSV and synthetic backends must fulfill,
so the comparison runner never depends on where the data came from.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from fscompare.data.catalog import FeatureCatalog
from fscompare.errors import MissingLabelsError


@dataclass(frozen=True)
class ComparisonData:
    """Read-only dataset shared by every feature-set evaluation in a run.

    Attributes:
        catalog: Feature metadata; column j of ``X`` is ``catalog.features[j]``.
        X: Feature matrix (n_samples, n_features).
        labels: Integer class labels in [1, num_classes], or None when the
            samples have no group labels assigned.
        group_names: Human-readable name of each class, index 0 for class 1.
        name: Dataset identifier used in messages.
    """

    catalog: FeatureCatalog
    X: np.ndarray
    labels: Optional[np.ndarray] = None
    group_names: List[str] = field(default_factory=list)
    name: str = ""

    def __post_init__(self) -> None:
        """Validate shapes and labels, then freeze the arrays."""
        X = np.array(self.X, dtype=np.float64)
        if X.ndim != 2:
            raise ValueError(f"X must be 2-D, got shape {X.shape}")
        if X.shape[1] != len(self.catalog):
            raise ValueError(
                f"X must have {len(self.catalog)} columns (one per catalog "
                f"feature), got shape {X.shape}"
            )
        X.setflags(write=False)
        object.__setattr__(self, "X", X)

        if self.labels is not None:
            y = np.asarray(self.labels)
            if y.ndim != 1 or len(y) != X.shape[0]:
                raise ValueError(
                    f"labels must be 1-D with {X.shape[0]} entries, got shape {y.shape}"
                )
            if not np.issubdtype(y.dtype, np.integer):
                if not np.all(np.equal(np.mod(y, 1), 0)):
                    raise ValueError("labels must be integer class labels")
            y = y.astype(int)
            if len(y) and y.min() < 1:
                raise ValueError(
                    f"labels must start at 1, got minimum {y.min()}"
                )
            y.setflags(write=False)
            object.__setattr__(self, "labels", y)

    @property
    def n_samples(self) -> int:
        return self.X.shape[0]

    @property
    def n_features(self) -> int:
        return self.X.shape[1]

    def has_labels(self) -> bool:
        """Whether group labels have been assigned to the samples."""
        return self.labels is not None

    def require_labels(self) -> np.ndarray:
        """Return the labels, failing fast if none are assigned.

        Raises:
            MissingLabelsError: If the dataset has no group labels.
        """
        if self.labels is None:
            raise MissingLabelsError(self.name)
        return self.labels

    @property
    def num_classes(self) -> int:
        """Number of classes, taken as the largest label value."""
        return int(self.require_labels().max())

    def class_counts(self) -> Dict[int, int]:
        """Members per class 1..num_classes (absent classes count 0)."""
        y = self.require_labels()
        counts = np.bincount(y, minlength=self.num_classes + 1)
        return {c: int(counts[c]) for c in range(1, self.num_classes + 1)}

    def group_name(self, label: int) -> str:
        if 0 < label <= len(self.group_names):
            return self.group_names[label - 1]
        return str(label)


class DataBackend(ABC):
    """Abstract base class for data backends."""

    @abstractmethod
    def load(self) -> ComparisonData:
        """Return the full dataset for a comparison run."""
        pass

    @abstractmethod
    def has_labels(self) -> bool:
        """Whether this sample set has group labels assigned."""
        pass

