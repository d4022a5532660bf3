"""
Exceptions raised by the feature-set comparison engine.

Every error is fatal for a comparison run: nothing is retried and no partial
comparison is reported. Each exception carries the offending name or index so
the caller can tell the user exactly what failed.
"""

from __future__ import annotations

from typing import Optional


class FeatureSetComparisonError(Exception):
    """Base class for all comparison errors."""


class MissingLabelsError(FeatureSetComparisonError):
    """Raised when the dataset has no group labels assigned."""

    def __init__(self, dataset: str = "") -> None:
        self.dataset = dataset
        where = f" in dataset '{dataset}'" if dataset else ""
        super().__init__(
            f"Group labels not assigned to samples{where}. "
            "Add a 'Group' column before comparing feature sets."
        )

    def __reduce__(self):
        return (type(self), (self.dataset,))


class UnknownFeatureSetError(FeatureSetComparisonError, ValueError):
    """Raised for a feature-set name outside the recognized vocabulary."""

    def __init__(self, name: str, known: Optional[list] = None) -> None:
        self.name = name
        self.known = list(known or [])
        msg = f"Unknown feature set: '{name}'"
        if self.known:
            msg += f". Supported: {self.known}"
        super().__init__(msg)

    def __reduce__(self):
        return (type(self), (self.name, self.known))


class UnknownKeywordError(FeatureSetComparisonError, ValueError):
    """Raised when a feature carries a keyword tag outside the vocabulary."""

    def __init__(self, feature_id: int, keyword: str) -> None:
        self.feature_id = feature_id
        self.keyword = keyword
        super().__init__(
            f"Feature {feature_id} has unknown keyword '{keyword}'"
        )

    def __reduce__(self):
        return (type(self), (self.feature_id, self.keyword))


class EmptyFeatureSubsetError(FeatureSetComparisonError):
    """Raised when a resolved feature set contains no features."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Feature set '{name}' contains no features in this catalog; "
            "cannot classify on zero features"
        )

    def __reduce__(self):
        return (type(self), (self.name,))


class InsufficientClassSizeError(FeatureSetComparisonError):
    """Raised when a class is too small for at least 2-fold cross-validation."""

    def __init__(self, label: int, count: int) -> None:
        self.label = label
        self.count = count
        super().__init__(
            f"Class {label} has {count} member(s); "
            "every class needs at least 2 for cross-validation"
        )

    def __reduce__(self):
        return (type(self), (self.label, self.count))


class DegenerateFoldError(FeatureSetComparisonError):
    """Raised when a fold assignment leaves a fold without samples."""

    def __init__(self, fold: int, n_folds: int) -> None:
        self.fold = fold
        self.n_folds = n_folds
        super().__init__(f"Fold {fold} of {n_folds} received no samples")

    def __reduce__(self):
        return (type(self), (self.fold, self.n_folds))


class ClassifierEvaluationError(FeatureSetComparisonError):
    """Wraps a failure inside one fold's train/score call."""

    def __init__(
        self,
        feature_set: str,
        fold: int,
        repeat: int,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.feature_set = feature_set
        self.fold = fold
        self.repeat = repeat
        self.cause = cause
        detail = f": {type(cause).__name__}: {cause}" if cause is not None else ""
        super().__init__(
            f"Classifier failed on feature set '{feature_set}' "
            f"(repeat {repeat}, fold {fold}){detail}"
        )

    def __reduce__(self):
        return (type(self), (self.feature_set, self.fold, self.repeat, self.cause))


class InconsistentMetricError(FeatureSetComparisonError):
    """Raised when results mix loss metrics or have mismatched row lengths."""
