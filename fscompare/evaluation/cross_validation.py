"""
Repeated stratified k-fold cross-validation of one feature subset.

For each repeat a fresh fold assignment is drawn from a seed derived from the
run seed, so every feature subset sees identical partitions. Each fold trains
the injected classifier on the other folds and records one loss value.
Losses are returned repeat-major: all folds of repeat 0, then repeat 1, ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from fscompare.data.backend import ComparisonData
from fscompare.errors import (
    ClassifierEvaluationError,
    EmptyFeatureSubsetError,
    InconsistentMetricError,
)
from fscompare.evaluation.folds import assign_folds, repeat_seed
from fscompare.features.feature_sets import FeatureSubset

if TYPE_CHECKING:
    from fscompare.models.classifier import Classifier


@dataclass(frozen=True)
class SubsetResult:
    """Cross-validation losses of one feature subset.

    Attributes:
        name: Feature-set name.
        n_features: Number of features in the subset.
        losses: n_folds * n_repeats loss values, repeat-major.
        loss_name: Name of the loss metric, identical for every fold.
        n_folds: Folds per repeat.
        n_repeats: Number of repeats.
    """

    name: str
    n_features: int
    losses: Tuple[float, ...]
    loss_name: str
    n_folds: int
    n_repeats: int

    @property
    def mean(self) -> float:
        return sum(self.losses) / len(self.losses)

    def repeat_losses(self, repeat: int) -> Tuple[float, ...]:
        """Losses of every fold in one repeat."""
        start = repeat * self.n_folds
        return self.losses[start:start + self.n_folds]


def check_feature_subsets(subsets: Sequence[FeatureSubset]) -> None:
    """Fail on the first subset with no features.

    Raises:
        EmptyFeatureSubsetError: Naming the empty subset.
    """
    for subset in subsets:
        if subset.is_empty:
            raise EmptyFeatureSubsetError(subset.name)


def evaluate_feature_subset(
    subset: FeatureSubset,
    data: ComparisonData,
    classifier: "Classifier",
    n_folds: int,
    n_repeats: int,
    random_seed: int = 42,
) -> SubsetResult:
    """Cross-validate a classifier on one feature subset.

    Args:
        subset: Resolved feature subset (non-empty).
        data: Dataset with feature matrix, catalog and labels.
        classifier: Object with ``train_and_score``.
        n_folds: Folds per repeat, shared by every subset in a run.
        n_repeats: Number of independent repeats.
        random_seed: Run-level seed; repeat r uses ``repeat_seed(random_seed, r)``.

    Returns:
        SubsetResult with n_folds * n_repeats losses.

    Raises:
        EmptyFeatureSubsetError: If the subset has no features.
        ClassifierEvaluationError: If training or scoring fails on any fold.
        InconsistentMetricError: If folds report different loss names.
    """
    check_feature_subsets([subset])
    y = data.require_labels()
    X = data.X[:, data.catalog.column_indices(subset.feature_ids)]

    losses: List[float] = []
    loss_name: Optional[str] = None

    for repeat in range(n_repeats):
        assignment = assign_folds(y, n_folds, repeat_seed(random_seed, repeat))
        for fold, (train_idx, test_idx) in enumerate(assignment):
            try:
                loss, fold_loss_name = classifier.train_and_score(
                    X[train_idx], y[train_idx], X[test_idx], y[test_idx]
                )
            except Exception as exc:
                raise ClassifierEvaluationError(subset.name, fold, repeat, exc) from exc

            if loss_name is None:
                loss_name = fold_loss_name
            elif fold_loss_name != loss_name:
                raise InconsistentMetricError(
                    f"Feature set '{subset.name}' reported loss '{fold_loss_name}' "
                    f"on repeat {repeat} fold {fold}, expected '{loss_name}'"
                )
            losses.append(float(loss))

    return SubsetResult(
        name=subset.name,
        n_features=len(subset),
        losses=tuple(losses),
        loss_name=loss_name,
        n_folds=n_folds,
        n_repeats=n_repeats,
    )
