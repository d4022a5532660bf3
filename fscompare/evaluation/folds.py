"""
Fold planning for stratified repeated cross-validation.

Implements:
- choose_fold_count: largest fold count every class can support
- assign_folds: stratified shuffled assignment of samples to folds (StratifiedKFold)
- repeat_seed: per-repeat seed derived from the run seed

The fold count is chosen once per run and shared by every feature set, and
fold assignments depend only on the labels and the seed, so every feature set
is evaluated on identical partitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np
from sklearn.model_selection import StratifiedKFold

from fscompare.errors import DegenerateFoldError, InsufficientClassSizeError

DEFAULT_MAX_FOLDS = 10


@dataclass(frozen=True)
class FoldAssignment:
    """Partition of sample indices into folds.

    Attributes:
        n_folds: Number of folds.
        fold_of: Fold index (0 to n_folds-1) of every sample.
        seed: Seed the assignment was drawn with.
    """

    n_folds: int
    fold_of: np.ndarray
    seed: int

    @property
    def folds(self) -> List[np.ndarray]:
        """Sample indices of each fold, ascending."""
        return [np.flatnonzero(self.fold_of == k) for k in range(self.n_folds)]

    def train_test(self, fold: int) -> Tuple[np.ndarray, np.ndarray]:
        """(train_indices, test_indices) holding out ``fold``."""
        if not 0 <= fold < self.n_folds:
            raise IndexError(f"Fold {fold} out of range [0, {self.n_folds})")
        test = self.fold_of == fold
        return np.flatnonzero(~test), np.flatnonzero(test)

    def __iter__(self) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
        for k in range(self.n_folds):
            yield self.train_test(k)


def _class_sizes(labels: np.ndarray, num_classes: int) -> np.ndarray:
    labels = np.asarray(labels, dtype=int)
    return np.bincount(labels, minlength=num_classes + 1)[1:num_classes + 1]


def choose_fold_count(
    labels: np.ndarray,
    num_classes: int,
    max_folds: int = DEFAULT_MAX_FOLDS,
) -> int:
    """Choose the number of cross-validation folds.

    Returns the largest k <= max_folds such that every class 1..num_classes
    has at least k members.

    Args:
        labels: Integer class labels in [1, num_classes].
        num_classes: Number of classes.
        max_folds: Upper bound on the fold count (default 10).

    Returns:
        Fold count, at least 2.

    Raises:
        InsufficientClassSizeError: If some class has fewer than 2 members.
    """
    if max_folds < 2:
        raise ValueError(f"max_folds must be >= 2, got {max_folds}")
    sizes = _class_sizes(labels, num_classes)
    smallest = int(np.argmin(sizes))
    if sizes[smallest] < 2:
        raise InsufficientClassSizeError(smallest + 1, int(sizes[smallest]))
    return int(min(max_folds, sizes.min()))


def repeat_seed(random_seed: int, repeat: int) -> int:
    """Deterministic, distinct seed for one cross-validation repeat."""
    seq = np.random.SeedSequence([random_seed, repeat])
    return int(seq.generate_state(1)[0])


def assign_folds(labels: np.ndarray, n_folds: int, seed: int) -> FoldAssignment:
    """Assign samples to folds, stratified by class.

    Wraps StratifiedKFold with shuffling, so each fold keeps the class
    proportions of the full label vector.

    Args:
        labels: Class label of every sample.
        n_folds: Number of folds.
        seed: Random seed for the shuffle.

    Returns:
        FoldAssignment with disjoint folds covering every sample.

    Raises:
        DegenerateFoldError: If a fold receives no samples.
    """
    if n_folds < 2:
        raise ValueError(f"n_folds must be >= 2, got {n_folds}")
    labels = np.asarray(labels)
    skf = StratifiedKFold(n_splits=n_folds, shuffle=True, random_state=seed)

    fold_of = np.full(len(labels), -1, dtype=int)
    try:
        for k, (_, test_idx) in enumerate(skf.split(np.zeros((len(labels), 1)), labels)):
            fold_of[test_idx] = k
    except ValueError as exc:
        # too few samples (or class members) to fill every fold
        raise DegenerateFoldError(min(len(labels), n_folds - 1), n_folds) from exc

    counts = np.bincount(fold_of, minlength=n_folds)
    for k in range(n_folds):
        if counts[k] == 0:
            raise DegenerateFoldError(k, n_folds)

    fold_of.setflags(write=False)
    return FoldAssignment(n_folds=n_folds, fold_of=fold_of, seed=seed)
