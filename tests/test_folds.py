import numpy as np
import pytest

from fscompare.errors import DegenerateFoldError, InsufficientClassSizeError
from fscompare.evaluation.folds import assign_folds, choose_fold_count, repeat_seed


def test_fold_count_limited_by_smallest_class():
    labels = np.array([1, 1, 1, 2, 2, 2])
    assert choose_fold_count(labels, num_classes=2, max_folds=10) == 3


def test_fold_count_limited_by_max_folds():
    labels = np.repeat([1, 2, 3], 40)
    assert choose_fold_count(labels, num_classes=3) == 10
    assert choose_fold_count(labels, num_classes=3, max_folds=4) == 4


def test_singleton_class_raises():
    labels = np.array([1, 1, 1, 2, 2, 3])
    with pytest.raises(InsufficientClassSizeError) as exc_info:
        choose_fold_count(labels, num_classes=3)
    assert exc_info.value.label == 3
    assert exc_info.value.count == 1


def test_absent_class_raises():
    labels = np.array([1, 1, 3, 3])
    with pytest.raises(InsufficientClassSizeError) as exc_info:
        choose_fold_count(labels, num_classes=3)
    assert exc_info.value.label == 2


@pytest.mark.parametrize("seed", [0, 1, 123])
def test_fold_count_never_exceeds_class_size(seed):
    rng = np.random.default_rng(seed)
    labels = rng.integers(1, 5, size=60)
    sizes = np.bincount(labels, minlength=5)[1:]
    if sizes.min() < 2:
        pytest.skip("random labels produced a tiny class")
    k = choose_fold_count(labels, num_classes=4)
    assert all(size >= k for size in sizes)


def test_assignment_partitions_samples():
    labels = np.repeat([1, 2, 3], [7, 11, 5])
    assignment = assign_folds(labels, n_folds=5, seed=3)
    folds = assignment.folds
    assert len(folds) == 5
    combined = np.concatenate(folds)
    assert len(combined) == len(labels)
    assert set(combined.tolist()) == set(range(len(labels)))
    assert all(len(f) > 0 for f in folds)


def test_assignment_is_stratified_and_balanced():
    labels = np.repeat([1, 2], [20, 10])
    assignment = assign_folds(labels, n_folds=5, seed=0)
    for fold in assignment.folds:
        fold_labels = labels[fold]
        assert (fold_labels == 1).sum() == 4
        assert (fold_labels == 2).sum() == 2


def test_train_test_are_complementary():
    labels = np.repeat([1, 2], 6)
    assignment = assign_folds(labels, n_folds=3, seed=1)
    for train_idx, test_idx in assignment:
        assert not set(train_idx) & set(test_idx)
        assert len(train_idx) + len(test_idx) == len(labels)


def test_assignment_is_deterministic_per_seed():
    labels = np.repeat([1, 2, 3], 8)
    a = assign_folds(labels, 4, seed=7)
    b = assign_folds(labels, 4, seed=7)
    c = assign_folds(labels, 4, seed=8)
    assert np.array_equal(a.fold_of, b.fold_of)
    assert not np.array_equal(a.fold_of, c.fold_of)


def test_too_few_samples_gives_degenerate_fold():
    with pytest.raises(DegenerateFoldError) as exc_info:
        assign_folds(np.array([1, 2]), n_folds=3, seed=0)
    assert exc_info.value.fold == 2
    assert exc_info.value.n_folds == 3
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_repeat_seeds_differ_and_are_stable():
    seeds = [repeat_seed(42, r) for r in range(5)]
    assert len(set(seeds)) == 5
    assert seeds == [repeat_seed(42, r) for r in range(5)]
