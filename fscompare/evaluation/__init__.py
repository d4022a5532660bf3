"""Cross-validated evaluation of feature subsets."""

from fscompare.evaluation.aggregation import AccuracyMatrix, aggregate_results
from fscompare.evaluation.cross_validation import (
    SubsetResult,
    check_feature_subsets,
    evaluate_feature_subset,
)
from fscompare.evaluation.folds import (
    FoldAssignment,
    assign_folds,
    choose_fold_count,
    repeat_seed,
)
from fscompare.evaluation.metrics import compute_loss

__all__ = [
    "AccuracyMatrix",
    "FoldAssignment",
    "SubsetResult",
    "aggregate_results",
    "assign_folds",
    "check_feature_subsets",
    "choose_fold_count",
    "compute_loss",
    "evaluate_feature_subset",
    "repeat_seed",
]
