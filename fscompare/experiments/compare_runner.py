"""
Feature-set comparison: one classifier, many feature subsets.

For a labeled dataset this runner:
- resolves every requested feature-set name (failing before any training on
  unknown names or empty sets)
- chooses the fold count once from the labels
- runs repeated stratified k-fold cross-validation per feature set
- aggregates the per-fold losses into an AccuracyMatrix

Feature sets are evaluated to completion one after another, or in parallel
with joblib when ``n_jobs > 1``. Every error aborts the run; no partial
comparison is returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from joblib import Parallel, delayed
from tqdm import tqdm

from fscompare.config import CompareConfig
from fscompare.data.backend import ComparisonData, DataBackend
from fscompare.data.csv_backend import CSVBackend
from fscompare.data.synthetic_generator import SyntheticBackend
from fscompare.evaluation.aggregation import AccuracyMatrix, aggregate_results
from fscompare.evaluation.cross_validation import (
    SubsetResult,
    check_feature_subsets,
    evaluate_feature_subset,
)
from fscompare.evaluation.folds import choose_fold_count
from fscompare.features.canonical import CanonicalFeatureSets
from fscompare.features.feature_sets import FeatureSubset, resolve_feature_sets
from fscompare.models.classifier import Classifier, SklearnClassifier


@dataclass(frozen=True)
class ComparisonResult:
    """Everything handed to reporting once a comparison completes."""

    matrix: AccuracyMatrix
    subsets: List[FeatureSubset]
    dataset: str
    config: CompareConfig


def build_backend(cfg: CompareConfig) -> DataBackend:
    """Create the data backend selected by ``cfg.dataset``."""
    if cfg.dataset == "synthetic":
        return SyntheticBackend(cfg.synthetic)
    return CSVBackend(cfg.dataset, keyword_vocabulary=cfg.keyword_vocabulary)


def build_canonical_sets(cfg: CompareConfig) -> CanonicalFeatureSets:
    if cfg.canonical_sets_path is None:
        return CanonicalFeatureSets()
    return CanonicalFeatureSets.from_yaml(cfg.canonical_sets_path)


def run_comparison(
    data: ComparisonData,
    cfg: CompareConfig,
    classifier: Optional[Classifier] = None,
    canonical: Optional[CanonicalFeatureSets] = None,
    show_progress: bool = True,
) -> ComparisonResult:
    """Compare classification performance across feature sets.

    Args:
        data: Dataset with group labels.
        cfg: Comparison configuration.
        classifier: Classifier capability. If None, builds one from
            ``cfg.classifier``.
        canonical: Canonical set provider. If None, uses
            ``cfg.canonical_sets_path`` or the built-in sets.
        show_progress: Whether to print progress and per-set summaries.

    Returns:
        ComparisonResult with the finalized AccuracyMatrix.

    Raises:
        MissingLabelsError: If the dataset has no group labels.
        UnknownFeatureSetError: If a feature-set name is not recognized.
        EmptyFeatureSubsetError: If a feature set resolves to no features.
        InsufficientClassSizeError: If a class has fewer than 2 samples.
        ClassifierEvaluationError: If the classifier fails on any fold.
        InconsistentMetricError: If results mix loss metrics.
    """
    labels = data.require_labels()
    classifier = classifier or SklearnClassifier(cfg.classifier)
    classifier_name = getattr(classifier, "name", type(classifier).__name__)
    canonical = canonical or build_canonical_sets(cfg)

    subsets = resolve_feature_sets(cfg.feature_sets, data.catalog, canonical)
    check_feature_subsets(subsets)

    num_classes = data.num_classes
    n_folds = choose_fold_count(labels, num_classes, cfg.max_folds)

    if show_progress:
        print(
            f"Training and evaluating a {num_classes}-class {classifier_name} classifier "
            f"using {n_folds}-fold cross validation with {cfg.n_repeats} repeats..."
        )
        for subset in subsets:
            if subset.n_dropped:
                print(
                    f"  Note: {subset.n_dropped} feature(s) of '{subset.name}' "
                    f"are not in this dataset and were skipped"
                )

    def _evaluate(subset: FeatureSubset) -> SubsetResult:
        return evaluate_feature_subset(
            subset,
            data,
            classifier,
            n_folds=n_folds,
            n_repeats=cfg.n_repeats,
            random_seed=cfg.random_seed,
        )

    if cfg.n_jobs == 1:
        results = []
        iterator = tqdm(subsets, desc="Feature sets") if show_progress else subsets
        for subset in iterator:
            result = _evaluate(subset)
            results.append(result)
            if show_progress:
                tqdm.write(_format_result_line(result))
    else:
        results = Parallel(n_jobs=cfg.n_jobs)(
            delayed(_evaluate)(subset) for subset in subsets
        )
        if show_progress:
            for result in results:
                print(_format_result_line(result))

    matrix = aggregate_results(
        results,
        n_folds=n_folds,
        n_repeats=cfg.n_repeats,
        num_classes=num_classes,
        classifier=classifier_name,
    )
    return ComparisonResult(matrix=matrix, subsets=subsets, dataset=data.name, config=cfg)


def run_comparison_from_config(
    cfg: CompareConfig,
    classifier: Optional[Classifier] = None,
    show_progress: bool = True,
) -> ComparisonResult:
    """Load the configured dataset and run the comparison."""
    backend = build_backend(cfg)
    return run_comparison(
        backend.load(), cfg, classifier=classifier, show_progress=show_progress
    )


def _format_result_line(result: SubsetResult) -> str:
    return (
        f"Classified using the '{result.name}' set ({result.n_features} features): "
        f"({result.n_folds} fold-average, {result.n_repeats} repeats) "
        f"average {result.loss_name} = {result.mean:.2f}%"
    )
