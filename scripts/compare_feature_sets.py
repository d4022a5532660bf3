#!/usr/bin/env python
"""
Compare classification performance across feature sets.

Trains the same classifier on each feature set (all features, catch22,
length/location/spread-dependent features and their complements) with
repeated stratified k-fold cross-validation, and reports the fold losses.

Usage:
    python scripts/compare_feature_sets.py
    python scripts/compare_feature_sets.py --dataset data/my_bundle --classifier svm_linear
    python scripts/compare_feature_sets.py --feature-sets all catch22 lengthDependent --n-repeats 5

Results saved to experiments/compare_{timestamp}/.
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fscompare.config import ClassifierConfig, CompareConfig
from fscompare.errors import FeatureSetComparisonError
from fscompare.experiments.compare_runner import run_comparison_from_config
from fscompare.reporting import format_summary, save_comparison


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Compare classification performance across feature sets"
    )
    parser.add_argument(
        "--config", type=str, help="YAML config (default: configs/compare.yaml)"
    )
    parser.add_argument(
        "--dataset", type=str, help="CSV bundle directory or 'synthetic' (overrides config)"
    )
    parser.add_argument(
        "--classifier", type=str, help="Classifier name (overrides config)"
    )
    parser.add_argument(
        "--feature-sets", nargs="+", help="Feature-set names to compare (overrides config)"
    )
    parser.add_argument(
        "--n-repeats", type=int, help="Cross-validation repeats (overrides config)"
    )
    parser.add_argument(
        "--max-folds", type=int, help="Maximum number of folds (overrides config)"
    )
    parser.add_argument(
        "--seed", type=int, help="Random seed (overrides config)"
    )
    parser.add_argument(
        "--n-jobs", type=int, help="Feature sets evaluated in parallel (overrides config)"
    )
    parser.add_argument(
        "--name", type=str, default="", help="Optional output directory name suffix"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Hide progress output"
    )
    args = parser.parse_args()

    cfg = CompareConfig.from_yaml(args.config)

    # CLI overrides
    overrides = {}
    if args.dataset is not None:
        overrides["dataset"] = args.dataset
    if args.feature_sets is not None:
        overrides["feature_sets"] = args.feature_sets
    if args.n_repeats is not None:
        overrides["n_repeats"] = args.n_repeats
    if args.max_folds is not None:
        overrides["max_folds"] = args.max_folds
    if args.seed is not None:
        overrides["random_seed"] = args.seed
    if args.n_jobs is not None:
        overrides["n_jobs"] = args.n_jobs
    if args.classifier is not None:
        overrides["classifier"] = ClassifierConfig(
            **{**cfg.classifier.model_dump(), "name": args.classifier}
        )
    cfg = CompareConfig(**{**cfg.model_dump(), **overrides})

    print("=" * 70)
    print("Feature-set comparison")
    print("=" * 70)
    print(f"  Dataset: {cfg.dataset}")
    print(f"  Classifier: {cfg.classifier.name} ({cfg.classifier.loss})")
    print(f"  Feature sets: {cfg.feature_sets}")
    print(f"  Repeats: {cfg.n_repeats}, max folds: {cfg.max_folds}, seed: {cfg.random_seed}")
    print("=" * 70)

    try:
        result = run_comparison_from_config(cfg, show_progress=not args.quiet)
    except FeatureSetComparisonError as exc:
        print(f"\nComparison aborted: {exc}", file=sys.stderr)
        return 1

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    exp_name = f"compare_{timestamp}"
    if args.name:
        exp_name += f"_{args.name}"
    exp_dir = PROJECT_ROOT / "experiments" / exp_name

    save_comparison(
        result.matrix, exp_dir, config=cfg.model_dump(), dataset=result.dataset
    )

    print()
    print(format_summary(result.matrix))
    print(f"\n{'=' * 70}")
    print(f"Results saved to: {exp_dir}")
    print(f"{'=' * 70}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
