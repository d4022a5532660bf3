"""
Synthetic labeled feature matrix with tagged feature groups.

Generates a catalog made of length-, location- and spread-dependent feature
groups, untagged neutral features and (optionally) the catch22 features, plus
Gaussian feature values. Only the groups listed in ``informative`` differ
between classes, so a comparison run should show which feature sets carry
the class signal.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np

from fscompare.config import SyntheticDataConfig
from fscompare.data.backend import ComparisonData, DataBackend
from fscompare.data.catalog import DependencyKeyword, FeatureCatalog
from fscompare.features.canonical import CATCH22_NAMES


class SyntheticGenerator:
    """
    Generates a synthetic dataset for feature-set comparisons.

    Feature values are drawn from N(0, noise_sigma^2). For informative groups
    the mean is shifted by ``(label - 1) * class_shift``.
    """

    def __init__(self, cfg: SyntheticDataConfig):
        self.cfg = cfg
        self.rng = np.random.default_rng(cfg.random_seed)

    def _build_catalog(self) -> Tuple[FeatureCatalog, Dict[str, List[int]]]:
        """
        Build the feature catalog and the column indices of each group.

        Returns:
            (catalog, groups): groups maps group name to column indices.
        """
        group_specs = [
            ("length", self.cfg.n_length_dependent, "len", [DependencyKeyword.LENGTH.value]),
            ("location", self.cfg.n_location_dependent, "loc", [DependencyKeyword.LOCATION.value]),
            ("spread", self.cfg.n_spread_dependent, "spread", [DependencyKeyword.SPREAD.value]),
            ("neutral", self.cfg.n_neutral, "neutral", []),
        ]

        ids, names, keywords = [], [], []
        groups: Dict[str, List[int]] = {}
        for group, n, prefix, tags in group_specs:
            groups[group] = []
            for k in range(n):
                groups[group].append(len(ids))
                ids.append(len(ids) + 1)
                names.append(f"{prefix}_{k}")
                keywords.append(tags)

        groups["catch22"] = []
        if self.cfg.include_catch22:
            for name in CATCH22_NAMES:
                groups["catch22"].append(len(ids))
                ids.append(len(ids) + 1)
                names.append(name)
                keywords.append([])

        catalog = FeatureCatalog.from_records(ids, names, keywords)
        return catalog, groups

    def _sample_labels(self) -> np.ndarray:
        """Balanced labels 1..n_classes in random order."""
        labels = np.repeat(
            np.arange(1, self.cfg.n_classes + 1), self.cfg.samples_per_class
        )
        return self.rng.permutation(labels)

    def generate(self) -> ComparisonData:
        """
        Generate the full dataset.

        Returns:
            ComparisonData with catalog, feature matrix and labels.
        """
        if self.cfg.n_classes < 2:
            raise ValueError(f"n_classes must be >= 2, got {self.cfg.n_classes}")

        catalog, groups = self._build_catalog()
        labels = self._sample_labels()

        X = self.rng.normal(0.0, self.cfg.noise_sigma, size=(len(labels), len(catalog)))
        shift = (labels - 1)[:, None] * self.cfg.class_shift
        for group in self.cfg.informative:
            cols = groups[group]
            if cols:
                X[:, cols] += shift

        return ComparisonData(
            catalog=catalog,
            X=X,
            labels=labels,
            group_names=[f"class{c}" for c in range(1, self.cfg.n_classes + 1)],
            name="synthetic",
        )


class SyntheticBackend(DataBackend):
    """Backend serving one generated synthetic dataset."""

    def __init__(self, cfg: SyntheticDataConfig | None = None):
        self.cfg = cfg or SyntheticDataConfig()
        self._data = SyntheticGenerator(self.cfg).generate()

    def load(self) -> ComparisonData:
        return self._data

    def has_labels(self) -> bool:
        return self._data.has_labels()
