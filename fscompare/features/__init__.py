"""Feature-set definitions and resolution."""

from fscompare.features.canonical import CATCH22_NAMES, CanonicalFeatureSets
from fscompare.features.feature_sets import (
    FEATURE_SET_SPECS,
    FeatureSetSpec,
    FeatureSubset,
    ResolutionRule,
    get_feature_set_spec,
    known_feature_sets,
    resolve_feature_set,
    resolve_feature_sets,
)

__all__ = [
    "CATCH22_NAMES",
    "CanonicalFeatureSets",
    "FEATURE_SET_SPECS",
    "FeatureSetSpec",
    "FeatureSubset",
    "ResolutionRule",
    "get_feature_set_spec",
    "known_feature_sets",
    "resolve_feature_set",
    "resolve_feature_sets",
]
