"""
Data loading for feature-set comparisons.

This module provides:
- FeatureCatalog: Ordered feature metadata with validated keyword tags
- ComparisonData: Read-only feature matrix, catalog and labels for one run
- DataBackend: Abstract base class for data sources
- CSVBackend: Loads from static CSV bundle (TS_DataMat, Operations, TimeSeries)
- SyntheticGenerator: Labeled synthetic data with tagged feature groups
"""

from fscompare.data.backend import ComparisonData, DataBackend
from fscompare.data.catalog import DependencyKeyword, Feature, FeatureCatalog
from fscompare.data.csv_backend import CSVBackend, save_csv_bundle
from fscompare.data.synthetic_generator import SyntheticBackend, SyntheticGenerator

__all__ = [
    "CSVBackend",
    "ComparisonData",
    "DataBackend",
    "DependencyKeyword",
    "Feature",
    "FeatureCatalog",
    "SyntheticBackend",
    "SyntheticGenerator",
    "save_csv_bundle",
]
