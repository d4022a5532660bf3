"""Cross-validated comparison of classification performance across feature sets."""

__version__ = "0.1.0"
