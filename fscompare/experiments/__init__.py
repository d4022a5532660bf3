"""
Comparison runners.

This module provides:
- compare_runner: classification accuracy of one classifier across feature sets
"""
