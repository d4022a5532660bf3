# tests/conftest.py
# Ensure project root is importable as a module during pytest runs
import pathlib
import sys

import numpy as np
import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fscompare.data.backend import ComparisonData  # noqa: E402
from fscompare.data.catalog import FeatureCatalog  # noqa: E402


@pytest.fixture
def five_feature_catalog():
    # A:lengthdep  B:locdep  C:-  D:lengthdep+locdep  E:-
    return FeatureCatalog.from_records(
        ids=[1, 2, 3, 4, 5],
        names=["A", "B", "C", "D", "E"],
        keywords=[["lengthdep"], ["locdep"], [], ["lengthdep", "locdep"], []],
    )


@pytest.fixture
def small_dataset(five_feature_catalog):
    # 2 classes x 12 samples; column B (locdep) separates the classes
    rng = np.random.default_rng(0)
    labels = np.repeat([1, 2], 12)
    X = rng.normal(size=(24, 5))
    X[:, 1] += (labels - 1) * 4.0
    return ComparisonData(
        catalog=five_feature_catalog,
        X=X,
        labels=labels,
        group_names=["noise", "signal"],
        name="toy",
    )


class ConstantClassifier:
    """Returns a fixed loss per fold and records the shapes it was given."""

    def __init__(self, loss=50.0, loss_name="accuracy"):
        self.loss = loss
        self.loss_name = loss_name
        self.calls = []

    def train_and_score(self, train_X, train_y, test_X, test_y):
        self.calls.append((train_X.shape, test_X.shape, tuple(np.sort(test_y))))
        return self.loss, self.loss_name


@pytest.fixture
def constant_classifier():
    return ConstantClassifier()


@pytest.fixture
def classifier_factory():
    return ConstantClassifier
