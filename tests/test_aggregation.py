import numpy as np
import pytest

from fscompare.errors import InconsistentMetricError
from fscompare.evaluation.aggregation import aggregate_results
from fscompare.evaluation.cross_validation import SubsetResult


def _result(name, losses, loss_name="accuracy", n_folds=2, n_repeats=2, n_features=3):
    return SubsetResult(
        name=name,
        n_features=n_features,
        losses=tuple(losses),
        loss_name=loss_name,
        n_folds=n_folds,
        n_repeats=n_repeats,
    )


def test_matrix_rows_and_means():
    matrix = aggregate_results([
        _result("all", [80, 90, 70, 80], n_features=10),
        _result("catch22", [60, 60, 50, 70], n_features=22),
    ])
    assert matrix.values.shape == (2, 4)
    assert matrix.feature_sets == ("all", "catch22")
    assert matrix.n_features == (10, 22)
    assert matrix.loss_name == "accuracy"
    np.testing.assert_allclose(matrix.means, [80.0, 60.0])
    np.testing.assert_allclose(matrix.row("catch22"), [60, 60, 50, 70])


def test_matrix_is_read_only():
    matrix = aggregate_results([_result("all", [1, 2, 3, 4])])
    with pytest.raises(ValueError):
        matrix.values[0, 0] = 5.0


def test_mixed_loss_names_raise():
    with pytest.raises(InconsistentMetricError):
        aggregate_results([
            _result("all", [80, 90, 70, 80], loss_name="accuracy"),
            _result("catch22", [60, 60, 50, 70], loss_name="f1"),
        ])


def test_row_length_mismatch_raises():
    with pytest.raises(InconsistentMetricError):
        aggregate_results([_result("all", [80, 90, 70])])
    with pytest.raises(InconsistentMetricError):
        aggregate_results([_result("all", [80, 90, 70, 80])], n_folds=3, n_repeats=2)


def test_duplicate_and_empty_inputs_raise():
    with pytest.raises(InconsistentMetricError):
        aggregate_results([])
    with pytest.raises(InconsistentMetricError):
        aggregate_results([_result("all", [1, 2, 3, 4]), _result("all", [1, 2, 3, 4])])


def test_summary_and_long_frame():
    matrix = aggregate_results([
        _result("all", [80, 90, 70, 80]),
        _result("lengthDependent", [50, 50, 50, 50]),
    ])
    summary = matrix.summary()
    assert list(summary["feature_set"]) == ["all", "lengthDependent"]
    assert summary.loc[1, "std"] == 0.0

    long = matrix.to_long_frame()
    assert len(long) == 8
    first = long[long["feature_set"] == "all"]
    assert list(first["repeat"]) == [0, 0, 1, 1]
    assert list(first["fold"]) == [0, 1, 0, 1]
    assert list(first["accuracy"]) == [80, 90, 70, 80]
