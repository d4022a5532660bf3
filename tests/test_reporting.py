import json

import numpy as np

from fscompare.evaluation.aggregation import aggregate_results
from fscompare.evaluation.cross_validation import SubsetResult
from fscompare.reporting import format_summary, load_comparison, save_comparison


def _matrix():
    results = [
        SubsetResult("all", 10, (80.0, 90.0, 70.0, 80.0), "balanced_accuracy", 2, 2),
        SubsetResult("catch22", 22, (95.0, 85.0, 90.0, 90.0), "balanced_accuracy", 2, 2),
    ]
    return aggregate_results(results, num_classes=2, classifier="svm_linear")


def test_save_and_load(tmp_path):
    matrix = _matrix()
    path = save_comparison(matrix, tmp_path / "out", config={"n_repeats": 2}, dataset="toy")

    payload = json.loads(path.read_text())
    assert payload["dataset"] == "toy"
    assert payload["config"] == {"n_repeats": 2}
    assert (tmp_path / "out" / "fold_losses.csv").exists()
    assert (tmp_path / "out" / "summary.csv").exists()

    loaded = load_comparison(tmp_path / "out")
    assert loaded.feature_sets == matrix.feature_sets
    assert loaded.n_features == matrix.n_features
    assert loaded.loss_name == "balanced_accuracy"
    assert loaded.classifier == "svm_linear"
    np.testing.assert_allclose(loaded.values, matrix.values)


def test_format_summary_orders_by_mean():
    text = format_summary(_matrix())
    lines = text.splitlines()
    assert "2-class classification with svm_linear" in lines[0]
    body = [line for line in lines[3:]]
    assert body[0].strip().startswith("catch22")
    assert body[1].strip().startswith("all")
