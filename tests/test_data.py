import numpy as np
import pandas as pd
import pytest

from fscompare.config import SyntheticDataConfig
from fscompare.data.backend import ComparisonData, DataBackend
from fscompare.data.catalog import FeatureCatalog
from fscompare.data.csv_backend import CSVBackend, encode_groups, save_csv_bundle
from fscompare.data.synthetic_generator import SyntheticBackend, SyntheticGenerator
from fscompare.errors import MissingLabelsError, UnknownKeywordError


def _write_bundle(path, groups=None, keywords=None):
    path.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(np.arange(12, dtype=float).reshape(4, 3)).to_csv(
        path / "TS_DataMat.csv", header=False, index=False
    )
    pd.DataFrame({
        "ID": [7, 8, 9],
        "Name": ["f7", "f8", "f9"],
        "Keywords": keywords or ["lengthdep,locdep", "", "spreaddep"],
    }).to_csv(path / "Operations.csv", index=False)
    ts = pd.DataFrame({"Name": ["a", "b", "c", "d"]})
    if groups is not None:
        ts["Group"] = groups
    ts.to_csv(path / "TimeSeries.csv", index=False)
    return path


def test_unknown_keyword_fails_at_catalog_build():
    with pytest.raises(UnknownKeywordError) as exc_info:
        FeatureCatalog.from_records([1, 2], ["a", "b"], [["lengthdep"], ["lenghtdep"]])
    assert exc_info.value.feature_id == 2
    assert exc_info.value.keyword == "lenghtdep"


def test_extended_vocabulary_accepts_extra_tags():
    catalog = FeatureCatalog.from_records(
        [1], ["a"], [["entropy"]], vocabulary=["lengthdep", "entropy"]
    )
    assert catalog.ids_with_keyword("entropy") == [1]


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        FeatureCatalog.from_records([1, 1], ["a", "b"], [[], []])


def test_column_indices_follow_catalog_order(five_feature_catalog):
    assert five_feature_catalog.column_indices([4, 1]).tolist() == [3, 0]
    assert five_feature_catalog.in_catalog_order([5, 99, 2, 5]) == (2, 5)


def test_comparison_data_validates_shapes(five_feature_catalog):
    with pytest.raises(ValueError):
        ComparisonData(catalog=five_feature_catalog, X=np.zeros((4, 3)))
    with pytest.raises(ValueError):
        ComparisonData(catalog=five_feature_catalog, X=np.zeros((4, 5)), labels=np.array([1, 2]))
    with pytest.raises(ValueError):
        ComparisonData(catalog=five_feature_catalog, X=np.zeros((2, 5)), labels=np.array([0, 1]))


def test_comparison_data_is_read_only(small_dataset):
    with pytest.raises(ValueError):
        small_dataset.X[0, 0] = 1.0
    assert small_dataset.num_classes == 2
    assert small_dataset.class_counts() == {1: 12, 2: 12}
    assert small_dataset.group_name(2) == "signal"


def test_csv_backend_loads_bundle(tmp_path):
    backend = CSVBackend(_write_bundle(tmp_path / "bundle", groups=[1, 2, 1, 2]))
    data = backend.load()
    assert backend.has_labels()
    assert data.X.shape == (4, 3)
    assert data.catalog.ids == [7, 8, 9]
    assert data.catalog.ids_with_keyword("locdep") == [7]
    assert data.catalog.ids_with_keyword("spreaddep") == [9]
    assert data.labels.tolist() == [1, 2, 1, 2]
    assert data.name == "bundle"


def test_csv_backend_maps_string_groups(tmp_path):
    data = CSVBackend(_write_bundle(tmp_path / "b", groups=["rest", "motor", "rest", "motor"])).load()
    assert data.group_names == ["motor", "rest"]
    assert data.labels.tolist() == [2, 1, 2, 1]


def test_csv_backend_without_groups_has_no_labels(tmp_path):
    backend = CSVBackend(_write_bundle(tmp_path / "b"))
    assert not backend.has_labels()
    with pytest.raises(MissingLabelsError):
        backend.load().require_labels()


def test_csv_backend_rejects_unknown_keyword(tmp_path):
    bundle = _write_bundle(tmp_path / "b", groups=[1, 2, 1, 2], keywords=["lengthdep", "bogus", ""])
    with pytest.raises(UnknownKeywordError):
        CSVBackend(bundle)


def test_csv_backend_missing_file(tmp_path):
    bundle = _write_bundle(tmp_path / "b", groups=[1, 2, 1, 2])
    (bundle / "Operations.csv").unlink()
    with pytest.raises(FileNotFoundError):
        CSVBackend(bundle)


def test_encode_groups_rejects_missing_values():
    with pytest.raises(ValueError):
        encode_groups(pd.Series(["a", None, "b"]))


def test_synthetic_bundle_round_trip(tmp_path):
    cfg = SyntheticDataConfig(n_classes=3, samples_per_class=5, n_neutral=2)
    data = SyntheticGenerator(cfg).generate()
    loaded = CSVBackend(save_csv_bundle(data, tmp_path / "syn")).load()
    assert loaded.catalog == data.catalog
    np.testing.assert_allclose(loaded.X, data.X)
    assert loaded.labels.tolist() == data.labels.tolist()


def test_synthetic_generator_layout():
    cfg = SyntheticDataConfig(samples_per_class=10)
    data = SyntheticBackend(cfg).load()
    assert data.n_samples == 20
    assert data.n_features == 6 + 6 + 6 + 10 + 22
    assert len(data.catalog.ids_with_keyword("locdep")) == 6
    assert data.class_counts() == {1: 10, 2: 10}


def test_backend_contract_is_load_and_labels(five_feature_catalog):
    assert DataBackend.__abstractmethods__ == frozenset({"load", "has_labels"})
    assert not hasattr(DataBackend, "get_summary")
    # names are resolved through canonical sets, not the catalog
    assert not hasattr(five_feature_catalog, "ids_for_names")
