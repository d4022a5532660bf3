import pytest

from fscompare.data.catalog import DependencyKeyword, FeatureCatalog
from fscompare.errors import UnknownFeatureSetError
from fscompare.features.canonical import CATCH22_NAMES, CanonicalFeatureSets
from fscompare.features.feature_sets import (
    FEATURE_SET_SPECS,
    ResolutionRule,
    get_feature_set_spec,
    known_feature_sets,
    resolve_feature_set,
    resolve_feature_sets,
)

DEPENDENCY_PAIRS = [
    ("lengthDependent", "notLengthDependent"),
    ("locationDependent", "notLocationDependent"),
    ("spreadDependent", "notSpreadDependent"),
]


def test_length_dependent_split(five_feature_catalog):
    dep = resolve_feature_set("lengthDependent", five_feature_catalog)
    not_dep = resolve_feature_set("notLengthDependent", five_feature_catalog)
    assert dep.feature_ids == (1, 4)
    assert not_dep.feature_ids == (2, 3, 5)


def test_location_dependent_split(five_feature_catalog):
    assert resolve_feature_set("locationDependent", five_feature_catalog).feature_ids == (2, 4)
    assert resolve_feature_set("notLocationDependent", five_feature_catalog).feature_ids == (1, 3, 5)


@pytest.mark.parametrize("dep_name,not_dep_name", DEPENDENCY_PAIRS)
def test_dependency_split_partitions_catalog(five_feature_catalog, dep_name, not_dep_name):
    all_ids = set(resolve_feature_set("all", five_feature_catalog).feature_ids)
    dep = set(resolve_feature_set(dep_name, five_feature_catalog).feature_ids)
    not_dep = set(resolve_feature_set(not_dep_name, five_feature_catalog).feature_ids)
    assert dep | not_dep == all_ids
    assert not dep & not_dep


def test_resolution_is_deterministic(five_feature_catalog):
    for name in known_feature_sets():
        first = resolve_feature_set(name, five_feature_catalog)
        second = resolve_feature_set(name, five_feature_catalog)
        assert first == second


def test_unknown_name_raises_with_name(five_feature_catalog):
    with pytest.raises(UnknownFeatureSetError) as exc_info:
        resolve_feature_set("bogus", five_feature_catalog)
    assert exc_info.value.name == "bogus"
    assert "bogus" in str(exc_info.value)


def test_missing_keyword_resolves_to_empty_subset(five_feature_catalog):
    subset = resolve_feature_set("spreadDependent", five_feature_catalog)
    assert subset.is_empty
    assert len(subset) == 0
    assert resolve_feature_set("notSpreadDependent", five_feature_catalog).feature_ids == (1, 2, 3, 4, 5)


def test_canonical_set_drops_absent_features():
    names = ["x", CATCH22_NAMES[3], "y", CATCH22_NAMES[0]]
    catalog = FeatureCatalog.from_records(
        ids=[10, 20, 30, 40], names=names, keywords=[[], [], [], []]
    )
    subset = resolve_feature_set("catch22", catalog)
    # catalog order, not canonical order
    assert subset.feature_ids == (20, 40)
    assert subset.n_dropped == 20


def test_canonical_set_accepts_integer_ids(five_feature_catalog):
    canonical = CanonicalFeatureSets({"curated": [5, 3, 99]})
    subset = resolve_feature_set("curated", five_feature_catalog, canonical)
    assert subset.feature_ids == (3, 5)
    assert subset.n_dropped == 1
    assert get_feature_set_spec("curated", canonical).rule is ResolutionRule.CANONICAL


def test_canonical_sets_from_yaml(tmp_path, five_feature_catalog):
    path = tmp_path / "sets.yaml"
    path.write_text("mine:\n  - A\n  - E\n")
    canonical = CanonicalFeatureSets.from_yaml(path)
    assert "catch22" in canonical
    assert resolve_feature_set("mine", five_feature_catalog, canonical).feature_ids == (1, 5)


def test_dependency_specs_use_keyword_enum():
    spec = FEATURE_SET_SPECS["notSpreadDependent"]
    assert spec.rule is ResolutionRule.WITHOUT_KEYWORD
    assert spec.keyword is DependencyKeyword.SPREAD


def test_resolve_many_keeps_order_and_rejects_duplicates(five_feature_catalog):
    subsets = resolve_feature_sets(["lengthDependent", "all"], five_feature_catalog)
    assert [s.name for s in subsets] == ["lengthDependent", "all"]
    with pytest.raises(ValueError):
        resolve_feature_sets(["all", "all"], five_feature_catalog)
    with pytest.raises(UnknownFeatureSetError):
        resolve_feature_sets(["all", "bogus"], five_feature_catalog)


@pytest.mark.parametrize("name", ["all", "lengthDependent", "notSpreadDependent"])
def test_canonical_yaml_rejects_builtin_rule_names(tmp_path, name):
    path = tmp_path / "sets.yaml"
    path.write_text(f"{name}:\n  - A\n")
    with pytest.raises(ValueError, match=name):
        CanonicalFeatureSets.from_yaml(path)
