"""
Feature-set resolution: named feature sets -> concrete feature IDs.

Every recognized name maps to a FeatureSetSpec holding one ResolutionRule:
- ALL: every feature in the catalog
- WITH_KEYWORD: features tagged with a dependency keyword
- WITHOUT_KEYWORD: the complement of WITH_KEYWORD within the catalog
- CANONICAL: a fixed curated list (e.g. catch22) filtered to the catalog

Resolution is a pure function of the name, the catalog and the canonical
provider. An empty result is allowed here; evaluation rejects it later.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from fscompare.data.catalog import DependencyKeyword, FeatureCatalog
from fscompare.errors import UnknownFeatureSetError
from fscompare.features.canonical import CanonicalFeatureSets


class ResolutionRule(Enum):
    ALL = "all"
    WITH_KEYWORD = "with_keyword"
    WITHOUT_KEYWORD = "without_keyword"
    CANONICAL = "canonical"


@dataclass(frozen=True)
class FeatureSetSpec:
    """A named feature set and the rule that resolves it."""

    name: str
    rule: ResolutionRule
    keyword: Optional[DependencyKeyword] = None

    def __post_init__(self) -> None:
        needs_keyword = self.rule in (ResolutionRule.WITH_KEYWORD, ResolutionRule.WITHOUT_KEYWORD)
        if needs_keyword != (self.keyword is not None):
            raise ValueError(
                f"Feature set '{self.name}': rule {self.rule.value} "
                f"{'requires' if needs_keyword else 'does not take'} a keyword"
            )


@dataclass(frozen=True)
class FeatureSubset:
    """A resolved feature set.

    Attributes:
        name: Feature-set name.
        feature_ids: Feature IDs in catalog order.
        n_dropped: Canonical references absent from the catalog (0 for
            keyword-based sets).
    """

    name: str
    feature_ids: Tuple[int, ...]
    n_dropped: int = 0

    def __len__(self) -> int:
        return len(self.feature_ids)

    @property
    def is_empty(self) -> bool:
        return len(self.feature_ids) == 0


def _dependency_specs() -> Dict[str, FeatureSetSpec]:
    prefixes = {
        DependencyKeyword.LENGTH: "length",
        DependencyKeyword.LOCATION: "location",
        DependencyKeyword.SPREAD: "spread",
    }
    specs = {}
    for keyword, prefix in prefixes.items():
        dep = f"{prefix}Dependent"
        not_dep = f"not{prefix.capitalize()}Dependent"
        specs[dep] = FeatureSetSpec(dep, ResolutionRule.WITH_KEYWORD, keyword)
        specs[not_dep] = FeatureSetSpec(not_dep, ResolutionRule.WITHOUT_KEYWORD, keyword)
    return specs


FEATURE_SET_SPECS: Dict[str, FeatureSetSpec] = {
    "all": FeatureSetSpec("all", ResolutionRule.ALL),
    **_dependency_specs(),
}


def known_feature_sets(canonical: Optional[CanonicalFeatureSets] = None) -> List[str]:
    """All recognized feature-set names."""
    canonical = canonical or CanonicalFeatureSets()
    return list(FEATURE_SET_SPECS) + [n for n in canonical.names if n not in FEATURE_SET_SPECS]


def get_feature_set_spec(
    name: str,
    canonical: Optional[CanonicalFeatureSets] = None,
) -> FeatureSetSpec:
    """Look up the spec for a feature-set name.

    Raises:
        UnknownFeatureSetError: If the name is not recognized.
    """
    if name in FEATURE_SET_SPECS:
        return FEATURE_SET_SPECS[name]
    canonical = canonical or CanonicalFeatureSets()
    if name in canonical:
        return FeatureSetSpec(name, ResolutionRule.CANONICAL)
    raise UnknownFeatureSetError(name, known_feature_sets(canonical))


def resolve_feature_set(
    name: str,
    catalog: FeatureCatalog,
    canonical: Optional[CanonicalFeatureSets] = None,
) -> FeatureSubset:
    """Resolve a feature-set name into the IDs of its features.

    Args:
        name: Feature-set name, e.g. "all", "lengthDependent", "catch22".
        catalog: Feature catalog of the current dataset.
        canonical: Canonical set provider. If None, uses the built-in sets.

    Returns:
        FeatureSubset with IDs in catalog order.

    Raises:
        UnknownFeatureSetError: If the name is not recognized.
    """
    canonical = canonical or CanonicalFeatureSets()
    spec = get_feature_set_spec(name, canonical)

    if spec.rule is ResolutionRule.ALL:
        return FeatureSubset(name, tuple(catalog.ids))
    if spec.rule is ResolutionRule.WITH_KEYWORD:
        return FeatureSubset(name, tuple(catalog.ids_with_keyword(spec.keyword.value)))
    if spec.rule is ResolutionRule.WITHOUT_KEYWORD:
        return FeatureSubset(name, tuple(catalog.ids_without_keyword(spec.keyword.value)))

    ids, n_dropped = canonical.ids_for(name, catalog)
    return FeatureSubset(name, catalog.in_catalog_order(ids), n_dropped=n_dropped)


def resolve_feature_sets(
    names: Sequence[str],
    catalog: FeatureCatalog,
    canonical: Optional[CanonicalFeatureSets] = None,
) -> List[FeatureSubset]:
    """Resolve several feature sets, keeping the requested order.

    Every name is validated before anything is returned, so a bad name
    fails the whole request.

    Raises:
        ValueError: If a name is requested twice.
        UnknownFeatureSetError: If any name is not recognized.
    """
    seen = set()
    for name in names:
        if name in seen:
            raise ValueError(f"Feature set '{name}' requested more than once")
        seen.add(name)
    canonical = canonical or CanonicalFeatureSets()
    return [resolve_feature_set(name, catalog, canonical) for name in names]
