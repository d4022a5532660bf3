"""
Canonical feature sets: fixed, curated feature lists such as catch22.

A canonical set is an ordered list of feature names or integer feature IDs.
Entries that are not present in the current catalog are dropped when the set
is resolved, since catalogs differ between datasets.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Mapping, Sequence, Tuple, Union

from fscompare.config import load_yaml

if TYPE_CHECKING:
    from fscompare.data.catalog import FeatureCatalog

FeatureRef = Union[int, str]

# catch22: 22 canonical time-series characteristics
CATCH22_NAMES: Tuple[str, ...] = (
    "DN_HistogramMode_5",
    "DN_HistogramMode_10",
    "CO_f1ecac",
    "CO_FirstMin_ac",
    "CO_HistogramAMI_even_2_5",
    "CO_trev_1_num",
    "MD_hrv_classic_pnn40",
    "SB_BinaryStats_mean_longstretch1",
    "SB_TransitionMatrix_3ac_sumdiagcov",
    "PD_PeriodicityWang_th0_01",
    "CO_Embed2_Dist_tau_d_expfit_meandiff",
    "IN_AutoMutualInfoStats_40_gaussian_fmmi",
    "FC_LocalSimple_mean1_tauresrat",
    "DN_OutlierInclude_p_001_mdrmd",
    "DN_OutlierInclude_n_001_mdrmd",
    "SP_Summaries_welch_rect_area_5_1",
    "SB_BinaryStats_diff_longstretch0",
    "SB_MotifThree_quantile_hh",
    "SC_FluctAnal_2_rsrangefit_50_1_logi_prop_r1",
    "SC_FluctAnal_2_dfa_50_1_2_logi_prop_r1",
    "SP_Summaries_welch_rect_centroid",
    "FC_LocalSimple_mean3_stderr",
)

BUILTIN_CANONICAL_SETS: Dict[str, Tuple[FeatureRef, ...]] = {
    "catch22": CATCH22_NAMES,
}


class CanonicalFeatureSets:
    """Provider of named, fixed feature lists.

    Args:
        sets: Mapping from canonical set name to an ordered list of feature
            references (integer IDs or feature names). If None, uses the
            built-in sets.
    """

    def __init__(self, sets: Mapping[str, Sequence[FeatureRef]] | None = None):
        source = BUILTIN_CANONICAL_SETS if sets is None else sets
        self._sets: Dict[str, Tuple[FeatureRef, ...]] = {
            name: tuple(refs) for name, refs in source.items()
        }

    @classmethod
    def from_yaml(cls, path: Path | str, include_builtin: bool = True) -> CanonicalFeatureSets:
        """Load canonical sets from a YAML mapping of name -> list of features.

        Args:
            path: YAML file path.
            include_builtin: Keep the built-in sets; YAML entries with the
                same name replace them.
        """
        loaded = load_yaml(path)
        if not isinstance(loaded, dict):
            raise ValueError(f"{path} must contain a mapping of set name to feature list")
        # deferred: feature_sets imports this module
        from fscompare.features.feature_sets import FEATURE_SET_SPECS

        sets: Dict[str, Sequence[FeatureRef]] = (
            dict(BUILTIN_CANONICAL_SETS) if include_builtin else {}
        )
        for name, refs in loaded.items():
            if not isinstance(refs, list):
                raise ValueError(f"Canonical set '{name}' must be a list, got {type(refs).__name__}")
            if str(name) in FEATURE_SET_SPECS:
                raise ValueError(
                    f"Canonical set name '{name}' clashes with a built-in feature set"
                )
            sets[str(name)] = refs
        return cls(sets)

    @property
    def names(self) -> List[str]:
        return list(self._sets)

    def __contains__(self, name: object) -> bool:
        return name in self._sets

    def references(self, name: str) -> Tuple[FeatureRef, ...]:
        """The raw ordered feature references of a canonical set."""
        return self._sets[name]

    def ids_for(self, name: str, catalog: FeatureCatalog) -> Tuple[List[int], int]:
        """Resolve a canonical set against a catalog.

        Returns:
            (feature_ids, n_dropped): IDs present in the catalog, in canonical
            order, and the number of references absent from the catalog.
        """
        by_name = {f.name: f.id for f in catalog}
        ids: List[int] = []
        n_dropped = 0
        for ref in self._sets[name]:
            if isinstance(ref, str) and ref in by_name:
                ids.append(by_name[ref])
            elif isinstance(ref, int) and not isinstance(ref, bool) and ref in catalog:
                ids.append(ref)
            else:
                n_dropped += 1
        return ids, n_dropped
