"""
Feature catalog: the ordered feature metadata a feature matrix is aligned to.

Each feature has a unique integer ID, a name, and a set of keyword tags
(e.g. "lengthdep", "locdep", "spreaddep"). Tags are validated against an
explicit vocabulary when the catalog is built, so a misspelled tag fails
immediately instead of silently producing an empty feature set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from fscompare.errors import UnknownKeywordError


class DependencyKeyword(str, Enum):
    """Keyword tags marking features that depend on a time-series property."""

    LENGTH = "lengthdep"
    LOCATION = "locdep"
    SPREAD = "spreaddep"


DEFAULT_VOCABULARY: FrozenSet[str] = frozenset(
    [kw.value for kw in DependencyKeyword] + ["raw"]
)


@dataclass(frozen=True)
class Feature:
    """A single feature (column of the data matrix)."""

    id: int
    name: str
    keywords: FrozenSet[str] = frozenset()

    def has_keyword(self, keyword: str) -> bool:
        return keyword in self.keywords


@dataclass(frozen=True)
class FeatureCatalog:
    """Ordered, immutable collection of features.

    Column ``j`` of the data matrix holds the feature at position ``j``.

    Attributes:
        features: Features in column order.
        vocabulary: Keyword tags allowed on any feature.
    """

    features: Tuple[Feature, ...]
    vocabulary: FrozenSet[str] = DEFAULT_VOCABULARY
    _position: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate unique IDs and keyword vocabulary."""
        position = {}
        for j, feat in enumerate(self.features):
            if feat.id in position:
                raise ValueError(f"Duplicate feature ID {feat.id} in catalog")
            position[feat.id] = j
            for kw in feat.keywords:
                if kw not in self.vocabulary:
                    raise UnknownKeywordError(feat.id, kw)
        object.__setattr__(self, "_position", position)

    @classmethod
    def from_records(
        cls,
        ids: Sequence[int],
        names: Sequence[str],
        keywords: Sequence[Iterable[str]],
        vocabulary: Optional[Iterable[str]] = None,
    ) -> FeatureCatalog:
        """Build a catalog from parallel sequences of IDs, names and tags."""
        if not (len(ids) == len(names) == len(keywords)):
            raise ValueError(
                f"ids/names/keywords length mismatch: "
                f"{len(ids)}/{len(names)}/{len(keywords)}"
            )
        features = tuple(
            Feature(int(i), str(n), frozenset(kws))
            for i, n, kws in zip(ids, names, keywords)
        )
        vocab = frozenset(vocabulary) if vocabulary is not None else DEFAULT_VOCABULARY
        return cls(features=features, vocabulary=vocab)

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def __contains__(self, feature_id: object) -> bool:
        return feature_id in self._position

    @property
    def ids(self) -> List[int]:
        """All feature IDs in catalog order."""
        return [f.id for f in self.features]

    @property
    def names(self) -> List[str]:
        return [f.name for f in self.features]

    def ids_with_keyword(self, keyword: str) -> List[int]:
        """IDs of features tagged with ``keyword``, in catalog order."""
        return [f.id for f in self.features if f.has_keyword(keyword)]

    def ids_without_keyword(self, keyword: str) -> List[int]:
        """IDs of features not tagged with ``keyword``, in catalog order."""
        return [f.id for f in self.features if not f.has_keyword(keyword)]

    def in_catalog_order(self, feature_ids: Iterable[int]) -> Tuple[int, ...]:
        """Deduplicate and sort IDs by catalog position, dropping unknown IDs."""
        present = {i for i in feature_ids if i in self._position}
        return tuple(sorted(present, key=self._position.__getitem__))

    def column_indices(self, feature_ids: Iterable[int]) -> np.ndarray:
        """Data-matrix column indices of the given feature IDs.

        Raises:
            KeyError: If an ID is not in the catalog.
        """
        return np.array([self._position[i] for i in feature_ids], dtype=int)
