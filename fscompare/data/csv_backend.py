"""
CSV-based data backend for loading static data bundles.

Loads a bundle of three files from one directory:
- TS_DataMat.csv: feature matrix, no header, one row per sample,
  one column per row of Operations.csv
- Operations.csv: feature metadata with columns ID, Name, Keywords
  (Keywords is a comma-separated tag list, may be empty)
- TimeSeries.csv: sample metadata with column Name and, once labeled, Group
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from fscompare.data.backend import ComparisonData, DataBackend
from fscompare.data.catalog import FeatureCatalog

DATA_MATRIX_FILE = "TS_DataMat.csv"
OPERATIONS_FILE = "Operations.csv"
TIME_SERIES_FILE = "TimeSeries.csv"


def parse_keywords(cell: object) -> List[str]:
    """Split a Keywords cell into stripped, non-empty tags."""
    if cell is None or (isinstance(cell, float) and np.isnan(cell)):
        return []
    return [kw.strip() for kw in str(cell).split(",") if kw.strip()]


def encode_groups(groups: pd.Series) -> Tuple[np.ndarray, List[str]]:
    """Convert a Group column into integer labels starting at 1.

    Integer groups are used as-is. Any other values are mapped to 1..K in
    sorted order.

    Returns:
        (labels, group_names): group_names[k-1] is the name of class k.
    """
    if groups.isna().any():
        raise ValueError(
            f"Group column has {int(groups.isna().sum())} missing value(s)"
        )
    if pd.api.types.is_integer_dtype(groups):
        labels = groups.to_numpy(dtype=int)
        names = [str(k) for k in range(1, int(labels.max()) + 1)]
        return labels, names
    names = sorted(str(g) for g in groups.unique())
    lookup = {name: k + 1 for k, name in enumerate(names)}
    labels = np.array([lookup[str(g)] for g in groups], dtype=int)
    return labels, names


class CSVBackend(DataBackend):
    """Backend that loads from static CSV bundle."""

    def __init__(
        self,
        data_dir: str | Path,
        keyword_vocabulary: Optional[Iterable[str]] = None,
    ):
        """Initialize CSV backend.

        Args:
            data_dir: Directory containing TS_DataMat.csv, Operations.csv,
                TimeSeries.csv.
            keyword_vocabulary: Allowed keyword tags. If None, uses the
                catalog default vocabulary.
        """
        self.data_dir = Path(data_dir)
        self.keyword_vocabulary = (
            list(keyword_vocabulary) if keyword_vocabulary is not None else None
        )
        self._data: Optional[ComparisonData] = None

        self._load_data()

    def _load_data(self) -> None:
        """Load the three CSVs and validate alignment."""
        mat_path = self.data_dir / DATA_MATRIX_FILE
        ops_path = self.data_dir / OPERATIONS_FILE
        ts_path = self.data_dir / TIME_SERIES_FILE

        # Check files exist
        for path in [mat_path, ops_path, ts_path]:
            if not path.exists():
                raise FileNotFoundError(f"Required file not found: {path}")

        ops = pd.read_csv(ops_path)
        time_series = pd.read_csv(ts_path)
        X = pd.read_csv(mat_path, header=None).to_numpy(dtype=np.float64)

        for col in ["ID", "Name"]:
            if col not in ops.columns:
                raise ValueError(f"{OPERATIONS_FILE} must have '{col}' column")
        if "Name" not in time_series.columns:
            raise ValueError(f"{TIME_SERIES_FILE} must have 'Name' column")

        if X.shape != (len(time_series), len(ops)):
            raise ValueError(
                f"{DATA_MATRIX_FILE} has shape {X.shape}, expected "
                f"({len(time_series)}, {len(ops)}) from {TIME_SERIES_FILE} "
                f"and {OPERATIONS_FILE}"
            )

        keywords = (
            [parse_keywords(c) for c in ops["Keywords"]]
            if "Keywords" in ops.columns
            else [[] for _ in range(len(ops))]
        )
        catalog = FeatureCatalog.from_records(
            ids=ops["ID"].astype(int).tolist(),
            names=ops["Name"].astype(str).tolist(),
            keywords=keywords,
            vocabulary=self.keyword_vocabulary,
        )

        labels = None
        group_names: List[str] = []
        if "Group" in time_series.columns:
            labels, group_names = encode_groups(time_series["Group"])

        self._data = ComparisonData(
            catalog=catalog,
            X=X,
            labels=labels,
            group_names=group_names,
            name=self.data_dir.name,
        )

    def load(self) -> ComparisonData:
        return self._data

    def has_labels(self) -> bool:
        return self._data.has_labels()


def save_csv_bundle(data: ComparisonData, data_dir: str | Path) -> Path:
    """Write a dataset as a CSV bundle readable by CSVBackend.

    Args:
        data: Dataset to write.
        data_dir: Output directory (created if missing).

    Returns:
        The output directory.
    """
    out = Path(data_dir)
    out.mkdir(parents=True, exist_ok=True)

    pd.DataFrame(data.X).to_csv(out / DATA_MATRIX_FILE, header=False, index=False)
    pd.DataFrame({
        "ID": data.catalog.ids,
        "Name": data.catalog.names,
        "Keywords": [",".join(sorted(f.keywords)) for f in data.catalog],
    }).to_csv(out / OPERATIONS_FILE, index=False)

    ts = pd.DataFrame({"Name": [f"ts{i}" for i in range(data.n_samples)]})
    if data.has_labels():
        if data.group_names:
            ts["Group"] = [data.group_name(int(k)) for k in data.labels]
        else:
            ts["Group"] = data.labels
    ts.to_csv(out / TIME_SERIES_FILE, index=False)
    return out
