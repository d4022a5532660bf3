"""
Configuration management using pydantic.

All config classes use pydantic for validation and YAML loading.
Config files are stored in configs/ directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


# Base path for config files
CONFIGS_DIR = Path(__file__).parent.parent / "configs"

DEFAULT_FEATURE_SETS = [
    "all",
    "catch22",
    "notLocationDependent",
    "locationDependent",
    "notLengthDependent",
    "lengthDependent",
    "notSpreadDependent",
    "spreadDependent",
]

DEFAULT_KEYWORD_VOCABULARY = ["lengthdep", "locdep", "spreaddep", "raw"]


def load_yaml(path: Path | str) -> dict[str, Any]:
    """Load a YAML file and return as dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


class ClassifierConfig(BaseModel):
    """Configuration for the classifier trained on every fold.

    The same classifier (and hyperparameters) is used for every feature set so
    that accuracy differences reflect the features only.
    """

    name: Literal["svm_linear", "svm_rbf", "logistic", "knn", "xgboost"] = "svm_linear"
    loss: Literal["accuracy", "balanced_accuracy", "f1_macro"] = "balanced_accuracy"
    standardize: bool = True  # z-score features, fitted on the training fold
    class_weight_balanced: bool = True  # reweight classes by inverse frequency
    C: float = 1.0
    n_neighbors: int = 3
    max_iter: int = 10000
    # xgboost
    n_estimators: int = 100
    max_depth: int = 3
    learning_rate: float = 0.1
    random_seed: int = 42

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> ClassifierConfig:
        """Load config from YAML file.

        Args:
            path: Path to YAML file. If None, uses configs/classifier.yaml.
        """
        if path is None:
            path = CONFIGS_DIR / "classifier.yaml"
        return cls(**load_yaml(path))


class SyntheticDataConfig(BaseModel):
    """Configuration for the synthetic labeled feature matrix.

    Each class shifts a chosen group of features by ``class_shift`` per class
    step, so only feature sets containing that group separate the classes.
    """

    random_seed: int = 42
    n_classes: int = 2
    samples_per_class: int = 30
    n_length_dependent: int = 6
    n_location_dependent: int = 6
    n_spread_dependent: int = 6
    n_neutral: int = 10
    include_catch22: bool = True
    informative: List[Literal["length", "location", "spread", "neutral", "catch22"]] = Field(
        default=["location"]
    )
    class_shift: float = 1.5
    noise_sigma: float = 1.0

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> SyntheticDataConfig:
        """Load config from YAML file.

        Args:
            path: Path to YAML file. If None, uses configs/synthetic_data.yaml.
        """
        if path is None:
            path = CONFIGS_DIR / "synthetic_data.yaml"
        return cls(**load_yaml(path))


class CompareConfig(BaseModel):
    """Configuration for a feature-set comparison run.

    Defaults: the 8-set battery, 2 repeats, at most 10 folds.
    """

    dataset: str = "synthetic"  # CSV bundle directory, or "synthetic"
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    feature_sets: List[str] = Field(default_factory=lambda: list(DEFAULT_FEATURE_SETS))
    n_repeats: int = 2
    max_folds: int = 10
    random_seed: int = 42
    n_jobs: int = 1  # >1 evaluates feature sets in parallel
    keyword_vocabulary: List[str] = Field(
        default_factory=lambda: list(DEFAULT_KEYWORD_VOCABULARY)
    )
    canonical_sets_path: Optional[str] = None  # None: built-in canonical sets
    synthetic: SyntheticDataConfig = Field(default_factory=SyntheticDataConfig)

    @field_validator("n_repeats")
    @classmethod
    def _check_repeats(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"n_repeats must be >= 1, got {v}")
        return v

    @field_validator("max_folds")
    @classmethod
    def _check_max_folds(cls, v: int) -> int:
        if v < 2:
            raise ValueError(f"max_folds must be >= 2, got {v}")
        return v

    @field_validator("random_seed")
    @classmethod
    def _check_random_seed(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"random_seed must be >= 0, got {v}")
        return v

    @field_validator("n_jobs")
    @classmethod
    def _check_n_jobs(cls, v: int) -> int:
        if v == 0:
            raise ValueError("n_jobs must be positive, or negative to count back from the CPU count")
        return v

    @field_validator("feature_sets")
    @classmethod
    def _check_feature_sets(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("feature_sets must name at least one feature set")
        return v

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> CompareConfig:
        """Load config from YAML file.

        Args:
            path: Path to YAML file. If None, uses configs/compare.yaml.
        """
        if path is None:
            path = CONFIGS_DIR / "compare.yaml"
        return cls(**load_yaml(path))
