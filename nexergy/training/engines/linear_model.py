# nexergy/training/engines/linear_model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from nexergy.utils.errors import ConfigError


@dataclass(frozen=True)
class LinearModel:
    """
    LinearModel (immutable)

    Semantics:
    - weights[0] is the bias, weights[1:] follow feature_names order
    - weights live in standardized space
    - feature_means / feature_stds standardize raw inputs at inference
    - target_mean / target_std de-standardize predictions

    Invariants:
    - len(weights) == len(feature_names) + 1
    - len(feature_means) == len(feature_stds) == len(feature_names)
    - every std > 0
    """

    feature_names: Tuple[str, ...]
    weights: Tuple[float, ...]
    feature_means: Tuple[float, ...]
    feature_stds: Tuple[float, ...]
    target_mean: float
    target_std: float

    def __post_init__(self):
        p = len(self.feature_names)
        if len(self.weights) != p + 1:
            raise ConfigError(
                f"[LinearModel] expected {p + 1} weights, got {len(self.weights)}"
            )
        if len(self.feature_means) != p or len(self.feature_stds) != p:
            raise ConfigError(
                "[LinearModel] feature_means / feature_stds must match feature_names"
            )
        if any(not s > 0 for s in self.feature_stds) or not self.target_std > 0:
            raise ConfigError("[LinearModel] standard deviations must be > 0")

    @property
    def bias(self) -> float:
        return self.weights[0]

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------
    def predict_matrix(self, X_raw: np.ndarray) -> np.ndarray:
        """
        X_raw: (n, p) raw feature matrix, columns in feature_names order.
        """
        X_std = (X_raw - np.asarray(self.feature_means)) / np.asarray(self.feature_stds)
        y_std = self.weights[0] + X_std @ np.asarray(self.weights[1:])
        return self.target_mean + self.target_std * y_std
