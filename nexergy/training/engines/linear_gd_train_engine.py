# nexergy/training/engines/linear_gd_train_engine.py
from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np
import pyarrow as pa

from nexergy import logs
from nexergy.training.engines.columns import float_values
from nexergy.training.engines.linear_model import LinearModel
from nexergy.utils.errors import ConfigError


class LinearGDTrainEngine:
    """
    LinearGDTrainEngine (batch, standardized least squares)

    Semantics:
    - z-score target and every feature on the training set
      (mean / population std over non-null values)
    - fit bias + weights by full-batch gradient descent on MSE
    - exactly `epochs` updates: no regularization, no decay, no early stop

    Null handling:
    - null target  -> standardized target 0 (still counted in n)
    - null feature -> raw 0.0 before standardization
    """

    def train(
        self,
        *,
        table: pa.Table,
        target_column: str,
        feature_columns: Sequence[str],
        learning_rate: float,
        epochs: int,
    ) -> LinearModel:
        self._validate(feature_columns, learning_rate, epochs)

        y, y_valid = float_values(table, target_column)
        n = len(y)
        p = len(feature_columns)

        X_raw = np.zeros((n, p), dtype=np.float64)
        feat_means: list[float] = []
        feat_stds: list[float] = []
        for j, name in enumerate(feature_columns):
            values, valid = float_values(table, name)
            mean, std = self.moments(values, valid)
            X_raw[:, j] = values
            feat_means.append(mean)
            feat_stds.append(std)

        y_mean, y_std = self.moments(y, y_valid)

        X = (X_raw - np.asarray(feat_means)) / np.asarray(feat_stds)
        z = np.where(y_valid, (y - y_mean) / y_std, 0.0)

        w = np.zeros(p + 1, dtype=np.float64)

        if n == 0:
            logs.warning("[LinearGDTrainEngine] empty training table, weights stay at zero")
        else:
            scale = learning_rate / n
            for _ in range(epochs):
                residual = w[0] + X @ w[1:] - z
                g0 = residual.sum()
                g = X.T @ residual
                w[0] -= scale * g0
                w[1:] -= scale * g

        logs.debug(
            f"[LinearGDTrainEngine] n={n} p={p} epochs={epochs} "
            f"lr={learning_rate} bias={w[0]:.6f}"
        )

        return LinearModel(
            feature_names=tuple(feature_columns),
            weights=tuple(float(v) for v in w),
            feature_means=tuple(feat_means),
            feature_stds=tuple(feat_stds),
            target_mean=y_mean,
            target_std=y_std,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    @staticmethod
    def _validate(feature_columns: Sequence[str], learning_rate: float, epochs: int) -> None:
        if len(feature_columns) == 0:
            raise ConfigError("[LinearGDTrainEngine] no features provided")
        if not math.isfinite(learning_rate) or learning_rate < 0:
            raise ConfigError(
                f"[LinearGDTrainEngine] learning_rate must be finite and >= 0, got {learning_rate}"
            )
        if epochs < 0:
            raise ConfigError(f"[LinearGDTrainEngine] epochs must be >= 0, got {epochs}")

    @staticmethod
    def moments(values: np.ndarray, valid: np.ndarray) -> Tuple[float, float]:
        """
        Mean and population std over valid entries.

        - no valid entry      -> mean 0.0
        - fewer than 2 valid  -> std 1.0
        - std == 0 (or NaN)   -> std 1.0
        """
        observed = values[valid]
        cnt = observed.size

        mean = float(observed.sum() / cnt) if cnt > 0 else 0.0
        if cnt > 1:
            std = math.sqrt(float(((observed - mean) ** 2).sum()) / cnt)
        else:
            std = 1.0

        if not std > 0:
            std = 1.0
        return mean, std
