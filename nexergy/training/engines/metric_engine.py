# nexergy/training/engines/metric_engine.py
from __future__ import annotations

import math
from typing import Dict, Tuple

import numpy as np
import pyarrow as pa

from nexergy.training.engines.columns import to_nullable_numpy


def _aligned_errors(y_true, y_pred) -> np.ndarray:
    """
    Pairwise y_true - y_pred over the common prefix,
    restricted to positions where both sides are non-null.
    """
    t_vals, t_valid = _as_nullable(y_true)
    p_vals, p_valid = _as_nullable(y_pred)

    n = min(len(t_vals), len(p_vals))
    both = t_valid[:n] & p_valid[:n]
    return t_vals[:n][both] - p_vals[:n][both]


def _as_nullable(values) -> Tuple[np.ndarray, np.ndarray]:
    if isinstance(values, pa.ChunkedArray):
        values = values.combine_chunks()
    if not isinstance(values, pa.Array):
        values = pa.array(list(values), type=pa.float64())
    return to_nullable_numpy(values.cast(pa.float64()))


def mean_absolute_error(y_true, y_pred) -> float:
    """MAE over present pairs; NaN when there is none."""
    err = _aligned_errors(y_true, y_pred)
    if err.size == 0:
        return float("nan")
    return float(np.abs(err).sum() / err.size)


def root_mean_squared_error(y_true, y_pred) -> float:
    """RMSE over present pairs; NaN when there is none."""
    err = _aligned_errors(y_true, y_pred)
    if err.size == 0:
        return float("nan")
    return math.sqrt(float((err * err).sum()) / err.size)


class RegressionMetricEngine:
    """
    RegressionMetricEngine (pure)

    Contract:
    - inputs are Arrow arrays or plain sequences (None = missing)
    - both metrics share the same pairing rule
    """

    def evaluate(self, *, y_true, y_pred) -> Dict[str, float]:
        return {
            "mae": mean_absolute_error(y_true, y_pred),
            "rmse": root_mean_squared_error(y_true, y_pred),
        }
