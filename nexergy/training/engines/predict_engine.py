# nexergy/training/engines/predict_engine.py
from __future__ import annotations

import numpy as np
import pyarrow as pa

from nexergy.training.engines.columns import float_values
from nexergy.training.engines.linear_model import LinearModel


class PredictEngine:
    """
    Apply a fitted LinearModel to raw (non-standardized) feature rows.

    - missing feature value -> raw 0.0 (no null propagation)
    - one prediction per row, input order
    - stateless: same table in, same predictions out
    """

    def predict(self, model: LinearModel, table: pa.Table) -> pa.Array:
        n = table.num_rows
        X_raw = np.zeros((n, len(model.feature_names)), dtype=np.float64)
        for j, name in enumerate(model.feature_names):
            values, _ = float_values(table, name)
            X_raw[:, j] = values

        return pa.array(model.predict_matrix(X_raw), type=pa.float64())
