# nexergy/training/engines/lag_feature_engine.py
from __future__ import annotations

import pyarrow as pa

from nexergy.training.engines.columns import float_column, lag_column_names
from nexergy.utils.errors import ConfigError


class LagFeatureEngine:
    """
    LagFeatureEngine (pure logic, autoregressive features)

    Contract:
      - input rows MUST already be in time order (ReorderEngine first)
      - output has the same rows plus num_lags float64 columns
      - lag_k[i] = target[i - k] for i >= k, null otherwise
      - an existing lag_k column is replaced, never duplicated

    Naming:
      - lag_1 .. lag_<num_lags>
    """

    def execute(self, table: pa.Table, target_column: str, num_lags: int) -> pa.Table:
        if num_lags < 0:
            raise ConfigError(f"num_lags must be >= 0, got {num_lags}")

        target = float_column(table, target_column)
        n = len(target)

        out = table
        for k, name in enumerate(lag_column_names(num_lags), start=1):
            head = min(k, n)
            lagged = pa.concat_arrays(
                [
                    pa.nulls(head, type=pa.float64()),
                    target.slice(0, n - head),
                ]
            )

            if name in out.column_names:
                out = out.set_column(out.column_names.index(name), name, lagged)
            else:
                out = out.append_column(name, lagged)

        return out
