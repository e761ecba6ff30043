# nexergy/training/engines/columns.py
from __future__ import annotations

from typing import Tuple

import numpy as np
import pyarrow as pa
import pyarrow.compute as pc

from nexergy.utils.errors import SchemaError

LAG_PREFIX = "lag_"


def lag_column_names(num_lags: int) -> list[str]:
    """lag_1 .. lag_<num_lags>"""
    return [f"{LAG_PREFIX}{k}" for k in range(1, num_lags + 1)]


def require_column(table: pa.Table, name: str) -> pa.ChunkedArray:
    if name not in table.column_names:
        raise SchemaError(
            f"column '{name}' not found; columns: {table.column_names}"
        )
    return table.column(name)


def is_numeric(type_: pa.DataType) -> bool:
    return pa.types.is_floating(type_) or pa.types.is_integer(type_)


def is_text(type_: pa.DataType) -> bool:
    return pa.types.is_string(type_) or pa.types.is_large_string(type_)


def float_column(table: pa.Table, name: str) -> pa.Array:
    """
    Numeric column as a single float64 Arrow array (nulls preserved).
    """
    col = require_column(table, name)
    if not is_numeric(col.type) and not pa.types.is_null(col.type):
        raise SchemaError(f"column '{name}' must be numeric, got {col.type}")

    return pc.cast(col, pa.float64()).combine_chunks()


def float_values(table: pa.Table, name: str) -> Tuple[np.ndarray, np.ndarray]:
    """
    Returns:
        values: float64 ndarray, nulls filled with 0.0
        valid:  bool ndarray, False where the source value was null
    """
    arr = float_column(table, name)
    return to_nullable_numpy(arr)


def to_nullable_numpy(arr: pa.Array) -> Tuple[np.ndarray, np.ndarray]:
    valid = pc.is_valid(arr).to_numpy(zero_copy_only=False).astype(bool)
    values = pc.fill_null(arr, 0.0).to_numpy(zero_copy_only=False).astype(np.float64)
    return values, valid
