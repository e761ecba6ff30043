# nexergy/training/engines/row_filter_engine.py
from __future__ import annotations

from typing import Sequence

import pyarrow as pa
import pyarrow.compute as pc

from nexergy.training.engines.columns import float_column, require_column


class RowFilterEngine:
    """
    RowFilterEngine (pure logic, two-stage row sanitization)

    Stage (a) drop_nulls:
        drop rows holding a null in any listed column (any type)
    Stage (b) drop_non_finite:
        drop rows where any listed numeric column is NaN / +-inf / null

    Guarantees:
        - rows are only removed, never reordered
        - row count never increases
    """

    def execute(
        self,
        table: pa.Table,
        *,
        required_columns: Sequence[str],
        numeric_columns: Sequence[str],
    ) -> pa.Table:
        table = self.drop_nulls(table, required_columns)
        return self.drop_non_finite(table, numeric_columns)

    # --------------------------------------------------
    @staticmethod
    def drop_nulls(table: pa.Table, columns: Sequence[str]) -> pa.Table:
        mask = None
        for name in columns:
            valid = pc.is_valid(require_column(table, name))
            mask = valid if mask is None else pc.and_(mask, valid)

        if mask is None:
            return table
        return table.filter(mask)

    # --------------------------------------------------
    @staticmethod
    def drop_non_finite(table: pa.Table, columns: Sequence[str]) -> pa.Table:
        mask = None
        for name in columns:
            # null -> False: a missing value is dropped as well
            finite = pc.fill_null(pc.is_finite(float_column(table, name)), False)
            mask = finite if mask is None else pc.and_(mask, finite)

        if mask is None:
            return table
        return table.filter(mask)
