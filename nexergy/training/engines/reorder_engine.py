# nexergy/training/engines/reorder_engine.py
from __future__ import annotations

import pyarrow as pa
import pyarrow.compute as pc

from nexergy.training.engines.columns import is_text, require_column


class ReorderEngine:
    """
    ReorderEngine (pure logic)

    Input:
        - table
        - text column with ISO-ordered timestamps
          (YYYY-MM-DD / YYYY-MM-DDTHH:MM:SS)

    Output:
        - same rows, ascending string order of that column

    Semantics:
        - byte-wise lexicographic order (Arrow sort)
        - null / non-text values sort as the empty string
        - ties are not guaranteed stable
    """

    def execute(self, table: pa.Table, column: str) -> pa.Table:
        col = require_column(table, column)

        if not is_text(col.type):
            # every value compares as "" -> any permutation is valid
            return table

        indices = pc.array_sort_indices(
            col.combine_chunks(),
            order="ascending",
            null_placement="at_start",
        )
        return table.take(indices)
