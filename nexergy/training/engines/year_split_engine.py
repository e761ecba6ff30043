# nexergy/training/engines/year_split_engine.py
from __future__ import annotations

import re
from typing import Optional, Tuple

import pyarrow as pa

from nexergy.training.engines.columns import is_text, require_column

_YEAR_RE = re.compile(r"[+-]?[0-9]+")


class YearSplitEngine:
    """
    YearSplitEngine (pure logic, one-year-ahead holdout)

    For each row, year = int(timestamp[:4]):
        year <= cutoff_year      -> train
        year == cutoff_year + 1  -> test
        anything else            -> dropped from both

    "anything else" covers later years, null / non-text values,
    strings shorter than 4 characters and unparseable prefixes.

    Both outputs keep the input's relative row order.
    """

    def split(
        self,
        table: pa.Table,
        timestamp_column: str,
        cutoff_year: int,
    ) -> Tuple[pa.Table, pa.Table]:
        col = require_column(table, timestamp_column)

        train_idx: list[int] = []
        test_idx: list[int] = []

        values = col.to_pylist() if is_text(col.type) else [None] * len(col)
        for i, value in enumerate(values):
            year = self.parse_year(value)
            if year is None:
                continue
            if year <= cutoff_year:
                train_idx.append(i)
            elif year == cutoff_year + 1:
                test_idx.append(i)

        return (
            table.take(pa.array(train_idx, type=pa.int64())),
            table.take(pa.array(test_idx, type=pa.int64())),
        )

    # --------------------------------------------------
    @staticmethod
    def parse_year(value) -> Optional[int]:
        if not isinstance(value, str) or len(value) < 4:
            return None

        head = value[:4]
        if _YEAR_RE.fullmatch(head) is None:
            return None
        return int(head)
