# tests/training/conftest.py
from __future__ import annotations

import pyarrow as pa
import pytest

PRICE_SCHEMA = pa.schema(
    [
        ("datetime_utc", pa.string()),
        ("price_eur_mwh", pa.float64()),
    ]
)


def make_price_table(dates, prices) -> pa.Table:
    return pa.Table.from_pylist(
        [
            {"datetime_utc": d, "price_eur_mwh": p}
            for d, p in zip(dates, prices)
        ],
        schema=PRICE_SCHEMA,
    )


@pytest.fixture
def make_prices():
    return make_price_table


@pytest.fixture
def price_table():
    """
    Scenario A:
        2023-01-01 .. 2023-01-05 -> 10, 12, 11, 13, 14
        2024-01-01               -> 15
    """
    return make_price_table(
        [
            "2023-01-01",
            "2023-01-02",
            "2023-01-03",
            "2023-01-04",
            "2023-01-05",
            "2024-01-01",
        ],
        [10.0, 12.0, 11.0, 13.0, 14.0, 15.0],
    )
