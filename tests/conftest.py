# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq
import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture
def curated_prices_dir(tmp_path: Path) -> Path:
    """
    <tmp>/curated/prices/
        dt=2023-01-01/part-0.parquet
        dt=2023-01-02/part-0.parquet
        dt=2024-01-01/part-0.parquet
    """
    base = tmp_path / "curated" / "prices"

    days = {
        "2023-01-01": [10.0, 12.0],
        "2023-01-02": [11.0, 13.0],
        "2024-01-01": [14.0, 15.0],
    }
    for day, prices in days.items():
        part = base / f"dt={day}"
        part.mkdir(parents=True)
        table = pa.table(
            {
                "datetime_local": [f"{day}T00:00:00+01:00", f"{day}T01:00:00+01:00"],
                "datetime_utc": [f"{day}T00:00:00Z", f"{day}T01:00:00Z"],
                "price_eur_mwh": prices,
            }
        )
        pq.write_table(table, part / "part-0.parquet")

    return base
