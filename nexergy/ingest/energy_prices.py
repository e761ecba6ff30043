#!filepath: nexergy/ingest/energy_prices.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

import pyarrow as pa

from nexergy import logs
from nexergy.utils.errors import SchemaError

KWH_PER_MWH = 1000.0

PRICE_SCHEMA = pa.schema(
    [
        ("datetime_local", pa.string()),
        ("datetime_utc", pa.string()),
        ("price_eur_mwh", pa.float64()),
    ]
)

GAS_SCHEMA = pa.schema(
    [
        ("datetime_local", pa.string()),
        ("price_eur_mwh", pa.float64()),
    ]
)


def parse_price_eur_mwh(raw: str) -> float:
    """
    "0,12345" (EUR/kWh, comma or dot decimal) -> 123.45 EUR/MWh
    """
    s = str(raw).strip().replace(",", ".")
    try:
        value = float(s)
    except ValueError:
        raise SchemaError(f"parse price '{s}': not a number") from None
    return value * KWH_PER_MWH


def _field(row: Mapping[str, Any], name: str) -> Any:
    if name not in row:
        raise SchemaError(f"record missing field '{name}': {dict(row)}")
    return row[name]


def _load_json_array(path: str | Path) -> list:
    with open(path, "r", encoding="utf-8") as f:
        rows = json.load(f)
    if not isinstance(rows, list):
        raise SchemaError(f"{path}: expected a JSON array, got {type(rows).__name__}")
    return rows


# ======================================================================
# Day-ahead electricity prices
# ======================================================================
def parse_price_records(rows: Iterable[Mapping[str, Any]]) -> pa.Table:
    """
    [{"datum_nl", "datum_utc", "prijs_excl_belastingen"}, ...]
        -> datetime_local | datetime_utc | price_eur_mwh
    """
    datetime_local, datetime_utc, price = [], [], []
    for row in rows:
        datetime_local.append(str(_field(row, "datum_nl")))
        datetime_utc.append(str(_field(row, "datum_utc")))
        price.append(parse_price_eur_mwh(_field(row, "prijs_excl_belastingen")))

    return pa.table(
        [datetime_local, datetime_utc, price],
        schema=PRICE_SCHEMA,
    )


def read_price_json(path: str | Path) -> pa.Table:
    table = parse_price_records(_load_json_array(path))
    logs.info(f"[Ingest:prices] {path} rows={table.num_rows}")
    return table


# ======================================================================
# Gas prices
# ======================================================================
def parse_gas_records(rows: Iterable[Mapping[str, Any]]) -> pa.Table:
    """
    [{"datum", "prijs_excl_belastingen"}, ...]
        -> datetime_local | price_eur_mwh
    """
    datetime_local, price = [], []
    for row in rows:
        datetime_local.append(str(_field(row, "datum")))
        price.append(parse_price_eur_mwh(_field(row, "prijs_excl_belastingen")))

    return pa.table([datetime_local, price], schema=GAS_SCHEMA)


def read_gas_json(path: str | Path) -> pa.Table:
    table = parse_gas_records(_load_json_array(path))
    logs.info(f"[Ingest:gas] {path} rows={table.num_rows}")
    return table
