from __future__ import annotations

import pyarrow as pa
import pytest

from nexergy.training.engines.year_split_engine import YearSplitEngine
from nexergy.utils.errors import SchemaError


def make_table(stamps):
    return pa.table(
        {
            "ts": pa.array(stamps, type=pa.string()),
            "i": list(range(len(stamps))),
        }
    )


def test_split_by_year():
    table = make_table(
        ["2022-06-01", "2023-12-31T23:00", "2024-01-01", "2024-07-01", "2025-01-01"]
    )

    train, test = YearSplitEngine().split(table, "ts", 2023)

    assert train["i"].to_pylist() == [0, 1]
    assert test["i"].to_pylist() == [2, 3]


def test_split_is_disjoint_and_ordered():
    stamps = ["2024-03-01", "2021-01-01", "2024-01-01", "2023-05-05"]
    table = make_table(stamps)

    train, test = YearSplitEngine().split(table, "ts", 2023)

    assert train["i"].to_pylist() == [1, 3]
    assert test["i"].to_pylist() == [0, 2]
    assert set(train["i"].to_pylist()).isdisjoint(test["i"].to_pylist())


def test_unparseable_timestamps_are_dropped():
    table = make_table(["abc", "20", None, "x2023-01-01", "2023-01-01"])

    train, test = YearSplitEngine().split(table, "ts", 2030)

    assert train["i"].to_pylist() == [4]
    assert test.num_rows == 0


def test_empty_test_split_is_not_an_error():
    table = make_table(["2020-01-01", "2021-01-01"])

    train, test = YearSplitEngine().split(table, "ts", 2021)

    assert train.num_rows == 2
    assert test.num_rows == 0
    assert test.schema == table.schema


def test_non_text_column_drops_everything():
    table = pa.table({"ts": [2023, 2024], "i": [0, 1]})

    train, test = YearSplitEngine().split(table, "ts", 2023)

    assert train.num_rows == 0
    assert test.num_rows == 0


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2023-01-01", 2023),
        ("1999", 1999),
        ("+202", 202),
        ("-001", -1),
        ("20a3-01-01", None),
        ("202", None),
        ("", None),
        (None, None),
        (2023, None),
    ],
)
def test_parse_year(value, expected):
    assert YearSplitEngine.parse_year(value) == expected


def test_missing_column():
    with pytest.raises(SchemaError):
        YearSplitEngine().split(make_table(["2023"]), "datetime_utc", 2023)
