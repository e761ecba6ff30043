from __future__ import annotations

import math

import pyarrow as pa
import pytest

from nexergy.training.engines.metric_engine import (
    RegressionMetricEngine,
    mean_absolute_error,
    root_mean_squared_error,
)


def test_mae_rmse_values():
    y_true = [1.0, 2.0, 3.0]
    y_pred = [2.0, 2.0, 1.0]

    assert mean_absolute_error(y_true, y_pred) == pytest.approx(1.0)
    assert root_mean_squared_error(y_true, y_pred) == pytest.approx(math.sqrt(5.0 / 3.0))


def test_rmse_not_below_mae():
    y_true = [0.0, 0.0, 0.0, 0.0]
    y_pred = [1.0, -3.0, 0.5, 2.0]

    assert root_mean_squared_error(y_true, y_pred) >= mean_absolute_error(y_true, y_pred)


def test_perfect_prediction():
    values = [1.5, -2.0, 8.0]

    assert mean_absolute_error(values, values) == 0.0
    assert root_mean_squared_error(values, values) == 0.0


def test_missing_pairs_are_skipped():
    y_true = pa.array([1.0, None, 3.0, 4.0], type=pa.float64())
    y_pred = pa.array([2.0, 5.0, None, 6.0], type=pa.float64())

    assert mean_absolute_error(y_true, y_pred) == pytest.approx(1.5)


def test_unequal_lengths_use_common_prefix():
    assert mean_absolute_error([1.0, 2.0, 3.0], [1.0, 3.0]) == pytest.approx(0.5)


def test_no_pairs_is_nan():
    assert math.isnan(mean_absolute_error([], []))
    assert math.isnan(root_mean_squared_error([None], [1.0]))


def test_chunked_input():
    y_true = pa.chunked_array([[1.0], [2.0]])
    y_pred = pa.chunked_array([[0.0, 0.0]])

    scores = RegressionMetricEngine().evaluate(y_true=y_true, y_pred=y_pred)

    assert scores["mae"] == pytest.approx(1.5)
    assert scores["rmse"] == pytest.approx(math.sqrt(2.5))


@pytest.mark.parametrize(
    "y_true, y_pred, mae, rmse",
    [
        ([1.0, 2.0, 3.0], [1.0, 2.0, 3.0], 0.0, 0.0),
        ([1.0, 2.0, 3.0], [2.0, 3.0, 4.0], 1.0, 1.0),
        ([0.0, 0.0], [3.0, 4.0], 3.5, math.sqrt(12.5)),
    ],
)
def test_reference_values(y_true, y_pred, mae, rmse):
    assert mean_absolute_error(y_true, y_pred) == pytest.approx(mae)
    assert root_mean_squared_error(y_true, y_pred) == pytest.approx(rmse)
