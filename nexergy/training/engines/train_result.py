# nexergy/training/engines/train_result.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pyarrow as pa

from nexergy.training.engines.linear_model import LinearModel


@dataclass(frozen=True)
class TrainEvalResult:
    """
    TrainEvalResult

    Semantics:
    - pure in-memory outcome of one train/eval run
    - model is None when the train or test split was empty
    - mae / rmse are NaN when no model was fitted
    - baseline_* is None when the test split was empty
    """

    model: Optional[LinearModel]
    mae: float
    rmse: float
    train_n: int
    test_n: int
    baseline_mae: Optional[float] = None
    baseline_rmse: Optional[float] = None

    # timestamp / y_true / y_pred / y_baseline per test row
    predictions: Optional[pa.Table] = None
