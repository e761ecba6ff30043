# nexergy/training/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pyarrow as pa

from nexergy.training.engines.linear_model import LinearModel
from nexergy.training.engines.train_result import TrainEvalResult


@dataclass
class TrainingContext:
    """
    TrainingContext

    Semantics:
    - One context == one train/eval run
    - Parameters are fixed at construction
    - Steps replace tables, they never mutate them
    """

    # -------------------------
    # Source
    # -------------------------
    table: pa.Table

    # -------------------------
    # Parameters
    # -------------------------
    target_column: str
    timestamp_column: str
    num_lags: int
    cutoff_year: int
    learning_rate: float
    epochs: int

    # -------------------------
    # Dataset state
    # -------------------------
    feature_columns: List[str] = field(default_factory=list)
    train: Optional[pa.Table] = None
    test: Optional[pa.Table] = None

    # -------------------------
    # Model / evaluation state
    # -------------------------
    model: Optional[LinearModel] = None
    baseline: Optional[pa.Array] = None
    predictions: Optional[pa.Table] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    result: Optional[TrainEvalResult] = None

    @property
    def train_n(self) -> int:
        return 0 if self.train is None else self.train.num_rows

    @property
    def test_n(self) -> int:
        return 0 if self.test is None else self.test.num_rows

    @property
    def splits_ready(self) -> bool:
        return self.train_n > 0 and self.test_n > 0
