# nexergy/training/engines/report_engine.py
from __future__ import annotations

import math

import pandas as pd

from nexergy.training.engines.train_result import TrainEvalResult


class TrainEvalReportEngine:
    """
    TrainEvalReportEngine

    Responsibility:
    - Render a TrainEvalResult as a model-vs-persistence summary frame
    - Return a pure DataFrame (no side effects)

    Columns:
        mae, rmse, skill_mae, train_n, test_n
    Index:
        model, persistence

    skill_mae = 1 - mae / baseline_mae (NaN when either side is undefined
    or baseline_mae is 0).
    """

    def build(self, result: TrainEvalResult) -> pd.DataFrame:
        baseline_mae = _or_nan(result.baseline_mae)
        baseline_rmse = _or_nan(result.baseline_rmse)

        frame = pd.DataFrame(
            {
                "mae": [result.mae, baseline_mae],
                "rmse": [result.rmse, baseline_rmse],
                "skill_mae": [
                    self.skill(result.mae, baseline_mae),
                    self.skill(baseline_mae, baseline_mae),
                ],
                "train_n": [result.train_n, result.train_n],
                "test_n": [result.test_n, result.test_n],
            },
            index=pd.Index(["model", "persistence"], name="forecaster"),
        )
        return frame

    @staticmethod
    def skill(mae: float, baseline_mae: float) -> float:
        if math.isnan(mae) or math.isnan(baseline_mae) or baseline_mae == 0:
            return math.nan
        return 1.0 - mae / baseline_mae


def _or_nan(value) -> float:
    return math.nan if value is None else float(value)
