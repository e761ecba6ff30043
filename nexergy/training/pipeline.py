# nexergy/training/pipeline.py
from __future__ import annotations

from typing import List, Optional

import pyarrow as pa

from nexergy import logs
from nexergy.observability.instrumentation import Instrumentation, NoOpInstrumentation
from nexergy.pipeline.step import PipelineStep
from nexergy.training.context import TrainingContext
from nexergy.training.engines.lag_feature_engine import LagFeatureEngine
from nexergy.training.engines.linear_gd_train_engine import LinearGDTrainEngine
from nexergy.training.engines.metric_engine import RegressionMetricEngine
from nexergy.training.engines.predict_engine import PredictEngine
from nexergy.training.engines.reorder_engine import ReorderEngine
from nexergy.training.engines.row_filter_engine import RowFilterEngine
from nexergy.training.engines.train_result import TrainEvalResult
from nexergy.training.engines.year_split_engine import YearSplitEngine
from nexergy.training.steps.baseline_evaluate_step import BaselineEvaluateStep
from nexergy.training.steps.finalize_result_step import FinalizeResultStep
from nexergy.training.steps.lag_feature_step import LagFeatureStep
from nexergy.training.steps.model_evaluate_step import ModelEvaluateStep
from nexergy.training.steps.model_train_step import ModelTrainStep
from nexergy.training.steps.reorder_step import ReorderStep
from nexergy.training.steps.row_filter_step import RowFilterStep
from nexergy.training.steps.year_split_step import YearSplitStep


class TrainEvalPipeline:
    """
    TrainEvalPipeline

    Semantics:
    - Pipeline owns the context and the step order
    - Steps execute semantics, engines own the numerics
    - Pipeline records run metrics and prints the timeline

    Order:
        reorder -> lags -> filter -> year split
        -> persistence baseline -> train -> evaluate -> result [-> report]
    """

    def __init__(
        self,
        *,
        steps: List[PipelineStep],
        inst: Instrumentation | NoOpInstrumentation | None = None,
    ):
        self.steps = steps
        self.inst = inst if inst is not None else NoOpInstrumentation()

    def run(
        self,
        table: pa.Table,
        *,
        target_column: str,
        timestamp_column: str,
        num_lags: int,
        cutoff_year: int,
        learning_rate: float,
        epochs: int,
    ) -> TrainEvalResult:
        logs.info(
            f"[TrainEvalPipeline] START rows={table.num_rows} "
            f"target={target_column} lags={num_lags} cutoff={cutoff_year}"
        )

        ctx = TrainingContext(
            table=table,
            target_column=target_column,
            timestamp_column=timestamp_column,
            num_lags=num_lags,
            cutoff_year=cutoff_year,
            learning_rate=learning_rate,
            epochs=epochs,
        )

        for step in self.steps:
            ctx = step.run(ctx)

        if ctx.result is None:
            raise RuntimeError("[TrainEvalPipeline] no FinalizeResultStep in pipeline")

        self._record(ctx.result)
        self.inst.generate_timeline_report(f"train_eval cutoff={cutoff_year}")

        logs.info("[TrainEvalPipeline] DONE")
        return ctx.result

    def _record(self, result: TrainEvalResult) -> None:
        self.inst.record("train_n", result.train_n)
        self.inst.record("test_n", result.test_n)
        self.inst.record("mae", result.mae)
        self.inst.record("rmse", result.rmse)
        self.inst.record("baseline_mae", result.baseline_mae)
        self.inst.record("baseline_rmse", result.baseline_rmse)


def build_train_eval_steps(
    inst: Instrumentation | None = None,
    extra_steps: Optional[List[PipelineStep]] = None,
) -> List[PipelineStep]:
    metrics = RegressionMetricEngine()

    steps: List[PipelineStep] = [
        ReorderStep(ReorderEngine(), inst=inst),
        LagFeatureStep(LagFeatureEngine(), inst=inst),
        RowFilterStep(RowFilterEngine(), inst=inst),
        YearSplitStep(YearSplitEngine(), inst=inst),
        BaselineEvaluateStep(metrics, inst=inst),
        ModelTrainStep(LinearGDTrainEngine(), inst=inst),
        ModelEvaluateStep(predictor=PredictEngine(), metrics=metrics, inst=inst),
        FinalizeResultStep(inst=inst),
    ]
    if extra_steps:
        steps.extend(extra_steps)
    return steps


def train_eval(
    table: pa.Table,
    target_col: str,
    timestamp_col: str,
    num_lags: int,
    cutoff_year: int,
    learning_rate: float,
    epochs: int,
) -> TrainEvalResult:
    """
    Lagged-feature linear model, fitted on years <= cutoff_year and
    scored on cutoff_year + 1 against the persistence baseline.

    Empty splits are not errors: the result then carries no model and
    NaN metrics (plus the baseline when the test split is non-empty).
    """
    pipeline = TrainEvalPipeline(steps=build_train_eval_steps())
    return pipeline.run(
        table,
        target_column=target_col,
        timestamp_column=timestamp_col,
        num_lags=num_lags,
        cutoff_year=cutoff_year,
        learning_rate=learning_rate,
        epochs=epochs,
    )
