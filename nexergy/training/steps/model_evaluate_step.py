# nexergy/training/steps/model_evaluate_step.py
from __future__ import annotations

import pyarrow as pa

from nexergy import logs
from nexergy.pipeline.step import PipelineStep
from nexergy.training.context import TrainingContext
from nexergy.training.engines.columns import float_column
from nexergy.training.engines.metric_engine import RegressionMetricEngine
from nexergy.training.engines.predict_engine import PredictEngine


class ModelEvaluateStep(PipelineStep):
    """
    ModelEvaluateStep (hold-out year)

    Contract:
    - consumes ctx.model / ctx.test / ctx.baseline
    - produces ctx.metrics["mae"], ctx.metrics["rmse"]
    - produces ctx.predictions:
        <timestamp>, y_true, y_pred, y_baseline
    """

    stage = "model_evaluate"

    def __init__(
        self,
        *,
        predictor: PredictEngine,
        metrics: RegressionMetricEngine,
        inst=None,
    ):
        super().__init__(inst)
        self.predictor = predictor
        self.metric_engine = metrics

    def run(self, ctx: TrainingContext) -> TrainingContext:
        if ctx.model is None:
            logs.info(f"[{self.step_name}] skip evaluation (no model)")
            return ctx

        y_true = float_column(ctx.test, ctx.target_column)

        with self.timed():
            with self.leaf("predict"):
                y_pred = self.predictor.predict(ctx.model, ctx.test)
            with self.leaf("score"):
                scores = self.metric_engine.evaluate(y_true=y_true, y_pred=y_pred)

        ctx.metrics.update(scores)

        baseline = ctx.baseline
        if baseline is None:
            baseline = pa.nulls(ctx.test_n, type=pa.float64())

        ctx.predictions = pa.table(
            {
                ctx.timestamp_column: ctx.test.column(ctx.timestamp_column),
                "y_true": y_true,
                "y_pred": y_pred,
                "y_baseline": baseline,
            }
        )

        logs.info(
            f"[{self.step_name}] mae={scores['mae']:.4f} rmse={scores['rmse']:.4f}"
        )
        return ctx
