# nexergy/training/steps/baseline_evaluate_step.py
from __future__ import annotations

from nexergy import logs
from nexergy.pipeline.step import PipelineStep
from nexergy.training.context import TrainingContext
from nexergy.training.engines.columns import float_column, lag_column_names
from nexergy.training.engines.metric_engine import RegressionMetricEngine


class BaselineEvaluateStep(PipelineStep):
    """
    BaselineEvaluateStep (persistence forecast)

    y_hat(t) = lag_1(t): "the next value equals the last observed one".

    Skip conditions (NOT errors):
    - empty test split
    - no lag_1 column (num_lags == 0)
    """

    stage = "baseline_evaluate"

    def __init__(self, engine: RegressionMetricEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: TrainingContext) -> TrainingContext:
        if ctx.test_n == 0:
            logs.info(f"[{self.step_name}] skip (empty test split)")
            return ctx

        if ctx.num_lags < 1:
            logs.warning(f"[{self.step_name}] skip (num_lags=0, no lag_1 column)")
            return ctx

        lag_1 = lag_column_names(1)[0]
        with self.timed():
            with self.leaf():
                ctx.baseline = float_column(ctx.test, lag_1)
                scores = self.engine.evaluate(
                    y_true=float_column(ctx.test, ctx.target_column),
                    y_pred=ctx.baseline,
                )

        ctx.metrics["baseline_mae"] = scores["mae"]
        ctx.metrics["baseline_rmse"] = scores["rmse"]

        logs.info(
            f"[{self.step_name}] baseline_mae={scores['mae']:.4f} "
            f"baseline_rmse={scores['rmse']:.4f}"
        )
        return ctx
