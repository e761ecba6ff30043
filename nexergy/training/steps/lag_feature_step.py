# nexergy/training/steps/lag_feature_step.py
from __future__ import annotations

from nexergy import logs
from nexergy.pipeline.step import PipelineStep
from nexergy.training.context import TrainingContext
from nexergy.training.engines.columns import lag_column_names
from nexergy.training.engines.lag_feature_engine import LagFeatureEngine


class LagFeatureStep(PipelineStep):
    """
    LagFeatureStep

    Contract:
    - consumes ctx.table (time ordered)
    - produces ctx.table with lag_1..lag_<num_lags>
    - produces ctx.feature_columns (fixed model feature order)
    """

    stage = "lag_features"

    def __init__(self, engine: LagFeatureEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    @logs.catch(msg="lag feature build failed", log_time=False)
    def run(self, ctx: TrainingContext) -> TrainingContext:
        with self.timed():
            with self.leaf():
                ctx.table = self.engine.execute(
                    ctx.table, ctx.target_column, ctx.num_lags
                )

        ctx.feature_columns = lag_column_names(ctx.num_lags)
        logs.info(f"[{self.step_name}] target={ctx.target_column} lags={ctx.num_lags}")
        return ctx
