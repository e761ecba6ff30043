# nexergy/training/steps/row_filter_step.py
from __future__ import annotations

from nexergy import logs
from nexergy.pipeline.step import PipelineStep
from nexergy.training.context import TrainingContext
from nexergy.training.engines.row_filter_engine import RowFilterEngine


class RowFilterStep(PipelineStep):
    """
    RowFilterStep

    Drops the leading rows without full lag history and any
    malformed numeric record.

    - null check:   target, timestamp, lags
    - finite check: target, lags (timestamp is text)
    """

    stage = "row_filter"

    def __init__(self, engine: RowFilterEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    @logs.catch(msg="row filter failed", log_time=False)
    def run(self, ctx: TrainingContext) -> TrainingContext:
        numeric = [ctx.target_column, *ctx.feature_columns]
        required = [ctx.target_column, ctx.timestamp_column, *ctx.feature_columns]

        before = ctx.table.num_rows
        with self.timed():
            with self.leaf():
                ctx.table = self.engine.execute(
                    ctx.table,
                    required_columns=required,
                    numeric_columns=numeric,
                )

        logs.info(
            f"[{self.step_name}] kept={ctx.table.num_rows} "
            f"dropped={before - ctx.table.num_rows}"
        )
        return ctx
