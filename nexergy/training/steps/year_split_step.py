# nexergy/training/steps/year_split_step.py
from __future__ import annotations

from nexergy import logs
from nexergy.pipeline.step import PipelineStep
from nexergy.training.context import TrainingContext
from nexergy.training.engines.year_split_engine import YearSplitEngine


class YearSplitStep(PipelineStep):
    """
    YearSplitStep

    Contract:
    - consumes ctx.table (filtered, time ordered)
    - produces ctx.train (years <= cutoff) and ctx.test (cutoff + 1)
    """

    stage = "year_split"

    def __init__(self, engine: YearSplitEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    @logs.catch(msg="year split failed", log_time=False)
    def run(self, ctx: TrainingContext) -> TrainingContext:
        with self.timed():
            with self.leaf():
                ctx.train, ctx.test = self.engine.split(
                    ctx.table, ctx.timestamp_column, ctx.cutoff_year
                )

        excluded = ctx.table.num_rows - ctx.train_n - ctx.test_n
        logs.info(
            f"[{self.step_name}] cutoff={ctx.cutoff_year} "
            f"train_n={ctx.train_n} test_n={ctx.test_n} excluded={excluded}"
        )
        return ctx
