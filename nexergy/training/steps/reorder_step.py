# nexergy/training/steps/reorder_step.py
from __future__ import annotations

from nexergy import logs
from nexergy.pipeline.step import PipelineStep
from nexergy.training.context import TrainingContext
from nexergy.training.engines.reorder_engine import ReorderEngine


class ReorderStep(PipelineStep):
    """
    ReorderStep

    Contract:
    - consumes ctx.table
    - produces ctx.table in ascending timestamp order
    """

    stage = "reorder"

    def __init__(self, engine: ReorderEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    @logs.catch(msg="reorder failed", log_time=False)
    def run(self, ctx: TrainingContext) -> TrainingContext:
        with self.timed():
            with self.leaf():
                ctx.table = self.engine.execute(ctx.table, ctx.timestamp_column)

        logs.info(f"[{self.step_name}] rows={ctx.table.num_rows} by={ctx.timestamp_column}")
        return ctx
