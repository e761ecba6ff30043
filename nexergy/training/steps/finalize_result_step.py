# nexergy/training/steps/finalize_result_step.py
from __future__ import annotations

import math

from nexergy import logs
from nexergy.pipeline.step import PipelineStep
from nexergy.training.context import TrainingContext
from nexergy.training.engines.train_result import TrainEvalResult


class FinalizeResultStep(PipelineStep):
    """
    FinalizeResultStep

    - runs once, after every dataset / model step
    - never modifies tables or the model
    - only builds ctx.result
    """

    stage = "finalize_result"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        with self.timed():
            ctx.result = TrainEvalResult(
                model=ctx.model,
                mae=ctx.metrics.get("mae", math.nan),
                rmse=ctx.metrics.get("rmse", math.nan),
                train_n=ctx.train_n,
                test_n=ctx.test_n,
                baseline_mae=ctx.metrics.get("baseline_mae"),
                baseline_rmse=ctx.metrics.get("baseline_rmse"),
                predictions=ctx.predictions,
            )

        logs.info(
            f"[{self.step_name}] model={'yes' if ctx.model is not None else 'no'} "
            f"train_n={ctx.train_n} test_n={ctx.test_n}"
        )
        return ctx
