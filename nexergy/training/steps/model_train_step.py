# nexergy/training/steps/model_train_step.py
from __future__ import annotations

from nexergy import logs
from nexergy.pipeline.step import PipelineStep
from nexergy.training.context import TrainingContext
from nexergy.training.engines.linear_gd_train_engine import LinearGDTrainEngine


class ModelTrainStep(PipelineStep):
    """
    ModelTrainStep

    Contract:
    - consumes ctx.train / ctx.feature_columns
    - produces ctx.model
    - skipped (NOT an error) when either split is empty
    """

    stage = "model_train"

    def __init__(self, engine: LinearGDTrainEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    @logs.catch(msg="model training failed", log_time=False)
    def run(self, ctx: TrainingContext) -> TrainingContext:
        if not ctx.splits_ready:
            logs.info(
                f"[{self.step_name}] skip training "
                f"(train_n={ctx.train_n}, test_n={ctx.test_n})"
            )
            return ctx

        with self.timed():
            with self.leaf():
                ctx.model = self.engine.train(
                    table=ctx.train,
                    target_column=ctx.target_column,
                    feature_columns=ctx.feature_columns,
                    learning_rate=ctx.learning_rate,
                    epochs=ctx.epochs,
                )

        logs.info(
            f"[{self.step_name}] fitted features={len(ctx.model.feature_names)} "
            f"epochs={ctx.epochs} lr={ctx.learning_rate}"
        )
        return ctx
