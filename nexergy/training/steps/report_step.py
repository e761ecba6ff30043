# nexergy/training/steps/report_step.py
from __future__ import annotations

from nexergy import logs
from nexergy.pipeline.step import PipelineStep
from nexergy.training.context import TrainingContext
from nexergy.training.engines.report_engine import TrainEvalReportEngine


class TrainEvalReportStep(PipelineStep):
    """
    TrainEvalReportStep

    Logs the model-vs-persistence summary and the fitted weights.
    Does NOT modify ctx.result.
    """

    stage = "report"

    def __init__(self, engine: TrainEvalReportEngine, inst=None):
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: TrainingContext) -> TrainingContext:
        if ctx.result is None:
            raise RuntimeError(f"[{self.step_name}] result not finalized")

        frame = self.engine.build(ctx.result)
        logs.info(f"[{self.step_name}] summary\n{frame.to_string(float_format='{:.4f}'.format)}")

        model = ctx.result.model
        if model is not None:
            logs.info(
                f"[{self.step_name}] features={len(model.feature_names)} "
                f"weights={list(model.weights)}"
            )
        return ctx
