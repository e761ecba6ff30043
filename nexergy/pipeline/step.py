#!filepath: nexergy/pipeline/step.py
from __future__ import annotations

from typing import Any

from nexergy.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Pipeline Step base class

    Responsibility:
      1. orchestration layer (sequencing / conditional execution)
      2. step-level timing boundary (parent scope)

    Rules:
      - the step itself is not written to the timeline
      - leaf timers live inside the step (around engine calls)
      - instrumentation is optional; behaviour never depends on it
      - numeric work belongs to engines, never to steps
    """

    stage: str = ""

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    # --------------------------------------------------
    # Step identity
    # --------------------------------------------------
    @property
    def step_name(self) -> str:
        """Class name is the step name by default."""
        return self.__class__.__name__

    # --------------------------------------------------
    # Step-level timer (parent scope, not recorded)
    # --------------------------------------------------
    def timed(self):
        return self.inst.timer(self.step_name, record=False)

    def leaf(self, name: str = ""):
        """Leaf timer recorded on the timeline as <stage>:<name>."""
        label = f"{self.stage or self.step_name}:{name}" if name else (self.stage or self.step_name)
        return self.inst.timer(label, record=True)

    # --------------------------------------------------
    # Contract
    # --------------------------------------------------
    def run(self, ctx: Any) -> Any:
        raise NotImplementedError
