#!filepath: nexergy/observability/instrumentation.py
from __future__ import annotations

from dataclasses import dataclass
from contextlib import contextmanager
from collections import OrderedDict
from typing import Any, Dict

from nexergy.observability.timer import Timer
from nexergy.observability.metrics import MetricRecorder
from nexergy.observability.timeline_reporter import TimelineReporter
from nexergy import logs


@dataclass
class Instrumentation:
    """
    Instrumentation (leaf-only accounting + parent scope).

    Rules:
    1. The timeline only records leaf timers (record=True),
       named "<stage>:<leaf>" by PipelineStep.leaf()
    2. Step-level timers are wall-time boundaries only (record=False)
    3. A leaf that runs again adds to its timeline entry
    """

    enabled: bool = True

    def __post_init__(self):
        self._timer = Timer(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)

        # timeline: OrderedDict[leaf_name, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    # ---------------------------------------------------------
    # Context manager timer
    # ---------------------------------------------------------
    def timer(self, name: str, *, record: bool = True):
        """
        Context-manager timer.

        Parameters
        ----------
        name : str
            timer name
        record : bool
            - True  : leaf, written to the timeline
            - False : parent scope, wall time only
        """
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            inst._timer.start(name)
            try:
                yield
            finally:
                elapsed = inst._timer.end(name)
                if record:
                    inst.timeline[name] = inst.timeline.get(name, 0.0) + elapsed

        return _ctx()

    def record(self, name: str, value: Any) -> None:
        self.metrics.record(name, value)

    # ---------------------------------------------------------
    # Timeline report (cold path)
    # ---------------------------------------------------------
    def generate_timeline_report(self, label: str):
        if not self.enabled:
            return
        TimelineReporter(self.timeline, label, calls=self._timer.calls).print()
        if self.metrics.metrics:
            logs.info(f"[Metric] {label}: {self.metrics.summary()}")


# -------------------------------------------------------------
# No-op Instrumentation (observability disabled)
# -------------------------------------------------------------
class NoOpInstrumentation:
    """Used when instrumentation is disabled."""

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def record(self, name: str, value: Any) -> None:
        pass

    def generate_timeline_report(self, label: str):
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
