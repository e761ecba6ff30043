#!filepath: nexergy/observability/timeline_reporter.py
from collections import OrderedDict
from typing import Dict, Optional
from nexergy import logs


def stage_of(leaf: str) -> str:
    """``model_evaluate:predict`` -> ``model_evaluate``"""
    return leaf.split(":", 1)[0]


class TimelineReporter:
    """
    Run timeline report.

    Leaves are grouped under their step stage (the part before ':'),
    each line shows seconds, share of the run and call count.
    """

    def __init__(
        self,
        timeline: Dict[str, float],
        label: str,
        calls: Optional[Dict[str, int]] = None,
    ):
        self.timeline = timeline
        self.label = label
        self.calls = calls or {}

    def stage_totals(self) -> Dict[str, float]:
        totals: Dict[str, float] = OrderedDict()
        for name, sec in self.timeline.items():
            stage = stage_of(name)
            totals[stage] = totals.get(stage, 0.0) + sec
        return totals

    def print(self):
        logs.info(f"[Timeline] ===== Pipeline timeline for {self.label} =====")

        total = sum(self.timeline.values())
        for name, sec in self.timeline.items():
            share = 100.0 * sec / total if total > 0 else 0.0
            n = self.calls.get(name, 1)
            logs.info(f"[Timeline] {str(name):<30} {sec:>8.3f}s {share:>6.1f}%  x{n}")

        totals = self.stage_totals()
        if totals:
            slowest = max(totals, key=totals.get)
            logs.info(f"[Timeline] slowest stage: {slowest} ({totals[slowest]:.3f}s)")

        logs.info(f"[Timeline] Total{'':<27} {total:>8.3f}s")
        logs.info("[Timeline] ===========================================")
