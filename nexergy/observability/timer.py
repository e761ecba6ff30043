#!filepath: nexergy/observability/timer.py
import time
from typing import Dict


class Timer:
    """
    Named wall-clock timers for steps and engine calls.

    - start(name) / end(name) -> seconds of that run
    - a name may run many times; ``calls`` counts finished runs
    - ending a name that was never started is a no-op (0.0)
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._open: Dict[str, float] = {}
        self.calls: Dict[str, int] = {}

    def start(self, name: str):
        if not self.enabled:
            return
        self._open[name] = time.perf_counter()

    def end(self, name: str) -> float:
        if not self.enabled:
            return 0.0

        started = self._open.pop(name, None)
        if started is None:
            return 0.0

        self.calls[name] = self.calls.get(name, 0) + 1
        return time.perf_counter() - started
