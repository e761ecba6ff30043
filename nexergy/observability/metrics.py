#!filepath: nexergy/observability/metrics.py
import math
from dataclasses import dataclass, field
from typing import Dict, Any
from nexergy import logs


def format_metric(value: Any) -> str:
    """
    Run metrics are counts, errors (possibly NaN) or absent baselines.
    """
    if value is None:
        return "n/a"
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return "nan" if math.isnan(value) else f"{value:.4f}"
    return str(value)


@dataclass
class MetricRecorder:
    """
    Last value per metric name (train_n, test_n, mae, rmse, baseline_*).
    """

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.info(f"[Metric] {name} = {format_metric(value)}")

    def summary(self) -> str:
        """One line, insertion order: ``train_n=4 test_n=1 mae=0.5000 ...``"""
        return " ".join(f"{k}={format_metric(v)}" for k, v in self.metrics.items())
