#!filepath: tests/observability/test_instrumentation.py

import time
from nexergy.observability.instrumentation import Instrumentation, NoOpInstrumentation

from loguru import logger


def test_instrumentation_timer():
    inst = Instrumentation(enabled=True)

    with inst.timer("reorder"):
        time.sleep(0.01)

    assert "reorder" in inst.timeline
    assert inst.timeline["reorder"] > 0


def test_instrumentation_parent_scope_not_recorded():
    inst = Instrumentation(enabled=True)

    with inst.timer("ModelTrainStep", record=False):
        with inst.timer("model_train"):
            pass

    assert list(inst.timeline) == ["model_train"]


def test_instrumentation_metrics():
    inst = Instrumentation(enabled=True)
    inst.record("train_n", 123)

    assert inst.metrics.metrics["train_n"] == 123


def test_disabled_instrumentation_records_nothing():
    inst = Instrumentation(enabled=False)

    with inst.timer("phase"):
        pass
    inst.record("mae", 1.0)

    assert inst.timeline == {}
    assert inst.metrics.metrics == {}


def test_noop_instrumentation_is_inert():
    inst = NoOpInstrumentation()

    with inst.timer("anything"):
        pass
    inst.record("x", 1)
    inst.generate_timeline_report("noop")


def test_generate_timeline_report():
    inst = Instrumentation(enabled=True)

    with inst.timer("phase_X"):
        time.sleep(0.005)

    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))

    inst.generate_timeline_report("train_eval cutoff=2024")

    logger.remove(sink_id)

    output = "\n".join(captured)

    assert "phase_X" in output
    assert "cutoff=2024" in output
    assert "Pipeline timeline" in output


def test_repeated_leaf_accumulates():
    inst = Instrumentation(enabled=True)

    with inst.timer("model_evaluate:score"):
        time.sleep(0.002)
    first = inst.timeline["model_evaluate:score"]
    with inst.timer("model_evaluate:score"):
        time.sleep(0.002)

    assert list(inst.timeline) == ["model_evaluate:score"]
    assert inst.timeline["model_evaluate:score"] > first


def test_report_includes_run_metrics():
    inst = Instrumentation(enabled=True)
    inst.record("train_n", 4)
    inst.record("baseline_mae", None)

    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))

    inst.generate_timeline_report("train_eval cutoff=2023")

    logger.remove(sink_id)

    assert any("train_n=4 baseline_mae=n/a" in line for line in captured)
