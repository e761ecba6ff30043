from __future__ import annotations

import pytest

from nexergy import init_logging, logs
from nexergy.config.log_config import LogConfig


def test_catch_reraises():
    @logs.catch(msg="boom", log_time=False)
    def fail():
        raise ValueError("bad")

    with pytest.raises(ValueError):
        fail()


def test_catch_returns_result():
    @logs.catch(log_inputs=True, log_outputs=True)
    def add(a, b=0):
        return a + b

    assert add(1, b=2) == 3


def test_init_logging_writes_to_configured_dir(tmp_path):
    log_dir = tmp_path / "logs"

    init_logging(LogConfig(dir=str(log_dir), level="DEBUG"))
    logs.info("hello")

    assert log_dir.is_dir()
    assert logs.level == "DEBUG"
