# nexergy/workflows/offline_training.py
from __future__ import annotations

from pathlib import Path

from nexergy import init_logging, logs
from nexergy.config.app_config import AppConfig
from nexergy.observability.instrumentation import Instrumentation
from nexergy.storage.curated_reader import read_curated_table
from nexergy.training.engines.report_engine import TrainEvalReportEngine
from nexergy.training.engines.train_result import TrainEvalResult
from nexergy.training.pipeline import TrainEvalPipeline, build_train_eval_steps
from nexergy.training.steps.report_step import TrainEvalReportStep
from nexergy.utils.path import PathManager


def build_offline_training(inst: Instrumentation | None = None) -> TrainEvalPipeline:
    """
    Offline train/eval workflow: core steps + summary report.
    """
    if inst is None:
        inst = Instrumentation()

    return TrainEvalPipeline(
        steps=build_train_eval_steps(
            inst=inst,
            extra_steps=[TrainEvalReportStep(TrainEvalReportEngine(), inst=inst)],
        ),
        inst=inst,
    )


def resolve_prices_dir(cfg: AppConfig, prices_dir: str | Path | None = None) -> Path:
    """
    Priority:
        1) explicit argument
        2) cfg.data.data_root / cfg.data.prices_dir
        3) PathManager data dir / cfg.data.prices_dir
    """
    if prices_dir is not None:
        return Path(prices_dir)

    data_root = Path(cfg.data.data_root) if cfg.data.data_root else PathManager.data_dir()
    return data_root / cfg.data.prices_dir


def run_train_eval(
    prices_dir: str | Path | None = None,
    cfg: AppConfig | None = None,
) -> TrainEvalResult:
    """
    Read the curated day-ahead prices once and run train/eval with the
    configured parameters.
    """
    if cfg is None:
        cfg = AppConfig.load()
        init_logging(cfg.log)

    source = resolve_prices_dir(cfg, prices_dir)
    logs.info(f"[OfflineTraining] prices_dir={source}")

    table = read_curated_table(source)

    t = cfg.training
    return build_offline_training().run(
        table,
        target_column=t.target_column,
        timestamp_column=t.timestamp_column,
        num_lags=t.num_lags,
        cutoff_year=t.cutoff_year,
        learning_rate=t.learning_rate,
        epochs=t.epochs,
    )
