from __future__ import annotations

import math

import pyarrow as pa
import pytest

from nexergy.observability.instrumentation import Instrumentation
from nexergy.training.context import TrainingContext
from nexergy.training.engines.lag_feature_engine import LagFeatureEngine
from nexergy.training.engines.linear_model import LinearModel
from nexergy.training.engines.metric_engine import RegressionMetricEngine
from nexergy.training.engines.predict_engine import PredictEngine
from nexergy.training.engines.report_engine import TrainEvalReportEngine
from nexergy.training.steps.baseline_evaluate_step import BaselineEvaluateStep
from nexergy.training.steps.finalize_result_step import FinalizeResultStep
from nexergy.training.steps.lag_feature_step import LagFeatureStep
from nexergy.training.steps.model_evaluate_step import ModelEvaluateStep
from nexergy.training.steps.report_step import TrainEvalReportStep


def make_ctx(table, **kwargs):
    params = dict(
        table=table,
        target_column="price_eur_mwh",
        timestamp_column="datetime_utc",
        num_lags=1,
        cutoff_year=2023,
        learning_rate=0.01,
        epochs=10,
    )
    params.update(kwargs)
    return TrainingContext(**params)


@pytest.fixture
def test_split():
    return pa.table(
        {
            "datetime_utc": ["2024-01-01", "2024-01-02"],
            "price_eur_mwh": [15.0, 17.0],
            "lag_1": [14.0, 15.0],
        }
    )


def test_lag_feature_step_sets_feature_columns(price_table):
    inst = Instrumentation(enabled=True)
    ctx = make_ctx(price_table, num_lags=2)

    ctx = LagFeatureStep(LagFeatureEngine(), inst=inst).run(ctx)

    assert ctx.feature_columns == ["lag_1", "lag_2"]
    assert "lag_features" in inst.timeline


def test_baseline_step(test_split):
    ctx = make_ctx(test_split)
    ctx.test = test_split

    ctx = BaselineEvaluateStep(RegressionMetricEngine()).run(ctx)

    assert ctx.baseline.to_pylist() == [14.0, 15.0]
    assert ctx.metrics["baseline_mae"] == pytest.approx(1.5)
    assert ctx.metrics["baseline_rmse"] == pytest.approx(math.sqrt(2.5))


def test_baseline_step_skips_without_lags(test_split):
    ctx = make_ctx(test_split, num_lags=0)
    ctx.test = test_split

    ctx = BaselineEvaluateStep(RegressionMetricEngine()).run(ctx)

    assert ctx.baseline is None
    assert "baseline_mae" not in ctx.metrics


def test_baseline_step_skips_empty_test(test_split):
    ctx = make_ctx(test_split)

    ctx = BaselineEvaluateStep(RegressionMetricEngine()).run(ctx)

    assert ctx.metrics == {}


def test_evaluate_step_without_baseline(test_split):
    ctx = make_ctx(test_split)
    ctx.test = test_split
    ctx.model = LinearModel(
        feature_names=("lag_1",),
        weights=(0.0, 0.0),
        feature_means=(0.0,),
        feature_stds=(1.0,),
        target_mean=16.0,
        target_std=1.0,
    )

    step = ModelEvaluateStep(predictor=PredictEngine(), metrics=RegressionMetricEngine())
    ctx = step.run(ctx)

    assert ctx.metrics["mae"] == pytest.approx(1.0)
    assert ctx.predictions.column("y_pred").to_pylist() == [16.0, 16.0]
    assert ctx.predictions.column("y_baseline").null_count == 2


def test_evaluate_step_skips_without_model(test_split):
    ctx = make_ctx(test_split)
    ctx.test = test_split

    step = ModelEvaluateStep(predictor=PredictEngine(), metrics=RegressionMetricEngine())
    ctx = step.run(ctx)

    assert ctx.predictions is None
    assert "mae" not in ctx.metrics


def test_finalize_defaults_to_nan(test_split):
    ctx = FinalizeResultStep().run(make_ctx(test_split))

    assert ctx.result.model is None
    assert math.isnan(ctx.result.mae)
    assert ctx.result.baseline_mae is None
    assert (ctx.result.train_n, ctx.result.test_n) == (0, 0)


def test_report_step_requires_result(test_split):
    step = TrainEvalReportStep(TrainEvalReportEngine())

    with pytest.raises(RuntimeError):
        step.run(make_ctx(test_split))


def test_report_step_leaves_result_untouched(test_split):
    ctx = FinalizeResultStep().run(make_ctx(test_split))
    result = ctx.result

    ctx = TrainEvalReportStep(TrainEvalReportEngine()).run(ctx)

    assert ctx.result is result
