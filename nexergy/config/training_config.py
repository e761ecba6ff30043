# nexergy/config/training_config.py
from __future__ import annotations

from pydantic import BaseModel, Field


class TrainingConfig(BaseModel):
    """
    TrainingConfig (autoregressive price model)

    Defaults mirror the day-ahead price train/eval run:
    24 hourly lags, hold out the year after ``cutoff_year``.
    """

    # dataset
    target_column: str = "price_eur_mwh"
    timestamp_column: str = "datetime_utc"
    num_lags: int = Field(default=24, ge=0)
    cutoff_year: int = 2024

    # optimizer
    learning_rate: float = Field(default=0.01, ge=0.0)
    epochs: int = Field(default=2000, ge=0)
