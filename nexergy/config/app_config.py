#!filepath: nexergy/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .data_config import DataConfig
from .training_config import TrainingConfig


def project_root() -> str:
    """
    Project root derived from this file's location:
    nexergy/config/app_config.py -> nexergy/config -> nexergy -> project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    data: DataConfig = DataConfig()
    training: TrainingConfig = TrainingConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - default file is <project_root>/nexergy/config/base.yml
        - independent of the current working directory
        - NEXERGY_DATA_ROOT overrides data.data_root
        """
        root = project_root()

        # 1) .env at the project root
        load_dotenv(os.path.join(root, ".env"))

        # 2) resolve config path
        if path is None:
            path = os.path.join(root, "nexergy/config/base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) read YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) environment overrides
        data_root = os.getenv("NEXERGY_DATA_ROOT")
        if data_root:
            raw["data"] = {**(raw.get("data") or {}), "data_root": data_root}

        return cls(**raw)
