#!filepath: nexergy/config/data_config.py
from typing import Optional

from pydantic import BaseModel


class DataConfig(BaseModel):
    # None -> PathManager.data_dir()
    data_root: Optional[str] = None
    prices_dir: str = "curated/prices"
