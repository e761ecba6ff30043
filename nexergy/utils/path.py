#!filepath: nexergy/utils/path.py
from pathlib import Path
from typing import Optional

from nexergy import logs


class PathManager:
    """
    Data directory layout:

    <root>
     ├── nexergy/...
     └── data/
           └── <DataConfig.prices_dir>  (curated/prices by default)

    root = project checkout (parent of the nexergy package)
    """

    _root: Optional[Path] = None

    # ---------------------------------------------------------
    # root detection
    # ---------------------------------------------------------
    @classmethod
    def detect_root(cls) -> Path:
        """
        This file lives at <root>/nexergy/utils/path.py, so root = parents[2].
        """
        current = Path(__file__).resolve()
        root = current.parents[2]
        logs.debug(f"[PathManager] detect_root = {root}")
        return root

    @classmethod
    def root(cls) -> Path:
        if cls._root is None:
            cls._root = cls.detect_root()
        return cls._root

    @classmethod
    def set_root(cls, new_root: Path | str | None):
        if new_root is None:
            cls._root = None
        else:
            cls._root = Path(new_root).resolve()
        logs.debug(f"[PathManager] set_root = {cls._root}")

    # ---------------------------------------------------------
    # data/
    # ---------------------------------------------------------
    @classmethod
    def data_dir(cls) -> Path:
        return cls.root() / "data"
