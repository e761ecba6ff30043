#!filepath: nexergy/utils/filesystem.py
from pathlib import Path
from typing import List, Optional

from nexergy import logs


class FileSystem:
    """
    Filesystem helpers
    - scan directory trees
    """

    @staticmethod
    def scan_tree(path: str | Path, suffix: Optional[str] = None) -> List[Path]:
        """
        Files anywhere below ``path`` (optionally filtered by suffix), sorted.
        """
        p = Path(path)
        if not p.exists():
            logs.debug(f"[FS] path does not exist: {p}")
            return []

        files = [
            f for f in p.rglob("*")
            if f.is_file() and (suffix is None or f.suffix == suffix)
        ]
        return sorted(files)
