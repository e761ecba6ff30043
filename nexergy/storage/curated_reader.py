#!filepath: nexergy/storage/curated_reader.py
from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from nexergy import logs
from nexergy.utils.errors import StorageError
from nexergy.utils.filesystem import FileSystem


def read_curated_table(path: str | Path) -> pa.Table:
    """
    Load every parquet file below ``path`` into one Arrow table.

    - files are read in sorted path order (dt=YYYY-MM-DD partitions
      therefore arrive in date order, rows within a file keep their order)
    - schemas are unified by column name with type promotion
    - the core does not rely on file order: it reorders by timestamp

    Raises:
        StorageError: directory missing or no parquet file found
    """
    root = Path(path)
    if not root.is_dir():
        raise StorageError(f"curated directory not found: {root}")

    files = FileSystem.scan_tree(root, suffix=".parquet")
    if not files:
        raise StorageError(f"no parquet files found under {root}")

    tables = []
    for f in files:
        # partition directories (dt=...) are layout, not data columns
        tables.append(pq.read_table(f, partitioning=None))

    table = pa.concat_tables(tables, promote_options="permissive")
    logs.info(f"[CuratedReader] {root} files={len(files)} rows={table.num_rows}")
    return table
