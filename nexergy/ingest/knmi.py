#!filepath: nexergy/ingest/knmi.py
from __future__ import annotations

import io
import re
from typing import List, Optional

import pyarrow as pa
import pyarrow.csv as pacsv

from nexergy import logs
from nexergy.utils.errors import SchemaError

DATE_STR_COLUMN = "date_str"

_YYYYMMDD = re.compile(r"[0-9]{8}")


class KnmiCsvParser:
    """
    KNMI hourly / daily CSV export -> Arrow table (pure, no network)

    Input layout:
        # free-text preamble lines
        # STN,YYYYMMDD,   HH,   FH,    T
          260,20240101,    1,   50,   87
          ...

    Semantics:
        - '#' lines are comments; the last comment line holding a comma
          separated header supplies the column names when present,
          otherwise the first data line is the header
        - cells are whitespace-trimmed before type inference
        - date column = first column whose first value starts with
          8 digits; a YYYY-MM-DD copy is appended as ``date_str``
          ("" for rows that do not conform)
    """

    def parse(self, text: str) -> pa.Table:
        header, data_lines = self._split(text)
        if not data_lines:
            raise SchemaError("KNMI payload holds no data rows")

        if header is not None and len(header) != len(data_lines[0].split(",")):
            header = None

        if header is not None:
            read_options = pacsv.ReadOptions(column_names=header)
        else:
            read_options = pacsv.ReadOptions()

        payload = "\n".join(data_lines).encode("utf-8")
        table = pacsv.read_csv(io.BytesIO(payload), read_options=read_options)

        date_col = self.detect_date_column(table)
        if date_col is None:
            raise SchemaError(
                f"KNMI date column not found; columns: {table.column_names}"
            )

        dates = [self.normalize_date(v) for v in table.column(date_col).to_pylist()]
        table = table.append_column(DATE_STR_COLUMN, pa.array(dates, type=pa.string()))

        logs.info(f"[Ingest:knmi] rows={table.num_rows} date_col={date_col}")
        return table

    # --------------------------------------------------
    @staticmethod
    def _split(text: str):
        header: Optional[List[str]] = None
        data_lines: List[str] = []

        for line in text.splitlines():
            stripped = line.strip()
            if not stripped:
                continue
            if stripped.startswith("#"):
                body = stripped.lstrip("#").strip()
                if "," in body and not data_lines:
                    header = [c.strip() for c in body.split(",")]
                continue
            data_lines.append(",".join(c.strip() for c in line.split(",")))

        return header, data_lines

    @staticmethod
    def detect_date_column(table: pa.Table) -> Optional[str]:
        if table.num_rows == 0:
            return None

        for name in table.column_names:
            first = table.column(name)[0].as_py()
            if first is None:
                continue
            if _YYYYMMDD.match(str(first).strip()):
                return name
        return None

    @staticmethod
    def normalize_date(value) -> str:
        if value is None:
            return ""
        t = str(value).strip()
        if not _YYYYMMDD.match(t):
            return ""
        return f"{t[0:4]}-{t[4:6]}-{t[6:8]}"


def parse_knmi_csv(text: str) -> pa.Table:
    return KnmiCsvParser().parse(text)
