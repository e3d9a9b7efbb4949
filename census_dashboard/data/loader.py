"""
CSV reading for the catalog and dataset extracts.
"""
from __future__ import annotations

import csv
from collections.abc import Mapping
from pathlib import Path

from census_dashboard.config import DATA_FOLDER
from census_dashboard.data.errors import DatasetUnavailable


def read_csv_rows(path: Path) -> list[list[str]]:
    """Parse a comma-separated UTF-8 file into rows of string cells.

    Blank lines are skipped. Rows keep their own length; the extracts are
    ragged (a one-cell title row above wider label and data rows).
    """
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        return [row for row in csv.reader(f) if row]


def read_dataset(
    code: str | None,
    catalog: Mapping[str, str],
    data_dir: Path = DATA_FOLDER,
) -> list[list[str]]:
    """Resolve a dataset code against the catalog and read its raw table."""
    from census_dashboard.data.catalog import resolve_dataset

    filename = resolve_dataset(code, catalog)
    path = Path(data_dir) / filename
    print(f"  Reading {filename}")
    try:
        rows = read_csv_rows(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetUnavailable(f"Cannot read dataset {code} ({filename}): {exc}") from exc
    print(f"  {code}: {len(rows)} rows")
    return rows
