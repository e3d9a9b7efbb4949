"""
Wide census table → one flat record per category.

Row 0 is a title, row 1 holds the tract labels, rows 2+ are categories with
one cell per tract column.
"""
from __future__ import annotations

import re
from collections.abc import Sequence

import pandas as pd

from census_dashboard.config import (
    UNIT_LABEL_RE, UNIT_PREFIX, EXCLUDED_CATEGORIES, INT_MIN, INT_MAX,
)
from census_dashboard.data.errors import MalformedTable

_INT_RE = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Cell / label parsing
# ---------------------------------------------------------------------------

def extract_unit_id(label: str) -> str | None:
    """"Census Tract 1902, Baltimore city" → "tract1902"; None if no match."""
    m = UNIT_LABEL_RE.search(label or "")
    if m:
        return f"{UNIT_PREFIX}{m.group(1)}"
    return None


def parse_count(cell: str | None) -> int | None:
    """Strict base-10 integer parse. Blank, padded, comma-grouped or decimal text → None."""
    if cell is None or not _INT_RE.fullmatch(cell):
        return None
    value = int(cell, 10)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


# ---------------------------------------------------------------------------
# Reshaping
# ---------------------------------------------------------------------------

def unit_columns(header: Sequence[str]) -> list[tuple[int, str]]:
    """(column index, unit id) for every recognised tract label after column 0.

    Unrecognised labels are dropped along with their column.
    """
    columns = []
    for idx, label in enumerate(header):
        if idx == 0:
            continue
        unit_id = extract_unit_id(label)
        if unit_id is not None:
            columns.append((idx, unit_id))
    return columns


def unit_ids(raw: Sequence[Sequence[str]]) -> list[str]:
    """Recognised unit ids in column order, each listed once."""
    if len(raw) < 2:
        raise MalformedTable(f"Expected a title row and a unit-label row, got {len(raw)} row(s)")
    return list(dict.fromkeys(unit_id for _, unit_id in unit_columns(raw[1])))


def reshape_table(raw: Sequence[Sequence[str]]) -> list[dict]:
    """Convert raw rows into category records.

    Each record is {"name": <category>, <unit id>: <int>, ...}. Rows labelled
    "Total:" or "Estimate" are skipped. A unit field is only present when
    its cell parses as a clean integer.
    """
    if len(raw) < 2:
        raise MalformedTable(f"Expected a title row and a unit-label row, got {len(raw)} row(s)")

    columns = unit_columns(raw[1])
    records: list[dict] = []
    for row in raw[2:]:
        category = row[0] if row else ""
        if category in EXCLUDED_CATEGORIES:
            continue
        record: dict = {"name": category}
        for idx, unit_id in columns:
            if idx >= len(row):
                continue
            value = parse_count(row[idx])
            if value is not None:
                record[unit_id] = value
        records.append(record)
    return records


def records_to_frame(records: list[dict], units: Sequence[str]) -> pd.DataFrame:
    """Category × unit frame with absent fields as 0, indexed by category name.

    Categories may repeat (e.g. "Under 5 years" under Male and Female), so
    the index is not unique.
    """
    units = list(units)
    if not records:
        return pd.DataFrame(columns=units, dtype="int64")
    df = pd.DataFrame.from_records(records)
    df = df.reindex(columns=["name", *units])
    if units:
        df[units] = df[units].fillna(0).astype("int64")
    return df.set_index("name")
