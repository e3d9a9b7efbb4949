"""
Dataset Report — summary panel and full data table for one census table.
"""
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from census_dashboard.data.store import DatasetStore
from census_dashboard.data.schemas import UserGroup
from census_dashboard.analytics.dashboard import data_summary, table_rows, tract_label
from census_dashboard.excel.writer import ExcelWriter


def generate_json(
    store: DatasetStore,
    code: str,
    group: UserGroup | None = None,
    units: Iterable[str] | None = None,
) -> dict:
    units = store.select_units(code, units)
    table = table_rows(store, code, units)
    for row in table["rows"]:
        row["total"] = sum(row.get(u) or 0 for u in units)
    return {
        "summary": data_summary(store, code, group, units),
        "table": table,
    }


def generate_excel(
    store: DatasetStore,
    code: str,
    output_path: str | Path,
    group: UserGroup | None = None,
    units: Iterable[str] | None = None,
) -> Path:
    data = generate_json(store, code, group, units)
    s = data["summary"]
    top = s["highest_category"]
    ew = ExcelWriter()

    # Summary
    ws = ew.add_sheet("Summary")
    ew.write_title(ws, f"{s['dataset_name']} ({code})",
                   f"ACS 2022 5-Year Estimates  |  Selected Baltimore City Census Tracts  |  "
                   f"Generated {pd.Timestamp.now():%B %d, %Y}")

    row = ew.write_section(ws, 4, "DATA SUMMARY")
    details = []
    if s["group"]:
        details.append(("User Group", s["group"]))
        details.append(("User Description", s["description"]))
    details.append(("Dataset", f"{s['dataset_name']} ({code})"))
    details.append(("Census Tracts", ", ".join(tract_label(u) for u in s["units"]) or "None"))
    details.append(("Highest Category", top["name"] or "N/A"))
    row = ew.write_details(ws, row, details)

    row = ew.write_kpi_row(ws, row, [
        (s["total_count"], "TOTAL COUNT", "number"),
        (s["category_count"], "CATEGORIES", "number"),
        (s["unit_count"], "CENSUS TRACTS", "number"),
        (top["pct"], "HIGHEST CATEGORY SHARE", "percent"),
    ])

    # Data table
    columns = [("name", "text", "Category")]
    columns += [(u, "number", tract_label(u)) for u in s["units"]]
    columns.append(("total", "number", "Total"))

    top_idx = next(
        (i for i, r in enumerate(data["table"]["rows"]) if top["name"] and r["name"] == top["name"]),
        None,
    )
    ws_d = ew.add_sheet("Data")
    ew.write_table(
        ws_d, 1, columns, data["table"]["rows"],
        highlight_fn=lambda idx, _row: "gold" if idx == top_idx else None,
        show_total=True,
    )

    return ew.save(output_path)
