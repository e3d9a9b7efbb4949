"""
Dashboard analytics — summary panel, chart series, and table rows for one dataset.

All functions take the category × tract frame from DatasetStore.frame(); a
tract missing from a category counts as 0 in every total.
"""
from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from census_dashboard.config import COLOR_HUE_STEP, COLOR_SATURATION, COLOR_LIGHTNESS, UNIT_PREFIX
from census_dashboard.data.store import DatasetStore
from census_dashboard.data.schemas import ChartType, UserGroup
from census_dashboard.analytics.common import pct_of_total, sanitize_for_json


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def generate_colors(count: int) -> list[str]:
    """One HSL color per series, hues spaced by the golden angle."""
    colors = []
    for i in range(count):
        hue = (i * COLOR_HUE_STEP) % 360
        colors.append(f"hsl({hue:g}, {COLOR_SATURATION}%, {COLOR_LIGHTNESS}%)")
    return colors


def tract_number(unit_id: str) -> str:
    """"tract190200" → "190200"."""
    return unit_id[len(UNIT_PREFIX):] if unit_id.startswith(UNIT_PREFIX) else unit_id


def tract_label(unit_id: str) -> str:
    """"tract190200" → "Tract 190200"."""
    return f"Tract {tract_number(unit_id)}"


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------

def category_totals(df: pd.DataFrame) -> pd.Series:
    """Row totals across the selected tracts, in category order."""
    return df.sum(axis=1).astype("int64")


def unit_totals(df: pd.DataFrame) -> dict[str, int]:
    """Column totals per tract."""
    return {unit: int(df[unit].sum()) for unit in df.columns}


def highest_category(df: pd.DataFrame) -> dict:
    """First category with the strictly largest positive total."""
    totals = category_totals(df)
    best = {"name": "", "total": 0}
    for name, total in zip(df.index, totals):
        if total > best["total"]:
            best = {"name": name, "total": int(total)}
    return best


def summarize_frame(df: pd.DataFrame) -> dict:
    """Summary panel numbers for a category × tract frame."""
    per_unit = unit_totals(df)
    grand_total = sum(per_unit.values())
    top = highest_category(df)
    top["pct"] = round(pct_of_total(top["total"], grand_total), 2)
    return {
        "total_count": grand_total,
        "category_count": len(df),
        "unit_count": len(df.columns),
        "highest_category": top,
        "unit_totals": per_unit,
    }


# ---------------------------------------------------------------------------
# Dashboard payloads
# ---------------------------------------------------------------------------

def data_summary(
    store: DatasetStore,
    code: str,
    group: UserGroup | None = None,
    units: Iterable[str] | None = None,
) -> dict:
    """Data Summary panel: group, dataset, totals and the highest category."""
    df = store.frame(code, units)
    summary = summarize_frame(df)
    return sanitize_for_json({
        "group": group.name if group else None,
        "description": group.description if group else None,
        "dataset": code,
        "dataset_name": store.display_name(code),
        "units": list(df.columns),
        **summary,
    })


def pie_chart(store: DatasetStore, code: str, units: Iterable[str] | None = None) -> dict:
    """One slice per category, valued at its total over the selected tracts."""
    df = store.frame(code, units)
    totals = category_totals(df)
    grand_total = int(totals.sum())
    colors = generate_colors(len(df.columns))
    slices = []
    for idx, (name, value) in enumerate(zip(df.index, totals)):
        slices.append({
            "name": name,
            "value": int(value),
            "pct": round(pct_of_total(int(value), grand_total), 2),
            "color": colors[idx % len(colors)] if colors else None,
        })
    return sanitize_for_json({
        "chart_type": ChartType.PIE.value,
        "title": "Categories Distribution",
        "data": slices,
    })


def bar_chart(store: DatasetStore, code: str, units: Iterable[str] | None = None) -> dict:
    """Stacked horizontal bars: one bar per category, one stack segment per tract."""
    selected = store.select_units(code, units)
    records = store.get_table(code)
    data = [{"name": r["name"], **{u: r[u] for u in selected if u in r}} for r in records]
    colors = generate_colors(len(selected))
    series = [
        {"key": unit, "label": tract_number(unit), "color": color}
        for unit, color in zip(selected, colors)
    ]
    return sanitize_for_json({
        "chart_type": ChartType.BAR.value,
        "title": "Census Tracts",
        "data": data,
        "series": series,
    })


def chart(
    store: DatasetStore,
    code: str,
    chart_type: ChartType = ChartType.BAR,
    units: Iterable[str] | None = None,
) -> dict:
    if ChartType(chart_type) == ChartType.PIE:
        return pie_chart(store, code, units)
    return bar_chart(store, code, units)


def table_rows(store: DatasetStore, code: str, units: Iterable[str] | None = None) -> dict:
    """Data Table: header labels plus one row per category (absent cells as None)."""
    selected = store.select_units(code, units)
    records = store.get_table(code)
    return {
        "columns": [{"key": "name", "label": "Category"}]
                   + [{"key": u, "label": tract_label(u)} for u in selected],
        "rows": [{"name": r["name"], **{u: r.get(u) for u in selected}} for r in records],
    }
