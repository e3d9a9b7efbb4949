"""
Dashboard data endpoints — normalized table, summary panel, chart series, data table.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from census_dashboard.config import DEFAULT_CHART_TYPE
from census_dashboard.data.store import DatasetStore
from census_dashboard.data.schemas import ChartType, UserGroup
from census_dashboard.api.dependencies import get_store, parse_group, parse_tracts
from census_dashboard.api.response_models import SummaryResponse
from census_dashboard.analytics.dashboard import data_summary, chart, table_rows

router = APIRouter(prefix="/api", tags=["data"])


@router.get("/data")
def get_data(
    dataset: Optional[str] = Query(None, description="Dataset code, e.g. B01001"),
    store: DatasetStore = Depends(get_store),
):
    """Category records for one dataset: [{name, tract<id>: count, ...}]."""
    print(f"  Requested dataset: {dataset}")
    return {"data": store.get_table(dataset)}


@router.get("/summary", response_model=SummaryResponse)
def get_summary(
    dataset: Optional[str] = Query(None),
    group: UserGroup = Depends(parse_group),
    tracts: list[str] | None = Depends(parse_tracts),
    store: DatasetStore = Depends(get_store),
):
    """Data Summary panel for the selected group, dataset and tracts."""
    return data_summary(store, dataset, group, tracts)


@router.get("/chart")
def get_chart(
    dataset: Optional[str] = Query(None),
    chart_type: str = Query(DEFAULT_CHART_TYPE, description="bar|pie"),
    tracts: list[str] | None = Depends(parse_tracts),
    store: DatasetStore = Depends(get_store),
):
    """Bar (stacked per tract) or pie (per category) chart series."""
    try:
        ct = ChartType(chart_type)
    except ValueError:
        raise HTTPException(400, f"Invalid chart_type: {chart_type}")
    return chart(store, dataset, ct, tracts)


@router.get("/table")
def get_table(
    dataset: Optional[str] = Query(None),
    tracts: list[str] | None = Depends(parse_tracts),
    store: DatasetStore = Depends(get_store),
):
    """Data Table columns and rows; tracts without a value are null."""
    return table_rows(store, dataset, tracts)
