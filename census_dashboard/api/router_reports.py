"""
Report endpoints — Excel export of a dataset's summary and table.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import FileResponse
from starlette.background import BackgroundTask

from census_dashboard.config import REPORTS_FOLDER
from census_dashboard.data.catalog import resolve_dataset
from census_dashboard.data.store import DatasetStore
from census_dashboard.data.schemas import UserGroup
from census_dashboard.api.dependencies import get_store, parse_group, parse_tracts
from census_dashboard.reports.dataset_report import generate_json, generate_excel

router = APIRouter(prefix="/api", tags=["reports"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("/report")
def dataset_report_json(
    dataset: Optional[str] = Query(None),
    group: UserGroup = Depends(parse_group),
    tracts: list[str] | None = Depends(parse_tracts),
    store: DatasetStore = Depends(get_store),
):
    """Summary + table in one payload."""
    return generate_json(store, dataset, group, tracts)


@router.get("/export")
def dataset_report_excel(
    dataset: Optional[str] = Query(None),
    group: UserGroup = Depends(parse_group),
    tracts: list[str] | None = Depends(parse_tracts),
    store: DatasetStore = Depends(get_store),
):
    """Download the dataset report as an .xlsx workbook.

    Each request writes its own workbook, removed once the download is sent.
    """
    resolve_dataset(dataset, store.catalog)
    REPORTS_FOLDER.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f"Census_{dataset}_", suffix=".xlsx", dir=REPORTS_FOLDER)
    os.close(fd)
    out_path = Path(tmp_name)
    try:
        generate_excel(store, dataset, out_path, group, tracts)
    except Exception:
        out_path.unlink(missing_ok=True)
        raise
    return FileResponse(
        path=str(out_path),
        filename=f"Census_{dataset}.xlsx",
        media_type=XLSX_MEDIA_TYPE,
        background=BackgroundTask(os.unlink, out_path),
    )
