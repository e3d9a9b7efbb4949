"""
Meta endpoints: health, dataset catalog, user groups, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from census_dashboard.config import DEFAULT_GROUP
from census_dashboard.data.store import DatasetStore
from census_dashboard.data.schemas import load_user_groups
from census_dashboard.api.dependencies import get_store, get_store_or_empty
from census_dashboard.api.response_models import HealthResponse, DatasetsResponse, GroupsResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DatasetStore = Depends(get_store_or_empty)):
    return HealthResponse(
        status="ok" if store.is_loaded else "catalog unavailable",
        datasets=store.dataset_count(),
        cached=store.cached_count(),
        data_dir=str(store.data_dir),
    )


@router.get("/datasets", response_model=DatasetsResponse)
def list_datasets(store: DatasetStore = Depends(get_store)):
    datasets = [{"code": code, "name": store.display_name(code)} for code in store.codes()]
    return {"datasets": datasets, "count": len(datasets)}


@router.get("/groups", response_model=GroupsResponse)
def list_groups(store: DatasetStore = Depends(get_store)):
    groups = [g.to_dict(store.catalog) for g in load_user_groups()]
    return {"groups": groups, "default": DEFAULT_GROUP}


@router.post("/reload")
def reload_data(store: DatasetStore = Depends(get_store_or_empty)):
    """Re-read the catalog and drop cached tables."""
    store.reload()
    print(f"  Reload complete — {store.dataset_count()} datasets")
    return {"status": "reloaded", "datasets": store.dataset_count()}
