"""
Census Tract Dashboard — FastAPI app factory with startup catalog loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from census_dashboard.data.errors import (
    DashboardDataError, CatalogUnavailable, CatalogMalformed,
    UnknownDataset, DatasetUnavailable, MalformedTable,
)
from census_dashboard.data.store import DatasetStore
from census_dashboard.api.dependencies import set_store
from census_dashboard.api.router_meta import router as meta_router
from census_dashboard.api.router_data import router as data_router
from census_dashboard.api.router_reports import router as reports_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the dataset catalog at startup."""
    from census_dashboard.config import DATA_FOLDER

    print(f"  DATA_FOLDER = {DATA_FOLDER}")
    print(f"  DATA_FOLDER exists = {DATA_FOLDER.exists()}")

    store = DatasetStore(DATA_FOLDER)
    try:
        store.load()
        print(f"\nCensus dashboard ready — {store.dataset_count()} datasets\n")
    except (CatalogUnavailable, CatalogMalformed) as exc:
        print(f"\nCensus dashboard started without a catalog: {exc}\n")
    set_store(store)
    yield
    set_store(None)


# ---------------------------------------------------------------------------
# Error translation: data-layer failures → JSON {"error": ...}
# ---------------------------------------------------------------------------

_ERROR_STATUS = [
    (UnknownDataset, 400),
    (DatasetUnavailable, 404),
    (MalformedTable, 422),
    (CatalogUnavailable, 503),
    (CatalogMalformed, 503),
]


async def data_error_handler(request: Request, exc: DashboardDataError) -> JSONResponse:
    status = next((code for cls, code in _ERROR_STATUS if isinstance(exc, cls)), 500)
    message = "Invalid dataset" if isinstance(exc, UnknownDataset) else str(exc)
    print(f"  {type(exc).__name__} on {request.url.path}: {exc}")
    return JSONResponse(status_code=status, content={"error": message})


def create_app(store: DatasetStore | None = None) -> FastAPI:
    """Build the app. A pre-built store skips the startup catalog load."""
    app = FastAPI(
        title="Census Tract Dashboard API",
        description="ACS 2022 5-year demographics for selected Baltimore City census tracts",
        version="1.0.0",
        lifespan=lifespan if store is None else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DashboardDataError, data_error_handler)

    app.include_router(meta_router)
    app.include_router(data_router)
    app.include_router(reports_router)

    if store is not None:
        set_store(store)

    return app


app = create_app()
