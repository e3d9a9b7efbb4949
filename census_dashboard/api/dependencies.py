"""
FastAPI dependencies — DatasetStore singleton, group and tract parsing.
"""
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Query

from census_dashboard.data.store import DatasetStore
from census_dashboard.data.schemas import UserGroup, find_group

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: DatasetStore | None = None


def set_store(store: DatasetStore | None) -> None:
    global _store
    _store = store


def get_store() -> DatasetStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return _store


def get_store_or_empty() -> DatasetStore:
    """Return the store even if the catalog failed to load (health/reload)."""
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


# ---------------------------------------------------------------------------
# Query parameter parsing
# ---------------------------------------------------------------------------

def parse_group(
    group: Optional[str] = Query(None, description="User group name (default: All Users)"),
) -> UserGroup:
    found = find_group(group)
    if found is None:
        raise HTTPException(400, f"Unknown user group: {group}")
    return found


def parse_tracts(
    tracts: Optional[str] = Query(None, description="Comma-separated tract keys, e.g. tract190200,tract190300"),
) -> list[str] | None:
    """None means every tract in the dataset; an empty string selects none."""
    if tracts is None:
        return None
    return [t.strip() for t in tracts.split(",") if t.strip()]
