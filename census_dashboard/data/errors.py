"""
Typed failures raised while loading the catalog and dataset tables.
"""
from __future__ import annotations


class DashboardDataError(Exception):
    """Base class for catalog and dataset loading failures."""


class CatalogUnavailable(DashboardDataError):
    """The catalog file could not be read."""


class CatalogMalformed(DashboardDataError):
    """The catalog file was read but a row has fewer than two columns."""


class UnknownDataset(DashboardDataError):
    """The requested dataset code is missing, empty, or not in the catalog."""

    def __init__(self, code: str | None) -> None:
        self.code = code
        super().__init__(f"Unknown dataset: {code!r}")


class DatasetUnavailable(DashboardDataError):
    """The catalog lists the dataset but its file could not be read."""


class MalformedTable(DashboardDataError):
    """The dataset has no unit-label row."""
