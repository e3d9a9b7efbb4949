"""Catalog loading, table reshaping, and the in-memory dataset store."""
from .errors import (
    DashboardDataError, CatalogUnavailable, CatalogMalformed,
    UnknownDataset, DatasetUnavailable, MalformedTable,
)
from .catalog import Catalog, load_catalog, resolve_dataset
from .loader import read_csv_rows, read_dataset
from .reshape import extract_unit_id, parse_count, unit_columns, unit_ids, reshape_table, records_to_frame
from .schemas import ChartType, UserGroup, load_user_groups, find_group
from .store import DatasetStore
