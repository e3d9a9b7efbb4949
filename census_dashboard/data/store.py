"""
DatasetStore — catalog plus reshaped tables, read once and served from memory.

Built explicitly at startup and handed to whoever needs it; nothing here is
module-level state.
"""
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Optional

import pandas as pd

from census_dashboard.config import DATA_FOLDER, CATALOG_FILENAME
from census_dashboard.data.catalog import Catalog, load_catalog
from census_dashboard.data.loader import read_dataset
from census_dashboard.data.reshape import reshape_table, unit_ids, records_to_frame


class DatasetStore:
    """Load-once, read-many access to the census extracts."""

    def __init__(self, data_dir: Path = DATA_FOLDER, catalog_path: Optional[Path] = None) -> None:
        self.data_dir = Path(data_dir)
        self.catalog_path = Path(catalog_path) if catalog_path else self.data_dir / CATALOG_FILENAME
        self._catalog: Catalog = Catalog()
        self._tables: dict[str, tuple[list[dict], list[str]]] = {}
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> "DatasetStore":
        """Read the catalog and drop any cached tables."""
        print(f"Loading census catalog from {self.data_dir}...")
        self._catalog = load_catalog(self.catalog_path)
        self._tables.clear()
        self._loaded = True
        return self

    def reload(self) -> "DatasetStore":
        """Re-read the catalog; tables are re-read lazily on next access."""
        return self.load()

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def _table(self, code: str | None) -> tuple[list[dict], list[str]]:
        if code in self._tables:
            return self._tables[code]
        raw = read_dataset(code, self._catalog, self.data_dir)
        entry = (reshape_table(raw), unit_ids(raw))
        self._tables[code] = entry
        print(f"  Cached {code}: {len(entry[0])} categories x {len(entry[1])} tracts")
        return entry

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_table(self, code: str | None) -> list[dict]:
        """Category records for a dataset (copies; the cache stays untouched)."""
        records, _ = self._table(code)
        return [dict(r) for r in records]

    def unit_ids(self, code: str | None) -> list[str]:
        """Tract keys recognised in the dataset's label row, in column order."""
        _, units = self._table(code)
        return list(units)

    def select_units(self, code: str | None, requested: Iterable[str] | None = None) -> list[str]:
        """Restrict a tract selection to the dataset's tracts, in dataset order.

        None selects every tract; unknown keys are ignored.
        """
        units = self.unit_ids(code)
        if requested is None:
            return units
        wanted = set(requested)
        return [u for u in units if u in wanted]

    def frame(self, code: str | None, units: Iterable[str] | None = None) -> pd.DataFrame:
        """Category × tract DataFrame (absent counts as 0)."""
        records, _ = self._table(code)
        return records_to_frame(records, self.select_units(code, units))

    def codes(self) -> list[str]:
        return sorted(self._catalog)

    def display_name(self, code: str) -> str:
        return self._catalog.display_name(code)

    def dataset_count(self) -> int:
        return len(self._catalog)

    def cached_count(self) -> int:
        return len(self._tables)
