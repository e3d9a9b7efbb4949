"""
Table catalog — dataset code → display name registry and dataset file resolution.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from census_dashboard.config import DATA_FOLDER, CATALOG_FILENAME, DATASET_FILE_TEMPLATE
from census_dashboard.data.errors import CatalogMalformed, CatalogUnavailable, UnknownDataset
from census_dashboard.data.loader import read_csv_rows


@dataclass(frozen=True)
class Catalog(Mapping):
    """Immutable code → display name mapping."""
    entries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __getitem__(self, code: str) -> str:
        return self.entries[code]

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def display_name(self, code: str) -> str:
        """Display name for a code, or the code itself when unlisted."""
        return self.entries.get(code, code)

    def label(self, code: str) -> str:
        """Dropdown label like "B01001 - Sex by Age"."""
        return f"{code} - {self.display_name(code)}"


def load_catalog(path: Path | None = None) -> Catalog:
    """Read the two-column (code, name) catalog file. No header row."""
    if path is None:
        path = DATA_FOLDER / CATALOG_FILENAME
    try:
        rows = read_csv_rows(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogUnavailable(f"Cannot read catalog {path}: {exc}") from exc

    entries: dict[str, str] = {}
    for line_no, row in enumerate(rows, 1):
        if len(row) < 2:
            raise CatalogMalformed(f"Malformed catalog {Path(path).name} row {line_no}: expected code and name, got {row!r}")
        code, name = row[0], row[1]
        entries[code] = name

    print(f"  Catalog: {len(entries)} datasets from {Path(path).name}")
    return Catalog(entries)


def resolve_dataset(code: str | None, catalog: Mapping[str, str]) -> str:
    """Return the dataset filename for a catalogued code.

    The code is interpolated into both placeholders of DATASET_FILE_TEMPLATE.
    """
    if not code or code not in catalog:
        raise UnknownDataset(code)
    return DATASET_FILE_TEMPLATE.format(code=code)
