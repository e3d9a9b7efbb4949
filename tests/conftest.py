import csv
from pathlib import Path

import pytest

from census_dashboard.config import CATALOG_FILENAME, DATASET_FILE_TEMPLATE
from census_dashboard.data.store import DatasetStore

CATALOG_ROWS = [
    ["B01001", "Sex by Age"],
    ["B02001", "Race"],
    ["B08134", "Means of Transportation"],
    ["B99999", "Listed Without A File"],
]

SEX_BY_AGE_ROWS = [
    ["B01001: Sex by Age - Universe: Total population"],
    [
        "Label (Grouping)",
        "Census Tract 1902; Baltimore city; Maryland",
        "Margin of Error",
        "Census Tract 1903; Baltimore city; Maryland",
    ],
    ["Total:", "3000", "120", "2500"],
    ["Male:", "1400", "90", "1200"],
    ["Under 5 years", "80", "", "75"],
    ["5 to 9 years", "1,234", "40", "n/a"],
    ["Estimate", "x", "y", "z"],
]

RACE_ROWS = [
    ["B02001: Race - Universe: Total population"],
    ["Label (Grouping)", "Census Tract 1902", "Census Tract 1903"],
    ["Total:", "10", "20"],
    ["White alone", "3", "4"],
    ["Black or African American alone", "", "7"],
]

# Only a title row: no unit-label row
TRANSPORT_ROWS = [
    ["B08134: Means of Transportation"],
]


def write_rows(path: Path, rows: list[list[str]]) -> Path:
    with open(path, "w", encoding="utf-8", newline="") as f:
        csv.writer(f).writerows(rows)
    return path


def dataset_path(data_dir: Path, code: str) -> Path:
    return data_dir / DATASET_FILE_TEMPLATE.format(code=code)


@pytest.fixture
def data_dir(tmp_path):
    d = tmp_path / "data"
    d.mkdir()
    write_rows(d / CATALOG_FILENAME, CATALOG_ROWS)
    write_rows(dataset_path(d, "B01001"), SEX_BY_AGE_ROWS)
    write_rows(dataset_path(d, "B02001"), RACE_ROWS)
    write_rows(dataset_path(d, "B08134"), TRANSPORT_ROWS)
    return d


@pytest.fixture
def store(data_dir):
    return DatasetStore(data_dir).load()
