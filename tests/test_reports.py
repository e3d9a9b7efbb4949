"""Tests for the dataset report (JSON + Excel)."""

from openpyxl import load_workbook

from census_dashboard.data.schemas import find_group
from census_dashboard.reports.dataset_report import generate_json, generate_excel


def test_generate_json_adds_row_totals(store):
    data = generate_json(store, "B01001")
    assert [r["total"] for r in data["table"]["rows"]] == [2600, 155, 0]
    assert data["summary"]["total_count"] == 2755


def test_generate_json_tract_subset(store):
    data = generate_json(store, "B01001", units=["tract1903"])
    assert [r["total"] for r in data["table"]["rows"]] == [1200, 75, 0]
    assert data["summary"]["units"] == ["tract1903"]


def test_generate_excel(store, tmp_path):
    group = find_group("7. Special Populations")
    path = generate_excel(store, "B01001", tmp_path / "out" / "report.xlsx", group)
    assert path.exists()

    wb = load_workbook(path)
    assert wb.sheetnames == ["Summary", "Data"]

    summary = wb["Summary"]
    assert summary["A1"].value == "Sex by Age (B01001)"
    labels = {summary.cell(row=r, column=1).value: summary.cell(row=r, column=2).value for r in range(1, 20)}
    assert labels["User Group"] == "7. Special Populations"
    assert labels["Highest Category"] == "Male:"

    data = wb["Data"]
    header = [c.value for c in data[1]]
    assert header == ["Category", "Tract 1902", "Tract 1903", "Total"]
    assert [c.value for c in data[2]] == ["Male:", 1400, 1200, 2600]
    # absent counts stay blank
    assert [c.value for c in data[4]] == ["5 to 9 years", None, None, 0]
    assert [c.value for c in data[5]] == ["TOTAL", 1480, 1275, 2755]
