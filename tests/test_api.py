"""API tests against a store built from fixture CSVs."""

from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from openpyxl import load_workbook

from census_dashboard import config
from census_dashboard.config import CATALOG_FILENAME
from census_dashboard.data.schemas import find_group
from census_dashboard.main import app as default_app, create_app
from census_dashboard.api import router_reports
from census_dashboard.api.dependencies import set_store

from conftest import dataset_path, write_rows


@pytest.fixture
def client(store):
    app = create_app(store)
    yield TestClient(app)
    set_store(None)


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["datasets"] == 4


def test_datasets(client):
    body = client.get("/api/datasets").json()
    assert body["count"] == 4
    assert {"code": "B01001", "name": "Sex by Age"} in body["datasets"]


def test_groups(client):
    body = client.get("/api/groups").json()
    assert body["default"] == "All Users"
    transit = next(g for g in body["groups"] if g["name"] == "4. Transit Users")
    assert [d["code"] for d in transit["datasets"]] == ["B08303", "B08134", "C24010"]
    assert transit["datasets"][1]["name"] == "Means of Transportation"


def test_data(client):
    response = client.get("/api/data", params={"dataset": "B02001"})
    assert response.status_code == 200
    assert response.json() == {"data": [
        {"name": "White alone", "tract1902": 3, "tract1903": 4},
        {"name": "Black or African American alone", "tract1903": 7},
    ]}


@pytest.mark.parametrize("params", [{}, {"dataset": ""}, {"dataset": "B00000"}])
def test_data_invalid_dataset(client, params):
    response = client.get("/api/data", params=params)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid dataset"}


def test_data_missing_file(client):
    response = client.get("/api/data", params={"dataset": "B99999"})
    assert response.status_code == 404
    assert "error" in response.json()


def test_data_malformed_table(client):
    response = client.get("/api/data", params={"dataset": "B08134"})
    assert response.status_code == 422
    assert "error" in response.json()


def test_summary(client):
    response = client.get("/api/summary", params={
        "dataset": "B01001", "group": "1. Residential Users", "tracts": "tract1902",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["group"] == "1. Residential Users"
    assert body["units"] == ["tract1902"]
    assert body["total_count"] == 1480
    assert body["highest_category"]["name"] == "Male:"


def test_summary_unknown_group(client):
    response = client.get("/api/summary", params={"dataset": "B01001", "group": "Nobody"})
    assert response.status_code == 400


def test_chart(client):
    bar = client.get("/api/chart", params={"dataset": "B02001"}).json()
    assert bar["chart_type"] == "bar"
    assert [s["label"] for s in bar["series"]] == ["1902", "1903"]

    pie = client.get("/api/chart", params={"dataset": "B02001", "chart_type": "pie"}).json()
    assert [p["value"] for p in pie["data"]] == [7, 7]


def test_chart_invalid_type(client):
    response = client.get("/api/chart", params={"dataset": "B02001", "chart_type": "line"})
    assert response.status_code == 400


def test_table(client):
    body = client.get("/api/table", params={"dataset": "B02001", "tracts": "tract1903"}).json()
    assert [c["key"] for c in body["columns"]] == ["name", "tract1903"]
    assert body["rows"][0] == {"name": "White alone", "tract1903": 4}


def test_report_json(client):
    body = client.get("/api/report", params={"dataset": "B02001"}).json()
    assert body["summary"]["total_count"] == 14
    assert [r["total"] for r in body["table"]["rows"]] == [7, 7]


def test_export(client, tmp_path, monkeypatch):
    reports = tmp_path / "reports"
    monkeypatch.setattr(router_reports, "REPORTS_FOLDER", reports)
    response = client.get("/api/export", params={"dataset": "B01001"})
    assert response.status_code == 200
    assert response.headers["content-type"] == router_reports.XLSX_MEDIA_TYPE
    assert 'filename="Census_B01001.xlsx"' in response.headers["content-disposition"]
    assert load_workbook(BytesIO(response.content)).sheetnames == ["Summary", "Data"]
    # the workbook is removed once it has been sent
    assert list(reports.iterdir()) == []


def test_exports_do_not_share_a_file(store, tmp_path, monkeypatch):
    monkeypatch.setattr(router_reports, "REPORTS_FOLDER", tmp_path / "reports")
    group = find_group(None)
    first = router_reports.dataset_report_excel("B01001", group, ["tract1902"], store)
    second = router_reports.dataset_report_excel("B01001", group, ["tract1903"], store)
    assert first.path != second.path

    header = [c.value for c in load_workbook(first.path)["Data"][1]]
    assert header == ["Category", "Tract 1902", "Total"]
    header = [c.value for c in load_workbook(second.path)["Data"][1]]
    assert header == ["Category", "Tract 1903", "Total"]


def test_export_invalid_dataset(client, tmp_path, monkeypatch):
    monkeypatch.setattr(router_reports, "REPORTS_FOLDER", tmp_path / "reports")
    response = client.get("/api/export", params={"dataset": "../etc"})
    assert response.status_code == 400
    assert not (tmp_path / "reports").exists()


def test_store_not_loaded():
    set_store(None)
    client = TestClient(default_app)
    assert client.get("/api/data", params={"dataset": "B01001"}).status_code == 503


def test_startup_without_catalog(tmp_path, monkeypatch):
    empty = tmp_path / "empty"
    empty.mkdir()
    monkeypatch.setattr(config, "DATA_FOLDER", empty)
    monkeypatch.setattr(config, "REPORTS_FOLDER", tmp_path / "reports")

    with TestClient(create_app()) as client:
        body = client.get("/api/health").json()
        assert body["status"] == "catalog unavailable"
        assert body["datasets"] == 0
        assert client.get("/api/data", params={"dataset": "B01001"}).status_code == 503

    # startup leaves the reports folder alone
    assert not (tmp_path / "reports").exists()


@pytest.mark.parametrize("catalog_rows", [None, [["B01001"]]])
def test_reload_with_broken_catalog(client, data_dir, catalog_rows):
    catalog = data_dir / CATALOG_FILENAME
    if catalog_rows is None:
        catalog.unlink()
    else:
        write_rows(catalog, catalog_rows)

    response = client.post("/api/reload")
    assert response.status_code == 503
    assert "catalog" in response.json()["error"]


def test_reload(client, data_dir):
    write_rows(data_dir / CATALOG_FILENAME, [["B02001", "Race"]])
    response = client.post("/api/reload")
    assert response.status_code == 200
    assert response.json() == {"status": "reloaded", "datasets": 1}


def test_data_undecodable_file(client, data_dir):
    dataset_path(data_dir, "B02001").write_bytes(b"\xff\xfe\x00not utf-8")
    response = client.get("/api/data", params={"dataset": "B02001"})
    assert response.status_code == 404
    assert "B02001" in response.json()["error"]
