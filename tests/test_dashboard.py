"""Tests for summary panel, chart series, and table payloads."""

import pandas as pd
import pytest

from census_dashboard.analytics.dashboard import (
    generate_colors, tract_label, tract_number,
    unit_totals, highest_category, summarize_frame,
    data_summary, pie_chart, bar_chart, chart, table_rows,
)
from census_dashboard.data.reshape import records_to_frame
from census_dashboard.data.schemas import ChartType, find_group


def _frame(records, units=("tract1", "tract2")):
    return records_to_frame(records, list(units))


class TestHelpers:
    def test_colors(self):
        assert generate_colors(0) == []
        colors = generate_colors(3)
        assert colors[0] == "hsl(0, 70%, 50%)"
        assert colors[1] == "hsl(137.508, 70%, 50%)"
        assert colors[2] == "hsl(275.016, 70%, 50%)"

    def test_colors_wrap_hue(self):
        assert generate_colors(4)[3] == "hsl(52.524, 70%, 50%)"

    def test_tract_names(self):
        assert tract_number("tract190200") == "190200"
        assert tract_label("tract190200") == "Tract 190200"


class TestSummaries:
    records = [{"name": "A", "tract1": 3, "tract2": 4}, {"name": "B", "tract2": 7}]

    def test_unit_totals(self):
        assert unit_totals(_frame(self.records)) == {"tract1": 3, "tract2": 11}

    def test_tie_keeps_first_category(self):
        assert highest_category(_frame(self.records)) == {"name": "A", "total": 7}

    def test_summary(self):
        s = summarize_frame(_frame(self.records))
        assert s["total_count"] == 14
        assert s["category_count"] == 2
        assert s["unit_count"] == 2
        assert s["highest_category"] == {"name": "A", "total": 7, "pct": 50.0}

    def test_all_zero_table(self):
        s = summarize_frame(_frame([{"name": "A"}, {"name": "B", "tract1": 0}]))
        assert s["total_count"] == 0
        assert s["highest_category"] == {"name": "", "total": 0, "pct": 0.0}

    def test_no_selected_units(self):
        s = summarize_frame(_frame(self.records, units=()))
        assert s["unit_count"] == 0
        assert s["total_count"] == 0


class TestStorePayloads:
    def test_data_summary(self, store):
        group = find_group(None)
        s = data_summary(store, "B01001", group)
        assert s["group"] == "All Users"
        assert s["dataset_name"] == "Sex by Age"
        assert s["units"] == ["tract1902", "tract1903"]
        assert s["unit_totals"] == {"tract1902": 1480, "tract1903": 1275}
        assert s["total_count"] == 2755
        assert s["category_count"] == 3
        assert s["highest_category"] == {"name": "Male:", "total": 2600, "pct": 94.37}

    def test_data_summary_for_tract_subset(self, store):
        s = data_summary(store, "B01001", None, ["tract1903"])
        assert s["group"] is None
        assert s["total_count"] == 1275
        assert s["unit_count"] == 1

    def test_pie_chart(self, store):
        pie = pie_chart(store, "B02001")
        assert pie["chart_type"] == "pie"
        assert [(p["name"], p["value"]) for p in pie["data"]] == [
            ("White alone", 7),
            ("Black or African American alone", 7),
        ]
        assert pie["data"][0]["pct"] == 50.0
        assert pie["data"][0]["color"] == "hsl(0, 70%, 50%)"

    def test_bar_chart(self, store):
        bar = bar_chart(store, "B02001", ["tract1903"])
        assert bar["chart_type"] == "bar"
        assert bar["data"] == [
            {"name": "White alone", "tract1903": 4},
            {"name": "Black or African American alone", "tract1903": 7},
        ]
        assert bar["series"] == [{"key": "tract1903", "label": "1903", "color": "hsl(0, 70%, 50%)"}]

    def test_bar_chart_keeps_absent_fields_absent(self, store):
        bar = bar_chart(store, "B02001")
        assert "tract1902" not in bar["data"][1]

    def test_chart_dispatch(self, store):
        assert chart(store, "B02001", ChartType.PIE)["chart_type"] == "pie"
        assert chart(store, "B02001", "bar")["chart_type"] == "bar"
        with pytest.raises(ValueError):
            chart(store, "B02001", "line")

    def test_table_rows(self, store):
        table = table_rows(store, "B02001")
        assert [c["label"] for c in table["columns"]] == ["Category", "Tract 1902", "Tract 1903"]
        assert table["rows"][1] == {
            "name": "Black or African American alone", "tract1902": None, "tract1903": 7,
        }
