"""Tests for terminal and export formatters."""

import csv
import io
import json

import pytest
from rich.console import Console

from coverage_matrix.formatters import CsvFormatter, JsonFormatter, RichFormatter, get_formatter
from coverage_matrix.models import PROGRAM_TYPE, RIGOR, Dataset, Program
from coverage_matrix.state import Layout, build_render_state


class TestGetFormatter:
    @pytest.mark.parametrize("name,cls", [("rich", RichFormatter), ("json", JsonFormatter), ("csv", CsvFormatter)])
    def test_known(self, name, cls):
        assert isinstance(get_formatter(name), cls)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestJsonFormatter:
    def test_structure(self, sample):
        data = json.loads(JsonFormatter().format(build_render_state(sample, RIGOR)))
        assert data["category_field"] == "Rigor"
        assert data["category_domain"] == ["High", "Low", "Medium"]
        assert data["goal_domain"][0] == "G-01"
        g06 = [c for c in data["cells"] if c["goal_id"] == "G-06"]
        assert {c["category"]: c["level"] for c in g06} == {"High": "overlap", "Low": "single"}

    def test_render_prints(self, scenario_dataset, capsys):
        JsonFormatter().render(build_render_state(scenario_dataset, "cat"))
        assert json.loads(capsys.readouterr().out)["category_domain"] == ["X"]


class TestCsvFormatter:
    def test_rows_in_axis_order(self, scenario_dataset):
        text = CsvFormatter().format(build_render_state(scenario_dataset, "cat"))
        rows = list(csv.reader(io.StringIO(text)))
        assert rows[0] == ["goal_id", "goal_name", "category", "program_count", "level", "programs"]
        assert rows[1] == ["G-01", "Basic Computation", "X", "1", "single", "P1"]
        assert rows[2] == ["G-02", "Phonological Awareness", "X", "2", "overlap", "P1; P2"]
        assert len(rows) == 3


class TestRichFormatter:
    def test_grid(self, sample):
        console = Console(width=160, color_system=None, file=io.StringIO())
        text = RichFormatter(console).format(build_render_state(sample, PROGRAM_TYPE))
        assert "Coverage by Program Type" in text
        assert "Decimals and Fractions" in text
        assert "■ 2" in text
        assert "overlap" in text

    def test_table_columns(self, sample):
        table = RichFormatter(Console(file=io.StringIO())).build_table(build_render_state(sample, RIGOR))
        assert [c.header for c in table.columns] == ["Goal", "Name", "High", "Low", "Medium"]
        assert table.row_count == 10


class TestHiddenUnspecified:
    @pytest.fixture
    def hidden_state(self, three_goals):
        dataset = Dataset(
            goals=tuple(three_goals),
            programs=(Program("A", "G-01", {"cat": "X"}), Program("B", "G-02", {})),
        )
        return build_render_state(dataset, "cat", Layout(show_unspecified=False))

    def test_json_exports_drawn_cells_only(self, hidden_state):
        data = json.loads(JsonFormatter().format(hidden_state))
        assert [c["category"] for c in data["cells"]] == ["X"]

    def test_csv_exports_drawn_cells_only(self, hidden_state):
        rows = list(csv.reader(io.StringIO(CsvFormatter().format(hidden_state))))
        assert [r[2] for r in rows[1:]] == ["X"]
