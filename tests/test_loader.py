"""Tests for loading goal and program tables."""

import pytest
import requests

from coverage_matrix import loader
from coverage_matrix.exceptions import DataLoadError, MissingColumnError
from coverage_matrix.loader import goals_from_rows, load_dataset, programs_from_rows, read_table
from coverage_matrix.sample import sample_dataset


class _FakeResponse:
    def __init__(self, content, status=200):
        self.content = content
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class TestReadTable:
    def test_reads_local_csv(self, goals_csv):
        rows = read_table(str(goals_csv))
        assert rows[0] == {"ID": "G-01", "Name": "Basic Computation", "Grade": "K"}
        assert len(rows) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataLoadError, match="Cannot load table"):
            read_table(str(tmp_path / "nope.csv"))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(DataLoadError) as exc:
            read_table(str(path))
        assert exc.value.reason == "empty table"

    def test_strips_header_and_bom(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes(b"\xef\xbb\xbfID , Name\nG-01,Alpha\n")
        assert read_table(str(path)) == [{"ID": "G-01", "Name": "Alpha"}]

    def test_fetches_url(self, monkeypatch):
        calls = []

        def fake_get(url, timeout):
            calls.append((url, timeout))
            return _FakeResponse(b"ID,Name\nG-01,Alpha\n")

        monkeypatch.setattr(loader.requests, "get", fake_get)
        rows = read_table("https://example.org/goals.csv", timeout=3.0)
        assert rows == [{"ID": "G-01", "Name": "Alpha"}]
        assert calls == [("https://example.org/goals.csv", 3.0)]

    def test_url_failure(self, monkeypatch):
        monkeypatch.setattr(loader.requests, "get", lambda url, timeout: _FakeResponse(b"", 404))
        with pytest.raises(DataLoadError) as exc:
            read_table("https://example.org/missing.csv")
        assert "404" in exc.value.reason

    def test_url_not_utf8(self, monkeypatch):
        monkeypatch.setattr(
            loader.requests, "get", lambda url, timeout: _FakeResponse(b"ID,Name\nG-01,\xff\xfe bad\n")
        )
        with pytest.raises(DataLoadError) as exc:
            read_table("https://example.org/goals.csv")
        assert "utf-8" in exc.value.reason

    def test_connection_error(self, monkeypatch):
        def boom(url, timeout):
            raise requests.ConnectionError("unreachable")

        monkeypatch.setattr(loader.requests, "get", boom)
        with pytest.raises(DataLoadError, match="Cannot load table"):
            read_table("http://example.org/goals.csv")


class TestGoalsFromRows:
    def test_keeps_order_and_optional_grade(self):
        goals = goals_from_rows([
            {"ID": "B", "Name": "Beta", "Grade": ""},
            {"ID": "A", "Name": "Alpha", "Grade": "3"},
        ])
        assert [g.id for g in goals] == ["B", "A"]
        assert goals[0].grade is None
        assert goals[1].grade == "3"

    def test_trims_values(self):
        goals = goals_from_rows([{"ID": " G-01 ", "Name": " Alpha "}])
        assert goals[0].id == "G-01"
        assert goals[0].name == "Alpha"

    def test_skips_blank_and_duplicate_ids(self):
        goals = goals_from_rows([
            {"ID": "A", "Name": "first"},
            {"ID": "", "Name": "nameless"},
            {"ID": "A", "Name": "second"},
        ])
        assert [(g.id, g.name) for g in goals] == [("A", "first")]

    def test_missing_columns(self):
        with pytest.raises(MissingColumnError) as exc:
            goals_from_rows([{"ID": "A"}], "goals.csv")
        assert exc.value.missing == ["Name"]
        assert isinstance(exc.value, DataLoadError)


class TestProgramsFromRows:
    def test_extra_columns_become_fields(self):
        programs = programs_from_rows([
            {"Program_Name": "Club", "Goals_Covered": "G-01", "Rigor": " High ", "Program_Type": "District"},
        ])
        p = programs[0]
        assert p.name == "Club"
        assert p.goals_covered == "G-01"
        assert p.rigor == "High"
        assert p.program_type == "District"
        assert "Program_Name" not in p.fields

    def test_short_row_values(self):
        programs = programs_from_rows([{"Program_Name": "Club", "Goals_Covered": None, "Rigor": None}])
        assert programs[0].goals_covered == ""
        assert programs[0].rigor is None

    def test_missing_columns(self):
        with pytest.raises(MissingColumnError):
            programs_from_rows([{"Program_Name": "Club"}])

    def test_no_rows(self):
        assert programs_from_rows([]) == []


class TestLoadDataset:
    def test_loads_both_tables(self, goals_csv, programs_csv):
        dataset = load_dataset(str(goals_csv), str(programs_csv))
        assert [g.id for g in dataset.goals] == ["G-01", "G-02", "G-03"]
        assert [p.name for p in dataset.programs] == ["Math Club", "Reading Buddies", "Open Lab", "Drop-in"]
        assert dataset.programs[1].goals_covered == "G-02 ,G-99"

    def test_failure_of_either_table(self, goals_csv, tmp_path):
        with pytest.raises(DataLoadError):
            load_dataset(str(goals_csv), str(tmp_path / "missing.csv"))

    def test_goals_table_without_goals(self, tmp_path, programs_csv):
        path = tmp_path / "goals.csv"
        path.write_text("ID,Name\n", encoding="utf-8")
        with pytest.raises(DataLoadError, match="Cannot load table"):
            load_dataset(str(path), str(programs_csv))


class TestSampleDataset:
    def test_shape(self):
        dataset = sample_dataset()
        assert len(dataset.goals) == 10
        assert len(dataset.programs) == 6
        assert dataset.goal("G-06").name == "Decimals and Fractions"
        assert dataset.goal("G-42") is None
