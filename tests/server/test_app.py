"""Tests for the live matrix server."""

import pytest

pytest.importorskip("starlette")

from starlette.testclient import TestClient  # noqa: E402

from coverage_matrix.models import DEFAULT_CATEGORY_FIELDS, PROGRAM_TYPE  # noqa: E402
from coverage_matrix.server.app import create_app  # noqa: E402


@pytest.fixture
def client(sample):
    return TestClient(create_app(sample, DEFAULT_CATEGORY_FIELDS))


class TestPage:
    def test_live_page(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert 'id="categorySelector"' in response.text
        assert '"live": true' in response.text


class TestCategories:
    def test_lists_fields_and_values(self, client):
        data = client.get("/api/categories").json()
        assert data == [
            {"column": "Rigor", "label": "Rigor", "values": ["High", "Low", "Medium"]},
            {"column": "Program_Type", "label": "Program Type", "values": ["Community", "District"]},
        ]


class TestState:
    def test_default_category(self, client):
        data = client.get("/api/state").json()
        assert data["field"]["column"] == "Rigor"

    def test_category_change(self, client):
        data = client.get("/api/state", params={"category": "Program_Type"}).json()
        assert [t["value"] for t in data["x_ticks"]] == ["Community", "District"]
        g06 = {c["category"]: c["program_count"] for c in data["cells"] if c["goal_id"] == "G-06"}
        assert g06 == {"Community": 1, "District": 2}

    def test_unknown_category(self, client):
        response = client.get("/api/state", params={"category": "Budget"})
        assert response.status_code == 400
        assert response.json()["available"] == ["Rigor", "Program_Type"]

    def test_initial_field(self, sample):
        client = TestClient(create_app(sample, DEFAULT_CATEGORY_FIELDS, initial=PROGRAM_TYPE))
        assert client.get("/api/state").json()["field"]["column"] == "Program_Type"
