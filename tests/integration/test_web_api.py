"""Integration tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from deckframe.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    """Create a test client for a fresh app."""
    return TestClient(create_app())


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestStructureEndpoint:
    """Tests for POST /api/v1/structure."""

    def test_ledger_deck(self, client: TestClient, ledger_request: dict) -> None:
        response = client.post("/api/v1/structure", json=ledger_request)
        assert response.status_code == 200
        data = response.json()
        assert data["joists"]["size"] == "2x8"
        assert data["joists"]["count"] == 13
        assert [beam["style"] for beam in data["beams"]] == ["ledger", "drop"]
        assert data["beams"][0]["size"] is None
        assert len(data["posts"]) == 3
        assert data["compliance"]["passes"] is True
        assert data["metrics"]["estimated_cost"] > 0

    def test_strength_goal(self, client: TestClient, freestanding_request: dict) -> None:
        response = client.post(
            "/api/v1/structure",
            json={**freestanding_request, "optimization_goal": "strength"},
        )
        assert response.status_code == 200
        assert set(response.json()["metrics"]) == {"reserve_capacity_min"}

    def test_invalid_input(self, client: TestClient, ledger_request: dict) -> None:
        response = client.post(
            "/api/v1/structure",
            json={**ledger_request, "width_ft": "wide", "species_grade": "Oak"},
        )
        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "INVALID_INPUT"
        assert {detail["field"] for detail in data["details"]} == {
            "width_ft",
            "species_grade",
        }

    def test_missing_field_uses_error_envelope(
        self, client: TestClient, ledger_request: dict
    ) -> None:
        body = {key: value for key, value in ledger_request.items() if key != "decking_type"}
        response = client.post("/api/v1/structure", json=body)
        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "INVALID_INPUT"
        assert data["details"][0]["field"] == "decking_type"
        assert data["details"][0]["code"] == "missing"

    def test_span_exceeded(self, client: TestClient, ledger_request: dict) -> None:
        response = client.post(
            "/api/v1/structure",
            json={**ledger_request, "width_ft": 30, "length_ft": 40},
        )
        assert response.status_code == 409
        data = response.json()
        assert data["error_type"] == "SPAN_EXCEEDED"
        assert data["details"] is None


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient, ledger_request: dict) -> None:
        response = client.post("/api/v1/validate", json=ledger_request)
        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "errors": []}

    def test_invalid(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={
                "width_ft": 12,
                "length_ft": 16,
                "height_ft": 3,
                "attachment": "ledger",
                "footing_type": "surface",
                "species_grade": "SPF #2",
                "decking_type": "composite_1in",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["code"] == "illegal_combination"

    def test_invalid_types_are_reported(self, client: TestClient, ledger_request: dict) -> None:
        response = client.post(
            "/api/v1/validate",
            json={**ledger_request, "height_ft": "low", "forced_joist_spacing_in": 20},
        )
        assert response.status_code == 200
        codes = {error["field"]: error["code"] for error in response.json()["errors"]}
        assert codes == {
            "height_ft": "invalid_type",
            "forced_joist_spacing_in": "invalid_choice",
        }
