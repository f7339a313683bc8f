"""Integration tests for the REST API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from glasscut.web import create_app

pytestmark = pytest.mark.integration


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def job() -> dict:
    return {
        "schema_version": "1.0",
        "glass_type": "Clear-1/4",
        "stock": "optimize",
        "price_per_sqft": 10,
        "panels": [
            {"width": 20, "height": 30, "quantity": 2},
            {"width": 60, "height": 80, "label": "Picture"},
        ],
    }


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestOptimizeEndpoint:
    """Tests for POST /api/v1/optimize."""

    def test_optimizes_job(self, client: TestClient, job: dict) -> None:
        """Panels are routed to the smallest stock they fit."""
        response = client.post("/api/v1/optimize", json={"config": job})

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert [item["size"] for item in data["line_items"]] == ['48" x 72"', '65" x 84"']
        assert data["total_sheets"] == 2
        assert data["total_cost"] == pytest.approx(240.0 + 65 * 84 / 144 * 10)
        assert data["line_items"][0]["notes"].startswith("Optimized. ")
        placed = data["line_items"][1]["layouts"][0]["placed_panels"][0]
        assert placed["source_label"] == "Picture"

    def test_packing_failure_is_not_http_error(self, client: TestClient, job: dict) -> None:
        """Unpackable panels come back as error lines with is_valid false."""
        job["stock"] = "48x72"
        response = client.post("/api/v1/optimize", json={"config": job})

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is False
        assert data["line_items"][0]["size"] == "Packing Failed"
        assert data["line_items"][0]["total_cost"] == 0

    def test_invalid_config_returns_422(self, client: TestClient, job: dict) -> None:
        """Schema violations are reported with JSON paths."""
        job["panels"][0]["height"] = -1
        response = client.post("/api/v1/optimize", json={"config": job})

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "panels[0].height"


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient, job: dict) -> None:
        """Valid jobs report the expanded panel count."""
        response = client.post("/api/v1/validate", json={"config": job})
        assert response.status_code == 200
        assert response.json() == {"is_valid": True, "panel_count": 3, "errors": []}

    def test_invalid(self, client: TestClient, job: dict) -> None:
        """Invalid jobs list their errors."""
        job["glass_type"] = "Clear"
        response = client.post("/api/v1/validate", json={"config": job})
        data = response.json()
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "glass_type"


class TestStockEndpoint:
    """Tests for GET /api/v1/stock."""

    def test_lists_general_stock(self, client: TestClient) -> None:
        response = client.get("/api/v1/stock", params={"glass_type": "Clear-1/4"})
        assert response.status_code == 200
        sizes = response.json()["sizes"]
        assert len(sizes) == 6
        assert sizes[0]["label"] == '48" x 72"'
        assert sizes[0]["area_sqft"] == pytest.approx(24.0)

    def test_bad_glass_type(self, client: TestClient) -> None:
        response = client.get("/api/v1/stock", params={"glass_type": "Clear"})
        assert response.status_code == 422
