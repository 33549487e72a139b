"""Integration tests for API endpoints"""

from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import REGISTRY
from sales_summarizer.api.v1 import summary as summary_module
from sales_summarizer.api.dependencies import get_settings
from sales_summarizer.config import Settings


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient, sample_text: str):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/summary", json={"raw_text": sample_text})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "sales_summary" in response.text


def test_summary_endpoint(client: TestClient, sample_text: str):
    """Test POST /v1/summary with valid data"""
    response = client.post("/v1/summary", json={"raw_text": sample_text})

    assert response.status_code == 200
    assert response.headers["X-Request-ID"]
    data = response.json()
    assert data["total_sales"] == 3300
    assert data["total_cost"] == 950
    assert data["profit"] == 2350
    assert data["record_count"] == 3
    assert data["highest_selling_day"] == {"date": "2023-01-01", "sales": 2500}
    assert data["lowest_selling_day"] == {"date": "2023-01-02", "sales": 800}
    assert data["most_profitable_month"] == {"month": "2023-01", "profit": 2350}
    assert data["formatted"]["profit_margin"] == "71.21%"


def test_summary_endpoint_idempotent(client: TestClient, sample_text: str):
    """Test identical requests return identical bodies"""
    first = client.post("/v1/summary", json={"raw_text": sample_text})
    second = client.post("/v1/summary", json={"raw_text": sample_text})

    assert first.json() == second.json()


def test_summary_endpoint_empty_input(client: TestClient):
    """Test whitespace-only input is rejected with no result"""
    response = client.post("/v1/summary", json={"raw_text": "   "})

    assert response.status_code == 422
    assert "No data supplied" in response.json()["detail"]


def test_summary_endpoint_malformed_line(client: TestClient):
    """Test a two-column line is rejected with a format message"""
    response = client.post("/v1/summary", json={"raw_text": "2023-01-01\t100"})

    assert response.status_code == 422
    assert "at least 3 tab-separated values" in response.json()["detail"]


def test_summary_endpoint_missing_body_field(client: TestClient):
    """Test request validation for a missing raw_text"""
    response = client.post("/v1/summary", json={})
    assert response.status_code == 422


def test_summary_endpoint_zero_sales(client: TestClient):
    """Test undefined margin is serialized as null and displayed as N/A"""
    response = client.post("/v1/summary", json={"raw_text": "2023-01-01\t0\t100"})

    assert response.status_code == 200
    data = response.json()
    assert data["profit_margin"] is None
    assert data["formatted"]["profit_margin"] == "N/A"


def test_summary_endpoint_non_numeric_permissive(client: TestClient):
    """Test nan totals go out as null instead of breaking JSON encoding"""
    response = client.post("/v1/summary", json={"raw_text": "2023-01-01\tabc\t100"})

    assert response.status_code == 200
    data = response.json()
    assert data["total_sales"] is None
    assert data["total_cost"] == 100
    assert data["highest_selling_day"] is None
    assert data["formatted"]["total_sales"] == "N/A"


def test_summary_endpoint_strict_numbers(app: FastAPI):
    """Test strict mode rejects non-numeric fields"""
    app.dependency_overrides[get_settings] = lambda: Settings(strict_numbers=True)
    client = TestClient(app)

    response = client.post("/v1/summary", json={"raw_text": "2023-01-01\tabc\t100"})

    assert response.status_code == 422
    assert "not a number" in response.json()["detail"]


def test_summary_endpoint_input_too_large(app: FastAPI, sample_text: str):
    """Test oversized input is refused before parsing"""
    app.dependency_overrides[get_settings] = lambda: Settings(max_input_chars=10)
    client = TestClient(app)

    response = client.post("/v1/summary", json={"raw_text": sample_text})

    assert response.status_code == 413


def test_example_endpoint_round_trip(client: TestClient):
    """Test the example dataset is accepted by the summary endpoint"""
    example = client.get("/v1/summary/example")
    assert example.status_code == 200

    response = client.post("/v1/summary", json=example.json())

    assert response.status_code == 200
    data = response.json()
    assert data["record_count"] == 7
    assert data["formatted"]["total_sales"] == "8,900.00"
    assert data["formatted"]["profit_margin"] == "58.99%"


def test_summary_endpoint_unexpected_error(client: TestClient, sample_text: str, monkeypatch):
    """Test unexpected failures return 500 and are counted as errors"""

    def broken_summarize(raw_text, strict_numbers=False):
        raise RuntimeError("boom")

    monkeypatch.setattr(summary_module, "summarize", broken_summarize)
    before = REGISTRY.get_sample_value("sales_summary_total", {"outcome": "error"}) or 0.0

    response = client.post("/v1/summary", json={"raw_text": sample_text})

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal server error"
    after = REGISTRY.get_sample_value("sales_summary_total", {"outcome": "error"})
    assert after == before + 1
