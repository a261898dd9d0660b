from __future__ import annotations

from fastapi.testclient import TestClient

from api.main import create_app
from config import Settings


def _client(**overrides) -> TestClient:
    return TestClient(create_app(Settings(_env_file=None, **overrides)))


def test_evaluate_endpoint_returns_result():
    with _client() as client:
        response = client.post("/evaluate", json={"expression": "2 + 3 * 4"})

    assert response.status_code == 200
    body = response.json()
    assert body["result"] == 14
    assert body["postfix"] == ["2", "3", "4", "*", "+"]
    assert body["steps"] == ["3 * 4 = 12", "2 + 12 = 14"]


def test_evaluate_endpoint_reports_expression_error():
    with _client() as client:
        response = client.post("/evaluate", json={"expression": "7 & 3"})

    assert response.status_code == 422
    assert response.json()["detail"] == {
        "kind": "invalid_character",
        "message": "Invalid character in expression: &",
        "offending": "&",
    }


def test_evaluate_endpoint_reports_division_by_zero():
    with _client() as client:
        response = client.post("/evaluate", json={"expression": "4 / 0"})

    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "division_by_zero"


def test_evaluate_endpoint_maps_nan_to_null():
    with _client() as client:
        response = client.post("/evaluate", json={"expression": "(-8) ^ 0.5"})

    assert response.status_code == 200
    assert response.json()["result"] is None


def test_evaluate_endpoint_rejects_too_long_expression():
    with _client(max_expression_length=5) as client:
        response = client.post("/evaluate", json={"expression": "1 + 2 + 3"})

    assert response.status_code == 413


def test_health():
    with _client(app_version="9.9.9") as client:
        response = client.get("/health")

    assert response.json() == {"status": "ok", "version": "9.9.9"}
