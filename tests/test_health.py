# tests/test_health.py

"""
Tests for the health check, error shapes and the dashboard shell.
"""

from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


def test_health_reports_unreachable_database(client: TestClient, monkeypatch):
    monkeypatch.setattr("routers.health.check_connection", lambda: False)

    response = client.get("/api/health")

    assert response.status_code == 503
    assert response.json()["database"] == "unreachable"


def test_unknown_api_route_uses_error_shape(client: TestClient):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_unhandled_error_is_500(client: TestClient, landlord, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("routers.dashboard.compute_dashboard_stats", boom)

    response = client.get("/api/dashboard/stats", headers=landlord)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_dashboard_shell_is_served(client: TestClient):
    response = client.get("/")

    assert response.status_code == 200
    assert "LandlordOS" in response.text


def test_error_body_is_documented(client: TestClient):
    schema = client.get("/openapi.json").json()

    assert schema["components"]["schemas"]["ErrorResponse"]["required"] == ["error"]
    assert list(schema["components"]["schemas"]["ErrorResponse"]["properties"]) == ["error"]
    not_found = schema["paths"]["/api/properties/{property_id}"]["get"]["responses"]["404"]
    assert not_found["content"]["application/json"]["schema"] == {"$ref": "#/components/schemas/ErrorResponse"}
