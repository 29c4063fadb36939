# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.

The application runs against a private in-memory SQLite database. The
environment is set here, before any application module is imported.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from typing import Callable, Dict, Generator

from database import SessionLocal, drop_db, init_db
from main import create_app

DEFAULT_PASSWORD = "secret123"


def _login(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> Dict[str, str]:
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture(autouse=True)
def fresh_database():
    """Every test starts from empty tables."""
    init_db()
    yield
    drop_db()


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    return create_app()


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def login(client) -> Callable[..., Dict[str, str]]:
    """Log in and return bearer headers."""
    def _do(email: str, password: str = DEFAULT_PASSWORD) -> Dict[str, str]:
        return _login(client, email, password)
    return _do


@pytest.fixture
def register_landlord(client) -> Callable[..., Dict[str, str]]:
    """Register a landlord account and return its bearer headers."""
    def _register(email: str = "amina@example.com", full_name: str = "Amina Juma") -> Dict[str, str]:
        response = client.post(
            "/api/auth/register",
            json={"email": email, "password": DEFAULT_PASSWORD, "fullName": full_name},
        )
        assert response.status_code == 201, response.text
        return _login(client, email)
    return _register


@pytest.fixture
def landlord(register_landlord) -> Dict[str, str]:
    return register_landlord()


@pytest.fixture
def other_landlord(register_landlord) -> Dict[str, str]:
    return register_landlord(email="juma@example.com", full_name="Juma Salim")


@pytest.fixture
def add_team_member(client, landlord) -> Callable[..., Dict[str, str]]:
    """Add a MANAGER or CARETAKER to the landlord's account and log them in."""
    def _add(role: str, email: str = None) -> Dict[str, str]:
        email = email or f"{role.lower()}@example.com"
        response = client.post(
            "/api/users",
            json={"email": email, "password": DEFAULT_PASSWORD, "fullName": role.title(), "role": role},
            headers=landlord,
        )
        assert response.status_code == 201, response.text
        return _login(client, email)
    return _add


@pytest.fixture
def create_property(client, landlord) -> Callable[..., str]:
    def _create(headers: Dict[str, str] = None, name: str = "Msasani Heights", total_units: int = 3, **extra) -> str:
        body = {"name": name, "address": "Plot 12, Msasani, Dar es Salaam", "totalUnits": total_units}
        body.update(extra)
        response = client.post("/api/properties", json=body, headers=headers or landlord)
        assert response.status_code == 201, response.text
        return response.json()["id"]
    return _create


@pytest.fixture
def list_units(client, landlord) -> Callable[..., list]:
    def _units(property_id: str, headers: Dict[str, str] = None) -> list:
        response = client.get(f"/api/properties/{property_id}/units", headers=headers or landlord)
        assert response.status_code == 200, response.text
        return response.json()
    return _units


@pytest.fixture
def create_tenant(client, landlord) -> Callable[..., str]:
    def _create(
        property_id: str,
        unit_id: str = None,
        headers: Dict[str, str] = None,
        full_name: str = "Baraka Mushi",
        rent_amount: float = 450000,
        **extra,
    ) -> str:
        body = {
            "property_id": property_id,
            "unit_id": unit_id,
            "full_name": full_name,
            "phone": "+255712000111",
            "rent_amount": rent_amount,
            "security_deposit": 900000,
        }
        body.update(extra)
        response = client.post("/api/tenants", json=body, headers=headers or landlord)
        assert response.status_code == 201, response.text
        return response.json()["id"]
    return _create


@pytest.fixture
def occupied_unit(create_property, list_units, create_tenant) -> Dict[str, str]:
    """A property whose first unit holds a tenant paying 450000."""
    property_id = create_property()
    unit_id = list_units(property_id)[0]["id"]
    tenant_id = create_tenant(property_id, unit_id)
    return {"property_id": property_id, "unit_id": unit_id, "tenant_id": tenant_id}
