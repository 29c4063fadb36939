# tests/test_expenses.py

"""
Tests for property expenses.
"""

from fastapi.testclient import TestClient


def _expense(client, headers, property_id, amount=120000, date="2026-03-10", **extra):
    body = {"property_id": property_id, "category": "REPAIR", "amount": amount, "date": date}
    body.update(extra)
    return client.post("/api/expenses", json=body, headers=headers)


def test_create_and_list_expenses(client: TestClient, landlord, create_property):
    property_id = create_property()
    _expense(client, landlord, property_id, date="2026-02-01")
    created = _expense(client, landlord, property_id, amount=50000, notes="Roof leak", receipt_url="https://r.example/1")

    assert created.status_code == 201
    assert created.json()["id"]

    expenses = client.get("/api/expenses", headers=landlord).json()
    assert [e["date"] for e in expenses] == ["2026-03-10", "2026-02-01"]
    assert expenses[0]["amount"] == 50000
    assert expenses[0]["notes"] == "Roof leak"
    assert expenses[0]["property_name"] == "Msasani Heights"
    assert expenses[0]["category"] == "REPAIR"


def test_expense_amount_must_be_positive(client: TestClient, landlord, create_property):
    response = _expense(client, landlord, create_property(), amount=0)

    assert response.status_code == 400


def test_expense_unknown_category(client: TestClient, landlord, create_property):
    response = _expense(client, landlord, create_property(), category="PARTY")

    assert response.status_code == 400


def test_expense_on_other_accounts_property_is_404(client: TestClient, other_landlord, create_property):
    response = _expense(client, other_landlord, create_property())

    assert response.status_code == 404


def test_expenses_filter_by_property(client: TestClient, landlord, create_property):
    first = create_property(name="First")
    second = create_property(name="Second")
    _expense(client, landlord, first)
    _expense(client, landlord, second)

    response = client.get(f"/api/expenses?property_id={second}", headers=landlord)

    assert [e["property_name"] for e in response.json()] == ["Second"]


def test_expenses_are_owner_scoped(client: TestClient, landlord, other_landlord, create_property):
    _expense(client, landlord, create_property())

    assert client.get("/api/expenses", headers=other_landlord).json() == []


def test_delete_expense(client: TestClient, landlord, create_property):
    expense_id = _expense(client, landlord, create_property()).json()["id"]

    response = client.delete(f"/api/expenses/{expense_id}", headers=landlord)

    assert response.status_code == 200
    assert client.get("/api/expenses", headers=landlord).json() == []
    assert client.delete(f"/api/expenses/{expense_id}", headers=landlord).status_code == 404


def test_caretaker_cannot_add_expense(client: TestClient, create_property, add_team_member):
    property_id = create_property()
    caretaker = add_team_member("CARETAKER")

    response = _expense(client, caretaker, property_id)

    assert response.status_code == 403
