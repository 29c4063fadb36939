# tests/test_payments.py

"""
Tests for the payment ledger and tenant balances.
"""

from fastapi.testclient import TestClient


def _pay(client, headers, tenant_id, amount_paid, amount_due, payment_date="2026-03-05", **extra):
    body = {
        "tenant_id": tenant_id,
        "amount_paid": amount_paid,
        "amount_due_at_time": amount_due,
        "payment_date": payment_date,
        "method": "MOBILE_MONEY",
    }
    body.update(extra)
    return client.post("/api/payments", json=body, headers=headers)


def test_record_payment_computes_balance(client: TestClient, landlord, occupied_unit):
    response = _pay(client, landlord, occupied_unit["tenant_id"], 400000, 450000, reference_number="TXN-1")

    assert response.status_code == 201
    data = response.json()
    assert data["id"]
    assert data["balance_after_transaction"] == 50000

    payments = client.get("/api/payments", headers=landlord).json()
    assert len(payments) == 1
    payment = payments[0]
    assert payment["property_id"] == occupied_unit["property_id"]
    assert payment["unit_id"] == occupied_unit["unit_id"]
    assert payment["tenant_name"] == "Baraka Mushi"
    assert payment["property_name"] == "Msasani Heights"
    assert payment["unit_number"] == "Unit 1"
    assert payment["method"] == "MOBILE_MONEY"
    assert payment["late_fee"] == 0
    assert payment["reference_number"] == "TXN-1"


def test_overpayment_leaves_credit(client: TestClient, landlord, occupied_unit):
    response = _pay(client, landlord, occupied_unit["tenant_id"], 500000, 450000)

    assert response.json()["balance_after_transaction"] == -50000


def test_late_fee_is_recorded_but_not_added_to_balance(client: TestClient, landlord, occupied_unit):
    response = _pay(client, landlord, occupied_unit["tenant_id"], 450000, 450000, late_fee=20000)

    assert response.json()["balance_after_transaction"] == 0
    assert client.get("/api/payments", headers=landlord).json()[0]["late_fee"] == 20000


def test_payments_ordered_newest_first(client: TestClient, landlord, occupied_unit):
    tenant_id = occupied_unit["tenant_id"]
    _pay(client, landlord, tenant_id, 100, 100, payment_date="2026-01-05")
    _pay(client, landlord, tenant_id, 300, 300, payment_date="2026-03-05")
    _pay(client, landlord, tenant_id, 200, 200, payment_date="2026-02-05")

    dates = [p["payment_date"] for p in client.get("/api/payments", headers=landlord).json()]

    assert dates == ["2026-03-05", "2026-02-05", "2026-01-05"]


def test_payments_filter_by_property(client: TestClient, landlord, occupied_unit, create_property, list_units, create_tenant):
    other_property = create_property(name="Mbezi Court")
    other_tenant = create_tenant(other_property, list_units(other_property)[0]["id"], full_name="Neema")
    _pay(client, landlord, occupied_unit["tenant_id"], 1, 1)
    _pay(client, landlord, other_tenant, 2, 2)

    response = client.get(f"/api/payments?property_id={other_property}", headers=landlord)

    assert [p["tenant_name"] for p in response.json()] == ["Neema"]


def test_payment_for_tenant_without_unit(client: TestClient, landlord, create_property, list_units, create_tenant):
    property_id = create_property()
    tenant_id = create_tenant(property_id)

    missing = _pay(client, landlord, tenant_id, 1, 1)
    assert missing.status_code == 400
    assert missing.json() == {"error": "Tenant has no unit; unit_id is required"}

    explicit = _pay(client, landlord, tenant_id, 1, 1, unit_id=list_units(property_id)[1]["id"])
    assert explicit.status_code == 201


def test_payment_for_other_accounts_tenant_is_404(client: TestClient, other_landlord, occupied_unit):
    response = _pay(client, other_landlord, occupied_unit["tenant_id"], 1, 1)

    assert response.status_code == 404
    assert response.json() == {"error": "Tenant not found"}
    assert client.get("/api/payments", headers=other_landlord).json() == []


def test_invalid_method_rejected(client: TestClient, landlord, occupied_unit):
    response = _pay(client, landlord, occupied_unit["tenant_id"], 1, 1, method="BITCOIN")

    assert response.status_code == 400


def test_negative_amount_rejected(client: TestClient, landlord, occupied_unit):
    response = _pay(client, landlord, occupied_unit["tenant_id"], -5, 1)

    assert response.status_code == 400


def test_caretaker_cannot_record_payment(client: TestClient, occupied_unit, add_team_member):
    caretaker = add_team_member("CARETAKER")

    response = _pay(client, caretaker, occupied_unit["tenant_id"], 1, 1)

    assert response.status_code == 403


def test_manager_records_payment(client: TestClient, occupied_unit, add_team_member):
    manager = add_team_member("MANAGER")

    response = _pay(client, manager, occupied_unit["tenant_id"], 450000, 450000)

    assert response.status_code == 201


def test_tenant_balance_follows_latest_payment(client: TestClient, landlord, occupied_unit):
    tenant_id = occupied_unit["tenant_id"]

    empty = client.get(f"/api/tenants/{tenant_id}/balance", headers=landlord).json()
    assert empty["balance"] == 0
    assert empty["payments_count"] == 0
    assert empty["last_payment_date"] is None

    _pay(client, landlord, tenant_id, 400000, 450000, payment_date="2026-02-05", late_fee=10000)
    _pay(client, landlord, tenant_id, 450000, 500000, payment_date="2026-03-05")

    balance = client.get(f"/api/tenants/{tenant_id}/balance", headers=landlord).json()
    assert balance == {
        "tenant_id": tenant_id,
        "balance": 50000,
        "total_paid": 850000,
        "total_late_fees": 10000,
        "payments_count": 2,
        "last_payment_date": "2026-03-05",
    }


def test_tenant_balance_is_owner_scoped(client: TestClient, other_landlord, occupied_unit):
    response = client.get(f"/api/tenants/{occupied_unit['tenant_id']}/balance", headers=other_landlord)

    assert response.status_code == 404


def test_payment_cannot_be_booked_to_another_property(client: TestClient, landlord, occupied_unit, create_property, list_units):
    other_property = create_property(name="Mbezi Court")
    other_unit = list_units(other_property)[2]["id"]

    response = _pay(
        client, landlord, occupied_unit["tenant_id"], 450000, 450000,
        property_id=other_property, unit_id=other_unit,
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Property does not match the tenant"}
    assert client.get("/api/payments", headers=landlord).json() == []


def test_payment_unit_must_be_in_tenants_property(client: TestClient, landlord, occupied_unit, create_property, list_units):
    other_unit = list_units(create_property(name="Mbezi Court"))[2]["id"]

    response = _pay(client, landlord, occupied_unit["tenant_id"], 450000, 450000, unit_id=other_unit)

    assert response.status_code == 400
    assert response.json() == {"error": "Unit does not belong to this property"}
    assert client.get("/api/payments", headers=landlord).json() == []


def test_payment_may_name_tenants_own_property_and_unit(client: TestClient, landlord, occupied_unit):
    response = _pay(
        client, landlord, occupied_unit["tenant_id"], 450000, 450000,
        property_id=occupied_unit["property_id"], unit_id=occupied_unit["unit_id"],
    )

    assert response.status_code == 201
