# tests/test_maintenance.py

"""
Tests for maintenance tickets.
"""

from fastapi.testclient import TestClient


def _ticket(client, headers, unit_id, description="Leaking tap", **extra):
    body = {"unit_id": unit_id, "description": description}
    body.update(extra)
    return client.post("/api/maintenance", json=body, headers=headers)


def test_caretaker_opens_ticket(client: TestClient, landlord, occupied_unit, add_team_member):
    caretaker = add_team_member("CARETAKER")

    response = _ticket(
        client, caretaker, occupied_unit["unit_id"],
        tenant_id=occupied_unit["tenant_id"], assigned_to="Plumber Ali",
    )

    assert response.status_code == 201
    ticket_id = response.json()["id"]

    ticket = client.get(f"/api/maintenance/{ticket_id}", headers=landlord).json()
    assert ticket["status"] == "PENDING"
    assert ticket["tenant_id"] == occupied_unit["tenant_id"]
    assert ticket["assigned_to"] == "Plumber Ali"
    assert ticket["unit_number"] == "Unit 1"
    assert ticket["property_name"] == "Msasani Heights"
    assert ticket["version"] == 1


def test_list_tickets_with_status_filter(client: TestClient, landlord, create_property, list_units):
    units = list_units(create_property())
    first = _ticket(client, landlord, units[0]["id"], description="Broken window").json()["id"]
    _ticket(client, landlord, units[1]["id"], description="No water")
    client.put(f"/api/maintenance/{first}", json={"status": "COMPLETED"}, headers=landlord)

    all_tickets = client.get("/api/maintenance", headers=landlord).json()
    assert [t["description"] for t in all_tickets] == ["No water", "Broken window"]

    done = client.get("/api/maintenance?status=COMPLETED", headers=landlord).json()
    assert [t["id"] for t in done] == [first]


def test_invalid_status_filter(client: TestClient, landlord):
    response = client.get("/api/maintenance?status=LOST", headers=landlord)

    assert response.status_code == 400


def test_update_ticket_versioning(client: TestClient, landlord, create_property, list_units, add_team_member):
    unit_id = list_units(create_property())[0]["id"]
    ticket_id = _ticket(client, landlord, unit_id).json()["id"]
    caretaker = add_team_member("CARETAKER")

    response = client.put(
        f"/api/maintenance/{ticket_id}",
        json={"status": "IN_PROGRESS", "assigned_to": "Caretaker", "version": 1},
        headers=caretaker,
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Maintenance updated", "version": 2}

    stale = client.put(f"/api/maintenance/{ticket_id}", json={"status": "COMPLETED", "version": 1}, headers=landlord)
    assert stale.status_code == 409
    assert stale.json() == {"error": "Version conflict"}

    ticket = client.get(f"/api/maintenance/{ticket_id}", headers=landlord).json()
    assert ticket["status"] == "IN_PROGRESS"
    assert ticket["assigned_to"] == "Caretaker"


def test_update_ticket_can_clear_assignee(client: TestClient, landlord, create_property, list_units):
    unit_id = list_units(create_property())[0]["id"]
    ticket_id = _ticket(client, landlord, unit_id, assigned_to="Someone").json()["id"]

    client.put(f"/api/maintenance/{ticket_id}", json={"assigned_to": None}, headers=landlord)

    assert client.get(f"/api/maintenance/{ticket_id}", headers=landlord).json()["assigned_to"] is None


def test_ticket_on_other_accounts_unit_is_404(client: TestClient, other_landlord, create_property, list_units):
    unit_id = list_units(create_property())[0]["id"]

    response = _ticket(client, other_landlord, unit_id)

    assert response.status_code == 404
    assert response.json() == {"error": "Unit not found"}


def test_other_account_cannot_read_or_update_ticket(client: TestClient, landlord, other_landlord, create_property, list_units):
    unit_id = list_units(create_property())[0]["id"]
    ticket_id = _ticket(client, landlord, unit_id).json()["id"]

    assert client.get(f"/api/maintenance/{ticket_id}", headers=other_landlord).status_code == 404
    assert client.put(
        f"/api/maintenance/{ticket_id}", json={"status": "COMPLETED"}, headers=other_landlord
    ).status_code == 404
    assert client.get("/api/maintenance", headers=other_landlord).json() == []


def test_ticket_tenant_must_share_property(client: TestClient, landlord, occupied_unit, create_property, list_units):
    other_unit = list_units(create_property(name="Elsewhere"))[0]["id"]

    response = _ticket(client, landlord, other_unit, tenant_id=occupied_unit["tenant_id"])

    assert response.status_code == 400
