"""
Tests for company endpoints and their audit trail
"""
from inventory.models.audit_log import AuditLog
from inventory.models.location import Location


def _audit_rows(db, entity_id):
    return db.query(AuditLog).filter(AuditLog.entity_id == entity_id).order_by(AuditLog.id).all()


def test_create_company_uppercases_code_and_audits(client, db):
    response = client.post(
        "/api/v1/masters/companies",
        json={"code": " acme ", "name": "Acme Industries", "address": "MG Road"},
        headers={"X-Actor": "Priya"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["code"] == "ACME"
    assert data["isActive"] is True
    assert "createdAt" in data

    rows = _audit_rows(db, data["id"])
    assert len(rows) == 1
    log = rows[0]
    assert log.action == "CREATE"
    assert log.entity_type == "Company"
    assert log.performed_by == "Priya"
    assert log.company_id == data["id"]
    assert log.old_values is None
    assert log.new_values["code"] == "ACME"
    assert log.new_values["name"] == "Acme Industries"


def test_create_company_defaults_actor_to_admin(client, db):
    response = client.post("/api/v1/masters/companies", json={"code": "ACME", "name": "Acme"})
    assert response.status_code == 201
    assert _audit_rows(db, response.json()["id"])[0].performed_by == "Admin"


def test_create_company_duplicate_code(client, company):
    response = client.post("/api/v1/masters/companies", json={"code": "acme", "name": "Another Acme"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Company code already exists"


def test_create_company_requires_name(client):
    response = client.post("/api/v1/masters/companies", json={"code": "X"})
    assert response.status_code == 422


def test_list_companies_ordered_by_name(client, company, other_company):
    response = client.get("/api/v1/masters/companies")
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Acme Industries", "Globex Corporation"]


def test_get_company_not_found(client):
    response = client.get("/api/v1/masters/companies/does-not-exist")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] is True
    assert body["status_code"] == 404
    assert body["path"] == "/api/v1/masters/companies/does-not-exist"


def test_update_company_records_only_changed_fields(client, db, company):
    response = client.put(
        f"/api/v1/masters/companies/{company.id}",
        json={"name": "Acme Global", "code": "ACME"},
        headers={"X-Actor": "Ravi"},
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Acme Global"

    log = _audit_rows(db, company.id)[-1]
    assert log.action == "UPDATE"
    assert log.performed_by == "Ravi"
    assert log.old_values == {"name": "Acme Industries"}
    assert log.new_values == {"name": "Acme Global"}


def test_update_company_without_changes_still_audits(client, db, company):
    response = client.put(f"/api/v1/masters/companies/{company.id}", json={"name": "Acme Industries"})
    assert response.status_code == 200

    log = _audit_rows(db, company.id)[-1]
    assert log.action == "UPDATE"
    assert log.old_values is None
    assert log.new_values is None


def test_update_company_code_conflict(client, company, other_company):
    response = client.put(f"/api/v1/masters/companies/{other_company.id}", json={"code": "ACME"})
    assert response.status_code == 400


def test_delete_company_audits_full_snapshot(client, db, company):
    response = client.delete(f"/api/v1/masters/companies/{company.id}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Company deleted successfully"}

    log = _audit_rows(db, company.id)[-1]
    assert log.action == "DELETE"
    assert log.company_id is None
    assert log.new_values is None
    assert log.old_values["code"] == "ACME"
    assert log.old_values["id"] == company.id


def test_delete_company_with_locations_is_rejected(client, db, company, location):
    response = client.delete(f"/api/v1/masters/companies/{company.id}")

    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot delete company with associated records"
    assert db.query(Location).count() == 1
    assert db.query(AuditLog).filter(AuditLog.action == "DELETE").count() == 0
