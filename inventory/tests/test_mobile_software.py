"""
Tests for mobile device and software license endpoints
"""
from datetime import timedelta

from inventory.models.audit_log import AuditLog
from inventory.models.software import Software
from inventory.utils.datetime_utils import today


def test_mobile_lifecycle(client, db, company, employee):
    created = client.post(
        "/api/v1/mobile",
        json={
            "manufacturer": "Samsung",
            "model": "Galaxy A54",
            "imei1": "356789012345678",
            "mobileNumber": "9876543210",
            "operator": "Jio",
            "monthlyRental": 399,
            "companyId": company.id,
            "employeeId": employee.id,
        },
    )
    assert created.status_code == 201
    mobile = created.json()
    assert mobile["status"] == "ACTIVE"

    updated = client.put(f"/api/v1/mobile/{mobile['id']}", json={"status": "LOST"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "LOST"

    log = db.query(AuditLog).filter(AuditLog.entity_id == mobile["id"], AuditLog.action == "UPDATE").one()
    assert log.entity_type == "Mobile"
    assert log.old_values == {"status": "ACTIVE"}
    assert log.new_values == {"status": "LOST"}

    assert client.delete(f"/api/v1/mobile/{mobile['id']}").status_code == 200
    actions = [a for (a,) in db.query(AuditLog.action).filter(AuditLog.entity_id == mobile["id"]).order_by(AuditLog.id)]
    assert actions == ["CREATE", "UPDATE", "DELETE"]


def test_list_mobiles_filters(client, company):
    client.post("/api/v1/mobile", json={"operator": "Jio", "mobileNumber": "111", "companyId": company.id})
    client.post("/api/v1/mobile", json={"operator": "Airtel", "mobileNumber": "222", "companyId": company.id})

    body = client.get("/api/v1/mobile", params={"operator": "Airtel"}).json()
    assert [m["mobileNumber"] for m in body["data"]] == ["222"]
    assert body["pagination"]["total"] == 1


def test_create_mobile_unknown_employee(client, company):
    response = client.post("/api/v1/mobile", json={"companyId": company.id, "employeeId": "nobody"})
    assert response.status_code == 400


def test_create_software(client, db, company):
    response = client.post(
        "/api/v1/software",
        json={
            "name": "Microsoft 365",
            "category": "OFFICE_SUITE",
            "licenseType": "SUBSCRIPTION",
            "totalLicenses": 50,
            "usedLicenses": 42,
            "expiryDate": "2030-03-31",
            "companyId": company.id,
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["currency"] == "INR"
    assert data["usedLicenses"] == 42

    log = db.query(AuditLog).filter(AuditLog.entity_id == data["id"]).one()
    assert log.entity_type == "Software"
    assert log.new_values["totalLicenses"] == 50


def test_software_used_licenses_cannot_exceed_total(client, company):
    response = client.post(
        "/api/v1/software",
        json={"name": "AutoCAD", "totalLicenses": 2, "usedLicenses": 3, "companyId": company.id},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Used licenses cannot exceed total licenses"


def test_software_update_checks_license_counts_against_stored_values(client, company):
    created = client.post(
        "/api/v1/software",
        json={"name": "AutoCAD", "totalLicenses": 5, "usedLicenses": 4, "companyId": company.id},
    ).json()

    too_many = client.put(f"/api/v1/software/{created['id']}", json={"usedLicenses": 6})
    assert too_many.status_code == 400

    shrink = client.put(f"/api/v1/software/{created['id']}", json={"totalLicenses": 3})
    assert shrink.status_code == 400

    ok = client.put(f"/api/v1/software/{created['id']}", json={"totalLicenses": 10, "usedLicenses": 6})
    assert ok.status_code == 200
    assert ok.json()["usedLicenses"] == 6


def test_software_expiring_filter(client, db, company):
    now = today()
    db.add_all([
        Software(name="Soon", company_id=company.id, expiry_date=now + timedelta(days=10)),
        Software(name="Later", company_id=company.id, expiry_date=now + timedelta(days=200)),
        Software(name="Perpetual", company_id=company.id),
    ])
    db.commit()

    body = client.get("/api/v1/software", params={"expiringDays": 30}).json()
    assert [s["name"] for s in body["data"]] == ["Soon"]

    everything = client.get("/api/v1/software").json()
    assert everything["pagination"]["total"] == 3
