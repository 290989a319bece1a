"""
Tests for software installations on hardware systems
"""
from inventory.models.audit_log import AuditLog
from inventory.models.software import Software
from inventory.models.system import System
from inventory.models.system_software import SystemSoftware


def _system_and_software(db, company):
    system = System(asset_tag="LT-001", company_id=company.id)
    software = Software(name="Microsoft Office", version="2021", company_id=company.id)
    db.add_all([system, software])
    db.commit()
    db.refresh(system)
    db.refresh(software)
    return system, software


def test_install_software(client, db, company):
    system, software = _system_and_software(db, company)

    response = client.post(
        f"/api/v1/systems/{system.id}/software",
        json={"softwareId": software.id, "installedDate": "2024-06-01"},
        headers={"X-Actor": "Priya"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["systemId"] == system.id
    assert data["installedDate"] == "2024-06-01"
    assert data["software"] == {"id": software.id, "name": "Microsoft Office"}

    log = db.query(AuditLog).filter(AuditLog.entity_type == "SystemSoftware").one()
    assert log.action == "CREATE"
    assert log.company_id == company.id
    assert log.performed_by == "Priya"
    assert log.new_values["softwareId"] == software.id


def test_install_software_twice_rejected(client, db, company):
    system, software = _system_and_software(db, company)
    url = f"/api/v1/systems/{system.id}/software"
    assert client.post(url, json={"softwareId": software.id}).status_code == 201

    response = client.post(url, json={"softwareId": software.id})
    assert response.status_code == 400
    assert response.json()["detail"] == "Software is already installed on this system"


def test_install_unknown_software(client, db, company):
    system, _ = _system_and_software(db, company)
    response = client.post(f"/api/v1/systems/{system.id}/software", json={"softwareId": "missing"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Software with id missing not found"


def test_install_on_unknown_system(client, db, company):
    _, software = _system_and_software(db, company)
    response = client.post("/api/v1/systems/missing/software", json={"softwareId": software.id})
    assert response.status_code == 404


def test_detail_responses_include_installations(client, db, company):
    system, software = _system_and_software(db, company)
    client.post(f"/api/v1/systems/{system.id}/software", json={"softwareId": software.id})

    system_data = client.get(f"/api/v1/systems/{system.id}").json()
    assert [item["software"]["name"] for item in system_data["installedSoftware"]] == ["Microsoft Office"]

    software_data = client.get(f"/api/v1/software/{software.id}").json()
    assert len(software_data["installations"]) == 1
    assert software_data["installations"][0]["system"] == {"id": system.id, "assetTag": "LT-001"}

    listed = client.get(f"/api/v1/systems/{system.id}/software").json()
    assert [item["softwareId"] for item in listed] == [software.id]


def test_uninstall_software(client, db, company):
    system, software = _system_and_software(db, company)
    client.post(f"/api/v1/systems/{system.id}/software", json={"softwareId": software.id})

    response = client.delete(f"/api/v1/systems/{system.id}/software/{software.id}")
    assert response.status_code == 200
    assert db.query(SystemSoftware).count() == 0

    log = (
        db.query(AuditLog)
        .filter(AuditLog.entity_type == "SystemSoftware", AuditLog.action == "DELETE")
        .one()
    )
    assert log.old_values["systemId"] == system.id
    assert log.new_values is None

    again = client.delete(f"/api/v1/systems/{system.id}/software/{software.id}")
    assert again.status_code == 404
    assert again.json()["detail"] == "Software is not installed on this system"


def test_delete_system_with_installed_software_rejected(client, db, company):
    system, software = _system_and_software(db, company)
    client.post(f"/api/v1/systems/{system.id}/software", json={"softwareId": software.id})

    response = client.delete(f"/api/v1/systems/{system.id}")
    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot delete system with associated records"
