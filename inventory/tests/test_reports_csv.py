"""
Tests for reports/CSV export endpoints
"""
import csv
import io

from fastapi import status

from inventory.models.location import Location
from inventory.models.mobile import Mobile
from inventory.models.request import Request
from inventory.models.software import Software
from inventory.models.system import System
from inventory.services.report_service import SYSTEM_HEADERS, LOCATION_HEADERS


def _rows(response):
    return list(csv.DictReader(io.StringIO(response.text)))


def test_systems_csv(client, db, company, location, employee):
    db.add_all([
        System(asset_tag="LT-001", company_id=company.id, location_id=location.id,
               current_user_id=employee.id, status="ACTIVE", model="ThinkPad"),
        System(asset_tag="LT-002", company_id=company.id, status="RETIRED"),
    ])
    db.commit()

    response = client.get("/api/v1/reports/systems.csv")

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"].startswith("text/csv")
    assert "attachment" in response.headers["content-disposition"]
    assert response.text.splitlines()[0] == ",".join(SYSTEM_HEADERS)

    rows = _rows(response)
    assert [r["asset_tag"] for r in rows] == ["LT-001", "LT-002"]
    assert rows[0]["company"] == "Acme Industries"
    assert rows[0]["location"] == "Bangalore HQ"
    assert rows[0]["current_user"] == "Asha Rao"
    assert rows[1]["location"] == ""


def test_systems_csv_status_filter(client, db, company):
    db.add_all([
        System(asset_tag="LT-001", company_id=company.id, status="ACTIVE"),
        System(asset_tag="LT-002", company_id=company.id, status="RETIRED"),
    ])
    db.commit()

    rows = _rows(client.get("/api/v1/reports/systems.csv", params={"status": "RETIRED"}))
    assert [r["asset_tag"] for r in rows] == ["LT-002"]


def test_empty_export_has_header_only(client):
    response = client.get("/api/v1/reports/software.csv")
    assert response.status_code == 200
    assert len(response.text.splitlines()) == 1


def test_mobile_software_and_request_csv(client, db, company):
    db.add_all([
        Mobile(company_id=company.id, mobile_number="9876543210", operator="Jio"),
        Software(name="Tally", company_id=company.id, total_licenses=5, used_licenses=2),
        Request(request_number="REQ-2024-00001", subject="Laptop", company_id=company.id),
    ])
    db.commit()

    mobiles = _rows(client.get("/api/v1/reports/mobile.csv"))
    assert mobiles[0]["mobile_number"] == "9876543210"

    software = _rows(client.get("/api/v1/reports/software.csv"))
    assert software[0]["used_licenses"] == "2"
    assert software[0]["is_active"] == "Yes"

    requests = _rows(client.get("/api/v1/reports/requests.csv"))
    assert requests[0]["request_number"] == "REQ-2024-00001"
    assert requests[0]["status"] == "PENDING"


def test_locations_csv_counts_assets(client, db, company, location):
    empty_site = Location(name="Annex", company_id=company.id)
    db.add(empty_site)
    db.add_all([
        System(asset_tag="LT-001", company_id=company.id, location_id=location.id),
        System(asset_tag="LT-002", company_id=company.id, location_id=location.id),
        Mobile(company_id=company.id, location_id=location.id),
    ])
    db.commit()

    response = client.get("/api/v1/reports/locations.csv")
    assert response.text.splitlines()[0] == ",".join(LOCATION_HEADERS)

    rows = {r["location"]: r for r in _rows(response)}
    assert rows["Bangalore HQ"]["systems"] == "2"
    assert rows["Bangalore HQ"]["mobiles"] == "1"
    assert rows["Bangalore HQ"]["software"] == "0"
    assert rows["Annex"]["systems"] == "0"
