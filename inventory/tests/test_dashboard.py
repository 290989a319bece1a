"""
Tests for the dashboard endpoint
"""
from datetime import timedelta

from inventory.models.mobile import Mobile
from inventory.models.request import Request
from inventory.models.software import Software
from inventory.models.system import System
from inventory.utils.datetime_utils import today


def test_empty_dashboard(client):
    response = client.get("/api/v1/dashboard")

    assert response.status_code == 200
    data = response.json()
    assert data["kpis"] == {
        "totalSystems": 0,
        "totalSoftware": 0,
        "totalMobiles": 0,
        "pendingRequests": 0,
        "totalAssetValue": 0.0,
        "monthlyMobileRental": 0.0,
    }
    assert data["alerts"] == {"warrantyExpiries": [], "licenseExpiries": []}
    assert data["recentRequests"] == []


def test_dashboard_kpis_and_charts(client, db, company, other_company):
    now = today()
    db.add_all([
        System(asset_tag="LT-1", company_id=company.id, status="ACTIVE", product_type="LAPTOP",
               purchase_price=50000, warranty_end_date=now + timedelta(days=10)),
        System(asset_tag="LT-2", company_id=other_company.id, status="RETIRED", product_type="LAPTOP",
               purchase_price=30000),
        Mobile(company_id=company.id, operator="Jio", monthly_rental=399, status="ACTIVE"),
        Mobile(company_id=company.id, operator="Jio", monthly_rental=599, status="INACTIVE"),
        Software(name="Tally", company_id=company.id, category="ACCOUNTING", total_cost=18000,
                 expiry_date=now + timedelta(days=3)),
        Request(request_number="REQ-2024-00001", subject="Laptop", company_id=company.id, status="PENDING"),
        Request(request_number="REQ-2024-00002", subject="VPN", company_id=company.id, status="IN_PROGRESS"),
        Request(request_number="REQ-2024-00003", subject="Mouse", company_id=company.id, status="COMPLETED",
                requester_name="Kiran"),
    ])
    db.commit()

    data = client.get("/api/v1/dashboard").json()

    kpis = data["kpis"]
    assert kpis["totalSystems"] == 2
    assert kpis["totalMobiles"] == 2
    assert kpis["totalSoftware"] == 1
    assert kpis["pendingRequests"] == 2
    assert kpis["totalAssetValue"] == 98000.0
    assert kpis["monthlyMobileRental"] == 399.0

    charts = data["charts"]
    assert {b["key"]: b["count"] for b in charts["systemsByStatus"]} == {"ACTIVE": 1, "RETIRED": 1}
    assert {b["key"]: b["count"] for b in charts["systemsByCompany"]} == {
        "Acme Industries": 1,
        "Globex Corporation": 1,
    }
    assert charts["mobilesByOperator"] == [{"key": "Jio", "count": 2}]
    assert charts["softwareByCategory"] == [{"key": "ACCOUNTING", "count": 1}]

    alerts = data["alerts"]
    assert [a["assetTag"] for a in alerts["warrantyExpiries"]] == ["LT-1"]
    assert [a["name"] for a in alerts["licenseExpiries"]] == ["Tally"]

    recent = data["recentRequests"]
    assert len(recent) == 3
    assert {r["requestNumber"] for r in recent} == {"REQ-2024-00001", "REQ-2024-00002", "REQ-2024-00003"}
    assert all(r["company"] == "Acme Industries" for r in recent)


def test_dashboard_alerts_are_capped(client, db, company):
    now = today()
    for i in range(7):
        db.add(System(asset_tag=f"W-{i}", company_id=company.id, status="ACTIVE",
                      warranty_end_date=now + timedelta(days=i + 1)))
    db.commit()

    alerts = client.get("/api/v1/dashboard").json()["alerts"]["warrantyExpiries"]
    assert [a["assetTag"] for a in alerts] == ["W-0", "W-1", "W-2", "W-3", "W-4"]
