"""
Tests for requests and the approval workflow
"""
from datetime import datetime, timedelta, timezone

from inventory.models.audit_log import AuditLog
from inventory.models.request import Request, RequestComment
from inventory.utils.datetime_utils import today


def _create(client, company, **extra):
    payload = {"subject": "New laptop for developer", "requestType": "HARDWARE", "companyId": company.id}
    payload.update(extra)
    response = client.post("/api/v1/requests", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_request_assigns_number_and_pending_status(client, db, company):
    first = _create(client, company)
    second = _create(client, company, subject="Adobe Acrobat", requestType="SOFTWARE")

    year = today().year
    assert first["requestNumber"] == f"REQ-{year}-00001"
    assert second["requestNumber"] == f"REQ-{year}-00002"
    assert first["status"] == "PENDING"
    assert first["priority"] == "NORMAL"
    assert first["quantity"] == 1

    log = db.query(AuditLog).filter(AuditLog.entity_id == first["id"]).one()
    assert log.entity_type == "Request"
    assert log.new_values["requestNumber"] == first["requestNumber"]


def test_request_number_skips_numbers_in_use(client, db, company):
    first = _create(client, company)
    _create(client, company)
    client.delete(f"/api/v1/requests/{first['id']}")

    # One request left, so the running count points at 00002, which is taken
    third = _create(client, company)
    assert third["requestNumber"] == f"REQ-{today().year}-00003"
    assert db.query(Request).count() == 2


def test_create_request_requires_subject(client, company):
    response = client.post("/api/v1/requests", json={"companyId": company.id})
    assert response.status_code == 422


def test_approve_request(client, db, company, employee):
    request = _create(client, company)

    response = client.post(
        f"/api/v1/requests/{request['id']}/approve",
        json={"approverId": employee.id, "remarks": "Budget approved"},
        headers={"X-Actor": "Manager One"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "APPROVED"
    assert data["approverId"] == employee.id
    assert data["approvalRemarks"] == "Budget approved"
    assert data["approvedAt"] is not None

    log = db.query(AuditLog).filter(AuditLog.entity_id == request["id"], AuditLog.action == "UPDATE").one()
    assert log.performed_by == "Manager One"
    assert log.old_values["status"] == "PENDING"
    assert log.new_values["status"] == "APPROVED"
    assert log.old_values["approvedAt"] is None
    assert log.new_values["approvalRemarks"] == "Budget approved"


def test_reject_requires_remarks(client, company):
    request = _create(client, company)

    missing = client.post(f"/api/v1/requests/{request['id']}/reject", json={})
    assert missing.status_code == 400
    assert missing.json()["detail"] == "Remarks are required to reject a request"

    blank = client.post(f"/api/v1/requests/{request['id']}/reject", json={"remarks": "   "})
    assert blank.status_code == 400

    rejected = client.post(f"/api/v1/requests/{request['id']}/reject", json={"remarks": "Not in budget"})
    assert rejected.status_code == 200
    assert rejected.json()["status"] == "REJECTED"


def test_cannot_approve_rejected_request(client, company):
    request = _create(client, company)
    client.post(f"/api/v1/requests/{request['id']}/reject", json={"remarks": "No"})

    response = client.post(f"/api/v1/requests/{request['id']}/approve", json={})
    assert response.status_code == 400
    assert response.json()["detail"] == "Cannot approve a request in REJECTED status"


def test_complete_request(client, company):
    request = _create(client, company)

    early = client.post(f"/api/v1/requests/{request['id']}/complete")
    assert early.status_code == 400

    client.post(f"/api/v1/requests/{request['id']}/approve", json={})
    done = client.post(f"/api/v1/requests/{request['id']}/complete")
    assert done.status_code == 200
    assert done.json()["status"] == "COMPLETED"
    assert done.json()["completedAt"] is not None


def test_update_request_status_directly(client, db, company):
    request = _create(client, company)
    response = client.put(f"/api/v1/requests/{request['id']}", json={"status": "IN_PROGRESS", "priority": "HIGH"})

    assert response.status_code == 200
    log = db.query(AuditLog).filter(AuditLog.entity_id == request["id"], AuditLog.action == "UPDATE").one()
    assert log.old_values == {"status": "PENDING", "priority": "NORMAL"}
    assert log.new_values == {"status": "IN_PROGRESS", "priority": "HIGH"}


def test_comments(client, db, company):
    request = _create(client, company)

    added = client.post(
        f"/api/v1/requests/{request['id']}/comments",
        json={"comment": "Ordered from vendor"},
        headers={"X-Actor": "IT Desk"},
    )
    assert added.status_code == 201
    assert added.json()["commentBy"] == "IT Desk"

    listed = client.get(f"/api/v1/requests/{request['id']}/comments").json()
    assert [c["comment"] for c in listed] == ["Ordered from vendor"]

    assert client.get("/api/v1/requests/missing/comments").status_code == 404


def test_delete_request_removes_comments(client, db, company):
    request = _create(client, company)
    client.post(f"/api/v1/requests/{request['id']}/comments", json={"comment": "hi"})

    assert client.delete(f"/api/v1/requests/{request['id']}").status_code == 200
    assert db.query(RequestComment).count() == 0


def test_pending_queue_orders_by_priority_then_age(db, client, company):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    rows = [
        ("REQ-2024-00001", "LOW", base),
        ("REQ-2024-00002", "URGENT", base + timedelta(hours=2)),
        ("REQ-2024-00003", "URGENT", base + timedelta(hours=1)),
        ("REQ-2024-00004", "NORMAL", base),
    ]
    for number, priority, created in rows:
        db.add(Request(request_number=number, subject=number, priority=priority,
                       company_id=company.id, created_at=created))
    db.add(Request(request_number="REQ-2024-00005", subject="done", priority="URGENT",
                   status="COMPLETED", company_id=company.id))
    db.commit()

    response = client.get("/api/v1/requests/pending")
    assert [r["requestNumber"] for r in response.json()] == [
        "REQ-2024-00003",
        "REQ-2024-00002",
        "REQ-2024-00004",
        "REQ-2024-00001",
    ]


def test_request_stats(client, company):
    _create(client, company, priority="HIGH")
    second = _create(client, company, requestType="SOFTWARE")
    client.post(f"/api/v1/requests/{second['id']}/approve", json={})

    stats = client.get("/api/v1/requests/stats").json()
    assert stats["total"] == 2
    assert {b["key"]: b["count"] for b in stats["byStatus"]} == {"APPROVED": 1, "PENDING": 1}
    assert {b["key"]: b["count"] for b in stats["byType"]} == {"HARDWARE": 1, "SOFTWARE": 1}
    assert {b["key"]: b["count"] for b in stats["byPriority"]} == {"HIGH": 1, "NORMAL": 1}


def test_list_requests_filters(client, company):
    _create(client, company, subject="Laptop", priority="HIGH")
    _create(client, company, subject="VPN access", requestType="ACCESS")

    body = client.get("/api/v1/requests", params={"requestType": "ACCESS"}).json()
    assert [r["subject"] for r in body["data"]] == ["VPN access"]

    body = client.get("/api/v1/requests", params={"search": "lap"}).json()
    assert [r["subject"] for r in body["data"]] == ["Laptop"]
