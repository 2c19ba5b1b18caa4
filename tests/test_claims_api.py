from __future__ import annotations

import io
from datetime import date

import pytest

from src.claim_system.claim_system.container import build_services
from src.claim_system.claim_system.core.enums import ClaimStatus
from src.claim_system.claim_system.main import create_app
from src.claim_system.claim_system.users.auth import SessionAuthProvider
from tests.fakes import COORDINATOR, HR, LECTURER, OTHER_LECTURER, InMemoryClaims, InMemoryDocuments, InMemoryUsers, make_claim


@pytest.fixture
def claims():
    return InMemoryClaims()


@pytest.fixture
def app(monkeypatch, claims):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(
        claims_repo=claims,
        users_repo=InMemoryUsers(),
        document_store=InMemoryDocuments(),
        auth_provider=SessionAuthProvider(),
    )
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, actor):
    with client.session_transaction() as sess:
        sess["user_id"] = actor.actor_id


def test_anonymous_requests_are_rejected(client):
    resp = client.get("/claims")
    assert resp.status_code == 401


def test_lecturer_submits_claim_with_document(client):
    login(client, LECTURER)

    resp = client.post(
        "/claims",
        data={
            "hours_worked": "10",
            "hourly_rate": "55.50",
            "claim_month": "2024-04",
            "notes": "Tutorials",
            "supporting_document": (io.BytesIO(b"%PDF-1.4"), "hours.pdf"),
        },
        content_type="multipart/form-data",
    )

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["status"] == "Pending"
    assert body["hours_worked"] == "10.00"
    assert body["hourly_rate"] == "55.50"
    assert body["total_amount"] == "555.0000"
    assert body["claim_month"] == "2024-04"
    assert body["has_document"] is True

    download = client.get(f"/claims/{body['claim_id']}/document")
    assert download.status_code == 200
    assert download.data == b"%PDF-1.4"
    assert download.mimetype == "application/pdf"


def test_validation_error_reports_field(client):
    login(client, LECTURER)

    resp = client.post("/claims", data={"hours_worked": "201", "hourly_rate": "10"})

    assert resp.status_code == 400
    assert resp.get_json()["field"] == "hours_worked"


def test_lecturer_cannot_review(client, claims):
    claims.put(make_claim(1))
    login(client, LECTURER)

    resp = client.post("/claims/1/review", data={"decision": "approve"})

    assert resp.status_code == 403
    assert claims.get_by_id(1).status == ClaimStatus.PENDING


def test_coordinator_rejects_then_cannot_approve(client, claims):
    claims.put(make_claim(1))
    login(client, COORDINATOR)

    resp = client.post("/claims/1/review", data={"decision": "reject", "rejection_reason": "No timesheet"})
    assert resp.status_code == 200
    assert resp.get_json()["rejection_reason"] == "No timesheet"

    again = client.post("/claims/1/review", data={"decision": "approve"})
    assert again.status_code == 409


def test_other_lecturers_claim_is_forbidden(client, claims):
    claims.put(make_claim(1, lecturer_id=OTHER_LECTURER.actor_id))
    login(client, LECTURER)

    assert client.get("/claims/1").status_code == 403
    assert client.get("/claims/99").status_code == 404


def test_hr_pays_and_reports(client, claims):
    claims.put(make_claim(1, status=ClaimStatus.APPROVED, claim_month=date(2024, 1, 1), hours="10", rate="50"))
    claims.put(make_claim(2, status=ClaimStatus.APPROVED, claim_month=date(2024, 1, 1), hours="10", rate="50"))
    login(client, HR)

    assert client.post("/claims/2/paid").get_json()["status"] == "Paid"

    report = client.get("/hr/report").get_json()
    assert report["rows"] == [
        {
            "period": "January 2024",
            "total_claims": 2,
            "total_amount": "1000",
            "approved_count": 1,
            "paid_count": 1,
        }
    ]
    assert report["totals"]["total_paid"] == 1

    approved = client.get("/hr/approved").get_json()
    assert approved["stats"]["total_approved"] == 1

    lecturers = client.get("/hr/lecturers").get_json()["lecturers"]
    assert [row["full_name"] for row in lecturers] == ["Alice Lecturer", "Zed Lecturer"]


def test_reports_forbidden_for_coordinator(client):
    login(client, COORDINATOR)
    assert client.get("/hr/report").status_code == 403
