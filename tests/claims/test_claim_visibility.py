from __future__ import annotations

from datetime import date, datetime

import pytest

from src.claim_system.claim_system.claims.service import ClaimService
from src.claim_system.claim_system.claims.visibility import ACCESS_RULES, LISTINGS
from src.claim_system.claim_system.core.enums import ClaimStatus, Role
from src.claim_system.claim_system.core.exceptions import AuthenticationError, AuthorizationError, NotFoundError
from tests.fakes import (
    COORDINATOR,
    HR,
    LECTURER,
    MANAGER,
    OTHER_LECTURER,
    FakeClock,
    InMemoryClaims,
    InMemoryDocuments,
    InMemoryUsers,
    make_claim,
)


@pytest.fixture
def claims():
    repo = InMemoryClaims()
    repo.put(make_claim(1, submitted_at=datetime(2024, 1, 5, 9, 0)))
    repo.put(make_claim(2, submitted_at=datetime(2024, 1, 20, 9, 0), status=ClaimStatus.APPROVED, claim_month=date(2024, 2, 1)))
    repo.put(make_claim(3, submitted_at=datetime(2024, 1, 10, 9, 0), lecturer_id=OTHER_LECTURER.actor_id))
    repo.put(
        make_claim(
            4,
            submitted_at=datetime(2024, 1, 1, 9, 0),
            lecturer_id=OTHER_LECTURER.actor_id,
            status=ClaimStatus.APPROVED,
            claim_month=date(2023, 12, 1),
        )
    )
    repo.put(make_claim(5, submitted_at=datetime(2024, 1, 2, 9, 0), status=ClaimStatus.REJECTED))
    return repo


@pytest.fixture
def documents():
    return InMemoryDocuments()


@pytest.fixture
def svc(claims, documents):
    return ClaimService(claims, InMemoryUsers(), documents, clock=FakeClock())


def ids(claims):
    return [c.claim_id for c in claims]


def test_every_role_has_a_listing_and_access_rule():
    assert set(LISTINGS) == set(Role)
    assert set(ACCESS_RULES) == set(Role)


def test_lecturer_sees_own_claims_newest_first(svc):
    result = svc.list_for_actor(actor_id=LECTURER.actor_id)
    assert ids(result) == [2, 1, 5]
    assert all(c.lecturer_id == LECTURER.actor_id for c in result)


@pytest.mark.parametrize("reviewer", [COORDINATOR, MANAGER])
def test_reviewers_see_pending_queue_oldest_first(svc, reviewer):
    result = svc.list_for_actor(actor_id=reviewer.actor_id)
    assert ids(result) == [1, 3]
    assert all(c.status == ClaimStatus.PENDING for c in result)


def test_hr_without_own_claims_falls_back_to_approved_claims(svc):
    result = svc.list_for_actor(actor_id=HR.actor_id)
    # claim month ascending
    assert ids(result) == [4, 2]


def test_hr_with_own_claims_sees_them(svc, claims):
    claims.put(make_claim(6, lecturer_id=HR.actor_id, submitted_at=datetime(2024, 1, 3, 9, 0)))
    claims.put(make_claim(7, lecturer_id=HR.actor_id, submitted_at=datetime(2024, 1, 4, 9, 0)))

    assert ids(svc.list_for_actor(actor_id=HR.actor_id)) == [7, 6]


def test_list_for_unknown_actor_fails(svc):
    with pytest.raises(AuthenticationError):
        svc.list_for_actor(actor_id=999)


def test_lecturer_can_view_own_claim(svc):
    assert svc.get_visible(actor_id=LECTURER.actor_id, claim_id=1).claim_id == 1


def test_lecturer_cannot_view_another_lecturers_claim(svc):
    with pytest.raises(AuthorizationError):
        svc.get_visible(actor_id=LECTURER.actor_id, claim_id=3)


@pytest.mark.parametrize("actor", [COORDINATOR, MANAGER, HR])
def test_other_roles_can_view_any_claim(svc, actor):
    assert svc.get_visible(actor_id=actor.actor_id, claim_id=3).lecturer_id == OTHER_LECTURER.actor_id


def test_get_visible_unknown_claim(svc):
    with pytest.raises(NotFoundError):
        svc.get_visible(actor_id=COORDINATOR.actor_id, claim_id=404)


def test_download_document_returns_content_and_type(svc, claims, documents):
    documents.files["k1_report.PDF"] = b"%PDF"
    claims.put(make_claim(10, document_key="k1_report.PDF", original_file_name="report.PDF"))

    doc = svc.download_document(actor_id=LECTURER.actor_id, claim_id=10)

    assert doc.content == b"%PDF"
    assert doc.filename == "report.PDF"
    assert doc.content_type == "application/pdf"


def test_download_document_respects_visibility(svc, claims, documents):
    documents.files["k1_a.png"] = b"png"
    claims.put(make_claim(10, document_key="k1_a.png", original_file_name="a.png"))

    with pytest.raises(AuthorizationError):
        svc.download_document(actor_id=OTHER_LECTURER.actor_id, claim_id=10)


def test_download_without_document_is_not_found(svc):
    with pytest.raises(NotFoundError):
        svc.download_document(actor_id=LECTURER.actor_id, claim_id=1)


def test_download_with_missing_blob_is_not_found(svc, claims):
    claims.put(make_claim(10, document_key="gone_a.pdf", original_file_name="a.pdf"))
    with pytest.raises(NotFoundError):
        svc.download_document(actor_id=COORDINATOR.actor_id, claim_id=10)
