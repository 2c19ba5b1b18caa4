from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from src.claim_system.claim_system.core.enums import ClaimStatus
from src.claim_system.claim_system.reporting.aggregator import (
    build_approved_view,
    build_lecturer_summaries,
    build_monthly_report,
)
from tests.fakes import HR, LECTURER, OTHER_LECTURER, make_claim


def test_monthly_report_groups_by_month_in_input_order():
    claims = [
        make_claim(1, status=ClaimStatus.APPROVED, hours="10", rate="50", claim_month=date(2024, 1, 1)),
        make_claim(2, status=ClaimStatus.APPROVED, hours="10", rate="50", claim_month=date(2024, 1, 1)),
        make_claim(3, status=ClaimStatus.PAID, hours="5", rate="100", claim_month=date(2024, 2, 1)),
    ]

    report = build_monthly_report(claims)

    assert [(r.period, r.total_claims, r.total_amount, r.approved_count, r.paid_count) for r in report.rows] == [
        ("January 2024", 2, Decimal("1000"), 2, 0),
        ("February 2024", 1, Decimal("500"), 0, 1),
    ]
    assert report.total_claims == 3
    assert report.total_amount == Decimal("1500")
    assert report.total_approved == 2
    assert report.total_paid == 1


def test_monthly_report_separates_same_month_of_different_years():
    claims = [
        make_claim(1, status=ClaimStatus.PAID, claim_month=date(2023, 3, 1)),
        make_claim(2, status=ClaimStatus.PAID, claim_month=date(2024, 3, 1)),
    ]

    report = build_monthly_report(claims)

    assert [r.period for r in report.rows] == ["March 2023", "March 2024"]


def test_monthly_report_of_nothing_is_empty():
    report = build_monthly_report([])
    assert report.rows == []
    assert report.total_claims == 0
    assert report.total_amount == Decimal("0")


def test_approved_view_stats():
    claims = [
        make_claim(1, status=ClaimStatus.APPROVED, hours="10", rate="20", claim_month=date(2024, 1, 1)),
        make_claim(2, status=ClaimStatus.APPROVED, hours="2", rate="50", claim_month=date(2024, 2, 1)),
        make_claim(3, status=ClaimStatus.APPROVED, lecturer_id=OTHER_LECTURER.actor_id, claim_month=date(2023, 11, 1)),
    ]

    view = build_approved_view(claims, now=datetime(2024, 5, 1, 12, 0))

    assert view.total_approved == 3
    assert view.total_amount == Decimal("800")
    assert view.earliest_claim_month == datetime(2023, 11, 1, 0, 0)
    assert view.lecturer_count == 2
    assert [c.claim_id for c in view.claims] == [1, 2, 3]


def test_approved_view_on_empty_set_uses_now():
    now = datetime(2024, 5, 1, 12, 0)
    view = build_approved_view([], now=now)

    assert view.total_approved == 0
    assert view.total_amount == Decimal("0")
    assert view.lecturer_count == 0
    assert view.earliest_claim_month == now
    assert view.claims == []


def test_lecturer_summaries_cover_every_lecturer_sorted_by_name():
    claims = [
        make_claim(1, lecturer_id=LECTURER.actor_id, status=ClaimStatus.PENDING, hours="1", rate="10"),
        make_claim(2, lecturer_id=LECTURER.actor_id, status=ClaimStatus.APPROVED, hours="2", rate="10"),
        make_claim(3, lecturer_id=LECTURER.actor_id, status=ClaimStatus.REJECTED, hours="3", rate="10"),
        make_claim(4, lecturer_id=HR.actor_id, status=ClaimStatus.PENDING),
    ]

    rows = build_lecturer_summaries([OTHER_LECTURER, LECTURER], claims)

    assert [r.full_name for r in rows] == ["Alice Lecturer", "Zed Lecturer"]
    alice, zed = rows
    assert (alice.total_claims, alice.total_amount, alice.pending_count, alice.approved_count) == (
        3,
        Decimal("60"),
        1,
        1,
    )
    assert (zed.total_claims, zed.total_amount, zed.pending_count, zed.approved_count) == (0, Decimal("0"), 0, 0)
