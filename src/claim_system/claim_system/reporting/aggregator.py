"""Pure aggregation over already-loaded claims.

Nothing here touches storage; callers decide which claims go in and in
what order.
"""

from __future__ import annotations

from datetime import datetime, time
from decimal import Decimal
from typing import Iterable, Sequence

from ..claims.model import Claim
from ..common.datetime_utils import format_period
from ..core.enums import ClaimStatus
from ..users.model import Actor
from .model import ApprovedClaimsView, LecturerSummary, MonthlyReport, MonthlyReportRow


def sum_amounts(claims: Iterable[Claim]) -> Decimal:
    return sum((c.total_amount for c in claims), Decimal("0"))


def build_approved_view(claims: Sequence[Claim], *, now: datetime) -> ApprovedClaimsView:
    # An empty queue reports "now" as its earliest month instead of failing.
    if claims:
        earliest = datetime.combine(min(c.claim_month for c in claims), time.min)
    else:
        earliest = now

    return ApprovedClaimsView(
        claims=list(claims),
        total_approved=len(claims),
        total_amount=sum_amounts(claims),
        earliest_claim_month=earliest,
        lecturer_count=len({c.lecturer_id for c in claims}),
    )


def build_monthly_report(claims: Iterable[Claim]) -> MonthlyReport:
    """Group by claim month, keeping the order in which months first appear."""
    groups: dict[tuple[int, int], list[Claim]] = {}
    for claim in claims:
        groups.setdefault((claim.claim_month.year, claim.claim_month.month), []).append(claim)

    rows = [
        MonthlyReportRow(
            year=year,
            month=month,
            period=format_period(year, month),
            total_claims=len(group),
            total_amount=sum_amounts(group),
            approved_count=sum(1 for c in group if c.status == ClaimStatus.APPROVED),
            paid_count=sum(1 for c in group if c.status == ClaimStatus.PAID),
        )
        for (year, month), group in groups.items()
    ]

    return MonthlyReport(
        rows=rows,
        total_claims=sum(r.total_claims for r in rows),
        total_amount=sum((r.total_amount for r in rows), Decimal("0")),
        total_approved=sum(r.approved_count for r in rows),
        total_paid=sum(r.paid_count for r in rows),
    )


def build_lecturer_summaries(lecturers: Iterable[Actor], claims: Iterable[Claim]) -> list[LecturerSummary]:
    by_lecturer: dict[int, list[Claim]] = {}
    for claim in claims:
        by_lecturer.setdefault(claim.lecturer_id, []).append(claim)

    out: list[LecturerSummary] = []
    for lecturer in sorted(lecturers, key=lambda a: (a.full_name, a.actor_id)):
        own = by_lecturer.get(lecturer.actor_id, [])
        out.append(
            LecturerSummary(
                lecturer_id=lecturer.actor_id,
                full_name=lecturer.full_name,
                total_claims=len(own),
                total_amount=sum_amounts(own),
                pending_count=sum(1 for c in own if c.status == ClaimStatus.PENDING),
                approved_count=sum(1 for c in own if c.status == ClaimStatus.APPROVED),
            )
        )
    return out
