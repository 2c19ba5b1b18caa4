from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from ..claims.model import Claim


@dataclass(frozen=True)
class MonthlyReportRow:
    year: int
    month: int
    period: str
    total_claims: int
    total_amount: Decimal
    approved_count: int
    paid_count: int


@dataclass(frozen=True)
class MonthlyReport:
    rows: list[MonthlyReportRow]
    total_claims: int
    total_amount: Decimal
    total_approved: int
    total_paid: int


@dataclass(frozen=True)
class ApprovedClaimsView:
    """HR payment queue plus its headline numbers."""

    claims: list[Claim]
    total_approved: int
    total_amount: Decimal
    earliest_claim_month: datetime
    lecturer_count: int


@dataclass(frozen=True)
class LecturerSummary:
    lecturer_id: int
    full_name: str
    total_claims: int
    total_amount: Decimal
    pending_count: int
    approved_count: int
