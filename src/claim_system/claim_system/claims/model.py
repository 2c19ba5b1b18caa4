from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import ClaimStatus


@dataclass(frozen=True)
class NewClaim:
    lecturer_id: int
    hours_worked: Decimal
    hourly_rate: Decimal
    claim_month: date
    submitted_at: datetime
    notes: Optional[str] = None
    document_key: Optional[str] = None
    original_file_name: Optional[str] = None

    def with_id(self, claim_id: int) -> "Claim":
        return Claim(
            claim_id=int(claim_id),
            lecturer_id=self.lecturer_id,
            hours_worked=self.hours_worked,
            hourly_rate=self.hourly_rate,
            claim_month=self.claim_month,
            status=ClaimStatus.PENDING,
            submitted_at=self.submitted_at,
            notes=self.notes,
            document_key=self.document_key,
            original_file_name=self.original_file_name,
        )


@dataclass(frozen=True)
class Claim:
    """A lecturer's monthly claim.

    Instances are immutable; transitions produce a new Claim via
    ``dataclasses.replace`` and are written back through the repository.
    """

    claim_id: int
    lecturer_id: int
    hours_worked: Decimal
    hourly_rate: Decimal
    claim_month: date
    status: ClaimStatus
    submitted_at: datetime
    notes: Optional[str] = None
    document_key: Optional[str] = None
    original_file_name: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    rejection_reason: Optional[str] = None
    version: int = 1

    @property
    def total_amount(self) -> Decimal:
        return self.hours_worked * self.hourly_rate

    @property
    def has_document(self) -> bool:
        return bool(self.document_key)


@dataclass(frozen=True)
class ClaimFilter:
    lecturer_id: Optional[int] = None
    statuses: tuple[ClaimStatus, ...] = field(default_factory=tuple)
