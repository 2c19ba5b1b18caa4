from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Actor role, assigned by the external directory."""

    LECTURER = "Lecturer"
    PROGRAMME_COORDINATOR = "ProgrammeCoordinator"
    ACADEMIC_MANAGER = "AcademicManager"
    HR = "HR"


class ClaimStatus(str, Enum):
    """Claim lifecycle states as stored in the database."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    PAID = "Paid"


class ReviewDecision(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"


class ClaimOrder(str, Enum):
    """Sort keys supported by the claim repository."""

    SUBMITTED_AT = "submitted_at"
    CLAIM_MONTH = "claim_month"
