from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..claims.model import ClaimFilter
from ..claims.repository import ClaimRepository
from ..claims.visibility import approved_claims
from ..common.datetime_utils import now_local
from ..core.enums import ClaimOrder, ClaimStatus, Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from ..users.model import Actor
from ..users.repository import UserDirectory
from .aggregator import build_approved_view, build_lecturer_summaries, build_monthly_report
from .model import ApprovedClaimsView, LecturerSummary, MonthlyReport

logger = logging.getLogger(__name__)


class ReportingService:
    """HR-only payment views and reports, computed fresh on every call."""

    def __init__(
        self,
        claims: ClaimRepository,
        users: UserDirectory,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._claims = claims
        self._users = users
        self._clock = clock

    def _require_hr(self, actor_id: Optional[int]) -> Actor:
        actor = self._users.get_by_id(int(actor_id)) if actor_id is not None else None
        if not actor:
            raise AuthenticationError("Unknown user")
        if actor.role != Role.HR:
            logger.warning("User %s (%s) denied access to HR reports", actor.actor_id, actor.role.value)
            raise AuthorizationError("Only HR can access payment reports")
        return actor

    def approved_view(self, *, actor_id: int) -> ApprovedClaimsView:
        self._require_hr(actor_id)
        return build_approved_view(approved_claims(self._claims), now=self._clock())

    def generate_report(self, *, actor_id: int) -> MonthlyReport:
        self._require_hr(actor_id)
        claims = self._claims.query(
            ClaimFilter(statuses=(ClaimStatus.APPROVED, ClaimStatus.PAID)),
            order_by=ClaimOrder.CLAIM_MONTH,
        )
        return build_monthly_report(claims)

    def manage_lecturers(self, *, actor_id: int) -> list[LecturerSummary]:
        self._require_hr(actor_id)
        lecturers = self._users.list_by_role(Role.LECTURER)
        claims = self._claims.query(ClaimFilter())
        return build_lecturer_summaries(lecturers, claims)
