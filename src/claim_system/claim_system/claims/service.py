from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Optional, Union

from ..common.datetime_utils import normalize_claim_month, now_local
from ..common.validators import Number, require_in_range, require_max_length, require_non_empty
from ..core.constants import (
    DECIMAL_QUANTUM,
    MAX_HOURLY_RATE,
    MAX_HOURS_WORKED,
    MAX_NOTES_LENGTH,
    MIN_HOURLY_RATE,
    MIN_HOURS_WORKED,
)
from ..core.enums import ClaimStatus, ReviewDecision, Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from ..documents.model import DocumentDownload, UploadedDocument
from ..documents.store import DocumentStore, content_type_for
from ..users.model import Actor
from ..users.repository import UserDirectory
from .model import Claim, NewClaim
from .repository import ClaimRepository
from .visibility import ACCESS_RULES, LISTINGS

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: dict[ClaimStatus, frozenset[ClaimStatus]] = {
    ClaimStatus.PENDING: frozenset({ClaimStatus.APPROVED, ClaimStatus.REJECTED}),
    ClaimStatus.APPROVED: frozenset({ClaimStatus.PAID}),
    ClaimStatus.REJECTED: frozenset(),
    ClaimStatus.PAID: frozenset(),
}


class ClaimService:
    """Claim lifecycle: submission, review, payment and role-based access.

    Every write is load -> validate -> transform -> persist. The repository
    only accepts an update while the stored version still matches the one
    that was loaded, so two reviewers racing on one claim cannot both win.
    """

    def __init__(
        self,
        claims: ClaimRepository,
        users: UserDirectory,
        documents: DocumentStore,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._claims = claims
        self._users = users
        self._documents = documents
        self._clock = clock

    # -------- helpers --------
    def _now(self) -> datetime:
        # DATETIME columns keep whole seconds only
        return self._clock().replace(microsecond=0)

    def _require_actor(self, actor_id: Optional[int]) -> Actor:
        actor = self._users.get_by_id(int(actor_id)) if actor_id is not None else None
        if not actor:
            raise AuthenticationError("Unknown user")
        return actor

    def _require_claim(self, claim_id: int) -> Claim:
        claim = self._claims.get_by_id(int(claim_id))
        if not claim:
            raise NotFoundError(f"Claim #{claim_id} not found")
        return claim

    @staticmethod
    def _require_transition(claim: Claim, target: ClaimStatus) -> None:
        if target not in ALLOWED_TRANSITIONS[claim.status]:
            logger.warning(
                "Rejected transition of claim #%s from %s to %s",
                claim.claim_id,
                claim.status.value,
                target.value,
            )
            raise InvalidStateError(
                f"Claim #{claim.claim_id} is {claim.status.value} and cannot become {target.value}"
            )

    def _persist(self, claim: Claim) -> Claim:
        if not self._claims.update(claim):
            raise ConflictError(f"Claim #{claim.claim_id} was modified by someone else, reload and retry")
        return replace(claim, version=claim.version + 1)

    def _discard_document(self, key: str) -> None:
        try:
            self._documents.delete(key)
        except OSError:
            logger.exception("Could not remove orphaned document %s", key)

    @staticmethod
    def _parse_decision(decision: Union[ReviewDecision, str]) -> ReviewDecision:
        if isinstance(decision, ReviewDecision):
            return decision
        try:
            return ReviewDecision(str(decision or "").strip().lower())
        except ValueError:
            raise ValidationError("Decision must be 'approve' or 'reject'", field="decision")

    # -------- lifecycle --------
    def submit(
        self,
        *,
        actor_id: int,
        hours_worked: Number,
        hourly_rate: Number,
        claim_month: Optional[Union[date, str]] = None,
        notes: Optional[str] = None,
        document: Optional[UploadedDocument] = None,
    ) -> Claim:
        actor = self._require_actor(actor_id)

        hours = require_in_range(
            hours_worked, "hours_worked", MIN_HOURS_WORKED, MAX_HOURS_WORKED, quantum=DECIMAL_QUANTUM
        )
        rate = require_in_range(
            hourly_rate, "hourly_rate", MIN_HOURLY_RATE, MAX_HOURLY_RATE, quantum=DECIMAL_QUANTUM
        )
        clean_notes = require_max_length(notes, "notes", MAX_NOTES_LENGTH)

        now = self._now()
        month = normalize_claim_month(claim_month, today=now.date())

        document_key: Optional[str] = None
        original_file_name: Optional[str] = None
        if document is not None and not document.is_empty:
            # A failed write propagates before any claim row exists.
            document_key = self._documents.store(document.content, document.filename)
            original_file_name = document.filename or None

        new_claim = NewClaim(
            lecturer_id=actor.actor_id,
            hours_worked=hours,
            hourly_rate=rate,
            claim_month=month,
            submitted_at=now,
            notes=clean_notes,
            document_key=document_key,
            original_file_name=original_file_name,
        )

        try:
            claim_id = self._claims.insert(new_claim)
        except Exception:
            if document_key:
                self._discard_document(document_key)
            raise

        logger.info(
            "Claim #%s submitted by user %s for %s (%s h x %s)",
            claim_id,
            actor.actor_id,
            month.strftime("%Y-%m"),
            hours,
            rate,
        )
        return new_claim.with_id(claim_id)

    def review(
        self,
        *,
        actor_id: int,
        claim_id: int,
        decision: Union[ReviewDecision, str],
        rejection_reason: Optional[str] = None,
    ) -> Claim:
        actor = self._require_actor(actor_id)
        if not actor.is_reviewer:
            logger.warning("User %s (%s) tried to review claim #%s", actor.actor_id, actor.role.value, claim_id)
            raise AuthorizationError("Only programme coordinators and academic managers can review claims")

        verdict = self._parse_decision(decision)
        claim = self._require_claim(claim_id)

        target = ClaimStatus.APPROVED if verdict == ReviewDecision.APPROVE else ClaimStatus.REJECTED
        self._require_transition(claim, target)

        reason: Optional[str] = None
        if target == ClaimStatus.REJECTED:
            reason = require_non_empty(rejection_reason, "rejection_reason")

        updated = self._persist(
            replace(
                claim,
                status=target,
                reviewed_by=actor.full_name,
                reviewed_at=self._now(),
                rejection_reason=reason,
            )
        )
        logger.info("Claim #%s %s by %s", claim.claim_id, target.value.lower(), actor.full_name)
        return updated

    def approve(self, *, actor_id: int, claim_id: int) -> Claim:
        return self.review(actor_id=actor_id, claim_id=claim_id, decision=ReviewDecision.APPROVE)

    def reject(self, *, actor_id: int, claim_id: int, rejection_reason: str) -> Claim:
        return self.review(
            actor_id=actor_id,
            claim_id=claim_id,
            decision=ReviewDecision.REJECT,
            rejection_reason=rejection_reason,
        )

    def mark_paid(self, *, actor_id: int, claim_id: int) -> Claim:
        actor = self._require_actor(actor_id)
        if actor.role != Role.HR:
            logger.warning("User %s (%s) tried to mark claim #%s paid", actor.actor_id, actor.role.value, claim_id)
            raise AuthorizationError("Only HR can mark claims as paid")

        claim = self._require_claim(claim_id)
        self._require_transition(claim, ClaimStatus.PAID)

        updated = self._persist(replace(claim, status=ClaimStatus.PAID))
        logger.info("Claim #%s marked paid by %s", claim.claim_id, actor.full_name)
        return updated

    # -------- queries --------
    def list_for_actor(self, *, actor_id: int) -> list[Claim]:
        actor = self._require_actor(actor_id)
        return list(LISTINGS[actor.role](actor, self._claims))

    def get_visible(self, *, actor_id: int, claim_id: int) -> Claim:
        actor = self._require_actor(actor_id)
        claim = self._require_claim(claim_id)
        if not ACCESS_RULES[actor.role](actor, claim):
            logger.warning("User %s denied access to claim #%s", actor.actor_id, claim.claim_id)
            raise AuthorizationError("You can only view your own claims")
        return claim

    def download_document(self, *, actor_id: int, claim_id: int) -> DocumentDownload:
        claim = self.get_visible(actor_id=actor_id, claim_id=claim_id)
        if not claim.document_key:
            raise NotFoundError(f"Claim #{claim.claim_id} has no supporting document")

        content = self._documents.retrieve(claim.document_key)
        filename = claim.original_file_name or claim.document_key
        return DocumentDownload(content=content, filename=filename, content_type=content_type_for(filename))
