from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ClaimOrder
from .model import Claim, ClaimFilter, NewClaim


class ClaimRepository(Protocol):
    """Persistence boundary for claims. Claims are never deleted."""

    def insert(self, new_claim: NewClaim) -> int:
        """Store a PENDING claim (version 1) and return its id."""

        raise NotImplementedError

    def get_by_id(self, claim_id: int) -> Optional[Claim]:
        raise NotImplementedError

    def update(self, claim: Claim) -> bool:
        """Replace the mutable fields of a stored claim.

        Applies only while the stored version equals ``claim.version``; the
        stored version is then incremented. Returns False when nothing was
        written (unknown id or stale version).
        """

        raise NotImplementedError

    def query(
        self,
        claim_filter: ClaimFilter,
        *,
        order_by: ClaimOrder = ClaimOrder.SUBMITTED_AT,
        descending: bool = False,
    ) -> Sequence[Claim]:
        """Claims matching every given filter field; ties break on claim id."""

        raise NotImplementedError
