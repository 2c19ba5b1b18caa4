"""Role-keyed views over the claim repository.

Each role maps to one listing function and one access rule, so a role's
contract can be read (and tested) on its own.
"""

from __future__ import annotations

from typing import Callable, Mapping, Sequence

from ..core.enums import ClaimOrder, ClaimStatus, Role
from ..users.model import Actor
from .model import Claim, ClaimFilter
from .repository import ClaimRepository

ClaimListing = Callable[[Actor, ClaimRepository], Sequence[Claim]]
AccessRule = Callable[[Actor, Claim], bool]


def own_claims(actor: Actor, claims: ClaimRepository) -> Sequence[Claim]:
    """Newest submission first."""
    return claims.query(
        ClaimFilter(lecturer_id=actor.actor_id),
        order_by=ClaimOrder.SUBMITTED_AT,
        descending=True,
    )


def approved_claims(claims: ClaimRepository) -> Sequence[Claim]:
    """HR payment queue, oldest claim month first."""
    return claims.query(
        ClaimFilter(statuses=(ClaimStatus.APPROVED,)),
        order_by=ClaimOrder.CLAIM_MONTH,
    )


def review_queue(actor: Actor, claims: ClaimRepository) -> Sequence[Claim]:
    # Oldest submission first so nothing waits behind newer claims.
    return claims.query(
        ClaimFilter(statuses=(ClaimStatus.PENDING,)),
        order_by=ClaimOrder.SUBMITTED_AT,
    )


def hr_claims(actor: Actor, claims: ClaimRepository) -> Sequence[Claim]:
    mine = own_claims(actor, claims)
    if mine:
        return mine
    return approved_claims(claims)


def owner_only(actor: Actor, claim: Claim) -> bool:
    return claim.lecturer_id == actor.actor_id


def any_claim(actor: Actor, claim: Claim) -> bool:
    return True


LISTINGS: Mapping[Role, ClaimListing] = {
    Role.LECTURER: own_claims,
    Role.HR: hr_claims,
    Role.PROGRAMME_COORDINATOR: review_queue,
    Role.ACADEMIC_MANAGER: review_queue,
}

ACCESS_RULES: Mapping[Role, AccessRule] = {
    Role.LECTURER: owner_only,
    Role.HR: any_claim,
    Role.PROGRAMME_COORDINATOR: any_claim,
    Role.ACADEMIC_MANAGER: any_claim,
}
