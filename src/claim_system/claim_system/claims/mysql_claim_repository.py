from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ClaimOrder, ClaimStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_decimal
from .model import Claim, ClaimFilter, NewClaim
from .repository import ClaimRepository

_COLUMNS = """
    claim_id, lecturer_id, hours_worked, hourly_rate, claim_month, notes,
    document_key, original_file_name, status, submitted_at, reviewed_at,
    reviewed_by, rejection_reason, version
"""

_ORDER_COLUMNS = {
    ClaimOrder.SUBMITTED_AT: "submitted_at",
    ClaimOrder.CLAIM_MONTH: "claim_month",
}


def _row_to_claim(r: dict) -> Claim:
    return Claim(
        claim_id=int(r["claim_id"]),
        lecturer_id=int(r["lecturer_id"]),
        hours_worked=to_decimal(r["hours_worked"]),
        hourly_rate=to_decimal(r["hourly_rate"]),
        claim_month=r["claim_month"],
        notes=r.get("notes"),
        document_key=r.get("document_key"),
        original_file_name=r.get("original_file_name"),
        status=ClaimStatus(r["status"]),
        submitted_at=r["submitted_at"],
        reviewed_at=r.get("reviewed_at"),
        reviewed_by=r.get("reviewed_by"),
        rejection_reason=r.get("rejection_reason"),
        version=int(r["version"]),
    )


class MySQLClaimRepository(ClaimRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(self, new_claim: NewClaim) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO monthly_claims(
                    lecturer_id, hours_worked, hourly_rate, claim_month, notes,
                    document_key, original_file_name, status, submitted_at, version
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,1)
                """,
                (
                    int(new_claim.lecturer_id),
                    new_claim.hours_worked,
                    new_claim.hourly_rate,
                    new_claim.claim_month,
                    new_claim.notes,
                    new_claim.document_key,
                    new_claim.original_file_name,
                    ClaimStatus.PENDING.value,
                    new_claim.submitted_at,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, claim_id: int) -> Optional[Claim]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM monthly_claims WHERE claim_id=%s",
                (int(claim_id),),
            )
            r = fetchone(cur)
            return _row_to_claim(r) if r else None

    def update(self, claim: Claim) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE monthly_claims
                SET status=%s, reviewed_at=%s, reviewed_by=%s, rejection_reason=%s,
                    notes=%s, document_key=%s, original_file_name=%s,
                    version=version + 1
                WHERE claim_id=%s AND version=%s
                """,
                (
                    claim.status.value,
                    claim.reviewed_at,
                    claim.reviewed_by,
                    claim.rejection_reason,
                    claim.notes,
                    claim.document_key,
                    claim.original_file_name,
                    int(claim.claim_id),
                    int(claim.version),
                ),
            )
            return cur.rowcount > 0

    def query(
        self,
        claim_filter: ClaimFilter,
        *,
        order_by: ClaimOrder = ClaimOrder.SUBMITTED_AT,
        descending: bool = False,
    ) -> Sequence[Claim]:
        clauses = ["1=1"]
        params: list[object] = []

        if claim_filter.lecturer_id is not None:
            clauses.append("lecturer_id=%s")
            params.append(int(claim_filter.lecturer_id))
        if claim_filter.statuses:
            placeholders = ",".join(["%s"] * len(claim_filter.statuses))
            clauses.append(f"status IN ({placeholders})")
            params.extend(s.value for s in claim_filter.statuses)

        where = " AND ".join(clauses)
        direction = "DESC" if descending else "ASC"
        column = _ORDER_COLUMNS[order_by]

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM monthly_claims
                WHERE {where}
                ORDER BY {column} {direction}, claim_id {direction}
                """,
                tuple(params),
            )
            return [_row_to_claim(r) for r in fetchall(cur)]
