from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Actor
from .repository import UserDirectory


def _row_to_actor(row: dict) -> Actor:
    return Actor(
        actor_id=int(row["user_id"]),
        full_name=row["full_name"],
        role=Role(row["role"]),
    )


class MySQLUserDirectory(UserDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, actor_id: int) -> Optional[Actor]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, role
                FROM users
                WHERE user_id=%s
                """,
                (int(actor_id),),
            )
            row = fetchone(cur)
            return _row_to_actor(row) if row else None

    def list_by_role(self, role: Role) -> Sequence[Actor]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, full_name, role
                FROM users
                WHERE role=%s
                ORDER BY full_name ASC, user_id ASC
                """,
                (role.value,),
            )
            return [_row_to_actor(r) for r in fetchall(cur)]
