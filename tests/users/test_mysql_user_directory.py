from __future__ import annotations

from src.claim_system.claim_system.core.enums import Role
from src.claim_system.claim_system.users.model import Actor
from src.claim_system.claim_system.users.mysql_user_directory import MySQLUserDirectory
from tests.fakes import FakeConnFactory, FakeCursor


def test_get_by_id_maps_row_to_actor():
    cur = FakeCursor(rows=[{"user_id": "3", "full_name": "Ben Coordinator", "role": "ProgrammeCoordinator"}])

    actor = MySQLUserDirectory(FakeConnFactory(cur)).get_by_id(3)

    assert actor == Actor(actor_id=3, full_name="Ben Coordinator", role=Role.PROGRAMME_COORDINATOR)
    sql, params = cur.executed[0]
    assert sql == "SELECT user_id, full_name, role FROM users WHERE user_id=%s"
    assert params == (3,)


def test_get_by_id_returns_none_for_unknown_user():
    assert MySQLUserDirectory(FakeConnFactory(FakeCursor())).get_by_id(999) is None


def test_deactivated_users_still_resolve():
    # Claims are never deleted, so their authors and reviewers must stay resolvable.
    cur = FakeCursor(rows=[{"user_id": 9, "full_name": "Former Lecturer", "role": "Lecturer", "is_active": 0}])
    directory = MySQLUserDirectory(FakeConnFactory(cur))

    assert directory.get_by_id(9).full_name == "Former Lecturer"
    assert [a.actor_id for a in directory.list_by_role(Role.LECTURER)] == [9]
    assert all("is_active" not in sql for sql, _ in cur.executed)


def test_list_by_role_orders_by_name_then_id():
    cur = FakeCursor(
        rows=[
            {"user_id": 1, "full_name": "Alice Lecturer", "role": "Lecturer"},
            {"user_id": 2, "full_name": "Zed Lecturer", "role": "Lecturer"},
        ]
    )
    factory = FakeConnFactory(cur)

    actors = MySQLUserDirectory(factory).list_by_role(Role.LECTURER)

    assert [a.full_name for a in actors] == ["Alice Lecturer", "Zed Lecturer"]
    assert all(a.role == Role.LECTURER for a in actors)
    sql, params = cur.executed[0]
    assert sql == "SELECT user_id, full_name, role FROM users WHERE role=%s ORDER BY full_name ASC, user_id ASC"
    assert params == ("Lecturer",)
    assert factory.connection.committed
