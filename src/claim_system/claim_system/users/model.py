from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Actor:
    """Directory entry for anyone acting on claims.

    Note: Roles are assigned outside this system; the core only reads them.
    """

    actor_id: int
    full_name: str
    role: Role

    @property
    def is_reviewer(self) -> bool:
        return self.role in {Role.PROGRAMME_COORDINATOR, Role.ACADEMIC_MANAGER}
