from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Actor


class UserDirectory(Protocol):
    """Read-only view over the external user directory.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, actor_id: int) -> Optional[Actor]:
        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[Actor]:
        """Actors with the given role, ordered by full name."""

        raise NotImplementedError
