from __future__ import annotations

from typing import Optional, Protocol

from flask import session


class AuthProvider(Protocol):
    """Answers "who is calling"; login itself happens elsewhere."""

    def current_actor_id(self) -> Optional[int]:
        raise NotImplementedError


class SessionAuthProvider(AuthProvider):
    """Reads the actor id that the login front-end stored in the Flask session."""

    def __init__(self, session_key: str = "user_id"):
        self._session_key = session_key

    def current_actor_id(self) -> Optional[int]:
        value = session.get(self._session_key)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None
