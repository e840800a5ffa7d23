from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceSession


class SessionRepository(Protocol):
    def get(self, session_id: str) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def add_replacing_active(self, session: AttendanceSession) -> Sequence[str]:
        """Store a new session, deactivating any active one for the same (course, issuer).

        Must be atomic. Returns the ids of the sessions that were deactivated.
        """

        raise NotImplementedError

    def deactivate(self, session_id: str) -> bool:
        """Flip active -> False. Returns False if the session was already inactive."""

        raise NotImplementedError

    def find_active(self, *, course_id: str, issuer_id: str) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def list_for_issuer(self, issuer_id: str) -> Sequence[AttendanceSession]:
        raise NotImplementedError
