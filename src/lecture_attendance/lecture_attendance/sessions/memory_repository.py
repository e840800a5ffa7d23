from __future__ import annotations

import threading
from dataclasses import replace
from typing import Optional, Sequence

from .model import AttendanceSession


class InMemorySessionRepository:
    """Process-local session store.

    Sessions are never removed; stopped and superseded ones stay for history.
    """

    def __init__(self):
        self._by_id: dict[str, AttendanceSession] = {}
        self._lock = threading.Lock()

    def get(self, session_id: str) -> Optional[AttendanceSession]:
        return self._by_id.get(session_id)

    def add_replacing_active(self, session: AttendanceSession) -> Sequence[str]:
        with self._lock:
            if session.session_id in self._by_id:
                raise KeyError(f"duplicate session id {session.session_id}")

            superseded = []
            for existing in list(self._by_id.values()):
                if (
                    existing.active
                    and existing.course_id == session.course_id
                    and existing.issuer_id == session.issuer_id
                ):
                    self._by_id[existing.session_id] = replace(existing, active=False)
                    superseded.append(existing.session_id)

            self._by_id[session.session_id] = session
            return superseded

    def deactivate(self, session_id: str) -> bool:
        with self._lock:
            existing = self._by_id.get(session_id)
            if not existing or not existing.active:
                return False
            self._by_id[session_id] = replace(existing, active=False)
            return True

    def find_active(self, *, course_id: str, issuer_id: str) -> Optional[AttendanceSession]:
        with self._lock:
            snapshot = list(self._by_id.values())
        for s in snapshot:
            if s.active and s.course_id == course_id and s.issuer_id == issuer_id:
                return s
        return None

    def list_for_issuer(self, issuer_id: str) -> Sequence[AttendanceSession]:
        with self._lock:
            items = [s for s in self._by_id.values() if s.issuer_id == issuer_id]
        items.sort(key=lambda s: s.created_at, reverse=True)
        return items
