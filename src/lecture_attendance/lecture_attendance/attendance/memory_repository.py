from __future__ import annotations

import threading
from typing import Optional, Sequence

from .model import AttendanceMark


class InMemoryMarkRepository:
    def __init__(self):
        self._by_key: dict[tuple[str, str], AttendanceMark] = {}
        self._lock = threading.Lock()

    def get(self, *, student_id: str, session_id: str) -> Optional[AttendanceMark]:
        return self._by_key.get((student_id, session_id))

    def add_if_absent(self, mark: AttendanceMark) -> tuple[AttendanceMark, bool]:
        key = (mark.student_id, mark.session_id)
        with self._lock:
            existing = self._by_key.get(key)
            if existing is not None:
                return existing, False
            self._by_key[key] = mark
            return mark, True

    def list_for_session(self, session_id: str) -> Sequence[AttendanceMark]:
        with self._lock:
            items = [m for m in self._by_key.values() if m.session_id == session_id]
        items.sort(key=lambda m: m.marked_at)
        return items

    def list_for_student(self, student_id: str, limit: int) -> Sequence[AttendanceMark]:
        with self._lock:
            items = [m for m in self._by_key.values() if m.student_id == student_id]
        items.sort(key=lambda m: m.marked_at, reverse=True)
        return items[:limit]
