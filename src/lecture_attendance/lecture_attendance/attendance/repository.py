from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceMark


class MarkRepository(Protocol):
    def get(self, *, student_id: str, session_id: str) -> Optional[AttendanceMark]:
        raise NotImplementedError

    def add_if_absent(self, mark: AttendanceMark) -> tuple[AttendanceMark, bool]:
        """Atomic check-and-insert keyed by (student_id, session_id).

        Returns (stored mark, created). When a mark already exists it is
        returned unchanged with created=False.
        """

        raise NotImplementedError

    def list_for_session(self, session_id: str) -> Sequence[AttendanceMark]:
        raise NotImplementedError

    def list_for_student(self, student_id: str, limit: int) -> Sequence[AttendanceMark]:
        raise NotImplementedError
