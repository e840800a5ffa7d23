from __future__ import annotations

import logging
from datetime import datetime

from ..common.datetime_utils import truncate_to_seconds
from ..common.validators import require_non_empty
from ..core.enums import MarkStatus
from .model import AlreadyMarked, AttendanceMark, Created, MarkResult
from .repository import MarkRepository

logger = logging.getLogger(__name__)


class AttendanceLedgerGate:
    """Enforces at most one mark per (student, session).

    Does not re-check the session itself; callers must have an Accepted
    validation outcome for `session_id` first.
    """

    def __init__(self, marks: MarkRepository):
        self._marks = marks

    def record_mark(self, student_id: str, session_id: str, now: datetime) -> MarkResult:
        student_id = require_non_empty(student_id, "Student")
        session_id = require_non_empty(session_id, "Session")

        candidate = AttendanceMark(
            student_id=student_id,
            session_id=session_id,
            marked_at=truncate_to_seconds(now),
            status=MarkStatus.PRESENT,
        )
        stored, created = self._marks.add_if_absent(candidate)
        if not created:
            return AlreadyMarked(stored)

        logger.info("Marked %s present for session %s", student_id, session_id)
        return Created(stored)
