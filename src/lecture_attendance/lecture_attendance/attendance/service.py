from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_utc
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttemptStatus, RejectionReason
from ..tokens.validator import Accepted, ScanValidator
from .ledger import AttendanceLedgerGate
from .model import AttendanceMark, Created
from .repository import MarkRepository

MESSAGES = {
    AttemptStatus.ACCEPTED_CREATED: "Attendance marked. You are recorded as present.",
    AttemptStatus.ACCEPTED_ALREADY_MARKED: "You have already been marked present for this class.",
}

REJECTION_MESSAGES = {
    RejectionReason.MALFORMED: "This is not an attendance QR code. Please scan the code shown by your lecturer.",
    RejectionReason.INTEGRITY_MISMATCH: "This attendance code could not be verified. It may be damaged or forged.",
    RejectionReason.UNKNOWN_SESSION: "This attendance session does not exist. Ask your lecturer for a new code.",
    RejectionReason.SESSION_INACTIVE: "Your lecturer has closed this attendance session.",
    RejectionReason.EXPIRED: "This attendance code has expired. The class attendance window is over.",
}


@dataclass(frozen=True)
class AttemptResult:
    status: AttemptStatus
    reason: Optional[RejectionReason] = None
    session_id: Optional[str] = None
    course_id: Optional[str] = None
    mark: Optional[AttendanceMark] = None

    @property
    def success(self) -> bool:
        return self.status != AttemptStatus.REJECTED

    @property
    def message(self) -> str:
        if self.reason is not None:
            return REJECTION_MESSAGES[self.reason]
        return MESSAGES[self.status]

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "status": self.status.value,
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
            "session_id": self.session_id,
            "course_id": self.course_id,
            "marked_at": self.mark.marked_at.isoformat() if self.mark else None,
        }


class AttendanceService:
    """Scanner-facing use case: validate a scanned code and record the mark once.

    The ledger gate is private to this service so a mark can only be
    recorded after an Accepted validation.
    """

    def __init__(self, validator: ScanValidator, marks: MarkRepository):
        self._validator = validator
        self._marks = marks
        self._gate = AttendanceLedgerGate(marks)

    def attempt_mark(self, raw: str, student_id: str, *, now: Optional[datetime] = None) -> AttemptResult:
        student_id = require_non_empty(student_id, "Student")
        now = now or now_utc()

        outcome = self._validator.validate_raw(raw, now)
        if not isinstance(outcome, Accepted):
            return AttemptResult(status=AttemptStatus.REJECTED, reason=outcome.reason)

        result = self._gate.record_mark(student_id, outcome.session_id, now)
        status = AttemptStatus.ACCEPTED_CREATED if isinstance(result, Created) else AttemptStatus.ACCEPTED_ALREADY_MARKED
        return AttemptResult(
            status=status,
            session_id=outcome.session_id,
            course_id=outcome.course_id,
            mark=result.mark,
        )

    def marks_for_session(self, session_id: str):
        return self._marks.list_for_session(session_id)

    def session_summary(self, session_id: str) -> dict:
        marks = self._marks.list_for_session(session_id)
        return {
            "session_id": session_id,
            "present_count": len(marks),
            "marks": [self._to_ui(m) for m in marks],
        }

    def get_history_ui(self, student_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT):
        rows = self._marks.list_for_student(student_id, limit)
        return [self._to_ui(r) for r in rows]

    def _to_ui(self, m: AttendanceMark) -> dict:
        label = {
            "present": "Present",
            "absent": "Absent",
            "late": "Late",
        }.get(m.status.value, m.status.value)

        return {
            "student_id": m.student_id,
            "session_id": m.session_id,
            "date": m.marked_at.strftime("%Y-%m-%d"),
            "time": m.marked_at.strftime("%H:%M:%S"),
            "status": label,
        }
