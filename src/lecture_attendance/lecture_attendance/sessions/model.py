from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import as_utc, seconds_until
from ..courses.model import CourseOccurrence


@dataclass(frozen=True)
class AttendanceSession:
    """Domain entity: one live attendance window for a class occurrence.

    Only `active` ever changes (True -> False); expiry is computed on demand.
    """

    session_id: str
    occurrence: CourseOccurrence
    issuer_id: str
    created_at: datetime
    expires_at: datetime
    active: bool = True

    @property
    def course_id(self) -> str:
        return self.occurrence.course_id

    def is_expired(self, now: datetime) -> bool:
        return as_utc(now) > self.expires_at

    def is_open(self, now: datetime) -> bool:
        return self.active and not self.is_expired(now)

    def seconds_remaining(self, now: datetime) -> int:
        return seconds_until(self.expires_at, now)
