from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import format_countdown, now_utc, truncate_to_seconds
from ..common.validators import require_non_empty, require_positive
from ..core.constants import CLOSING_SOON_SECONDS
from ..core.exceptions import NotFoundError
from ..courses.model import CourseOccurrence
from ..courses.repository import CourseDirectory
from ..tokens.codec import TokenCodec
from .model import AttendanceSession
from .repository import SessionRepository

logger = logging.getLogger(__name__)


class SessionManager:
    """Use case: open and close attendance windows for class occurrences."""

    def __init__(
        self,
        sessions: SessionRepository,
        codec: TokenCodec,
        courses: Optional[CourseDirectory] = None,
    ):
        self._sessions = sessions
        self._codec = codec
        self._courses = courses

    @staticmethod
    def _new_session_id() -> str:
        return secrets.token_urlsafe(12)

    def create_session(
        self,
        occurrence: CourseOccurrence,
        issuer_id: str,
        *,
        now: Optional[datetime] = None,
    ) -> AttendanceSession:
        issuer_id = require_non_empty(issuer_id, "Issuer")
        duration = require_positive(occurrence.duration_minutes, "Class duration")
        created_at = truncate_to_seconds(now) if now else now_utc()

        session = AttendanceSession(
            session_id=self._new_session_id(),
            occurrence=occurrence,
            issuer_id=issuer_id,
            created_at=created_at,
            expires_at=created_at + timedelta(minutes=duration),
        )
        superseded = self._sessions.add_replacing_active(session)

        for old_id in superseded:
            logger.info("Session %s superseded by %s", old_id, session.session_id)
        logger.info(
            "Session %s opened for %s/%s by %s until %s",
            session.session_id,
            occurrence.course_id,
            occurrence.schedule_id,
            issuer_id,
            session.expires_at.isoformat(),
        )
        return session

    def create_for_schedule(
        self,
        *,
        course_id: str,
        schedule_id: str,
        issuer_id: str,
        now: Optional[datetime] = None,
    ) -> AttendanceSession:
        """Look the occurrence up in the course directory, then open a session for it."""

        if self._courses is None:
            raise NotFoundError("Course directory is not configured")
        occurrence = self._courses.get_occurrence(course_id, schedule_id)
        if not occurrence:
            raise NotFoundError("Class schedule not found")
        return self.create_session(occurrence, issuer_id, now=now)

    def stop_session(self, session_id: str) -> None:
        """Deactivate a session. Stopping an already stopped session is a no-op."""

        if self._sessions.get(session_id) is None:
            raise NotFoundError("Session not found")
        if self._sessions.deactivate(session_id):
            logger.info("Session %s stopped", session_id)

    def find_session(self, session_id: str) -> Optional[AttendanceSession]:
        return self._sessions.get(session_id)

    def get_session(self, session_id: str) -> AttendanceSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise NotFoundError("Session not found")
        return session

    def payload_for(self, session_id: str) -> str:
        return self._codec.encode(self.get_session(session_id))

    def sessions_for_issuer(self, issuer_id: str) -> Sequence[AttendanceSession]:
        return self._sessions.list_for_issuer(issuer_id)

    def to_ui(self, session: AttendanceSession, *, now: Optional[datetime] = None) -> dict:
        now = now or now_utc()
        remaining = session.seconds_remaining(now) if session.active else 0
        occ = session.occurrence
        return {
            "session_id": session.session_id,
            "course_id": occ.course_id,
            "course_code": occ.course_code,
            "course_name": occ.course_name,
            "schedule_id": occ.schedule_id,
            "day": occ.day,
            "time": occ.time,
            "location": occ.location,
            "issuer_id": session.issuer_id,
            "date": session.created_at.strftime("%Y-%m-%d"),
            "created_at": session.created_at.isoformat(),
            "expires_at": session.expires_at.isoformat(),
            "active": session.is_open(now),
            "seconds_remaining": remaining,
            "countdown": format_countdown(remaining),
            "closing_soon": 0 < remaining < CLOSING_SOON_SECONDS,
        }
