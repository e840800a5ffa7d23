from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Union

from ..common.datetime_utils import as_utc
from ..core.enums import RejectionReason
from ..sessions.model import AttendanceSession
from .codec import MalformedPayload, TokenCodec, TokenPayload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Accepted:
    session_id: str
    course_id: str


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason


ValidationOutcome = Union[Accepted, Rejected]


class ScanValidator:
    """Decides whether a scanned payload may be used to mark attendance.

    Checks run in a fixed order and stop at the first failure:
    integrity, then existence, then liveness, then time. A forged code is
    therefore always reported as INTEGRITY_MISMATCH, never as EXPIRED.
    """

    def __init__(self, codec: TokenCodec, find_session: Callable[[str], Optional[AttendanceSession]]):
        self._codec = codec
        self._find_session = find_session

    def validate(self, payload: TokenPayload, now: datetime) -> ValidationOutcome:
        if not self._codec.verify(payload):
            return self._reject(RejectionReason.INTEGRITY_MISMATCH)

        session = self._find_session(payload.session_id)
        if session is None:
            return self._reject(RejectionReason.UNKNOWN_SESSION)

        if not session.active:
            return self._reject(RejectionReason.SESSION_INACTIVE)

        # Checked against the payload's own expiry, independent of the active flag.
        if as_utc(now) > payload.expires_at:
            return self._reject(RejectionReason.EXPIRED)

        return Accepted(session_id=payload.session_id, course_id=payload.course_id)

    def validate_raw(self, raw, now: datetime) -> ValidationOutcome:
        decoded = self._codec.decode(raw)
        if isinstance(decoded, MalformedPayload):
            logger.debug("Malformed payload: %s", decoded.detail)
            return self._reject(RejectionReason.MALFORMED)
        return self.validate(decoded, now)

    @staticmethod
    def _reject(reason: RejectionReason) -> Rejected:
        logger.info("Scan rejected: %s", reason.value)
        return Rejected(reason)
