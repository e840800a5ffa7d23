from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Iterable, Iterator, Optional

from ..attendance.service import AttemptResult, AttendanceService
from ..common.datetime_utils import now_utc

logger = logging.getLogger(__name__)


class ScanLoop:
    """Drives decode -> validate -> record for a stream of camera frames.

    Each decoded payload is fully processed before the next frame is pulled,
    so one frame can never be submitted twice concurrently. The same payload
    seen again in consecutive frames is not resubmitted until `resume()`.
    """

    def __init__(
        self,
        attempt: Callable[[str], AttemptResult],
        *,
        decode: Optional[Callable[[Any], Optional[str]]] = None,
    ):
        self._attempt = attempt
        if decode is None:
            from .decoder import decode_frame as decode
        self._decode = decode
        self._paused = False
        self._last_payload: Optional[str] = None

    @classmethod
    def for_student(
        cls,
        service: AttendanceService,
        student_id: str,
        *,
        clock: Callable[[], datetime] = now_utc,
        decode: Optional[Callable[[Any], Optional[str]]] = None,
    ) -> "ScanLoop":
        return cls(lambda raw: service.attempt_mark(raw, student_id, now=clock()), decode=decode)

    @property
    def paused(self) -> bool:
        return self._paused

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False
        self._last_payload = None

    def run(self, frames: Iterable[Any]) -> Iterator[AttemptResult]:
        for frame in frames:
            if self._paused:
                continue

            try:
                payload = self._decode(frame)
            except (OSError, ValueError) as e:
                logger.debug("Unreadable frame skipped: %s", e)
                continue
            if payload is None or payload == self._last_payload:
                continue

            self._last_payload = payload
            result = self._attempt(payload)
            logger.debug("Scan processed: %s", result.status.value)
            yield result
