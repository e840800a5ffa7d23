from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from ..core.enums import MarkStatus


@dataclass(frozen=True)
class AttendanceMark:
    """Domain entity: one student's accepted presence for one session."""

    student_id: str
    session_id: str
    marked_at: datetime
    status: MarkStatus = MarkStatus.PRESENT


@dataclass(frozen=True)
class Created:
    mark: AttendanceMark


@dataclass(frozen=True)
class AlreadyMarked:
    mark: AttendanceMark


MarkResult = Union[Created, AlreadyMarked]
