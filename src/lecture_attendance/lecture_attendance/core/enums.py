from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used by the placeholder access gate."""

    ADMIN = "admin"
    LECTURER = "lecturer"
    STUDENT = "student"


class MarkStatus(str, Enum):
    """Attendance status of a mark.

    Only PRESENT is ever produced by scanning; the others are derived by reporting.
    """

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class RejectionReason(str, Enum):
    """Why a scanned code was refused."""

    MALFORMED = "MALFORMED"
    INTEGRITY_MISMATCH = "INTEGRITY_MISMATCH"
    UNKNOWN_SESSION = "UNKNOWN_SESSION"
    SESSION_INACTIVE = "SESSION_INACTIVE"
    EXPIRED = "EXPIRED"


class AttemptStatus(str, Enum):
    """Outcome of a scanner-facing attempt to mark attendance."""

    ACCEPTED_CREATED = "ACCEPTED_CREATED"
    ACCEPTED_ALREADY_MARKED = "ACCEPTED_ALREADY_MARKED"
    REJECTED = "REJECTED"
