from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.memory_repository import InMemoryMarkRepository
from .attendance.service import AttendanceService
from .core.exceptions import ConfigurationError
from .courses.memory_repository import InMemoryCourseDirectory, demo_directory
from .rendering.qr import QRRenderer, RenderOptions
from .sessions.memory_repository import InMemorySessionRepository
from .sessions.service import SessionManager
from .tokens.codec import TokenCodec
from .tokens.validator import ScanValidator

# Defaults shipped in the settings modules; never acceptable where a real secret is required.
PLACEHOLDER_TOKEN_SECRETS = frozenset({"", "dev-token-secret", "test-token-secret", "please-set-TOKEN_SECRET"})


@dataclass(frozen=True)
class Container:
    courses: InMemoryCourseDirectory
    sessions_repo: InMemorySessionRepository
    marks_repo: InMemoryMarkRepository

    codec: TokenCodec
    validator: ScanValidator
    session_manager: SessionManager
    attendance_service: AttendanceService
    renderer: QRRenderer


def build_container(settings: Any, *, courses: Optional[InMemoryCourseDirectory] = None) -> Container:
    if courses is None:
        courses = demo_directory() if getattr(settings, "SEED_DEMO_DATA", False) else InMemoryCourseDirectory()

    sessions_repo = InMemorySessionRepository()
    marks_repo = InMemoryMarkRepository()

    token_secret = str(getattr(settings, "TOKEN_SECRET", "") or "")
    if getattr(settings, "REQUIRE_TOKEN_SECRET", False) and token_secret.strip() in PLACEHOLDER_TOKEN_SECRETS:
        raise ConfigurationError("TOKEN_SECRET must be set to a private value")

    codec = TokenCodec(token_secret)
    session_manager = SessionManager(sessions_repo, codec, courses)
    validator = ScanValidator(codec, session_manager.find_session)
    attendance_service = AttendanceService(validator, marks_repo)
    renderer = QRRenderer(
        RenderOptions(
            size=int(getattr(settings, "QR_SIZE", 300)),
            margin=int(getattr(settings, "QR_MARGIN", 2)),
            dark=str(getattr(settings, "QR_DARK_COLOR", "#000000")),
            light=str(getattr(settings, "QR_LIGHT_COLOR", "#FFFFFF")),
        )
    )

    return Container(
        courses=courses,
        sessions_repo=sessions_repo,
        marks_repo=marks_repo,
        codec=codec,
        validator=validator,
        session_manager=session_manager,
        attendance_service=attendance_service,
        renderer=renderer,
    )
