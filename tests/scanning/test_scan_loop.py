from __future__ import annotations

import itertools
from datetime import datetime, timezone

from lecture_attendance.attendance.memory_repository import InMemoryMarkRepository
from lecture_attendance.attendance.service import AttendanceService
from lecture_attendance.core.enums import AttemptStatus, RejectionReason
from lecture_attendance.courses.model import CourseOccurrence
from lecture_attendance.scanning.loop import ScanLoop
from lecture_attendance.sessions.memory_repository import InMemorySessionRepository
from lecture_attendance.sessions.service import SessionManager
from lecture_attendance.tokens.codec import TokenCodec
from lecture_attendance.tokens.validator import ScanValidator

T0 = datetime(2026, 3, 2, 10, 0, 0, tzinfo=timezone.utc)

CS101 = CourseOccurrence(
    course_id="CS101",
    course_code="CS101",
    course_name="Introduction to Programming",
    schedule_id="CS101-MON",
    day="Monday",
    time="10:00",
    location="Room 101",
    duration_minutes=50,
)


def text_frames(frame):
    """Frames in these tests are already the decoded text (or None for no code)."""
    return frame


def wire():
    codec = TokenCodec("secret")
    manager = SessionManager(InMemorySessionRepository(), codec)
    service = AttendanceService(ScanValidator(codec, manager.find_session), InMemoryMarkRepository())
    session = manager.create_session(CS101, "LEC001", now=T0)
    return service, manager.payload_for(session.session_id)


def test_frames_without_code_are_skipped():
    service, raw = wire()
    loop = ScanLoop.for_student(service, "S1", clock=lambda: T0, decode=text_frames)

    results = list(loop.run([None, None, raw, None]))

    assert [r.status for r in results] == [AttemptStatus.ACCEPTED_CREATED]


def test_same_code_in_consecutive_frames_is_submitted_once():
    service, raw = wire()
    loop = ScanLoop.for_student(service, "S1", clock=lambda: T0, decode=text_frames)

    results = list(loop.run([raw, raw, raw]))

    assert len(results) == 1


def test_resume_allows_rescanning_the_same_code():
    service, raw = wire()
    loop = ScanLoop.for_student(service, "S1", clock=lambda: T0, decode=text_frames)

    first = list(loop.run([raw]))
    loop.pause()
    paused = list(loop.run([raw, "garbage"]))
    loop.resume()
    again = list(loop.run([raw]))

    assert first[0].status == AttemptStatus.ACCEPTED_CREATED
    assert paused == []
    assert again[0].status == AttemptStatus.ACCEPTED_ALREADY_MARKED


def test_each_result_is_processed_before_the_next_frame_is_pulled():
    pulled = []
    seen = []

    def frames():
        for i in itertools.count():
            pulled.append(i)
            yield f"code-{i}"

    service, _ = wire()

    def attempt(raw):
        seen.append((raw, len(pulled)))
        return service.attempt_mark(raw, "S1", now=T0)

    results = ScanLoop(attempt, decode=text_frames).run(frames())

    for _ in range(3):
        r = next(results)
        assert r.reason == RejectionReason.MALFORMED

    assert seen == [("code-0", 1), ("code-1", 2), ("code-2", 3)]


def test_unreadable_frame_is_skipped():
    service, raw = wire()

    def flaky(frame):
        if frame == b"not an image":
            raise OSError("cannot identify image file")
        return frame

    loop = ScanLoop.for_student(service, "S1", clock=lambda: T0, decode=flaky)

    results = list(loop.run([b"not an image", raw]))

    assert [r.status for r in results] == [AttemptStatus.ACCEPTED_CREATED]
