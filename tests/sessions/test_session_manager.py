from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from lecture_attendance.core.exceptions import NotFoundError, ValidationError
from lecture_attendance.courses.memory_repository import demo_directory
from lecture_attendance.courses.model import CourseOccurrence
from lecture_attendance.sessions.memory_repository import InMemorySessionRepository
from lecture_attendance.sessions.service import SessionManager
from lecture_attendance.tokens.codec import TokenCodec, TokenPayload

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


def make_manager(courses=None) -> SessionManager:
    return SessionManager(InMemorySessionRepository(), TokenCodec("secret"), courses)


def test_create_session_uses_occurrence_duration():
    manager = make_manager()

    s = manager.create_session(CS101, "LEC001", now=T0)

    assert s.active is True
    assert s.created_at == T0
    assert s.expires_at == datetime(2026, 3, 2, 10, 50, 0, tzinfo=timezone.utc)
    assert s.expires_at > s.created_at
    assert manager.get_session(s.session_id) == s


def test_creation_time_is_truncated_to_seconds():
    manager = make_manager()

    s = manager.create_session(CS101, "LEC001", now=T0.replace(microsecond=987654))

    assert s.created_at == T0
    assert s.expires_at == T0 + timedelta(minutes=50)


def test_naive_now_is_treated_as_utc():
    manager = make_manager()

    s = manager.create_session(CS101, "LEC001", now=datetime(2026, 3, 2, 10, 0, 0))

    assert s.created_at == T0


def test_session_ids_are_unique():
    manager = make_manager()

    ids = {manager.create_session(CS101, f"LEC{i}", now=T0).session_id for i in range(50)}

    assert len(ids) == 50


def test_new_session_supersedes_previous_for_same_course_and_issuer():
    manager = make_manager()
    first = manager.create_session(CS101, "LEC001", now=T0)

    second = manager.create_session(CS101, "LEC001", now=T0 + timedelta(minutes=1))

    assert manager.get_session(first.session_id).active is False
    assert manager.get_session(second.session_id).active is True


def test_other_issuer_or_course_is_not_superseded():
    manager = make_manager()
    first = manager.create_session(CS101, "LEC001", now=T0)

    manager.create_session(CS101, "LEC002", now=T0)
    manager.create_session(replace(CS101, course_id="CS201"), "LEC001", now=T0)

    assert manager.get_session(first.session_id).active is True


def test_stop_session_is_idempotent():
    manager = make_manager()
    s = manager.create_session(CS101, "LEC001", now=T0)

    manager.stop_session(s.session_id)
    manager.stop_session(s.session_id)

    assert manager.get_session(s.session_id).active is False


def test_stopped_sessions_are_kept_for_history():
    manager = make_manager()
    first = manager.create_session(CS101, "LEC001", now=T0)
    manager.stop_session(first.session_id)
    manager.create_session(CS101, "LEC001", now=T0 + timedelta(days=7))

    history = manager.sessions_for_issuer("LEC001")

    assert [s.session_id for s in history][-1] == first.session_id
    assert len(history) == 2


def test_stop_unknown_session_raises():
    with pytest.raises(NotFoundError):
        make_manager().stop_session("nope")


def test_get_unknown_session_raises_and_find_returns_none():
    manager = make_manager()

    with pytest.raises(NotFoundError):
        manager.get_session("nope")
    assert manager.find_session("nope") is None


@pytest.mark.parametrize("minutes", [0, -10])
def test_non_positive_duration_is_rejected(minutes):
    with pytest.raises(ValidationError):
        make_manager().create_session(replace(CS101, duration_minutes=minutes), "LEC001", now=T0)


def test_empty_issuer_is_rejected():
    with pytest.raises(ValidationError):
        make_manager().create_session(CS101, "  ", now=T0)


def test_payload_for_encodes_session():
    manager = make_manager()
    s = manager.create_session(CS101, "LEC001", now=T0)

    payload = TokenCodec("secret").decode(manager.payload_for(s.session_id))

    assert isinstance(payload, TokenPayload)
    assert payload.session_id == s.session_id
    assert payload.expires_at == s.expires_at


def test_create_for_schedule_uses_course_directory():
    manager = make_manager(demo_directory())

    s = manager.create_for_schedule(course_id="CS101", schedule_id="CS101-WED", issuer_id="LEC001", now=T0)

    assert s.occurrence.location == "Lab 3"
    assert s.expires_at == T0 + timedelta(minutes=90)


def test_create_for_unknown_schedule_raises():
    manager = make_manager(demo_directory())

    with pytest.raises(NotFoundError):
        manager.create_for_schedule(course_id="CS101", schedule_id="CS101-FRI", issuer_id="LEC001", now=T0)


def test_to_ui_countdown():
    manager = make_manager()
    s = manager.create_session(CS101, "LEC001", now=T0)

    ui = manager.to_ui(s, now=T0 + timedelta(seconds=1))
    late = manager.to_ui(s, now=T0 + timedelta(minutes=47))
    over = manager.to_ui(s, now=T0 + timedelta(minutes=51))

    assert ui["countdown"] == "49:59"
    assert ui["active"] is True
    assert ui["closing_soon"] is False
    assert late["closing_soon"] is True
    assert over["seconds_remaining"] == 0
    assert over["active"] is False


def test_naive_now_is_accepted_by_expiry_checks_and_to_ui():
    manager = make_manager()
    s = manager.create_session(CS101, "LEC001", now=T0)

    ui = manager.to_ui(s, now=datetime(2026, 3, 2, 10, 1, 0))

    assert s.is_expired(datetime(2026, 3, 2, 10, 1, 0)) is False
    assert s.is_expired(datetime(2026, 3, 2, 11, 0, 0)) is True
    assert s.is_open(datetime(2026, 3, 2, 10, 50, 0)) is True
    assert ui["active"] is True
    assert ui["seconds_remaining"] == 49 * 60


@pytest.mark.parametrize("minutes", [1.9, 50.0, "50", True])
def test_non_integer_duration_is_rejected(minutes):
    with pytest.raises(ValidationError):
        make_manager().create_session(replace(CS101, duration_minutes=minutes), "LEC001", now=T0)
