from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone

import pytest

from lecture_attendance.attendance.ledger import AttendanceLedgerGate
from lecture_attendance.attendance.memory_repository import InMemoryMarkRepository
from lecture_attendance.attendance.model import AlreadyMarked, Created
from lecture_attendance.core.enums import MarkStatus
from lecture_attendance.core.exceptions import ValidationError

T0 = datetime(2026, 3, 2, 10, 5, 0, tzinfo=timezone.utc)


def test_first_mark_is_created_then_already_marked():
    gate = AttendanceLedgerGate(InMemoryMarkRepository())

    first = gate.record_mark("S1", "sess-1", T0)
    second = gate.record_mark("S1", "sess-1", T0 + timedelta(minutes=3))
    third = gate.record_mark("S1", "sess-1", T0 + timedelta(minutes=9))

    assert isinstance(first, Created)
    assert first.mark.status == MarkStatus.PRESENT
    assert isinstance(second, AlreadyMarked)
    assert isinstance(third, AlreadyMarked)
    assert second.mark == first.mark
    assert third.mark.marked_at == T0


def test_marks_are_keyed_by_student_and_session():
    marks = InMemoryMarkRepository()
    gate = AttendanceLedgerGate(marks)

    assert isinstance(gate.record_mark("S1", "sess-1", T0), Created)
    assert isinstance(gate.record_mark("S2", "sess-1", T0), Created)
    assert isinstance(gate.record_mark("S1", "sess-2", T0), Created)
    assert len(marks.list_for_session("sess-1")) == 2
    assert len(marks.list_for_student("S1", limit=10)) == 2


def test_concurrent_scans_create_exactly_one_mark():
    marks = InMemoryMarkRepository()
    gate = AttendanceLedgerGate(marks)
    barrier = threading.Barrier(16)
    results = []
    lock = threading.Lock()

    def scan(i: int):
        barrier.wait()
        r = gate.record_mark("S1", "sess-1", T0 + timedelta(seconds=i))
        with lock:
            results.append(r)

    threads = [threading.Thread(target=scan, args=(i,)) for i in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    created = [r for r in results if isinstance(r, Created)]
    assert len(created) == 1
    assert all(r.mark == created[0].mark for r in results)
    assert len(marks.list_for_session("sess-1")) == 1


@pytest.mark.parametrize("student_id, session_id", [("", "sess-1"), ("S1", ""), ("  ", "sess-1")])
def test_empty_ids_are_a_caller_error(student_id, session_id):
    gate = AttendanceLedgerGate(InMemoryMarkRepository())

    with pytest.raises(ValidationError):
        gate.record_mark(student_id, session_id, T0)
