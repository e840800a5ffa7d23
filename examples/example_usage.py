"""Example: drive the service layer directly (without Flask).

Controllers are only a thin layer; the attendance protocol lives in the services.
"""

import importlib
from datetime import datetime, timedelta, timezone

from lecture_attendance.container import build_container
from lecture_attendance.settings import get_settings_module


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)

    start = datetime(2026, 3, 2, 10, 0, 0, tzinfo=timezone.utc)
    session = container.session_manager.create_for_schedule(
        course_id="CS101", schedule_id="CS101-MON", issuer_id="LEC001", now=start
    )
    payload = container.session_manager.payload_for(session.session_id)
    print("payload:", payload)
    print("qr:", container.renderer.data_url(payload)[:64], "...")

    service = container.attendance_service
    for when in (start + timedelta(minutes=49, seconds=59), start + timedelta(minutes=49, seconds=59)):
        print(service.attempt_mark(payload, "S1", now=when).message)
    print(service.attempt_mark(payload, "S2", now=start + timedelta(minutes=50, seconds=1)).message)


if __name__ == "__main__":
    main()
