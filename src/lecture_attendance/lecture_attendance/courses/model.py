from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CourseSchedule:
    """One weekly meeting slot of a course."""

    schedule_id: str
    day: str
    time: str
    location: str
    duration_minutes: int


@dataclass(frozen=True)
class Course:
    course_id: str
    code: str
    name: str
    department: str
    lecturer_id: str
    schedules: tuple[CourseSchedule, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Lecturer:
    lecturer_id: str
    name: str
    email: str
    department: str


@dataclass(frozen=True)
class CourseOccurrence:
    """Read-model: one scheduled meeting of a course (course joined with schedule).

    Reference data owned by the course directory; the session layer only reads it.
    """

    course_id: str
    course_code: str
    course_name: str
    schedule_id: str
    day: str
    time: str
    location: str
    duration_minutes: int

    @classmethod
    def of(cls, course: Course, schedule: CourseSchedule) -> "CourseOccurrence":
        return cls(
            course_id=course.course_id,
            course_code=course.code,
            course_name=course.name,
            schedule_id=schedule.schedule_id,
            day=schedule.day,
            time=schedule.time,
            location=schedule.location,
            duration_minutes=schedule.duration_minutes,
        )
