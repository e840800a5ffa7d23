from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .model import Course, CourseOccurrence, CourseSchedule, Lecturer


class InMemoryCourseDirectory:
    """Dictionary-backed course directory used by the app and tests."""

    def __init__(self, courses: Iterable[Course] = (), lecturers: Iterable[Lecturer] = ()):
        self._courses: dict[str, Course] = {c.course_id: c for c in courses}
        self._lecturers: dict[str, Lecturer] = {lec.lecturer_id: lec for lec in lecturers}

    def add_course(self, course: Course) -> None:
        self._courses[course.course_id] = course

    def add_lecturer(self, lecturer: Lecturer) -> None:
        self._lecturers[lecturer.lecturer_id] = lecturer

    def get_course(self, course_id: str) -> Optional[Course]:
        return self._courses.get(course_id)

    def get_lecturer(self, lecturer_id: str) -> Optional[Lecturer]:
        return self._lecturers.get(lecturer_id)

    def get_occurrence(self, course_id: str, schedule_id: str) -> Optional[CourseOccurrence]:
        course = self._courses.get(course_id)
        if not course:
            return None
        for schedule in course.schedules:
            if schedule.schedule_id == schedule_id:
                return CourseOccurrence.of(course, schedule)
        return None

    def courses_for_lecturer(self, lecturer_id: str) -> Sequence[Course]:
        return [c for c in self._courses.values() if c.lecturer_id == lecturer_id]


def demo_directory() -> InMemoryCourseDirectory:
    """Small demo data set for local development (SEED_DEMO_DATA=1)."""

    lecturers = [
        Lecturer(lecturer_id="LEC001", name="Dr. Sarah Johnson", email="sarah.johnson@university.edu", department="Computer Science"),
        Lecturer(lecturer_id="LEC002", name="Prof. Michael Chen", email="michael.chen@university.edu", department="Mathematics"),
    ]
    courses = [
        Course(
            course_id="CS101",
            code="CS101",
            name="Introduction to Programming",
            department="Computer Science",
            lecturer_id="LEC001",
            schedules=(
                CourseSchedule(schedule_id="CS101-MON", day="Monday", time="10:00", location="Room 101", duration_minutes=50),
                CourseSchedule(schedule_id="CS101-WED", day="Wednesday", time="14:00", location="Lab 3", duration_minutes=90),
            ),
        ),
        Course(
            course_id="CS201",
            code="CS201",
            name="Data Structures",
            department="Computer Science",
            lecturer_id="LEC001",
            schedules=(
                CourseSchedule(schedule_id="CS201-TUE", day="Tuesday", time="09:00", location="Room 204", duration_minutes=60),
            ),
        ),
        Course(
            course_id="MATH101",
            code="MATH101",
            name="Calculus I",
            department="Mathematics",
            lecturer_id="LEC002",
            schedules=(
                CourseSchedule(schedule_id="MATH101-THU", day="Thursday", time="11:00", location="Hall B", duration_minutes=75),
            ),
        ),
    ]
    return InMemoryCourseDirectory(courses, lecturers)
