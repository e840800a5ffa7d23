from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Course, CourseOccurrence, Lecturer


class CourseDirectory(Protocol):
    """Read-only course directory.

    The attendance core depends on this interface only; the backing directory is external.
    """

    def get_occurrence(self, course_id: str, schedule_id: str) -> Optional[CourseOccurrence]:
        raise NotImplementedError

    def get_course(self, course_id: str) -> Optional[Course]:
        raise NotImplementedError

    def get_lecturer(self, lecturer_id: str) -> Optional[Lecturer]:
        raise NotImplementedError

    def courses_for_lecturer(self, lecturer_id: str) -> Sequence[Course]:
        raise NotImplementedError
