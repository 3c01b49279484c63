"""Course and the records that tie students to courses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from campusdesk.users import Student


@dataclass(eq=False)
class Course:
    """A course that students enrol in.

    Courses compare by identity, so two courses with the same title
    are still different courses.
    """

    title: str
    enrolled_students: list[Student] = field(default_factory=list)

    def add_student(self, student: Student) -> None:
        """Enrol a student in this course."""
        self.enrolled_students.append(student)

    def upload_grades(self) -> None:
        """Announce that grades are being uploaded for this course."""
        print(f"Uploading grades for course: {self.title}")

    def track_attendance(self) -> None:
        """Announce that attendance is being tracked for this course."""
        print(f"Tracking attendance for course: {self.title}")


@dataclass(frozen=True)
class Grade:
    """A student's score in a course."""

    student: Student
    course: Course
    score: float


@dataclass(frozen=True)
class Attendance:
    """Whether a student was present in a course on a given date."""

    student: Student
    course: Course
    date: str
    present: bool


@dataclass(frozen=True)
class Registration:
    """A student's registration for a course."""

    student: Student
    course: Course


@dataclass(frozen=True)
class Event:
    """A scheduled campus event."""

    title: str
    date: str
    time: str
    location: str