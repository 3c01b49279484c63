"""Users of the campus system and the actions each role can take."""

from __future__ import annotations

from dataclasses import dataclass

from campusdesk.records import Attendance, Course, Event, Grade


@dataclass(eq=False)
class User:
    """Anyone with an account: a name, a numeric id and a role."""

    name: str
    user_id: int
    role: str


class Student(User):
    """A student who registers for courses and collects grades and attendance."""

    def __init__(self, name: str, user_id: int) -> None:
        super().__init__(name, user_id, "Student")
        self.registered_courses: list[Course] = []
        self.grades: list[Grade] = []
        self.attendance_records: list[Attendance] = []

    def register_course(self, course: Course) -> None:
        """Add a course to this student's registrations."""
        self.registered_courses.append(course)

    def drop_course(self, course: Course) -> None:
        """Remove every registration for the given course."""
        self.registered_courses = [c for c in self.registered_courses if c is not course]

    def add_grade(self, grade: Grade) -> None:
        """Record a grade for this student."""
        self.grades.append(grade)

    def add_attendance(self, attendance: Attendance) -> None:
        """Record an attendance entry for this student."""
        self.attendance_records.append(attendance)


class Professor(User):
    """A professor who teaches courses, grades students and takes attendance."""

    def __init__(self, name: str, user_id: int) -> None:
        super().__init__(name, user_id, "Professor")
        self.assigned_courses: list[Course] = []

    def assign_course(self, course: Course) -> None:
        """Assign a course to this professor."""
        self.assigned_courses.append(course)

    def upload_grade(self, student: Student, course: Course, score: float) -> None:
        """Announce a grade upload for a student in a course."""
        print(
            f"Professor {self.name} attempting to upload grade {score:g}"
            f" for student {student.name} in course {course.title}"
        )

    def track_attendance(self, student: Student, course: Course, present: bool) -> None:
        """Announce an attendance mark for a student in a course."""
        status = "present" if present else "absent"
        print(
            f"Professor {self.name} attempting to mark student {student.name}"
            f" as {status} in course {course.title}"
        )


class Administrator(User):
    """An administrator who schedules campus events."""

    def __init__(self, name: str, user_id: int) -> None:
        super().__init__(name, user_id, "Administrator")

    def schedule_event(self, event: Event) -> None:
        """Announce that an event has been scheduled."""
        print(f"Administrator {self.name} scheduled event: {event.title}")


class ITSupport(User):
    """IT staff who act on other users' accounts."""

    def __init__(self, name: str, user_id: int) -> None:
        super().__init__(name, user_id, "IT Support")

    def manage_user_account(self, user: User, action: str) -> None:
        """Announce an action taken on another user's account."""
        print(
            f"IT Support {self.name} performing action '{action}'"
            f" on user account: {user.name} ({user.role})"
        )