"""Command that walks through a short campus scenario."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from campusdesk.records import Attendance, Course, Event, Grade, Registration
from campusdesk.users import Administrator, ITSupport, Professor, Student, User


def _describe(user: User) -> str:
    return f"User: {user.name} (ID: {user.user_id}, Role: {user.role})"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration scenario and print what happens."""
    parser = argparse.ArgumentParser(
        prog="campusdesk",
        description="Walk through a short scenario of campus users, courses and records.",
    )
    parser.parse_args(argv)

    student = Student("Jordan Reyes", 1001)
    professor = Professor("Dr. Smith", 2001)
    admin = Administrator("Ms. Davis", 3001)
    support = ITSupport("Mr. Brown", 4001)
    course = Course("Software Engineering")

    for user in (student, professor, admin, support):
        print(_describe(user))
    print(f"Course: {course.title}")

    print("\n--- Interactions ---")

    student.register_course(course)
    Registration(student, course)
    print(f"{student.name} registered for {len(student.registered_courses)} course(s).")

    professor.assign_course(course)
    print(f"{professor.name} is assigned to {len(professor.assigned_courses)} course(s).")

    professor.upload_grade(student, course, 95.5)
    student.add_grade(Grade(student, course, 95.5))

    professor.track_attendance(student, course, True)
    student.add_attendance(Attendance(student, course, "2023-10-27", True))

    orientation = Event("New Student Orientation", "2023-09-01", "10:00 AM", "University Auditorium")
    admin.schedule_event(orientation)

    support.manage_user_account(student, "reset password")

    print("\n--- Student Data ---")
    print(f"{student.name}'s Grades:")
    for grade in student.grades:
        print(f"- {grade.course.title}: {grade.score:g}")

    print(f"{student.name}'s Attendance Records:")
    for record in student.attendance_records:
        status = "Present" if record.present else "Absent"
        print(f"- {record.course.title} on {record.date}: {status}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())