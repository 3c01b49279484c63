import dataclasses

import pytest

from campusdesk.records import Attendance, Course, Event, Grade, Registration
from campusdesk.users import Student


def test_course_starts_empty_and_enrols_students():
    course = Course("Software Engineering")
    first = Student("Jordan Reyes", 1001)
    second = Student("Sam Lee", 1002)
    course.add_student(first)
    course.add_student(second)
    assert course.title == "Software Engineering"
    assert course.enrolled_students == [first, second]


def test_courses_with_same_title_stay_distinct():
    first = Course("Algebra")
    second = Course("Algebra")
    student = Student("Jordan Reyes", 1001)
    first.add_student(student)
    assert first.enrolled_students == [student]
    assert second.enrolled_students == []
    courses = [first, second]
    assert courses.count(first) == 1
    assert courses.index(second) == 1


def test_upload_grades_message(capsys):
    Course("Software Engineering").upload_grades()
    assert capsys.readouterr().out == "Uploading grades for course: Software Engineering\n"


def test_track_attendance_message(capsys):
    Course("Software Engineering").track_attendance()
    assert capsys.readouterr().out == "Tracking attendance for course: Software Engineering\n"


def test_grade_holds_its_parts():
    student = Student("Jordan Reyes", 1001)
    course = Course("Software Engineering")
    grade = Grade(student, course, 95.5)
    assert grade.student is student
    assert grade.course is course
    assert grade.score == 95.5


def test_attendance_holds_its_parts():
    student = Student("Jordan Reyes", 1001)
    course = Course("Software Engineering")
    record = Attendance(student, course, "2023-10-27", True)
    assert record.student is student
    assert record.course is course
    assert record.date == "2023-10-27"
    assert record.present is True


def test_registration_holds_its_parts():
    student = Student("Jordan Reyes", 1001)
    course = Course("Software Engineering")
    registration = Registration(student, course)
    assert (registration.student, registration.course) == (student, course)


def test_event_fields_and_immutability():
    event = Event("New Student Orientation", "2023-09-01", "10:00 AM", "University Auditorium")
    assert event.title == "New Student Orientation"
    assert event.date == "2023-09-01"
    assert event.time == "10:00 AM"
    assert event.location == "University Auditorium"
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.title = "Changed"