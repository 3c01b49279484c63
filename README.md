# campusdesk

campusdesk is a small in-memory object model of a university campus. It has
four kinds of user: students, professors, administrators and IT support staff.
It also has courses and the records kept about them: registrations, grades,
attendance and events.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
campusdesk
```

The command runs a short fixed scenario and prints each step. It takes no
options apart from `--help`. It does the following:

1. It creates one student, one professor, one administrator, one IT support
   user and the course "Software Engineering".
2. It prints each user's name, ID and role, and the course title.
3. The student registers for the course, and the professor is assigned to it.
4. The professor uploads a grade of 95.5 and marks the student present. Both
   are recorded on the student.
5. The administrator schedules an orientation event.
6. IT support resets the student's password.
7. Last, it lists the student's grades and attendance records.

## Library use

```python
from campusdesk.records import Attendance, Course, Event, Grade, Registration
from campusdesk.users import Administrator, ITSupport, Professor, Student

course = Course("Software Engineering")
student = Student("Ada Example", 1001)
professor = Professor("Dr. Example", 2001)

student.register_course(course)
course.add_student(student)
registration = Registration(student, course)
professor.assign_course(course)

professor.upload_grade(student, course, 95.5)
student.add_grade(Grade(student, course, 95.5))

professor.track_attendance(student, course, True)
student.add_attendance(Attendance(student, course, "2023-10-27", True))

Administrator("Ms. Example", 3001).schedule_event(
    Event("New Student Orientation", "2023-09-01", "10:00 AM", "University Auditorium")
)
ITSupport("Mr. Example", 4001).manage_user_account(student, "reset password")

student.drop_course(course)
```

### `campusdesk.records`

- `Course(title)`: has a `title` and an `enrolled_students` list.
  `add_student(student)` appends a student to that list. `upload_grades()` and
  `track_attendance()` each print a one-line notice naming the course. Two
  courses with the same title are still different courses, because courses
  compare by identity.
- `Grade(student, course, score)`
- `Attendance(student, course, date, present)`
- `Registration(student, course)`
- `Event(title, date, time, location)`

`Grade`, `Attendance`, `Registration` and `Event` are frozen dataclasses.
`date` and `time` are plain strings.

### `campusdesk.users`

- `User(name, user_id, role)`: the base class for all users.
- `Student(name, user_id)`: role `"Student"`. A student keeps three lists:
  `registered_courses`, `grades` and `attendance_records`.
  - `register_course(course)` appends a course.
  - `drop_course(course)` removes every entry for that course.
  - `add_grade(grade)` and `add_attendance(attendance)` append a record.
- `Professor(name, user_id)`: role `"Professor"`. A professor keeps an
  `assigned_courses` list.
  - `assign_course(course)` appends to that list.
  - `upload_grade(student, course, score)` prints a one-line report.
  - `track_attendance(student, course, present)` prints a one-line report.
- `Administrator(name, user_id)`: role `"Administrator"`.
  `schedule_event(event)` prints a one-line report.
- `ITSupport(name, user_id)`: role `"IT Support"`.
  `manage_user_account(user, action)` prints a one-line report.

### `campusdesk.cli`

`main(argv=None)` runs the command-line scenario and returns `0`.

## What it does not do

- **It stores nothing.** All objects live in memory only. There is no
  database or file storage.
- **The action methods only print.** `upload_grade`, `track_attendance`,
  `schedule_event`, `manage_user_account` and the course notices report what
  was done and change nothing. To keep a grade or an attendance record, add it
  to the student yourself, as the example above does.
- **Nothing is linked up for you.** Registering a student for a course does
  not add the student to the course. A scheduled event is not kept on any
  list.
- **There is no interactive mode.** The command only runs its fixed scenario.