"""Create operations for the records store.

Each function validates its input against the rows already stored, applies
the normalization the old insert triggers did (upper-cased student names,
sequence-assigned student ids) and commits a single row.
"""
import logging
from datetime import date

from extensions import db
from models import Department, Faculty, Student, Course, Enrollment, Exam
from services.exceptions import (
    DuplicateKey, UnknownReference, InvalidArgument, DuplicateEnrollment
)
from services.sequence_service import STUDENT_SEQUENCE, next_value
from utils.decorators import atomic_create

logger = logging.getLogger(__name__)


# =========================================================
# VALIDATION HELPERS
# =========================================================

def _require_name(name, label):
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgument(f"{label} name must not be empty")
    return name


def _require_key(key, label):
    if isinstance(key, bool) or not isinstance(key, int):
        raise InvalidArgument(f"{label} id must be an integer")
    return key


def _require_new_key(model, key, label):
    _require_key(key, label)
    if db.session.get(model, key) is not None:
        raise DuplicateKey(f"{label} {key} already exists")


def _require_date(value, label, required=False):
    if value is None and not required:
        return None
    if not isinstance(value, date):
        raise InvalidArgument(f"{label} must be a date")
    return value


def _require_department(department_id):
    if db.session.get(Department, department_id) is None:
        raise UnknownReference(f"Invalid Department ID: {department_id}")


def _duplicate(model, label, key_name):
    def conflict(*args, **kwargs):
        key = args[0] if args else kwargs.get(key_name)
        # Only a key that is now taken counts as a collision
        if db.session.get(model, key) is not None:
            return DuplicateKey(f"{label} {key} already exists")
        return None
    return conflict


def _untranslated(*args, **kwargs):
    return None


def _save(row):
    db.session.add(row)
    db.session.commit()
    logger.info("Created %r", row)
    return row


# =========================================================
# DEPARTMENTS / FACULTY
# =========================================================

@atomic_create(on_conflict=_duplicate(Department, "Department", "department_id"))
def create_department(department_id, name):
    _require_name(name, "Department")
    _require_new_key(Department, department_id, "Department")

    return _save(Department(department_id=department_id, department_name=name))


@atomic_create(on_conflict=_duplicate(Faculty, "Faculty", "faculty_id"))
def create_faculty(faculty_id, name, department_id=None):
    _require_name(name, "Faculty")
    _require_new_key(Faculty, faculty_id, "Faculty")
    if department_id is not None:
        _require_department(department_id)

    return _save(
        Faculty(faculty_id=faculty_id, faculty_name=name, department_id=department_id)
    )


# =========================================================
# STUDENTS
# =========================================================

# The id comes from the sequence, so no caller key can collide
@atomic_create(on_conflict=_untranslated)
def create_student(name, department_id):
    """Insert a student with the next ``student_seq`` value as its id."""
    _require_name(name, "Student")
    _require_department(department_id)

    student_id = next_value(STUDENT_SEQUENCE)
    # Ids already taken by direct inserts are skipped, not reused
    while db.session.get(Student, student_id) is not None:
        student_id = next_value(STUDENT_SEQUENCE)

    return _save(
        Student(student_id=student_id, name=name.upper(), department_id=department_id)
    )


@atomic_create(on_conflict=_duplicate(Student, "Student", "student_id"))
def add_student(student_id, name, department_id):
    """Direct insert with a caller supplied id; the sequence is left alone."""
    _require_name(name, "Student")
    _require_new_key(Student, student_id, "Student")
    _require_department(department_id)

    return _save(
        Student(student_id=student_id, name=name.upper(), department_id=department_id)
    )


# =========================================================
# COURSES / ENROLLMENTS / EXAMS
# =========================================================

@atomic_create(on_conflict=_duplicate(Course, "Course", "course_id"))
def create_course(course_id, name, department_id):
    _require_name(name, "Course")
    _require_new_key(Course, course_id, "Course")
    _require_department(department_id)

    return _save(
        Course(course_id=course_id, course_name=name, department_id=department_id)
    )


def _enrollment_exists(student_id, course_id):
    return db.session.query(
        Enrollment.query.filter_by(student_id=student_id, course_id=course_id).exists()
    ).scalar()


def _enrollment_conflict(enrollment_id, student_id, course_id, enrollment_date=None):
    # Same pair committed by someone else between our check and our insert
    if _enrollment_exists(student_id, course_id):
        return DuplicateEnrollment("Student is already enrolled in this course.")
    if db.session.get(Enrollment, enrollment_id) is not None:
        return DuplicateKey(f"Enrollment {enrollment_id} already exists")
    return None


@atomic_create(on_conflict=_enrollment_conflict)
def create_enrollment(enrollment_id, student_id, course_id, enrollment_date=None):
    """
    Enroll a student in a course.

    The existence check gives callers a clear error; the
    ``unique_student_course`` constraint makes the check-and-insert atomic
    when two requests for the same pair race.
    """
    _require_date(enrollment_date, "Enrollment date")
    if db.session.get(Student, student_id) is None:
        raise UnknownReference(f"Invalid Student ID: {student_id}")
    if db.session.get(Course, course_id) is None:
        raise UnknownReference(f"Invalid Course ID: {course_id}")
    if _enrollment_exists(student_id, course_id):
        raise DuplicateEnrollment("Student is already enrolled in this course.")
    _require_new_key(Enrollment, enrollment_id, "Enrollment")

    return _save(
        Enrollment(
            enrollment_id=enrollment_id,
            student_id=student_id,
            course_id=course_id,
            enrollment_date=enrollment_date or date.today()
        )
    )


@atomic_create(on_conflict=_duplicate(Exam, "Exam", "exam_id"))
def create_exam(exam_id, course_id, exam_date, max_marks):
    if isinstance(max_marks, bool) or not isinstance(max_marks, int) or max_marks <= 0:
        raise InvalidArgument("Max marks must be a positive integer")
    _require_date(exam_date, "Exam date")
    if db.session.get(Course, course_id) is None:
        raise UnknownReference(f"Invalid Course ID: {course_id}")
    _require_new_key(Exam, exam_id, "Exam")

    return _save(
        Exam(exam_id=exam_id, course_id=course_id, exam_date=exam_date, max_marks=max_marks)
    )
