import logging
from datetime import date

from extensions import db
from models import Department, Faculty, Student, Course, Enrollment, Exam
from services import records_service

logger = logging.getLogger(__name__)


def seed_departments():
    departments = [
        {"department_id": 1, "name": "Computer Science"},
        {"department_id": 2, "name": "Mathematics"},
        {"department_id": 3, "name": "Physics"},
    ]

    for d in departments:
        if not db.session.get(Department, d["department_id"]):
            records_service.create_department(d["department_id"], d["name"])

    logger.info("Departments seeded")


def seed_faculty():
    faculty = [
        {"faculty_id": 1, "name": "Dr. Smith", "department_id": 1},
        {"faculty_id": 2, "name": "Dr. Johnson", "department_id": 2},
        {"faculty_id": 3, "name": "Dr. Lee", "department_id": 3},
    ]

    for f in faculty:
        if not db.session.get(Faculty, f["faculty_id"]):
            records_service.create_faculty(f["faculty_id"], f["name"], f["department_id"])

    logger.info("Faculty seeded")


def seed_students():
    students = [
        {"name": "Alice", "department_id": 1},
        {"name": "Bob", "department_id": 2},
        {"name": "Charlie", "department_id": 3},
    ]

    for s in students:
        existing = Student.query.filter_by(name=s["name"].upper()).first()
        if not existing:
            records_service.create_student(s["name"], s["department_id"])

    logger.info("Students seeded")


def seed_courses():
    courses = [
        {"course_id": 1, "name": "Database Systems", "department_id": 1},
        {"course_id": 2, "name": "Linear Algebra", "department_id": 2},
        {"course_id": 3, "name": "Quantum Mechanics", "department_id": 3},
    ]

    for c in courses:
        if not db.session.get(Course, c["course_id"]):
            records_service.create_course(c["course_id"], c["name"], c["department_id"])

    logger.info("Courses seeded")


def seed_enrollments():
    # Each sample student takes their own department's course
    for student in Student.query.order_by(Student.student_id).all():
        course = Course.query.filter_by(department_id=student.department_id).first()
        if not course:
            continue
        existing = Enrollment.query.filter_by(
            student_id=student.student_id, course_id=course.course_id
        ).first()
        if not existing:
            next_id = (db.session.query(db.func.max(Enrollment.enrollment_id)).scalar() or 0) + 1
            records_service.create_enrollment(next_id, student.student_id, course.course_id)

    logger.info("Enrollments seeded")


def seed_exams():
    exams = [
        {"exam_id": 1, "course_id": 1, "exam_date": date(2025, 2, 1), "max_marks": 100},
        {"exam_id": 2, "course_id": 2, "exam_date": date(2025, 2, 2), "max_marks": 100},
        {"exam_id": 3, "course_id": 3, "exam_date": date(2025, 2, 3), "max_marks": 100},
    ]

    for e in exams:
        if not db.session.get(Exam, e["exam_id"]):
            records_service.create_exam(
                e["exam_id"], e["course_id"], e["exam_date"], e["max_marks"]
            )

    logger.info("Exams seeded")


def run_seed():
    seed_departments()
    seed_faculty()
    seed_students()
    seed_courses()
    seed_enrollments()
    seed_exams()
