"""Lookups and aggregations over the stored records."""
from collections import OrderedDict

from sqlalchemy import func

from extensions import db
from models import Department, Faculty, Student, Course, Enrollment, Exam
from services.exceptions import NotFound


def department_name(department_id):
    department = db.session.get(Department, department_id)
    if department is None:
        raise NotFound(f"Department {department_id} not found")
    return department.department_name


def total_marks_for_student(student_id):
    """
    Sum ``max_marks`` over the exams of every course the student is
    enrolled in. Unknown students simply have no enrollments and get 0.
    """
    total = (
        db.session.query(func.coalesce(func.sum(Exam.max_marks), 0))
        .select_from(Enrollment)
        .join(Exam, Exam.course_id == Enrollment.course_id)
        .filter(Enrollment.student_id == student_id)
        .scalar()
    )
    return int(total)


def student_count_by_department():
    """Department name -> number of students, empty departments included."""
    rows = (
        db.session.query(Department.department_name, func.count(Student.student_id))
        .outerjoin(Student, Student.department_id == Department.department_id)
        .group_by(Department.department_id, Department.department_name)
        .order_by(Department.department_id)
        .all()
    )

    counts = OrderedDict()
    for name, count in rows:
        # Department names are not unique; same-named rows share a key
        counts[name] = counts.get(name, 0) + count
    return counts


def students_with_multiple_courses():
    rows = (
        db.session.query(Student.name, func.count(Enrollment.course_id))
        .join(Enrollment, Enrollment.student_id == Student.student_id)
        .group_by(Student.student_id, Student.name)
        .having(func.count(Enrollment.course_id) > 1)
        .order_by(Student.student_id)
        .all()
    )
    return [(name, count) for name, count in rows]


# =========================================================
# VIEWS
# =========================================================

def student_names():
    return [name for (name,) in db.session.query(Student.name).order_by(Student.student_id)]


def enrollment_listing():
    """Student name, course name and enrollment date for every enrollment."""
    rows = (
        db.session.query(Student.name, Course.course_name, Enrollment.enrollment_date)
        .select_from(Enrollment)
        .join(Student, Student.student_id == Enrollment.student_id)
        .join(Course, Course.course_id == Enrollment.course_id)
        .order_by(Enrollment.enrollment_id)
        .all()
    )
    return [
        {"student_name": s, "course_name": c, "enrollment_date": d.isoformat()}
        for s, c, d in rows
    ]


def student_course_faculty():
    """
    Enrollments joined to every faculty member of the course's department,
    oldest enrollment first.
    """
    rows = (
        db.session.query(
            Student.name, Course.course_name, Faculty.faculty_name, Enrollment.enrollment_date
        )
        .select_from(Enrollment)
        .join(Student, Student.student_id == Enrollment.student_id)
        .join(Course, Course.course_id == Enrollment.course_id)
        .join(Faculty, Faculty.department_id == Course.department_id)
        .order_by(Enrollment.enrollment_date, Enrollment.enrollment_id, Faculty.faculty_id)
        .all()
    )
    return [
        {
            "student_name": s,
            "course_name": c,
            "faculty_name": f,
            "enrollment_date": d.isoformat(),
        }
        for s, c, f, d in rows
    ]


def faculty_courses():
    rows = (
        db.session.query(Faculty.faculty_name, Course.course_name)
        .join(Course, Course.department_id == Faculty.department_id)
        .order_by(Faculty.faculty_name, Course.course_id)
        .all()
    )
    return [{"faculty_name": f, "course_name": c} for f, c in rows]
