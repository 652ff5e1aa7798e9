from flask import Blueprint, jsonify

from services import report_service

reports_bp = Blueprint("reports", __name__, url_prefix="/reports")


@reports_bp.route("/departments/<int:department_id>/name")
def department_name(department_id):
    return jsonify({
        "department_id": department_id,
        "department_name": report_service.department_name(department_id)
    })


@reports_bp.route("/students/<int:student_id>/total-marks")
def total_marks(student_id):
    return jsonify({
        "student_id": student_id,
        "total_marks": report_service.total_marks_for_student(student_id)
    })


@reports_bp.route("/departments/student-counts")
def student_counts():
    counts = report_service.student_count_by_department()
    # JSON objects lose order; send a list so clients see department order
    return jsonify([
        {"department_name": name, "student_count": count}
        for name, count in counts.items()
    ])


@reports_bp.route("/students/multiple-courses")
def multiple_courses():
    return jsonify([
        {"name": name, "course_count": count}
        for name, count in report_service.students_with_multiple_courses()
    ])


@reports_bp.route("/enrollments")
def enrollments():
    return jsonify(report_service.enrollment_listing())


@reports_bp.route("/student-course-faculty")
def student_course_faculty():
    return jsonify(report_service.student_course_faculty())


@reports_bp.route("/faculty-courses")
def faculty_courses():
    return jsonify(report_service.faculty_courses())


@reports_bp.route("/students/names")
def student_names():
    return jsonify(report_service.student_names())
