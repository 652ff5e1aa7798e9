import re
from datetime import date

from flask import Blueprint, request, jsonify, current_app

from services import records_service
from services.exceptions import InvalidArgument

records_bp = Blueprint("records", __name__, url_prefix="/records")

# =========================================================
# HELPERS
# =========================================================

def _payload():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidArgument("Request body must be a JSON object")
    return data


def _int_field(data, key, required=True):
    value = data.get(key)
    if value is None:
        if required:
            raise InvalidArgument(f"'{key}' is required")
        return None
    # Whole numbers only: floats are rejected, not truncated
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and re.fullmatch(r"-?[0-9]+", value.strip()):
        return int(value)
    raise InvalidArgument(f"'{key}' must be an integer")


def _date_field(data, key):
    value = data.get(key)
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"'{key}' must be a YYYY-MM-DD date")


def _created(row):
    current_app.logger.info("Stored %r", row)
    return jsonify({"status": "success", "data": row.to_dict()}), 201


# =========================================================
# CREATE ROUTES
# =========================================================

@records_bp.route("/departments", methods=["POST"])
def create_department():
    data = _payload()
    department = records_service.create_department(
        _int_field(data, "department_id"),
        data.get("department_name")
    )
    return _created(department)


@records_bp.route("/faculty", methods=["POST"])
def create_faculty():
    data = _payload()
    faculty = records_service.create_faculty(
        _int_field(data, "faculty_id"),
        data.get("faculty_name"),
        _int_field(data, "department_id", required=False)
    )
    return _created(faculty)


@records_bp.route("/students", methods=["POST"])
def create_student():
    data = _payload()
    student_id = _int_field(data, "student_id", required=False)
    department_id = _int_field(data, "department_id")

    # An explicit id selects the direct insert path
    if student_id is not None:
        student = records_service.add_student(student_id, data.get("name"), department_id)
    else:
        student = records_service.create_student(data.get("name"), department_id)
    return _created(student)


@records_bp.route("/courses", methods=["POST"])
def create_course():
    data = _payload()
    course = records_service.create_course(
        _int_field(data, "course_id"),
        data.get("course_name"),
        _int_field(data, "department_id")
    )
    return _created(course)


@records_bp.route("/enrollments", methods=["POST"])
def create_enrollment():
    data = _payload()
    enrollment = records_service.create_enrollment(
        _int_field(data, "enrollment_id"),
        _int_field(data, "student_id"),
        _int_field(data, "course_id"),
        _date_field(data, "enrollment_date")
    )
    return _created(enrollment)


@records_bp.route("/exams", methods=["POST"])
def create_exam():
    data = _payload()
    exam = records_service.create_exam(
        _int_field(data, "exam_id"),
        _int_field(data, "course_id"),
        _date_field(data, "exam_date"),
        _int_field(data, "max_marks")
    )
    return _created(exam)
