import os

import pandas as pd

from extensions import db
from models import BackupLog, Department, Exam, Student
from services import records_service


class TestRecordsRoutes:

    def test_create_department(self, client):
        response = client.post(
            "/records/departments",
            json={"department_id": 1, "department_name": "Computer Science"}
        )
        assert response.status_code == 201
        assert response.get_json()["data"] == {
            "department_id": 1,
            "department_name": "Computer Science",
        }

    def test_duplicate_department(self, client, departments):
        response = client.post(
            "/records/departments",
            json={"department_id": 1, "department_name": "Biology"}
        )
        assert response.status_code == 409
        assert response.get_json()["error"] == "DuplicateKey"

    def test_student_auto_id(self, client, departments):
        response = client.post("/records/students", json={"name": "alice", "department_id": 1})
        assert response.status_code == 201
        assert response.get_json()["data"] == {
            "student_id": 1,
            "name": "ALICE",
            "department_id": 1,
        }

    def test_student_explicit_id(self, client, departments):
        response = client.post(
            "/records/students",
            json={"student_id": 4, "name": "David", "department_id": 1}
        )
        assert response.status_code == 201
        assert response.get_json()["data"]["student_id"] == 4

    def test_student_unknown_department(self, client, departments):
        response = client.post("/records/students", json={"name": "alice", "department_id": 8})
        assert response.status_code == 422
        assert response.get_json()["error"] == "UnknownReference"
        assert Student.query.count() == 0

    def test_faculty_without_department(self, client):
        response = client.post("/records/faculty", json={"faculty_id": 1, "faculty_name": "Dr. Lee"})
        assert response.status_code == 201
        assert response.get_json()["data"]["department_id"] is None

    def test_course_enrollment_and_exam(self, client, departments):
        client.post("/records/students", json={"name": "alice", "department_id": 1})
        assert client.post(
            "/records/courses",
            json={"course_id": 1, "course_name": "Database Systems", "department_id": 1}
        ).status_code == 201

        enrolled = client.post(
            "/records/enrollments",
            json={"enrollment_id": 1, "student_id": 1, "course_id": 1,
                  "enrollment_date": "2025-01-10"}
        )
        assert enrolled.status_code == 201
        assert enrolled.get_json()["data"]["enrollment_date"] == "2025-01-10"

        exam = client.post(
            "/records/exams",
            json={"exam_id": 1, "course_id": 1, "exam_date": "2025-02-01", "max_marks": 100}
        )
        assert exam.status_code == 201
        assert exam.get_json()["data"]["max_marks"] == 100

    def test_duplicate_enrollment(self, client, campus):
        payload = {"enrollment_id": 1, "student_id": 1, "course_id": 1}
        client.post("/records/enrollments", json=payload)

        payload["enrollment_id"] = 2
        response = client.post("/records/enrollments", json=payload)
        assert response.status_code == 409
        assert response.get_json()["error"] == "DuplicateEnrollment"

    def test_zero_marks(self, client, campus):
        response = client.post(
            "/records/exams", json={"exam_id": 9, "course_id": 1, "max_marks": 0}
        )
        assert response.status_code == 422
        assert response.get_json()["error"] == "InvalidArgument"

    def test_missing_field(self, client):
        response = client.post("/records/departments", json={"department_name": "Physics"})
        assert response.status_code == 422
        assert "department_id" in response.get_json()["message"]

    def test_non_integer_id(self, client):
        response = client.post(
            "/records/departments", json={"department_id": "abc", "department_name": "Physics"}
        )
        assert response.status_code == 422

    def test_float_id_rejected(self, client):
        response = client.post(
            "/records/departments", json={"department_id": 4.7, "department_name": "Biology"}
        )
        assert response.status_code == 422
        assert Department.query.count() == 0

    def test_float_marks_rejected(self, client, campus):
        response = client.post(
            "/records/exams", json={"exam_id": 9, "course_id": 1, "max_marks": 1.9}
        )
        assert response.status_code == 422
        assert response.get_json()["error"] == "InvalidArgument"
        assert db.session.get(Exam, 9) is None

    def test_digit_string_id_accepted(self, client):
        response = client.post(
            "/records/departments", json={"department_id": "4", "department_name": "Biology"}
        )
        assert response.status_code == 201
        assert response.get_json()["data"]["department_id"] == 4

    def test_bad_date(self, client, campus):
        response = client.post(
            "/records/enrollments",
            json={"enrollment_id": 1, "student_id": 1, "course_id": 1,
                  "enrollment_date": "10/01/2025"}
        )
        assert response.status_code == 422

    def test_body_must_be_json_object(self, client):
        response = client.post("/records/departments", data="not json")
        assert response.status_code == 422


class TestReportRoutes:

    def test_department_name(self, client, departments):
        response = client.get("/reports/departments/3/name")
        assert response.get_json()["department_name"] == "Physics"

    def test_department_not_found(self, client, departments):
        response = client.get("/reports/departments/99/name")
        assert response.status_code == 404
        assert response.get_json()["error"] == "NotFound"

    def test_total_marks(self, client, campus):
        records_service.create_enrollment(1, 1, 1)
        records_service.create_enrollment(2, 1, 2)
        response = client.get("/reports/students/1/total-marks")
        assert response.get_json() == {"student_id": 1, "total_marks": 200}

    def test_student_counts(self, client, campus):
        response = client.get("/reports/departments/student-counts")
        assert response.get_json() == [
            {"department_name": "Computer Science", "student_count": 1},
            {"department_name": "Mathematics", "student_count": 1},
            {"department_name": "Physics", "student_count": 0},
        ]

    def test_multiple_courses(self, client, campus):
        records_service.create_enrollment(1, 2, 1)
        records_service.create_enrollment(2, 2, 3)
        response = client.get("/reports/students/multiple-courses")
        assert response.get_json() == [{"name": "BOB", "course_count": 2}]

    def test_views(self, client, campus):
        records_service.create_enrollment(1, 1, 1)

        assert client.get("/reports/students/names").get_json() == ["ALICE", "BOB"]
        assert len(client.get("/reports/enrollments").get_json()) == 1
        assert client.get("/reports/student-course-faculty").get_json()[0]["faculty_name"] == "Dr. Smith"
        assert len(client.get("/reports/faculty-courses").get_json()) == 2


class TestBackup:

    def test_backup_writes_workbook(self, app, client, campus, tmp_path):
        app.config["BACKUP_FOLDER"] = str(tmp_path)

        response = client.post("/admin/backup-data")
        assert response.status_code == 200
        assert response.get_json()["status"] == "success"

        log = BackupLog.query.one()
        assert response.get_json()["backup"] == {
            "backup_id": log.backup_id,
            "backup_type": "excel",
            "backup_file": os.path.basename(log.backup_path),
        }
        assert os.path.dirname(log.backup_path) == str(tmp_path)

        sheets = pd.read_excel(log.backup_path, sheet_name=None)
        assert {"departments", "students", "courses", "exams"} <= set(sheets)
        assert list(sheets["students"]["name"]) == ["ALICE", "BOB"]
