from datetime import date

import pytest

from app import create_app
from config.config import TestingConfig
from extensions import db
from services import records_service


@pytest.fixture
def app():
    """Fresh in-memory schema per test."""
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def departments(app):
    records_service.create_department(1, "Computer Science")
    records_service.create_department(2, "Mathematics")
    records_service.create_department(3, "Physics")


@pytest.fixture
def campus(departments):
    """Two students, three courses with one exam each, faculty per department."""
    records_service.create_faculty(1, "Dr. Smith", 1)
    records_service.create_faculty(2, "Dr. Johnson", 2)
    records_service.create_student("alice", 1)
    records_service.create_student("bob", 2)
    records_service.create_course(1, "Database Systems", 1)
    records_service.create_course(2, "Linear Algebra", 2)
    records_service.create_course(3, "Quantum Mechanics", 3)
    records_service.create_exam(1, 1, date(2025, 2, 1), 100)
    records_service.create_exam(2, 2, date(2025, 2, 2), 100)
    records_service.create_exam(3, 3, date(2025, 2, 3), 50)
