import click
from flask import Flask, jsonify
from config.config import Config
from flask_migrate import Migrate
from extensions import db

# Route Imports
from routes.records_routes import records_bp
from routes.report_routes import reports_bp
from routes.admin_routes import admin_bp

# Model Imports (registers every table on db.metadata for migrations)
from models.department import Department
from models.faculty import Faculty
from models.student import Student
from models.course import Course
from models.enrollment import Enrollment
from models.exam import Exam
from models.sequence import Sequence
from models.backup_log import BackupLog

from services.exceptions import RecordsError
from utils.seed_data import run_seed

migrate = Migrate()

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize Extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # Store failures become JSON with the status each error kind carries
    @app.errorhandler(RecordsError)
    def handle_records_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.cli.command("seed")
    def seed_command():
        """Load the sample departments, students, courses and exams."""
        run_seed()
        click.echo("Sample records loaded")

    # Register Blueprints
    app.register_blueprint(records_bp)
    app.register_blueprint(reports_bp)
    app.register_blueprint(admin_bp)

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=5000, debug=True)
