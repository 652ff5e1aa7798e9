"""create records tables

Revision ID: 4e7a9c2b1d03
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "4e7a9c2b1d03"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "departments",
        sa.Column("department_id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("department_name", sa.String(length=50), nullable=False),
    )
    op.create_table(
        "faculty",
        sa.Column("faculty_id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("faculty_name", sa.String(length=100), nullable=False),
        sa.Column("department_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["department_id"], ["departments.department_id"]),
    )
    op.create_index("idx_faculty_name", "faculty", ["faculty_name"])
    op.create_table(
        "students",
        sa.Column("student_id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("department_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["department_id"], ["departments.department_id"]),
    )
    op.create_index("idx_student_name", "students", ["name"])
    op.create_table(
        "courses",
        sa.Column("course_id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("course_name", sa.String(length=100), nullable=False),
        sa.Column("department_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["department_id"], ["departments.department_id"]),
    )
    op.create_table(
        "enrollments",
        sa.Column("enrollment_id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("student_id", sa.Integer(), nullable=False),
        sa.Column("course_id", sa.Integer(), nullable=False),
        sa.Column("enrollment_date", sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(["student_id"], ["students.student_id"]),
        sa.ForeignKeyConstraint(["course_id"], ["courses.course_id"]),
        sa.UniqueConstraint("student_id", "course_id", name="unique_student_course"),
    )
    op.create_table(
        "exams",
        sa.Column("exam_id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("course_id", sa.Integer(), nullable=False),
        sa.Column("exam_date", sa.Date(), nullable=True),
        sa.Column("max_marks", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["course_id"], ["courses.course_id"]),
        sa.CheckConstraint("max_marks > 0", name="check_max_marks"),
    )
    op.create_table(
        "sequences",
        sa.Column("sequence_name", sa.String(length=50), primary_key=True),
        sa.Column("last_value", sa.Integer(), nullable=False),
        sa.Column("increment_by", sa.Integer(), nullable=False),
    )
    op.create_table(
        "backup_logs",
        sa.Column("backup_id", sa.Integer(), primary_key=True),
        sa.Column("backup_type", sa.String(length=50), nullable=True),
        sa.Column("backup_path", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
    )
    op.execute(
        "INSERT INTO sequences (sequence_name, last_value, increment_by) "
        "VALUES ('student_seq', 0, 1)"
    )


def downgrade():
    op.drop_table("backup_logs")
    op.drop_table("sequences")
    op.drop_table("exams")
    op.drop_table("enrollments")
    op.drop_table("courses")
    op.drop_index("idx_student_name", table_name="students")
    op.drop_table("students")
    op.drop_index("idx_faculty_name", table_name="faculty")
    op.drop_table("faculty")
    op.drop_table("departments")
