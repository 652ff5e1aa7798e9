from extensions import db

class Course(db.Model):
    __tablename__ = "courses"

    course_id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    course_name = db.Column(db.String(100), nullable=False)

    department_id = db.Column(
        db.Integer,
        db.ForeignKey("departments.department_id"),
        nullable=False
    )

    enrollments = db.relationship("Enrollment", backref="course", lazy=True)
    exams = db.relationship("Exam", backref="course", lazy=True)

    def to_dict(self):
        return {
            "course_id": self.course_id,
            "course_name": self.course_name,
            "department_id": self.department_id,
        }

    def __repr__(self):
        return f"<Course {self.course_name}>"
