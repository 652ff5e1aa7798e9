from extensions import db

class Student(db.Model):
    __tablename__ = "students"

    student_id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    name = db.Column(db.String(100), nullable=False)

    department_id = db.Column(
        db.Integer,
        db.ForeignKey("departments.department_id"),
        nullable=False
    )

    enrollments = db.relationship("Enrollment", backref="student", lazy=True)

    __table_args__ = (
        db.Index("idx_student_name", "name"),
    )

    def to_dict(self):
        return {
            "student_id": self.student_id,
            "name": self.name,
            "department_id": self.department_id,
        }

    def __repr__(self):
        return f"<Student {self.name}>"
