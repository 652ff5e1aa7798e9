from extensions import db

class Exam(db.Model):
    __tablename__ = "exams"

    exam_id = db.Column(db.Integer, primary_key=True, autoincrement=False)

    course_id = db.Column(
        db.Integer,
        db.ForeignKey("courses.course_id"),
        nullable=False
    )

    exam_date = db.Column(db.Date, nullable=True)
    max_marks = db.Column(db.Integer, nullable=False)

    __table_args__ = (
        db.CheckConstraint("max_marks > 0", name="check_max_marks"),
    )

    def to_dict(self):
        return {
            "exam_id": self.exam_id,
            "course_id": self.course_id,
            "exam_date": self.exam_date.isoformat() if self.exam_date else None,
            "max_marks": self.max_marks,
        }

    def __repr__(self):
        return f"<Exam course={self.course_id} max={self.max_marks}>"
