from extensions import db

class Faculty(db.Model):
    __tablename__ = "faculty"

    faculty_id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    faculty_name = db.Column(db.String(100), nullable=False)

    # A faculty member may be unassigned
    department_id = db.Column(
        db.Integer,
        db.ForeignKey("departments.department_id"),
        nullable=True
    )

    __table_args__ = (
        db.Index("idx_faculty_name", "faculty_name"),
    )

    def to_dict(self):
        return {
            "faculty_id": self.faculty_id,
            "faculty_name": self.faculty_name,
            "department_id": self.department_id,
        }

    def __repr__(self):
        return f"<Faculty {self.faculty_name}>"
