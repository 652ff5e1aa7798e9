from extensions import db

class Department(db.Model):
    __tablename__ = "departments"

    department_id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    department_name = db.Column(db.String(50), nullable=False)

    faculty = db.relationship("Faculty", backref="department", lazy=True)
    students = db.relationship("Student", backref="department", lazy=True)
    courses = db.relationship("Course", backref="department", lazy=True)

    def to_dict(self):
        return {
            "department_id": self.department_id,
            "department_name": self.department_name,
        }

    def __repr__(self):
        return f"<Department {self.department_name}>"
