from extensions import db

# Counter rows standing in for database sequences (e.g. student_seq)
class Sequence(db.Model):
    __tablename__ = "sequences"

    sequence_name = db.Column(db.String(50), primary_key=True)
    last_value = db.Column(db.Integer, nullable=False, default=0)
    increment_by = db.Column(db.Integer, nullable=False, default=1)

    def __repr__(self):
        return f"<Sequence {self.sequence_name}={self.last_value}>"
