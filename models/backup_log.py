import os

from extensions import db

class BackupLog(db.Model):
    __tablename__ = "backup_logs"

    backup_id = db.Column(db.Integer, primary_key=True)
    backup_type = db.Column(db.String(50))
    backup_path = db.Column(db.String(255))
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    def to_dict(self):
        return {
            "backup_id": self.backup_id,
            "backup_type": self.backup_type,
            # File name only; the server path stays private
            "backup_file": os.path.basename(self.backup_path or ""),
        }

    def __repr__(self):
        return f"<BackupLog {self.backup_id} {self.backup_type}>"
