import os
from datetime import datetime

import pandas as pd
from flask import Blueprint, jsonify, current_app
from sqlalchemy import inspect

from extensions import db
from models import BackupLog

admin_bp = Blueprint("admin", __name__, url_prefix="/admin")


@admin_bp.route("/backup-data", methods=["POST"])
def backup_data():
    """Write every table to one Excel workbook on the server."""
    try:
        backup_dir = current_app.config["BACKUP_FOLDER"]
        os.makedirs(backup_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        filename = f"Backup_{timestamp}.xlsx"
        full_path = os.path.join(backup_dir, filename)

        connection = db.session.connection()
        table_names = inspect(connection).get_table_names()

        with pd.ExcelWriter(full_path, engine="openpyxl") as writer:
            for table in table_names:
                df = pd.read_sql_table(table, connection)
                # Excel caps sheet names at 31 characters
                df.to_excel(writer, sheet_name=table[:31], index=False)

        log = BackupLog(backup_type="excel", backup_path=full_path)
        db.session.add(log)
        db.session.commit()

        current_app.logger.info("Backup saved to %s", full_path)

        return jsonify({
            "status": "success",
            "backup": log.to_dict(),
            "message": f"Backup '{filename}' created successfully on server."
        })

    except Exception as e:
        db.session.rollback()
        current_app.logger.exception("Backup failed")
        return jsonify({"status": "error", "message": str(e)}), 500
