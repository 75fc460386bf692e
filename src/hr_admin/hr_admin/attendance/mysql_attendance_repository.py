from __future__ import annotations

from ..crud.mysql_repository import MySQLRecordRepository
from ..database.mysql_base import normalize_mysql_time
from .model import AttendanceRecord


class MySQLAttendanceRepository(MySQLRecordRepository):
    table = "attendance"
    key_columns = ("attendance_id",)
    insert_columns = ("employee_id", "work_date", "time_in", "time_out")
    update_columns = ("employee_id", "work_date", "time_in", "time_out")
    list_sql = """
        SELECT a.attendance_id, a.employee_id, a.work_date, a.time_in, a.time_out,
               CONCAT(e.first_name, ' ', e.last_name) AS employee_name
        FROM attendance a
        JOIN employees e ON a.employee_id = e.employee_id
        WHERE {where}
        ORDER BY a.work_date DESC, e.last_name, e.first_name
    """
    detail_sql = """
        SELECT a.attendance_id, a.employee_id, a.work_date, a.time_in, a.time_out,
               CONCAT(e.first_name, ' ', e.last_name) AS employee_name
        FROM attendance a
        JOIN employees e ON a.employee_id = e.employee_id
        WHERE a.attendance_id=%s
    """
    filter_columns = {"employee_id": "a.employee_id", "work_date": "a.work_date"}

    def _to_model(self, r: dict) -> AttendanceRecord:
        return AttendanceRecord(
            attendance_id=int(r["attendance_id"]),
            employee_id=int(r["employee_id"]),
            work_date=r["work_date"],
            time_in=normalize_mysql_time(r["time_in"]),
            time_out=normalize_mysql_time(r.get("time_out")),
            employee_name=r.get("employee_name"),
        )
