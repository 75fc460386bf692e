from __future__ import annotations

from typing import Any, Mapping

from ..core.enums import LeaveStatus, LeaveType
from ..crud.mysql_repository import MySQLRecordRepository, sql_value
from ..database.mysql_base import db_cursor
from .model import LeaveRequest
from .repository import LeaveRequestRepository

_SELECT = """
    SELECT l.leave_id, l.employee_id, l.leave_type, l.start_date, l.end_date, l.reason,
           l.status, l.submitted_date, l.reviewed_by, l.review_date,
           CONCAT(e.first_name, ' ', e.last_name) AS employee_name,
           CONCAT(r.first_name, ' ', r.last_name) AS reviewer_name
    FROM leave_requests l
    JOIN employees e ON l.employee_id = e.employee_id
    LEFT JOIN employees r ON l.reviewed_by = r.employee_id
"""


class MySQLLeaveRequestRepository(MySQLRecordRepository, LeaveRequestRepository):
    table = "leave_requests"
    key_columns = ("leave_id",)
    insert_columns = ("employee_id", "leave_type", "start_date", "end_date", "reason", "status", "submitted_date")
    update_columns = (
        "employee_id",
        "leave_type",
        "start_date",
        "end_date",
        "reason",
        "status",
        "reviewed_by",
        "review_date",
    )
    list_sql = _SELECT + """
        WHERE {where}
        ORDER BY l.submitted_date DESC, l.leave_id DESC
    """
    detail_sql = _SELECT + " WHERE l.leave_id=%s"
    filter_columns = {"employee_id": "l.employee_id", "status": "l.status", "leave_type": "l.leave_type"}

    def update_if_status(self, key, values: Mapping[str, Any], expected_status: LeaveStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._update(cur, key, values, extra_where=" AND status=%s", extra_params=(sql_value(expected_status),))

    def _to_model(self, r: dict) -> LeaveRequest:
        return LeaveRequest(
            leave_id=int(r["leave_id"]),
            employee_id=int(r["employee_id"]),
            leave_type=LeaveType(r["leave_type"]),
            start_date=r["start_date"],
            end_date=r["end_date"],
            reason=r["reason"],
            status=LeaveStatus(r["status"]),
            submitted_date=r["submitted_date"],
            reviewed_by=int(r["reviewed_by"]) if r.get("reviewed_by") is not None else None,
            review_date=r.get("review_date"),
            employee_name=r.get("employee_name"),
            reviewer_name=r.get("reviewer_name"),
        )
