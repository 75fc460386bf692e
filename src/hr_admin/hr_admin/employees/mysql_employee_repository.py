from __future__ import annotations

from ..core.enums import EmployeeStatus
from ..crud.mysql_repository import MySQLRecordRepository
from .model import Employee

_COLUMNS = (
    "first_name",
    "last_name",
    "cnic",
    "date_of_birth",
    "email",
    "phone_number",
    "address",
    "join_date",
    "status",
    "job_id",
    "dept_id",
)


class MySQLEmployeeRepository(MySQLRecordRepository):
    table = "employees"
    key_columns = ("employee_id",)
    insert_columns = _COLUMNS
    update_columns = _COLUMNS
    list_sql = """
        SELECT e.employee_id, e.first_name, e.last_name, e.cnic, e.email, e.phone_number,
               e.status, j.job_title, d.dept_name
        FROM employees e
        LEFT JOIN job_positions j ON e.job_id = j.job_id
        LEFT JOIN departments d ON e.dept_id = d.dept_id
        WHERE {where}
        ORDER BY e.last_name, e.first_name
    """
    detail_sql = """
        SELECT e.*, j.job_title, d.dept_name
        FROM employees e
        LEFT JOIN job_positions j ON e.job_id = j.job_id
        LEFT JOIN departments d ON e.dept_id = d.dept_id
        WHERE e.employee_id=%s
    """
    filter_columns = {"dept_id": "e.dept_id", "job_id": "e.job_id", "status": "e.status"}

    def _to_model(self, r: dict) -> Employee:
        return Employee(
            employee_id=int(r["employee_id"]),
            first_name=r["first_name"],
            last_name=r["last_name"],
            cnic=r["cnic"],
            date_of_birth=r["date_of_birth"],
            email=r["email"],
            phone_number=r["phone_number"],
            address=r["address"],
            join_date=r.get("join_date"),
            status=EmployeeStatus(r["status"]),
            job_id=int(r["job_id"]),
            dept_id=int(r["dept_id"]),
            job_title=r.get("job_title"),
            dept_name=r.get("dept_name"),
        )
