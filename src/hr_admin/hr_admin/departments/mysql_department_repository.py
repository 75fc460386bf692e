from __future__ import annotations

from ..crud.mysql_repository import MySQLRecordRepository
from .model import Department


class MySQLDepartmentRepository(MySQLRecordRepository):
    table = "departments"
    key_columns = ("dept_id",)
    insert_columns = ("dept_name", "location", "manager_id")
    update_columns = ("dept_name", "location", "manager_id")
    list_sql = """
        SELECT d.dept_id, d.dept_name, d.location, d.manager_id,
               CONCAT(m.first_name, ' ', m.last_name) AS manager_name
        FROM departments d
        LEFT JOIN employees m ON d.manager_id = m.employee_id
        WHERE {where}
        ORDER BY d.dept_name
    """
    detail_sql = """
        SELECT d.dept_id, d.dept_name, d.location, d.manager_id,
               CONCAT(m.first_name, ' ', m.last_name) AS manager_name
        FROM departments d
        LEFT JOIN employees m ON d.manager_id = m.employee_id
        WHERE d.dept_id=%s
    """
    filter_columns = {"manager_id": "d.manager_id"}

    def _to_model(self, r: dict) -> Department:
        return Department(
            dept_id=int(r["dept_id"]),
            dept_name=r["dept_name"],
            location=r.get("location"),
            manager_id=int(r["manager_id"]) if r.get("manager_id") is not None else None,
            manager_name=r.get("manager_name"),
        )
