from __future__ import annotations

from ..crud.mysql_repository import MySQLRecordRepository
from .model import JobPosition


class MySQLJobPositionRepository(MySQLRecordRepository):
    table = "job_positions"
    key_columns = ("job_id",)
    insert_columns = ("job_title", "job_description", "min_salary", "max_salary")
    update_columns = ("job_title", "job_description", "min_salary", "max_salary")
    list_sql = """
        SELECT j.job_id, j.job_title, j.min_salary, j.max_salary,
               (SELECT COUNT(*) FROM employees e WHERE e.job_id = j.job_id) AS employee_count
        FROM job_positions j
        WHERE {where}
        ORDER BY j.job_title
    """
    detail_sql = """
        SELECT job_id, job_title, job_description, min_salary, max_salary
        FROM job_positions
        WHERE job_id=%s
    """

    def _to_model(self, r: dict) -> JobPosition:
        return JobPosition(
            job_id=int(r["job_id"]),
            job_title=r["job_title"],
            job_description=r.get("job_description"),
            min_salary=r["min_salary"],
            max_salary=r["max_salary"],
        )
