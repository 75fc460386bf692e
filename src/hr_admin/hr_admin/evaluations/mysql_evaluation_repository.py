from __future__ import annotations

from ..crud.mysql_repository import MySQLRecordRepository
from .model import PerformanceEvaluation

_SELECT = """
    SELECT v.evaluation_id, v.employee_id, v.reviewer_id, v.evaluation_date, v.rating, v.comments,
           CONCAT(e.first_name, ' ', e.last_name) AS employee_name,
           CONCAT(r.first_name, ' ', r.last_name) AS reviewer_name
    FROM performance_evaluations v
    JOIN employees e ON v.employee_id = e.employee_id
    JOIN employees r ON v.reviewer_id = r.employee_id
"""


class MySQLEvaluationRepository(MySQLRecordRepository):
    table = "performance_evaluations"
    key_columns = ("evaluation_id",)
    insert_columns = ("employee_id", "reviewer_id", "evaluation_date", "rating", "comments")
    update_columns = ("employee_id", "reviewer_id", "evaluation_date", "rating", "comments")
    list_sql = _SELECT + """
        WHERE {where}
        ORDER BY v.evaluation_date DESC, v.evaluation_id DESC
    """
    detail_sql = _SELECT + " WHERE v.evaluation_id=%s"
    filter_columns = {"employee_id": "v.employee_id", "reviewer_id": "v.reviewer_id"}

    def _to_model(self, r: dict) -> PerformanceEvaluation:
        return PerformanceEvaluation(
            evaluation_id=int(r["evaluation_id"]),
            employee_id=int(r["employee_id"]),
            reviewer_id=int(r["reviewer_id"]),
            evaluation_date=r.get("evaluation_date"),
            rating=r["rating"],
            comments=r.get("comments"),
            employee_name=r.get("employee_name"),
            reviewer_name=r.get("reviewer_name"),
        )
