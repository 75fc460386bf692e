from __future__ import annotations

from typing import Any, Mapping

from ..core.enums import TrainingGrade
from ..core.exceptions import NotFoundError
from ..crud.mysql_repository import MySQLRecordRepository
from ..database.mysql_base import db_cursor
from .model import EmployeeTraining
from .repository import EmployeeTrainingRepository

_SELECT = """
    SELECT et.employee_id, et.training_id, et.completion_date, et.grade,
           CONCAT(e.first_name, ' ', e.last_name) AS employee_name,
           t.session_title, t.session_date
    FROM employee_trainings et
    JOIN employees e ON et.employee_id = e.employee_id
    JOIN training_sessions t ON et.training_id = t.training_id
"""


class MySQLEmployeeTrainingRepository(MySQLRecordRepository, EmployeeTrainingRepository):
    table = "employee_trainings"
    key_columns = ("employee_id", "training_id")
    insert_columns = ("employee_id", "training_id", "completion_date", "grade")
    # Key columns only change through rekey().
    update_columns = ("completion_date", "grade")
    list_sql = _SELECT + """
        WHERE {where}
        ORDER BY t.session_date DESC, e.last_name, e.first_name
    """
    detail_sql = _SELECT + " WHERE et.employee_id=%s AND et.training_id=%s"
    filter_columns = {"employee_id": "et.employee_id", "training_id": "et.training_id"}

    def rekey(self, old_key: tuple[int, int], new_key: tuple[int, int], values: Mapping[str, Any]) -> None:
        moved = {**values, "employee_id": new_key[0], "training_id": new_key[1]}
        with db_cursor(self._conn_factory) as (_, cur):
            # Insert first: a taken key fails here, before anything is deleted.
            self._insert(cur, moved)
            if not self._delete(cur, old_key):
                raise NotFoundError("Training record not found")

    def _to_model(self, r: dict) -> EmployeeTraining:
        return EmployeeTraining(
            employee_id=int(r["employee_id"]),
            training_id=int(r["training_id"]),
            completion_date=r.get("completion_date"),
            grade=TrainingGrade(r["grade"]) if r.get("grade") else None,
            employee_name=r.get("employee_name"),
            session_title=r.get("session_title"),
        )
