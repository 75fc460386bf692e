from __future__ import annotations

from ..crud.mysql_repository import MySQLRecordRepository
from .model import TrainingSession


class MySQLTrainingRepository(MySQLRecordRepository):
    table = "training_sessions"
    key_columns = ("training_id",)
    insert_columns = ("session_title", "description", "instructor", "session_date")
    update_columns = ("session_title", "description", "instructor", "session_date")
    list_sql = """
        SELECT t.training_id, t.session_title, t.instructor, t.session_date,
               (SELECT COUNT(*) FROM employee_trainings et WHERE et.training_id = t.training_id) AS participant_count
        FROM training_sessions t
        WHERE {where}
        ORDER BY t.session_date DESC, t.session_title
    """
    detail_sql = """
        SELECT training_id, session_title, description, instructor, session_date
        FROM training_sessions
        WHERE training_id=%s
    """

    def _to_model(self, r: dict) -> TrainingSession:
        return TrainingSession(
            training_id=int(r["training_id"]),
            session_title=r["session_title"],
            description=r.get("description"),
            instructor=r["instructor"],
            session_date=r["session_date"],
        )
