from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Option
from .repository import LookupRepository

_OPTION_QUERIES = {
    "employees": """
        SELECT employee_id AS value, CONCAT(first_name, ' ', last_name) AS label
        FROM employees
        ORDER BY first_name, last_name
    """,
    "active_employees": """
        SELECT employee_id AS value, CONCAT(first_name, ' ', last_name) AS label
        FROM employees
        WHERE status='Active'
        ORDER BY first_name, last_name
    """,
    "departments": "SELECT dept_id AS value, dept_name AS label FROM departments ORDER BY dept_name",
    "job_positions": "SELECT job_id AS value, job_title AS label FROM job_positions ORDER BY job_title",
    "training_sessions": """
        SELECT training_id AS value, CONCAT(session_title, ' (', session_date, ')') AS label
        FROM training_sessions
        ORDER BY session_date DESC, session_title
    """,
}


class MySQLLookupRepository(LookupRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def options(self, name: str) -> Sequence[Option]:
        sql = _OPTION_QUERIES.get(name)
        if sql is None:
            raise KeyError(f"Unknown option set: {name}")
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql)
            rows = fetchall(cur)
            return [Option(value=int(r["value"]), label=str(r["label"])) for r in rows]
