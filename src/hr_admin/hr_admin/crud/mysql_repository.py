from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Any, Mapping, Optional, Sequence

from ..core.constants import DEFAULT_LIST_LIMIT
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .repository import RecordRepository


def sql_value(value: Any) -> Any:
    """Convert a cleaned form value into something mysql-connector can bind."""
    if isinstance(value, Enum):
        return value.value
    return value


class MySQLRecordRepository(RecordRepository):
    """Table-driven CRUD over one MySQL table.

    Subclasses declare the table, its key and writable columns, and the two
    SELECT statements (list and detail) with their joins. Identifiers only ever
    come from these class attributes; user input is always bound as parameters.
    """

    table: str = ""
    key_columns: tuple[str, ...] = ()
    insert_columns: tuple[str, ...] = ()
    update_columns: tuple[str, ...] = ()
    # Must contain a "{where}" placeholder and end with ORDER BY.
    list_sql: str = ""
    # Must filter on the key columns, in key order, with %s placeholders.
    detail_sql: str = ""
    filter_columns: Mapping[str, str] = {}

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    # -------- reads --------
    def list(self, filters: Optional[Mapping[str, Any]] = None, *, limit: int = DEFAULT_LIST_LIMIT) -> Sequence[dict]:
        clauses = ["1=1"]
        params: list[object] = []

        for name, value in (filters or {}).items():
            column = self.filter_columns.get(name)
            if column is None:
                continue
            clauses.append(f"{column}=%s")
            params.append(sql_value(value))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{self.list_sql.format(where=where)} LIMIT %s",
                tuple(params + [int(limit)]),
            )
            return [self._to_row(r) for r in fetchall(cur)]

    def get(self, key) -> Optional[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(self.detail_sql, self._key_params(key))
            row = fetchone(cur)
            if not row:
                return None
            return self._to_model(row)

    # -------- writes --------
    def insert(self, values: Mapping[str, Any]):
        with db_cursor(self._conn_factory) as (_, cur):
            return self._insert(cur, values)

    def update(self, key, values: Mapping[str, Any]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._update(cur, key, values)

    def delete(self, key) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._delete(cur, key)

    # -------- statement helpers (run inside a caller's transaction) --------
    def _insert(self, cur, values: Mapping[str, Any]):
        placeholders = ",".join(["%s"] * len(self.insert_columns))
        cur.execute(
            f"INSERT INTO {self.table}({', '.join(self.insert_columns)}) VALUES({placeholders})",
            self._params(self.insert_columns, values),
        )
        if len(self.key_columns) == 1:
            return int(cur.lastrowid)
        return tuple(int(values[c]) for c in self.key_columns)

    def _update(self, cur, key, values: Mapping[str, Any], *, extra_where: str = "", extra_params: tuple = ()) -> int:
        assignments = ", ".join(f"{c}=%s" for c in self.update_columns)
        cur.execute(
            f"UPDATE {self.table} SET {assignments} WHERE {self._key_predicate()}{extra_where}",
            self._params(self.update_columns, values) + self._key_params(key) + tuple(extra_params),
        )
        return int(cur.rowcount)

    def _delete(self, cur, key) -> int:
        cur.execute(f"DELETE FROM {self.table} WHERE {self._key_predicate()}", self._key_params(key))
        return int(cur.rowcount)

    def _key_predicate(self) -> str:
        return " AND ".join(f"{c}=%s" for c in self.key_columns)

    @staticmethod
    def _key_params(key) -> tuple:
        if isinstance(key, tuple):
            return tuple(int(k) for k in key)
        return (int(key),)

    @staticmethod
    def _params(columns: Sequence[str], values: Mapping[str, Any]) -> tuple:
        return tuple(sql_value(values.get(c)) for c in columns)

    # -------- row mapping --------
    def _to_row(self, row: dict) -> dict:
        out = dict(row)
        for name, value in out.items():
            if isinstance(value, timedelta):
                out[name] = normalize_mysql_time(value)
        return out

    def _to_model(self, row: dict) -> Any:
        raise NotImplementedError
