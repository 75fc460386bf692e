from __future__ import annotations


class ScriptedCursor:
    """Records statements; the outcome of each SQL verb comes from the connection's script."""

    def __init__(self, conn: "ScriptedConnection"):
        self._conn = conn
        self.rowcount = 0
        self.lastrowid = None

    def execute(self, sql, params=()):
        statement = " ".join(sql.split())
        self._conn.statements.append((statement, tuple(params)))
        outcome = self._conn.script.get(statement.split()[0].upper(), 1)
        if isinstance(outcome, Exception):
            raise outcome
        self.rowcount = outcome
        self.lastrowid = self._conn.lastrowid

    def fetchone(self):
        return self._conn.rows[0] if self._conn.rows else None

    def fetchall(self):
        return list(self._conn.rows)

    def close(self):
        pass


class ScriptedConnection:
    def __init__(self, script=None, *, rows=None, lastrowid=None):
        self.script = script or {}
        self.rows = rows or []
        self.lastrowid = lastrowid
        self.statements: list[tuple[str, tuple]] = []
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=False):
        return ScriptedCursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True


class ScriptedConnFactory:
    """Stands in for DatabaseConnection: always hands out the same scripted connection."""

    def __init__(self, conn: ScriptedConnection):
        self.conn = conn
        self.released = 0

    def connect(self):
        return self.conn

    def release(self, conn):
        self.released += 1
