from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.enums import ViolationKind
from ..core.exceptions import ConstraintViolation, ReferentialBlock, StoreError, TransientStoreError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

_DUPLICATE_KEY_RE = re.compile(r"for key '([^']+)'")
_FOREIGN_KEY_RE = re.compile(r"CONSTRAINT `([^`]+)`")
_CHECK_RE = re.compile(r"constraint '([^']+)'", re.IGNORECASE)
_COLUMN_RE = re.compile(r"column '([^']+)'")

_MISSING_PARENT_CODES = {errorcode.ER_NO_REFERENCED_ROW, errorcode.ER_NO_REFERENCED_ROW_2}
_PARENT_REFERENCED_CODES = {errorcode.ER_ROW_IS_REFERENCED, errorcode.ER_ROW_IS_REFERENCED_2}
_CHECK_CODES = {errorcode.ER_CHECK_CONSTRAINT_VIOLATED}
# Strict mode rejects values that do not fit the column.
_DATA_RANGE_CODES = {errorcode.ER_WARN_DATA_OUT_OF_RANGE, errorcode.ER_DATA_TOO_LONG}
_TRANSIENT_ERRORS = (
    mysql.connector.errors.OperationalError,
    mysql.connector.errors.InterfaceError,
    mysql.connector.errors.PoolError,
)


def _constraint_name(pattern: re.Pattern, message: str) -> Optional[str]:
    match = pattern.search(message or "")
    if not match:
        return None
    # MySQL 8 reports unique keys as "<table>.<key>".
    return match.group(1).split(".")[-1]


def translate_error(error: mysql.connector.Error) -> Optional[StoreError]:
    """Classify a driver error by its MySQL error number.

    Returns None for errors that are not a store-level outcome the callers
    handle (syntax errors, unknown columns, ...); those propagate unchanged.
    """

    errno = getattr(error, "errno", None)
    message = getattr(error, "msg", None) or str(error)

    if errno == errorcode.ER_DUP_ENTRY:
        return ConstraintViolation(_constraint_name(_DUPLICATE_KEY_RE, message), kind=ViolationKind.DUPLICATE)
    if errno in _MISSING_PARENT_CODES:
        return ConstraintViolation(_constraint_name(_FOREIGN_KEY_RE, message), kind=ViolationKind.MISSING_REFERENCE)
    if errno in _CHECK_CODES:
        return ConstraintViolation(_constraint_name(_CHECK_RE, message), kind=ViolationKind.CHECK)
    if errno in _DATA_RANGE_CODES:
        return ConstraintViolation(_constraint_name(_COLUMN_RE, message), kind=ViolationKind.CHECK)
    if errno in _PARENT_REFERENCED_CODES:
        return ReferentialBlock(_constraint_name(_FOREIGN_KEY_RE, message))
    if isinstance(error, _TRANSIENT_ERRORS):
        return TransientStoreError(message)
    return None


def _rollback(conn) -> None:
    try:
        conn.rollback()
    except mysql.connector.Error as e:
        logger.warning("Rollback failed: %s", e)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One unit of work: a pooled connection and a cursor.

    Everything executed inside the block commits together, or is rolled back
    together when the block raises. Driver errors leave as domain errors.
    """

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        _rollback(conn)
        translated = translate_error(e)
        if translated is None:
            logger.exception("Unexpected database error")
            raise
        if isinstance(translated, TransientStoreError):
            logger.error("Database unavailable: %s", e, exc_info=True)
        else:
            logger.info("Write rejected by the store: errno=%s %s", e.errno, e.msg)
        raise translated from e
    except Exception:
        _rollback(conn)
        raise
    finally:
        conn_factory.release(conn)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Normalize MySQL TIME values across connector implementations.

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00')
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        hours = total_seconds // 3600
        minutes = (total_seconds % 3600) // 60
        seconds = total_seconds % 60
        return time(hour=hours, minute=minutes, second=seconds)

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        hours = int(parts[0])
        minutes = int(parts[1])
        seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
        return time(hour=hours, minute=minutes, second=seconds)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
