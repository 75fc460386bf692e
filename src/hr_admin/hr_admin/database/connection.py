from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import mysql.connector
from mysql.connector import pooling
from mysql.connector.constants import ClientFlag

from ..core.constants import DEFAULT_CONNECTION_TIMEOUT, DEFAULT_POOL_SIZE
from ..core.exceptions import TransientStoreError

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    pool_size: int = DEFAULT_POOL_SIZE
    connection_timeout: int = DEFAULT_CONNECTION_TIMEOUT

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "hr_management_db")),
            pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
            connection_timeout=int(db_config.get("connection_timeout", DEFAULT_CONNECTION_TIMEOUT)),
        )


class DatabaseConnection:
    """Process-wide connection pool.

    The pool is created lazily on first use so the app can start while the
    database is still coming up. At most ``pool_size`` connections are handed
    out at once; callers wait up to ``connection_timeout`` seconds for a free one.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config
        self._pool: Optional[pooling.MySQLConnectionPool] = None
        self._lock = threading.Lock()
        self._slots = threading.BoundedSemaphore(config.pool_size)

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def _get_pool(self) -> pooling.MySQLConnectionPool:
        with self._lock:
            if self._pool is None:
                logger.info(
                    "Creating MySQL pool size=%s for %s@%s:%s/%s",
                    self._config.pool_size,
                    self._config.user,
                    self._config.host,
                    self._config.port,
                    self._config.database,
                )
                self._pool = pooling.MySQLConnectionPool(
                    pool_name="hr_admin",
                    pool_size=self._config.pool_size,
                    host=self._config.host,
                    port=int(self._config.port),
                    user=self._config.user,
                    password=self._config.password,
                    database=self._config.database,
                    connection_timeout=self._config.connection_timeout,
                    autocommit=False,
                    client_flags=[ClientFlag.FOUND_ROWS],
                )
            return self._pool

    def connect(self):
        """Acquire a pooled connection; ``release`` must be called when done."""
        if not self._slots.acquire(timeout=self._config.connection_timeout):
            raise TransientStoreError("Timed out waiting for a free database connection")
        try:
            return self._get_pool().get_connection()
        except mysql.connector.Error as e:
            self._slots.release()
            logger.error("Could not acquire a database connection: %s", e)
            raise TransientStoreError(str(e)) from e

    def release(self, conn) -> None:
        try:
            # Closing a pooled connection resets its session and hands it back to the pool.
            conn.close()
        except mysql.connector.Error as e:
            logger.warning("Could not return a connection to the pool: %s", e)
        finally:
            self._slots.release()
