"""DuckDB connection management."""

import threading

import duckdb
from loguru import logger


class Database:
    """One DuckDB database per process, one cursor per thread."""

    def __init__(self, path: str = ":memory:", extensions: list[str] | None = None):
        self.path = path
        self.extensions = list(extensions or [])
        self._conn: duckdb.DuckDBPyConnection | None = None
        self._local = threading.local()
        self._lock = threading.Lock()

    def connect(self) -> duckdb.DuckDBPyConnection:
        """Open the root connection and load extensions (idempotent)."""
        with self._lock:
            if self._conn is None:
                conn = duckdb.connect(self.path)
                for ext in self.extensions:
                    conn.install_extension(ext)
                    conn.load_extension(ext)
                self._conn = conn
                logger.info("DB connected: {} (extensions={})", self.path, self.extensions or "none")
        return self._conn

    def cursor(self) -> duckdb.DuckDBPyConnection:
        """Get thread-local cursor."""
        cur = getattr(self._local, "cursor", None)
        if cur is None:
            cur = self.connect().cursor()
            self._local.cursor = cur
            logger.debug("DB cursor opened for thread {}", threading.current_thread().name)
        return cur

    def close(self) -> None:
        """Close the root connection (and with it every cursor)."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("DB connection closed")
        self._local = threading.local()
