"""Base repository class."""

import threading
import time

import duckdb
from loguru import logger

from app.errors import EngineQueryError
from app.repositories.db import Database


class BaseRepository:
    """Base repository: runs queries under a timeout and maps engine errors."""

    def __init__(self, db: Database, timeout: float | None = 30.0):
        self._db = db
        self._timeout = timeout
        logger.debug("{} initialized", self.__class__.__name__)

    def fetchall(self, query) -> list[tuple]:
        """Execute a `Query` and fetch all rows."""
        cursor = self._db.cursor()
        timer = None
        timed_out = threading.Event()

        if self._timeout:

            def interrupt():
                timed_out.set()
                cursor.interrupt()

            timer = threading.Timer(self._timeout, interrupt)
            timer.daemon = True
            timer.start()

        started = time.perf_counter()
        try:
            rows = cursor.execute(query.sql, query.params).fetchall()
        except duckdb.Error as e:
            if timed_out.is_set():
                logger.error("Query timed out after {}s", self._timeout)
                raise EngineQueryError(f"Query timed out after {self._timeout:g}s") from e
            logger.error("Query failed: {}", e)
            raise EngineQueryError(str(e)) from e
        finally:
            if timer:
                timer.cancel()

        logger.debug("Query returned {} rows in {:.2f}s", len(rows), time.perf_counter() - started)
        return rows
