"""Cache repository - content-addressed response cache on disk.

One JSON file per entry, named by the sha256 digest of the rendered query.
Entries never expire; identical query text always maps to the same file.
"""

import hashlib
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from loguru import logger


class CacheRepository:
    """File-based store keyed by rendered query text."""

    def __init__(self, cache_dir: str | Path, enabled: bool = True):
        self.cache_dir = Path(cache_dir)
        self.enabled = enabled
        logger.debug("CacheRepository initialized: {} (enabled={})", self.cache_dir, enabled)

    @staticmethod
    def key(text: str) -> str:
        """Hex digest used as the entry name."""
        return hashlib.sha256(text.encode("utf-8")).hexdigest()

    def _path(self, text: str) -> Path:
        return self.cache_dir / f"{self.key(text)}.json"

    def get(self, text: str) -> Any | None:
        """Load a cached response, or None on miss."""
        if not self.enabled:
            return None

        path = self._path(text)
        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            logger.warning("Unreadable cache entry {}: {}", path.name, e)
            return None

        logger.debug("Cache hit: {}", path.name)
        return data

    def set(self, text: str, data: Any) -> None:
        """Save a response, replacing any previous entry."""
        if not self.enabled:
            return

        self.cache_dir.mkdir(parents=True, exist_ok=True)
        path = self._path(text)
        fd, tmp = tempfile.mkstemp(dir=self.cache_dir, prefix=".tmp-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug("Cache saved: {}", path.name)

    def exists(self, text: str) -> bool:
        """Check if a query has a cached response."""
        return self.enabled and self._path(text).exists()

    def clear(self) -> int:
        """Remove all entries; returns how many were deleted."""
        if not self.cache_dir.exists():
            return 0
        removed = 0
        for path in self.cache_dir.glob("*.json"):
            path.unlink(missing_ok=True)
            removed += 1
        logger.info("Cache cleared: {} entries", removed)
        return removed
