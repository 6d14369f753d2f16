"""Repositories package - data access through the query engine and the cache."""

from app.repositories.base import BaseRepository
from app.repositories.common import CacheRepository
from app.repositories.db import Database
from app.repositories.forecast import ForecastRepository

__all__ = [
    # DB
    "Database",
    # Base
    "BaseRepository",
    # Common
    "CacheRepository",
    # Forecast
    "ForecastRepository",
]
