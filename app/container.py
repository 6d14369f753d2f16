"""Service context - built once at startup, closed at shutdown."""

from datetime import date
from pathlib import Path

from loguru import logger

import settings
from app.repositories.common.cache import CacheRepository
from app.repositories.db import Database
from app.repositories.forecast import ForecastRepository
from app.services.forecast import ArtifactResolver, ForecastService


class Container:
    """Holds the engine connection, repositories and services of one app."""

    def __init__(
        self,
        db_path: str = settings.DB_PATH,
        extensions: list[str] | None = None,
        data_url: str = settings.DATA_URL,
        cache_dir: str | Path = settings.CACHE_DIR,
        use_cache: bool = settings.USE_CACHE,
        first_forecast: date = settings.FIRST_FORECAST,
        latest_forecast: date = settings.LATEST_FORECAST,
        horizon_months: int = settings.FORECAST_HORIZON_MONTHS,
        query_timeout: float = settings.QUERY_TIMEOUT,
        forecast_repo: ForecastRepository | None = None,
    ):
        self.db = Database(db_path, settings.DUCKDB_EXTENSIONS if extensions is None else extensions)
        self.resolver = ArtifactResolver(first_forecast, latest_forecast, horizon_months, data_url)
        self.cache_repo = CacheRepository(cache_dir, enabled=use_cache)
        self.forecast_repo = forecast_repo or ForecastRepository(self.db, timeout=query_timeout)
        self.forecast = ForecastService(
            resolver=self.resolver,
            forecast_repo=self.forecast_repo,
            cache_repo=self.cache_repo,
        )

    def init(self) -> None:
        """Open the engine connection. Call once at app startup."""
        self.db.connect()
        logger.info(
            "Forecast window {} .. {} (+{} months), cache={}",
            self.resolver.first_anchor,
            self.resolver.latest_anchor,
            self.resolver.horizon_months,
            self.cache_repo.cache_dir if self.cache_repo.enabled else "off",
        )

    def close(self) -> None:
        self.db.close()
