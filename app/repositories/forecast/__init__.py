"""Forecast repositories and query builder."""

from app.repositories.forecast.queries import (
    Query,
    bbox_query,
    region_daily_query,
    region_yearly_query,
    snapshot_query,
)
from app.repositories.forecast.repository import ForecastRepository

__all__ = [
    "Query",
    "snapshot_query",
    "region_daily_query",
    "region_yearly_query",
    "bbox_query",
    "ForecastRepository",
]
