"""Forecast services."""

from app.services.forecast.aggregation import M2_PER_UNIT, aggregate_daily
from app.services.forecast.resolver import ArtifactResolver, add_months, parse_date, resolve_artifact
from app.services.forecast.service import ForecastService

__all__ = [
    "ArtifactResolver",
    "ForecastService",
    "M2_PER_UNIT",
    "add_months",
    "aggregate_daily",
    "parse_date",
    "resolve_artifact",
]
