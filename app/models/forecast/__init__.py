"""Forecast models."""

from app.models.forecast.entities import (
    BoundingBox,
    DailySeriesPoint,
    ForecastArtifact,
    RawRow,
    YearlyArtifact,
    YearlySeriesPoint,
)

__all__ = [
    "ForecastArtifact",
    "YearlyArtifact",
    "BoundingBox",
    "RawRow",
    "DailySeriesPoint",
    "YearlySeriesPoint",
]
