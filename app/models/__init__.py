"""Models package - entities for all domains."""

from app.models.common import BaseEntity
from app.models.forecast import (
    BoundingBox,
    DailySeriesPoint,
    ForecastArtifact,
    RawRow,
    YearlyArtifact,
    YearlySeriesPoint,
)

__all__ = [
    # Common
    "BaseEntity",
    # Forecast
    "ForecastArtifact",
    "YearlyArtifact",
    "BoundingBox",
    "RawRow",
    "DailySeriesPoint",
    "YearlySeriesPoint",
]
