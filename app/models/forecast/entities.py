"""Forecast domain entities - artifacts, engine rows and series points."""

from dataclasses import dataclass
from datetime import date, datetime

from app.models.common import BaseEntity


@dataclass(frozen=True)
class ForecastArtifact(BaseEntity):
    """Monthly forecast GeoParquet file, identified by its first-of-month anchor."""

    anchor: date
    url: str

    @property
    def artifact_id(self) -> str:
        return f"{self.anchor.year:04d}{self.anchor.month:02d}01"


@dataclass(frozen=True)
class YearlyArtifact(BaseEntity):
    """Pre-aggregated forecast file for a whole year."""

    year: int
    url: str


@dataclass(frozen=True)
class BoundingBox(BaseEntity):
    """Lon/lat bounding box."""

    min_lon: float
    max_lon: float
    min_lat: float
    max_lat: float


@dataclass(frozen=True)
class RawRow(BaseEntity):
    """One forecast cell intersecting a region, with the region's declared area."""

    time: datetime
    value: float
    geometry: str | None
    region_area: int | None


@dataclass(frozen=True)
class DailySeriesPoint(BaseEntity):
    """Summed daily density normalized by region area (m2 per km2)."""

    date: date
    value: float


@dataclass(frozen=True)
class YearlySeriesPoint(BaseEntity):
    """Engine-summed value for one timestamp of a yearly artifact."""

    date: datetime
    value: float
