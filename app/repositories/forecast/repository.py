"""Forecast repository - access to forecast artifacts through the query engine."""

from datetime import date, datetime

from loguru import logger

from app.errors import EngineQueryError
from app.models.forecast import BoundingBox, ForecastArtifact, RawRow, YearlyArtifact, YearlySeriesPoint
from app.repositories.base import BaseRepository
from app.repositories.forecast import queries


def _check_time(value) -> datetime:
    if not isinstance(value, datetime):
        raise EngineQueryError(f"Malformed row: expected timestamp, got {type(value).__name__}")
    return value


class ForecastRepository(BaseRepository):
    """Repository for forecast cells and EEZ joins."""

    def get_snapshot(
        self,
        artifact: ForecastArtifact,
        day: date,
        threshold: float | None = None,
        limit: int | None = None,
    ) -> list[dict]:
        """Get all cells of a forecast day."""
        rows = self.fetchall(queries.snapshot_query(artifact, day, threshold, limit))
        result = [{"time": _check_time(r[0]), "geometry": r[1], "value": r[2]} for r in rows]
        logger.debug("get_snapshot({}, {}): {} cells", artifact.artifact_id, day, len(result))
        return result

    def get_region_cells(self, artifact: ForecastArtifact, boundary_url: str, eez: str) -> list[RawRow]:
        """Get cells intersecting an EEZ, ordered by time."""
        rows = self.fetchall(queries.region_daily_query(artifact, boundary_url, eez))
        result = [RawRow(time=_check_time(r[0]), value=r[1], geometry=r[2], region_area=r[3]) for r in rows]
        logger.debug("get_region_cells({}, {}): {} cells", artifact.artifact_id, eez, len(result))
        return result

    def get_region_yearly(self, artifact: YearlyArtifact, boundary_url: str, eez: str) -> list[YearlySeriesPoint]:
        """Get engine-summed values per timestamp over an EEZ."""
        rows = self.fetchall(queries.region_yearly_query(artifact, boundary_url, eez))
        result = [YearlySeriesPoint(date=_check_time(r[0]), value=r[1]) for r in rows]
        logger.debug("get_region_yearly({}, {}): {} points", artifact.year, eez, len(result))
        return result

    def get_bbox(self, artifact: ForecastArtifact, bbox: BoundingBox) -> list[dict]:
        """Get cells intersecting a bounding box."""
        rows = self.fetchall(queries.bbox_query(artifact, bbox))
        return [{"time": _check_time(r[0]), "geometry": r[1], "value": r[2]} for r in rows]
