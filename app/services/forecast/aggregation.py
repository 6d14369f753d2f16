"""Daily aggregation of forecast cells over a region."""

import math
from collections.abc import Iterable
from datetime import date

from loguru import logger

from app.errors import EmptyResult, EngineQueryError, InvalidRegionArea
from app.models.forecast import DailySeriesPoint, RawRow

# Stored cell values are per-unit-area concentrations; scale to m2 per declared km2.
M2_PER_UNIT = 1_000_000


def aggregate_daily(rows: Iterable[RawRow], require_points: bool = False) -> list[DailySeriesPoint]:
    """Fold time-ordered region cells into one normalized point per day.

    The region area is taken from the first row (the query repeats it on
    every row). Raises InvalidRegionArea for a zero or missing area and
    EngineQueryError if rows go backwards in time or carry a null or
    non-finite value.
    """
    points: list[DailySeriesPoint] = []
    bucket_date: date | None = None
    bucket_sum = 0.0
    area = None

    for row in rows:
        if area is None:
            area = row.region_area
            if not area:
                raise InvalidRegionArea(f"Region area is {area!r}")

        day = row.time.date()
        if day != bucket_date:
            if bucket_date is not None:
                if day < bucket_date:
                    raise EngineQueryError(f"Rows not ordered by time: {day} after {bucket_date}")
                points.append(DailySeriesPoint(date=bucket_date, value=bucket_sum / area))
            bucket_date = day
            bucket_sum = 0.0

        if row.value is None or not math.isfinite(row.value):
            raise EngineQueryError(f"Malformed row: value {row.value!r} at {row.time}")
        bucket_sum += row.value * M2_PER_UNIT

    # last bucket
    if bucket_date is not None:
        points.append(DailySeriesPoint(date=bucket_date, value=bucket_sum / area))

    if require_points and not points:
        raise EmptyResult()

    logger.debug("aggregate_daily: {} days", len(points))
    return points
