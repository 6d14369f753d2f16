"""Artifact resolver - maps a requested date onto the monthly forecast file.

Forecasts are produced on the first of every month and span 7 months. A
forecast anchored on the 1st of month M is the best match for the days from
the 16th of M-1 up to the 15th of M, so dates before the 16th are looked up
one month earlier. Dates beyond the latest anchor but inside its 7-month
horizon are answered by the latest artifact.
"""

import calendar
from datetime import date

from loguru import logger

from app.errors import ForecastUnavailable, InvalidRequest
from app.models.forecast import ForecastArtifact, YearlyArtifact

SHIFT_BEFORE_DAY = 16


def add_months(d: date, months: int) -> date:
    """Calendar month arithmetic, clamping the day to the target month's length."""
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD request parameter."""
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InvalidRequest(f"Invalid date: {value!r}. Expected YYYY-MM-DD") from None


class ArtifactResolver:
    """Resolves dates to forecast artifacts inside the supported window."""

    def __init__(
        self,
        first_anchor: date,
        latest_anchor: date,
        horizon_months: int = 7,
        data_url: str = "",
    ):
        self.first_anchor = first_anchor
        self.latest_anchor = latest_anchor
        self.horizon_months = horizon_months
        self.data_url = data_url

    @property
    def end_of_window(self) -> date:
        return add_months(self.latest_anchor, self.horizon_months)

    def anchor_for(self, requested: date) -> date:
        """Return the first-of-month anchor whose artifact answers `requested`."""
        d = requested
        if d.day < SHIFT_BEFORE_DAY:
            d = add_months(d, -1)

        if d < self.first_anchor:
            raise ForecastUnavailable(f"Forecast not available before {self.first_anchor.isoformat()}")
        end = self.end_of_window
        if d > end:
            raise ForecastUnavailable(f"Forecast not available after {end.isoformat()}")

        anchor = d.replace(day=1)
        return min(anchor, self.latest_anchor)

    def resolve(self, requested: date) -> ForecastArtifact:
        """Resolve a requested date to its forecast artifact."""
        anchor = self.anchor_for(requested)
        artifact = ForecastArtifact(anchor=anchor, url=self.artifact_url(anchor))
        logger.debug("Resolved {} -> {}", requested, artifact.artifact_id)
        return artifact

    def latest(self) -> ForecastArtifact:
        return ForecastArtifact(anchor=self.latest_anchor, url=self.artifact_url(self.latest_anchor))

    def artifact_url(self, anchor: date) -> str:
        return f"{self.data_url}{anchor.year:04d}{anchor.month:02d}01_sarg_mean.parquet"

    def yearly(self, year: int) -> YearlyArtifact:
        return YearlyArtifact(year=year, url=f"{self.data_url}sargassum_year_{year}.parquet")

    @property
    def boundary_url(self) -> str:
        return f"{self.data_url}eez.parquet"


def resolve_artifact(requested: date, first_anchor: date, latest_anchor: date, horizon_months: int = 7) -> str:
    """Return the YYYYMM01 identifier of the artifact answering `requested`."""
    resolver = ArtifactResolver(first_anchor, latest_anchor, horizon_months)
    return resolver.resolve(requested).artifact_id
