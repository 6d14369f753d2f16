"""Domain errors raised by the forecast pipeline."""


class ForecastError(Exception):
    """Base error for forecast requests."""

    default_message = "Forecast request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ForecastUnavailable(ForecastError):
    """Requested date falls outside the resolvable forecast window."""

    default_message = "Forecast not available"


class InvalidRequest(ForecastError):
    """Malformed request parameter (e.g. an unparseable date)."""

    default_message = "Invalid request"


class EngineQueryError(ForecastError):
    """Query engine failed, timed out or returned malformed rows."""

    default_message = "Query failed"


class InvalidRegionArea(ForecastError):
    """Region declared area is zero or missing."""

    default_message = "Region area is zero or missing"


class EmptyResult(ForecastError):
    """Aggregation produced no points where at least one was required."""

    default_message = "No data for this request"
