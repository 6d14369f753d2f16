"""Query builder - spatial/temporal DuckDB queries over forecast artifacts.

User-supplied values are bound as parameters. Resource URLs are derived by
the resolver and quoted as string literals. `Query.render()` is the cache
key text, so it must be byte-identical for identical inputs.
"""

import json
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any

from app.models.forecast import BoundingBox, ForecastArtifact, YearlyArtifact

FORECAST_HOUR = time(12, 0, 0)


@dataclass(frozen=True)
class Query:
    """SQL text plus its bound parameters."""

    sql: str
    params: list[Any] = field(default_factory=list)

    def render(self) -> str:
        """Deterministic text of the query and its parameters."""
        params = json.dumps(self.params, sort_keys=True, separators=(",", ":"), default=_json_default)
        return f"{self.sql}\n-- params: {params}"


def _json_default(value: Any) -> str:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Unsupported query parameter: {type(value).__name__}")


def _literal(value: str) -> str:
    """Quote a string as a SQL literal."""
    return "'" + value.replace("'", "''") + "'"


def _parquet(url: str) -> str:
    return f"read_parquet({_literal(url)})"


def snapshot_query(
    artifact: ForecastArtifact,
    day: date,
    threshold: float | None = None,
    limit: int | None = None,
) -> Query:
    """All cells of `artifact` at `day` 12:00, optionally above a value threshold."""
    sql = f"""
        SELECT time, ST_AsGeoJSON(geometry) AS geometry, value FROM {_parquet(artifact.url)}
        WHERE time = ?
    """.strip()
    params: list[Any] = [datetime.combine(day, FORECAST_HOUR)]

    if threshold is not None:
        sql += "\n        AND value > ?"
        params.append(float(threshold))

    if limit is not None:
        if int(limit) < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        sql += f"\n        LIMIT {int(limit)}"

    return Query(sql, params)


def region_daily_query(artifact: ForecastArtifact, boundary_url: str, eez: str) -> Query:
    """Cells of `artifact` intersecting the named EEZ, ordered by time."""
    sql = f"""
        SELECT p.time, p.value, ST_AsGeoJSON(p.geometry) AS geometry, CAST(r.AREA_KM2 AS INTEGER) AS eez_area
        FROM {_parquet(artifact.url)} p
        JOIN {_parquet(boundary_url)} r
        ON ST_Intersects(p.geometry, r.geometry)
        WHERE r.GEONAME = ?
        ORDER BY p.time ASC
    """.strip()
    return Query(sql, [eez])


def region_yearly_query(artifact: YearlyArtifact, boundary_url: str, eez: str) -> Query:
    """Per-timestamp sums of a yearly artifact over the named EEZ."""
    sql = f"""
        SELECT p.time, SUM(p.value) AS total_value
        FROM {_parquet(artifact.url)} p
        JOIN {_parquet(boundary_url)} r
        ON ST_Intersects(p.geometry, r.geometry)
        WHERE r.GEONAME = ?
        GROUP BY p.time
        ORDER BY p.time ASC
    """.strip()
    return Query(sql, [eez])


def bbox_query(artifact: ForecastArtifact, bbox: BoundingBox) -> Query:
    """Cells of `artifact` intersecting a lon/lat bounding box."""
    sql = f"""
        SELECT time, ST_AsGeoJSON(geometry) AS geometry, value FROM {_parquet(artifact.url)}
        WHERE ST_Intersects(geometry, ST_MakeEnvelope(?, ?, ?, ?))
    """.strip()
    return Query(sql, [bbox.min_lon, bbox.min_lat, bbox.max_lon, bbox.max_lat])
