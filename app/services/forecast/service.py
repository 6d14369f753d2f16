"""Forecast service - resolve, query, aggregate and cache."""

import json
from collections.abc import Callable

from loguru import logger

from app.models.forecast import BoundingBox, ForecastArtifact
from app.repositories.common import CacheRepository
from app.repositories.forecast import ForecastRepository, queries
from app.services.forecast.aggregation import aggregate_daily
from app.services.forecast.resolver import ArtifactResolver, parse_date

PARQUET_MEDIA_TYPE = "application/vnd.apache.parquet"


def data_link(href: str) -> dict:
    """Link to the GeoParquet file a response was computed from."""
    return {
        "href": href,
        "rel": "data",
        "title": "Forecast data used",
        "type": PARQUET_MEDIA_TYPE,
    }


def _geometry(text: str | None) -> dict | None:
    return json.loads(text) if text else None


class ForecastService:
    """Forecast snapshots and EEZ series with on-disk caching."""

    def __init__(
        self,
        resolver: ArtifactResolver,
        forecast_repo: ForecastRepository,
        cache_repo: CacheRepository,
    ):
        self._resolver = resolver
        self._forecast = forecast_repo
        self._cache = cache_repo
        logger.debug("ForecastService initialized")

    def _get_cached_or_compute(self, query: queries.Query, compute_fn: Callable[[], dict], refresh: bool = False) -> dict:
        """Try the cache first, compute and save if missing (or if `refresh`)."""
        text = query.render()
        cached = None if refresh else self._cache.get(text)
        if cached is not None:
            logger.info("Returning cached result")
            return cached

        result = compute_fn()
        try:
            self._cache.set(text, result)
        except OSError as e:
            logger.warning("Could not write cache entry: {}", e)
        return result

    def resolve(self, timestamp: str) -> ForecastArtifact:
        return self._resolver.resolve(parse_date(timestamp))

    def snapshot(self, timestamp: str, limit: int | None = None, threshold: float | None = None) -> dict:
        """GeoJSON FeatureCollection of a forecast day."""
        day = parse_date(timestamp)
        artifact = self._resolver.resolve(day)
        query = queries.snapshot_query(artifact, day, threshold, limit)

        def compute() -> dict:
            rows = self._forecast.get_snapshot(artifact, day, threshold, limit)
            logger.info("Snapshot {} from {}: {} features", day, artifact.artifact_id, len(rows))
            return {
                "type": "FeatureCollection",
                "links": [data_link(artifact.url)],
                "features": [
                    {
                        "type": "Feature",
                        "properties": {"time": r["time"].isoformat(), "value": r["value"]},
                        "geometry": _geometry(r["geometry"]),
                    }
                    for r in rows
                ],
            }

        return self._get_cached_or_compute(query, compute)

    def eez_volume(self, timestamp: str, eez: str, refresh: bool = False) -> dict:
        """Daily density series (m2 per km2) over an EEZ."""
        artifact = self.resolve(timestamp)
        boundary_url = self._resolver.boundary_url
        query = queries.region_daily_query(artifact, boundary_url, eez)

        def compute() -> dict:
            rows = self._forecast.get_region_cells(artifact, boundary_url, eez)
            points = aggregate_daily(rows)
            if not rows:
                logger.warning("No cells for EEZ {!r} in {}", eez, artifact.artifact_id)
            logger.info("Computed {} daily values for {}", len(points), eez)
            return {
                "eez": eez,
                "eez_area": rows[0].region_area if rows else None,
                "links": [data_link(artifact.url)],
                "values": [{"date": p.date.isoformat(), "m2PerKm2": p.value} for p in points],
            }

        return self._get_cached_or_compute(query, compute, refresh)

    def yearly_volume(self, eez: str, year: int) -> dict:
        """Engine-summed yearly series over an EEZ."""
        artifact = self._resolver.yearly(year)
        boundary_url = self._resolver.boundary_url
        query = queries.region_yearly_query(artifact, boundary_url, eez)

        def compute() -> dict:
            points = self._forecast.get_region_yearly(artifact, boundary_url, eez)
            logger.info("Computed {} yearly values for {} ({})", len(points), eez, year)
            return {
                "eez": eez,
                "links": [data_link(artifact.url)],
                "values": [{**p.to_dict(), "date": p.date.isoformat()} for p in points],
            }

        return self._get_cached_or_compute(query, compute)

    def bbox(self, bbox: BoundingBox, timestamp: str | None = None) -> list[dict]:
        """Raw cells inside a bounding box (not cached)."""
        artifact = self.resolve(timestamp) if timestamp else self._resolver.latest()
        rows = self._forecast.get_bbox(artifact, bbox)
        logger.info("BBox {} on {}: {} rows", bbox, artifact.artifact_id, len(rows))
        return [{"time": r["time"].isoformat(), "geometry": _geometry(r["geometry"]), "value": r["value"]} for r in rows]

    def precompute(self, timestamp: str, eez_names: list[str], force: bool = False) -> None:
        """Compute and cache EEZ series for a forecast date."""
        logger.info("Precomputing {} EEZ series for {}...", len(eez_names), timestamp)
        for eez in eez_names:
            self.eez_volume(timestamp, eez, refresh=force)
        logger.info("All EEZ series cached for {}", timestamp)

    def cache_key(self, timestamp: str, eez: str) -> str:
        """Rendered query text of an EEZ series request."""
        artifact = self.resolve(timestamp)
        return queries.region_daily_query(artifact, self._resolver.boundary_url, eez).render()

    def is_cached(self, timestamp: str, eez: str) -> bool:
        return self._cache.exists(self.cache_key(timestamp, eez))
