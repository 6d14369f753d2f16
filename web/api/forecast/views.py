"""Forecast API views - thin layer over services."""

from app.container import Container
from app.models.forecast import BoundingBox

from .schemas import (
    BBoxRequest,
    EezVolumeResponse,
    FeatureCollectionResponse,
    RawRowItem,
    YearlyVolumeResponse,
)


def get_snapshot(
    container: Container,
    timestamp: str,
    limit: int | None = None,
    value: float | None = None,
) -> FeatureCollectionResponse:
    """Get forecast cells at a date as GeoJSON."""
    data = container.forecast.snapshot(timestamp, limit=limit, threshold=value)
    return FeatureCollectionResponse.model_validate(data)


def get_eez_volume(container: Container, timestamp: str, eez: str) -> EezVolumeResponse:
    """Get daily density series over an EEZ."""
    data = container.forecast.eez_volume(timestamp, eez)
    return EezVolumeResponse.model_validate(data)


def get_yearly_volume(container: Container, eez: str, year: int) -> YearlyVolumeResponse:
    """Get yearly series over an EEZ."""
    data = container.forecast.yearly_volume(eez, year)
    return YearlyVolumeResponse.model_validate(data)


def get_bbox(container: Container, body: BBoxRequest) -> list[RawRowItem]:
    """Get raw cells inside a bounding box."""
    bbox = BoundingBox(
        min_lon=body.min_lon,
        max_lon=body.max_lon,
        min_lat=body.min_lat,
        max_lat=body.max_lat,
    )
    rows = container.forecast.bbox(bbox, timestamp=body.timestamp)
    return [RawRowItem.model_validate(r) for r in rows]
