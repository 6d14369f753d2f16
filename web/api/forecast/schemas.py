"""Forecast API request and response schemas."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class Link(BaseModel):
    """Link to the data file a response was computed from."""

    href: str
    rel: str
    title: str
    type: str


class FeatureProperties(BaseModel):
    """Forecast cell properties."""

    time: str
    value: float | None


class Feature(BaseModel):
    """GeoJSON feature for one forecast cell."""

    type: Literal["Feature"] = "Feature"
    properties: FeatureProperties
    geometry: dict[str, Any] | None


class FeatureCollectionResponse(BaseModel):
    """Forecast snapshot as GeoJSON."""

    type: Literal["FeatureCollection"] = "FeatureCollection"
    links: list[Link]
    features: list[Feature]


class DailyValue(BaseModel):
    """Daily density over an EEZ."""

    date: str
    m2_per_km2: float = Field(alias="m2PerKm2")

    class Config:
        populate_by_name = True


class EezVolumeResponse(BaseModel):
    """Daily density series over an EEZ."""

    eez: str
    eez_area: int | None
    links: list[Link]
    values: list[DailyValue]


class YearlyValue(BaseModel):
    """Summed value at one timestamp."""

    date: str
    value: float | None


class YearlyVolumeResponse(BaseModel):
    """Yearly series over an EEZ."""

    eez: str
    links: list[Link]
    values: list[YearlyValue]


class BBoxRequest(BaseModel):
    """Bounding box query body."""

    min_lon: float
    max_lon: float
    min_lat: float
    max_lat: float
    timestamp: str | None = None


class RawRowItem(BaseModel):
    """Raw forecast cell."""

    time: str
    geometry: dict[str, Any] | None
    value: float | None
