"""Forecast API."""

from web.api.forecast.views import get_bbox, get_eez_volume, get_snapshot, get_yearly_volume

__all__ = [
    "get_snapshot",
    "get_eez_volume",
    "get_yearly_volume",
    "get_bbox",
]
