"""Services package - service class exports."""

from app.services.forecast import ArtifactResolver, ForecastService

__all__ = [
    "ArtifactResolver",
    "ForecastService",
]
