"""FastAPI application - forecast HTTP routes."""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.container import Container
from app.errors import ForecastError
from web.api import forecast
from web.api.errors import forecast_error_handler
from web.api.forecast.schemas import (
    BBoxRequest,
    EezVolumeResponse,
    FeatureCollectionResponse,
    RawRowItem,
    YearlyVolumeResponse,
)


def get_container(request: Request) -> Container:
    return request.app.state.container


def create_app(container: Container | None = None) -> FastAPI:
    """Build the API around a service context (a default one if not given)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.container.init()
        yield
        app.state.container.close()
        logger.info("Forecast API stopped")

    application = FastAPI(title="Sargassum Forecast API", lifespan=lifespan)
    application.state.container = container or Container()

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
    )
    application.add_exception_handler(ForecastError, forecast_error_handler)

    @application.get("/")
    def root():
        return {"message": "hello"}

    @application.get("/forecast/{timestamp}", response_model=FeatureCollectionResponse)
    def get_forecast(
        timestamp: str,
        limit: int | None = Query(None, ge=0),
        value: float | None = Query(None),
        c: Container = Depends(get_container),
    ):
        """Forecast cells at a date (YYYY-MM-DD) as GeoJSON."""
        return forecast.get_snapshot(c, timestamp, limit=limit, value=value)

    @application.get("/forecast/{timestamp}/volume/{eez}", response_model=EezVolumeResponse)
    def get_eez_volume(timestamp: str, eez: str, c: Container = Depends(get_container)):
        """Daily density sums over an EEZ."""
        return forecast.get_eez_volume(c, timestamp, eez)

    @application.get("/volume/{eez}/{year}", response_model=YearlyVolumeResponse)
    def get_yearly_volume(eez: str, year: int, c: Container = Depends(get_container)):
        """Yearly sums over an EEZ."""
        return forecast.get_yearly_volume(c, eez, year)

    @application.post("/data/bbox", response_model=list[RawRowItem])
    def post_bbox(body: BBoxRequest, c: Container = Depends(get_container)):
        """Forecast cells inside a bounding box."""
        return forecast.get_bbox(c, body)

    return application
