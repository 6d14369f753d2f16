"""API error mapping."""

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger

from app.errors import (
    EmptyResult,
    EngineQueryError,
    ForecastError,
    ForecastUnavailable,
    InvalidRegionArea,
    InvalidRequest,
)

ERROR_STATUS: dict[type[ForecastError], int] = {
    ForecastUnavailable: 404,
    EmptyResult: 404,
    InvalidRequest: 400,
    EngineQueryError: 500,
    InvalidRegionArea: 500,
}


def status_for(exc: ForecastError) -> int:
    """HTTP status for a domain error (500 when unmapped)."""
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return 500


async def forecast_error_handler(request: Request, exc: ForecastError) -> JSONResponse:
    status = status_for(exc)
    if status >= 500:
        logger.error("{} {} failed: {}", request.method, request.url.path, exc.message)
    else:
        logger.info("{} {} -> {}: {}", request.method, request.url.path, status, exc.message)
    return JSONResponse(status_code=status, content={"error": exc.message})
