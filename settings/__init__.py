"""Application settings."""

import os
from datetime import date
from pathlib import Path

# Query engine
DB_PATH = os.getenv("SARGASSUM_DB_PATH", ":memory:")
DUCKDB_EXTENSIONS = [e for e in os.getenv("SARGASSUM_DUCKDB_EXTENSIONS", "spatial,httpfs").split(",") if e]
QUERY_TIMEOUT = float(os.getenv("SARGASSUM_QUERY_TIMEOUT", "30"))

# Remote GeoParquet store
DATA_URL = os.getenv("SARGASSUM_DATA_URL", "https://minio.dive.edito.eu/project-sargasse/GeoParquet/")

# Forecast period
FIRST_FORECAST = date.fromisoformat(os.getenv("SARGASSUM_FIRST_FORECAST", "2024-01-01"))
LATEST_FORECAST = date.fromisoformat(os.getenv("SARGASSUM_LATEST_FORECAST", "2025-03-01"))
FORECAST_HORIZON_MONTHS = 7

# Result cache
CACHE_DIR = Path(os.getenv("SARGASSUM_CACHE_DIR", "cache"))
USE_CACHE = os.getenv("SARGASSUM_USE_CACHE", "true").lower() in ("1", "true", "yes")

# Logging
LOG_DIR = Path(os.getenv("SARGASSUM_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("SARGASSUM_LOG_LEVEL", "INFO")
LOG_FILE_LEVEL = os.getenv("SARGASSUM_LOG_FILE_LEVEL", "DEBUG")

# API
API_HOST = os.getenv("SARGASSUM_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("SARGASSUM_API_PORT", "3001"))
