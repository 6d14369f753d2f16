"""Shared pytest fixtures: stub query engine, service context, API client."""

from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient

from app.container import Container
from app.errors import EngineQueryError
from app.models.forecast import RawRow, YearlySeriesPoint
from web.api.app import create_app

FIRST = date(2024, 1, 1)
LATEST = date(2025, 3, 1)
DATA_URL = "https://data.test/GeoParquet/"

POINT = '{"type":"Point","coordinates":[-61.5,16.2]}'


def region_row(day: int, value: float, area: int | None = 100, month: int = 3) -> RawRow:
    return RawRow(time=datetime(2025, month, day, 12), value=value, geometry=POINT, region_area=area)


class StubForecastRepository:
    """Stands in for ForecastRepository; records calls, returns canned rows."""

    def __init__(self):
        self.calls: list[tuple] = []
        self.snapshot_rows: list[dict] = [
            {"time": datetime(2025, 3, 20, 12), "geometry": POINT, "value": 0.5},
            {"time": datetime(2025, 3, 20, 12), "geometry": POINT, "value": 0.1},
        ]
        self.region_rows: dict[str, list[RawRow]] = {
            "Guadeloupe": [region_row(20, 10), region_row(20, 20), region_row(21, 5)],
            "Zero": [region_row(20, 1, area=0)],
            "Masked": [region_row(20, 1), region_row(20, None)],
            "NaN": [region_row(20, float("nan"))],
        }
        self.yearly_rows: list[YearlySeriesPoint] = [
            YearlySeriesPoint(date=datetime(2023, 1, 1, 12), value=3.5),
            YearlySeriesPoint(date=datetime(2023, 1, 2, 12), value=4.0),
        ]
        self.fail = False

    def _record(self, *call):
        self.calls.append(call)
        if self.fail:
            raise EngineQueryError("IO Error: Unable to connect")

    def get_snapshot(self, artifact, day, threshold=None, limit=None):
        self._record("snapshot", artifact.artifact_id, day, threshold, limit)
        rows = [r for r in self.snapshot_rows if threshold is None or r["value"] > threshold]
        return rows[:limit] if limit is not None else rows

    def get_region_cells(self, artifact, boundary_url, eez):
        self._record("region", artifact.artifact_id, boundary_url, eez)
        return list(self.region_rows.get(eez, []))

    def get_region_yearly(self, artifact, boundary_url, eez):
        self._record("yearly", artifact.year, boundary_url, eez)
        return list(self.yearly_rows) if eez == "Guadeloupe" else []

    def get_bbox(self, artifact, bbox):
        self._record("bbox", artifact.artifact_id, bbox)
        return list(self.snapshot_rows)


@pytest.fixture
def stub_repo():
    return StubForecastRepository()


@pytest.fixture
def container(tmp_path, stub_repo):
    c = Container(
        db_path=":memory:",
        extensions=[],
        data_url=DATA_URL,
        cache_dir=tmp_path / "cache",
        use_cache=True,
        first_forecast=FIRST,
        latest_forecast=LATEST,
        forecast_repo=stub_repo,
    )
    yield c
    c.close()


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as test_client:
        yield test_client
