"""Tests for the query builder."""

from datetime import date, datetime

import pytest

from app.models.forecast import BoundingBox, ForecastArtifact, YearlyArtifact
from app.repositories.forecast.queries import (
    Query,
    bbox_query,
    region_daily_query,
    region_yearly_query,
    snapshot_query,
)

ARTIFACT = ForecastArtifact(anchor=date(2025, 3, 1), url="https://data.test/20250301_sarg_mean.parquet")
BOUNDARY = "https://data.test/eez.parquet"


class TestSnapshotQuery:
    def test_mid_day_timestamp(self):
        q = snapshot_query(ARTIFACT, date(2025, 3, 20))
        assert q.params == [datetime(2025, 3, 20, 12, 0, 0)]
        assert "read_parquet('https://data.test/20250301_sarg_mean.parquet')" in q.sql
        assert "ST_AsGeoJSON(geometry)" in q.sql
        assert "LIMIT" not in q.sql
        assert "value >" not in q.sql

    def test_threshold_and_limit(self):
        q = snapshot_query(ARTIFACT, date(2025, 3, 20), threshold=0.25, limit=10)
        assert "AND value > ?" in q.sql
        assert q.sql.endswith("LIMIT 10")
        assert q.params[1] == 0.25

    def test_zero_threshold_applies(self):
        q = snapshot_query(ARTIFACT, date(2025, 3, 20), threshold=0)
        assert "AND value > ?" in q.sql

    def test_negative_limit(self):
        with pytest.raises(ValueError):
            snapshot_query(ARTIFACT, date(2025, 3, 20), limit=-1)


class TestRegionQueries:
    def test_daily_shape(self):
        q = region_daily_query(ARTIFACT, BOUNDARY, "Guadeloupe")
        assert "ST_Intersects(p.geometry, r.geometry)" in q.sql
        assert "WHERE r.GEONAME = ?" in q.sql
        assert "CAST(r.AREA_KM2 AS INTEGER) AS eez_area" in q.sql
        assert q.sql.endswith("ORDER BY p.time ASC")
        assert q.params == ["Guadeloupe"]

    def test_yearly_shape(self):
        q = region_yearly_query(YearlyArtifact(2023, "https://data.test/sargassum_year_2023.parquet"), BOUNDARY, "X")
        assert "SUM(p.value) AS total_value" in q.sql
        assert "GROUP BY p.time" in q.sql
        assert "sargassum_year_2023.parquet" in q.sql

    def test_eez_is_never_interpolated(self):
        eez = "X'; DROP TABLE t; --"
        q = region_daily_query(ARTIFACT, BOUNDARY, eez)
        assert eez not in q.sql
        assert q.params == [eez]

    def test_url_quotes_escaped(self):
        artifact = ForecastArtifact(anchor=date(2025, 3, 1), url="https://x/it's.parquet")
        assert "read_parquet('https://x/it''s.parquet')" in region_daily_query(artifact, BOUNDARY, "A").sql


class TestRender:
    def test_deterministic(self):
        a = region_daily_query(ARTIFACT, BOUNDARY, "Guadeloupe").render()
        b = region_daily_query(ARTIFACT, BOUNDARY, "Guadeloupe").render()
        assert a == b

    def test_params_change_text(self):
        a = region_daily_query(ARTIFACT, BOUNDARY, "A").render()
        b = region_daily_query(ARTIFACT, BOUNDARY, "B").render()
        assert a != b

    def test_snapshot_render(self):
        text = snapshot_query(ARTIFACT, date(2025, 3, 20), threshold=0.5).render()
        assert text.endswith('-- params: ["2025-03-20T12:00:00",0.5]')

    def test_unsupported_param(self):
        with pytest.raises(TypeError):
            Query("SELECT ?", [object()]).render()


class TestBBoxQuery:
    def test_bound_coordinates(self):
        q = bbox_query(ARTIFACT, BoundingBox(min_lon=-80, max_lon=-60, min_lat=10, max_lat=30))
        assert "ST_MakeEnvelope(?, ?, ?, ?)" in q.sql
        assert q.params == [-80, 10, -60, 30]
