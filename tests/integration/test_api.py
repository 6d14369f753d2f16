"""
Integration tests for the forecast API.

The query engine is replaced by the stub repository from tests/conftest.py,
so no network or spatial extension is needed.
"""


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "hello"}


# ============================================================================
# Snapshot
# ============================================================================

def test_forecast_snapshot(client):
    response = client.get("/forecast/2025-03-20")
    assert response.status_code == 200
    data = response.json()
    assert data["type"] == "FeatureCollection"
    assert len(data["features"]) == 2
    assert data["features"][0]["type"] == "Feature"
    assert data["links"][0]["type"] == "application/vnd.apache.parquet"


def test_forecast_snapshot_filters(client, stub_repo):
    response = client.get("/forecast/2025-03-20", params={"limit": 1, "value": 0.05})
    assert response.status_code == 200
    assert len(response.json()["features"]) == 1
    assert stub_repo.calls[0][3:] == (0.05, 1)


def test_forecast_out_of_window(client):
    response = client.get("/forecast/2023-01-20")
    assert response.status_code == 404
    assert "before 2024-01-01" in response.json()["error"]


def test_forecast_bad_date(client):
    response = client.get("/forecast/not-a-date")
    assert response.status_code == 400
    assert "error" in response.json()


def test_forecast_negative_limit(client):
    response = client.get("/forecast/2025-03-20", params={"limit": -1})
    assert response.status_code == 422


def test_engine_failure_is_500(client, stub_repo):
    stub_repo.fail = True
    response = client.get("/forecast/2025-03-20")
    assert response.status_code == 500
    assert response.json() == {"error": "IO Error: Unable to connect"}


# ============================================================================
# EEZ series
# ============================================================================

def test_eez_volume(client):
    response = client.get("/forecast/2025-03-20/volume/Guadeloupe")
    assert response.status_code == 200
    data = response.json()
    assert data["eez"] == "Guadeloupe"
    assert data["eez_area"] == 100
    assert data["values"] == [
        {"date": "2025-03-20", "m2PerKm2": 300000.0},
        {"date": "2025-03-21", "m2PerKm2": 50000.0},
    ]


def test_eez_volume_served_from_cache(client, stub_repo):
    client.get("/forecast/2025-03-20/volume/Guadeloupe")
    stub_repo.fail = True
    response = client.get("/forecast/2025-03-20/volume/Guadeloupe")
    assert response.status_code == 200
    assert len(stub_repo.calls) == 1


def test_eez_volume_name_with_spaces(client, stub_repo):
    response = client.get("/forecast/2025-03-20/volume/Joint regime area")
    assert response.status_code == 200
    assert stub_repo.calls[0][3] == "Joint regime area"


def test_eez_volume_zero_area(client):
    response = client.get("/forecast/2025-03-20/volume/Zero")
    assert response.status_code == 500
    assert "area" in response.json()["error"]


def test_yearly_volume(client):
    response = client.get("/volume/Guadeloupe/2023")
    assert response.status_code == 200
    data = response.json()
    assert data["eez"] == "Guadeloupe"
    assert [v["value"] for v in data["values"]] == [3.5, 4.0]


def test_yearly_volume_bad_year(client):
    response = client.get("/volume/Guadeloupe/latest")
    assert response.status_code == 422


# ============================================================================
# Bounding box
# ============================================================================

def test_bbox(client, stub_repo):
    body = {"min_lon": -80, "max_lon": -60, "min_lat": 10, "max_lat": 30}
    response = client.post("/data/bbox", json=body)
    assert response.status_code == 200
    rows = response.json()
    assert len(rows) == 2
    assert rows[0]["geometry"]["type"] == "Point"
    assert stub_repo.calls[0][2].min_lon == -80


def test_bbox_missing_field(client):
    response = client.post("/data/bbox", json={"min_lon": -80})
    assert response.status_code == 422


def test_cors_header(client):
    response = client.get("/", headers={"Origin": "https://map.example"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_eez_volume_null_cell_value(client, container):
    response = client.get("/forecast/2025-03-20/volume/Masked")
    assert response.status_code == 500
    assert "Malformed row" in response.json()["error"]
    assert not container.forecast.is_cached("2025-03-20", "Masked")


def test_eez_volume_nan_cell_value(client, container):
    response = client.get("/forecast/2025-03-20/volume/NaN")
    assert response.status_code == 500
    assert "Malformed row" in response.json()["error"]
    assert not container.forecast.is_cached("2025-03-20", "NaN")
