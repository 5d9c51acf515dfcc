import pytest
from httpx import ASGITransport, AsyncClient

from dlr.main import app

ALPINE_STATE = {
    "air_temp_c": 0,
    "wind_mean_ms": 2,
    "wind_gust_ms": 8,
    "irradiance_w_m2": 400,
    "current_a": 600,
}


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_evaluate(client):
    resp = await client.post("/api/v1/rating/evaluate", json={"state": ALPINE_STATE})
    assert resp.status_code == 200
    data = resp.json()
    assert data["convection_model"] == "heuristic"
    assert data["effective_wind_ms"] == pytest.approx(4.1)
    assert data["conductor_temp_c"] < data["temp_limit_c"]
    assert data["risk_level"] == "Optimal"
    assert data["icing"] == "low"
    assert data["snow"] == "unlikely"
    assert 0 <= data["rating_pct"] <= 300
    assert "heat_balance" in data
    assert set(data["heat_balance"]) >= {"joule_w_m", "solar_w_m", "convective_w_m", "radiative_w_m"}


@pytest.mark.asyncio
async def test_evaluate_split_model(client):
    state = {**ALPINE_STATE, "convection_model": "split"}
    resp = await client.post("/api/v1/rating/evaluate", json={"state": state})
    assert resp.status_code == 200
    assert resp.json()["convection_model"] == "split"


@pytest.mark.asyncio
async def test_evaluate_rejects_negative_wind(client):
    state = {**ALPINE_STATE, "wind_mean_ms": -3}
    resp = await client.post("/api/v1/rating/evaluate", json={"state": state})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_evaluate_rejects_unknown_model(client):
    state = {**ALPINE_STATE, "convection_model": "laminar"}
    resp = await client.post("/api/v1/rating/evaluate", json={"state": state})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_evaluate_with_conductor_override(client):
    resp = await client.post(
        "/api/v1/rating/evaluate",
        json={"state": ALPINE_STATE, "conductor": {"max_temp_c": 100}},
    )
    assert resp.status_code == 200
    assert resp.json()["temp_limit_c"] == 100


@pytest.mark.asyncio
async def test_evaluate_persist_and_history(client):
    state = {**ALPINE_STATE, "air_temp_c": -7.5}
    resp = await client.post("/api/v1/rating/evaluate", params={"persist": "true"}, json={"state": state})
    assert resp.status_code == 200

    resp = await client.get("/api/v1/rating/history", params={"limit": 1})
    assert resp.status_code == 200
    history = resp.json()
    assert len(history) == 1
    assert history[0]["air_temp_c"] == -7.5
    assert history[0]["convection_model"] == "heuristic"


@pytest.mark.asyncio
async def test_compare(client):
    resp = await client.post("/api/v1/rating/compare", json={"state": ALPINE_STATE})
    assert resp.status_code == 200
    data = resp.json()
    assert data["heuristic"]["convection_model"] == "heuristic"
    assert data["split"]["convection_model"] == "split"
    assert data["temperature_spread_c"] != 0


@pytest.mark.asyncio
async def test_sweep(client):
    resp = await client.post(
        "/api/v1/rating/sweep",
        json={"base": ALPINE_STATE, "parameter": "irradiance_w_m2", "values": [0, 500, 1000]},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["parameter"] == "irradiance_w_m2"
    assert len(data["points"]) == 3
    ampacities = [p["rating"]["ampacity_a"] for p in data["points"]]
    assert ampacities == sorted(ampacities, reverse=True)


@pytest.mark.asyncio
async def test_sweep_unknown_parameter(client):
    resp = await client.post(
        "/api/v1/rating/sweep",
        json={"base": ALPINE_STATE, "parameter": "humidity_pct", "values": [10]},
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_sweep_too_many_points(client):
    resp = await client.post(
        "/api/v1/rating/sweep",
        json={"base": ALPINE_STATE, "parameter": "current_a", "values": list(range(500))},
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_reference(client):
    resp = await client.get("/api/v1/rating/reference", params={"model": "split"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["convection_model"] == "split"
    assert data["air_temp_c"] == 35
    assert data["wind_ms"] == 0.6
    assert data["irradiance_w_m2"] == 800
    assert data["ampacity_a"] > 0


@pytest.mark.asyncio
async def test_conductor(client):
    resp = await client.get("/api/v1/conductor/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["diameter_m"] == 0.028
    assert data["max_temp_c"] == 80
    assert set(data["convection_models"]) == {"heuristic", "split"}
    assert data["convection_models"]["split"]["slope_probe_c"] == 0.5
