import pytest
import random
from fastapi.testclient import TestClient
from src.monitor.application.services.refresh import RefreshService
from src.monitor.application.simulator import EventSimulator
from src.monitor.infrastructure.broadcast.realtime_broadcaster import RealtimeBroadcaster
from src.monitor.infrastructure.sources.camera_source import StaticCameraSource
from src.monitor.presentation.api import create_app

@pytest.fixture
def service(cameras, categories):
    svc = RefreshService(
        source=StaticCameraSource(cameras),
        simulator=EventSimulator(categories, rng=random.Random(2024)),
        categories=categories,
        broadcaster=RealtimeBroadcaster(),
        refresh_delay=0,
    )
    svc.load_cameras()
    return svc

@pytest.fixture
def client(service):
    return TestClient(create_app(service))

def test_list_cameras(client):
    response = client.get("/cameras")
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 10
    assert data["cameras"][0]["id"] == "C0"
    assert data["cameras"][0]["region"] == "Auckland"

def test_list_categories(client):
    response = client.get("/categories")
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["fire", "dense_traffic", "sparse_traffic", "accident"]

def test_events_empty_before_refresh(client):
    response = client.get("/events")
    assert response.status_code == 200
    assert response.json() == {"updated_at": None, "total_events": 0, "events": []}

def test_latest_and_bounds_404_before_refresh(client):
    assert client.get("/events/latest").status_code == 404
    assert client.get("/events/bounds").status_code == 404
    assert client.get("/snapshot").status_code == 404

def test_refresh(client):
    response = client.post("/events/refresh")
    assert response.status_code == 200
    data = response.json()
    assert 1 <= data["total_events"] <= 10
    assert sum(data["counts"].values()) == data["total_events"]
    for event in data["events"]:
        assert event["eventType"] in data["counts"]
        assert 0.7 <= event["confidence"] < 1.0
        assert "detectedAt" in event
    assert data["most_recent"]["id"] == data["events"][0]["id"]

def test_events_after_refresh(client):
    refreshed = client.post("/events/refresh").json()
    response = client.get("/events")
    assert response.status_code == 200
    assert [e["id"] for e in response.json()["events"]] == [e["id"] for e in refreshed["events"]]

def test_events_filter(client, service):
    client.post("/events/refresh")
    snapshot = service.snapshot()
    wanted = snapshot.events[0].event_type
    response = client.get("/events", params={"category": [wanted]})
    events = response.json()["events"]
    assert events
    assert all(e["eventType"] == wanted for e in events)
    assert len(events) == snapshot.counts[wanted]

def test_stats(client, service):
    client.post("/events/refresh")
    response = client.get("/events/stats")
    assert response.status_code == 200
    data = response.json()
    assert data["counts"] == service.snapshot().counts
    assert set(data["stats"]) == set(data["counts"])

def test_latest(client, service):
    client.post("/events/refresh")
    response = client.get("/events/latest")
    assert response.status_code == 200
    assert response.json()["id"] == service.snapshot().most_recent.id

def test_bounds(client, service):
    client.post("/events/refresh")
    response = client.get("/events/bounds")
    assert response.status_code == 200
    data = response.json()
    assert data["south"] <= data["north"]
    assert data["west"] <= data["east"]

def test_snapshot_after_refresh(client):
    refreshed = client.post("/events/refresh").json()
    response = client.get("/snapshot")
    assert response.status_code == 200
    assert response.json()["total_events"] == refreshed["total_events"]

def test_refresh_conflict(client, service):
    service._in_flight = 1
    response = client.post("/events/refresh")
    assert response.status_code == 409
