"""
API for cameras, simulated events and their summaries.
"""
from typing import List, Optional
from fastapi import FastAPI, HTTPException, Query
from ....application.aggregator import event_bounds, filter_by_categories
from ....application.services.refresh import RefreshInProgressError, RefreshService
from ....domain.entities import Camera
from ....infrastructure.broadcast.realtime_broadcaster import RealtimeBroadcaster

app = FastAPI()

# Singleton
_service: Optional[RefreshService] = None

def init_service(service: RefreshService):
    global _service
    _service = service

def get_service() -> RefreshService:
    if _service is None:
        raise HTTPException(500, "Refresh service not initialized")
    return _service

def serialize_camera(camera: Camera) -> dict:
    return {
        **camera.extra,
        "id": camera.id,
        "key": camera.id,
        "name": camera.name,
        "lat": camera.lat,
        "lon": camera.lon,
        "region": camera.region,
        "direction": camera.direction,
    }

@app.get("/cameras")
async def list_cameras():
    """Camera locations loaded at startup."""
    service = get_service()
    cameras = [serialize_camera(c) for c in service.cameras]
    return {"count": len(cameras), "cameras": cameras}

@app.get("/categories")
async def list_categories():
    """Legend: one entry per configured category."""
    service = get_service()
    return RealtimeBroadcaster.serialize_categories(service.categories)

@app.post("/events/refresh")
async def refresh_events():
    """
    Runs one detection sweep and returns the new snapshot.
    Rejected with 409 while another refresh is still running.
    """
    service = get_service()
    try:
        snapshot = await service.refresh(exclusive=True)
    except RefreshInProgressError as e:
        raise HTTPException(409, str(e))
    return service.broadcaster.serialize_snapshot(snapshot, service.categories)

@app.get("/events")
async def list_events(category: Optional[List[str]] = Query(None)):
    """
    Current events. Repeat ?category= to show only some categories.
    """
    service = get_service()
    snapshot = service.snapshot()
    events = snapshot.events
    if category is not None:
        events = filter_by_categories(events, category)
    return {
        "updated_at": snapshot.updated_at.isoformat() if snapshot.updated_at else None,
        "total_events": len(events),
        "events": [RealtimeBroadcaster.serialize_event(e) for e in events],
    }

@app.get("/events/stats")
async def get_stats():
    """Per-category counts and mean confidence of the current snapshot."""
    service = get_service()
    data = service.broadcaster.serialize_snapshot(service.snapshot(), service.categories)
    return {
        "updated_at": data["updated_at"],
        "total_events": data["total_events"],
        "counts": data["counts"],
        "stats": data["stats"],
    }

@app.get("/events/latest")
async def get_latest_event():
    """Most recently detected event."""
    service = get_service()
    latest = service.snapshot().most_recent
    if latest is None:
        raise HTTPException(404, "No events")
    return RealtimeBroadcaster.serialize_event(latest)

@app.get("/events/bounds")
async def get_event_bounds(category: Optional[List[str]] = Query(None)):
    """Map bounds enclosing the (optionally filtered) current events."""
    service = get_service()
    events = service.snapshot().events
    if category is not None:
        events = filter_by_categories(events, category)
    bounds = event_bounds(events)
    if bounds is None:
        raise HTTPException(404, "No events")
    (south, west), (north, east) = bounds
    return {"south": south, "west": west, "north": north, "east": east}
