"""
API package.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .routes import events, streaming
from ...application.services.refresh import RefreshService
from ...infrastructure.broadcast.realtime_broadcaster import RealtimeBroadcaster

def create_app(service: RefreshService) -> FastAPI:
    """
    Builds the API around an already configured refresh service.
    """
    app = FastAPI(title="Urban Orchestration Event Monitor API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allow all origins for development
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(events.app.router, tags=["events"])
    app.include_router(streaming.app.router, tags=["streaming"])

    if service.broadcaster is None:
        service.broadcaster = RealtimeBroadcaster()
    events.init_service(service)
    streaming.init_broadcaster(service.broadcaster)
    return app
