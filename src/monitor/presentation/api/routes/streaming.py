"""
Endpoints for realtime streaming.
"""
import asyncio
import json
from typing import Optional
from fastapi import FastAPI, HTTPException
from sse_starlette.sse import EventSourceResponse
from ....infrastructure.broadcast.realtime_broadcaster import DEFAULT_CHANNEL, RealtimeBroadcaster

app = FastAPI()

# Singleton broadcaster
_broadcaster: Optional[RealtimeBroadcaster] = None

def init_broadcaster(broadcaster: RealtimeBroadcaster):
    global _broadcaster
    _broadcaster = broadcaster

def get_broadcaster() -> RealtimeBroadcaster:
    if _broadcaster is None:
        raise HTTPException(500, "Broadcaster not initialized")
    return _broadcaster

@app.get("/stream")
async def stream_events():
    """
    Server-Sent Events endpoint; one `snapshot` message per refresh.

    Frontend usage:
    ```javascript
    const eventSource = new EventSource('/stream');
    eventSource.addEventListener('snapshot', (event) => {
        const data = JSON.parse(event.data);
        console.log('Active events:', data.total_events);
    });
    ```
    """
    broadcaster = get_broadcaster()
    queue = await broadcaster.subscribe(DEFAULT_CHANNEL)

    async def event_generator():
        try:
            while True:
                data = await queue.get()
                yield {
                    "event": "snapshot",
                    "data": json.dumps(data)
                }
        finally:
            await broadcaster.unsubscribe(DEFAULT_CHANNEL, queue)

    return EventSourceResponse(event_generator())

@app.get("/snapshot")
async def get_snapshot():
    """Latest broadcast snapshot (polling fallback)."""
    broadcaster = get_broadcaster()
    latest = broadcaster.latest(DEFAULT_CHANNEL)
    if latest is None:
        raise HTTPException(404, "No snapshot yet")
    return latest
