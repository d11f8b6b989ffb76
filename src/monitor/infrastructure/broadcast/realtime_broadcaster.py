import asyncio
from typing import Dict, Optional, Set

from ....common.logging import setup_logger
from ....common.schemas.event import CategoryInfo, CategorySummary, EventPayload
from ...domain.categories import CategoryTable
from ...domain.entities import DashboardSnapshot, Event

logger = setup_logger(__name__)

DEFAULT_CHANNEL = "events"


class RealtimeBroadcaster:
    """
    Pub/sub system to push dashboard snapshots to connected clients.
    Asynchronous; a slow client never blocks the others.
    """

    def __init__(self):
        # Subscribers per channel
        self._subscribers: Dict[str, Set[asyncio.Queue]] = {}
        self._lock = asyncio.Lock()

        # Latest payload per channel, replayed to new subscribers
        self._latest_state: Dict[str, dict] = {}

    async def subscribe(self, channel: str = DEFAULT_CHANNEL, queue_size: int = 50) -> asyncio.Queue:
        """
        Subscribes a client to a channel.
        Returns an async queue that will receive the data.
        """
        queue = asyncio.Queue(maxsize=queue_size)

        async with self._lock:
            if channel not in self._subscribers:
                self._subscribers[channel] = set()
            self._subscribers[channel].add(queue)

        if channel in self._latest_state:
            try:
                queue.put_nowait(self._latest_state[channel])
            except asyncio.QueueFull:
                pass

        return queue

    async def unsubscribe(self, channel: str, queue: asyncio.Queue):
        """Removes a subscriber."""
        async with self._lock:
            if channel in self._subscribers:
                self._subscribers[channel].discard(queue)
                if not self._subscribers[channel]:
                    del self._subscribers[channel]

    async def broadcast(self, channel: str, data: dict):
        """
        Sends data to all subscribers of a channel.
        Non-blocking: if a client's queue is full, that client is skipped.
        """
        self._latest_state[channel] = data

        async with self._lock:
            subscribers = self._subscribers.get(channel, set()).copy()

        for queue in subscribers:
            try:
                queue.put_nowait(data)
            except asyncio.QueueFull:
                logger.warning(f"Skipping slow client on channel {channel}")

    def latest(self, channel: str = DEFAULT_CHANNEL) -> Optional[dict]:
        return self._latest_state.get(channel)

    def subscriber_count(self, channel: str = DEFAULT_CHANNEL) -> int:
        return len(self._subscribers.get(channel, ()))

    @staticmethod
    def serialize_event(event: Event) -> dict:
        """
        Flattens an event into the camera's fields plus eventType, confidence
        and detectedAt.
        """
        camera = event.camera
        data = {
            **camera.extra,
            "id": camera.id,
            "key": camera.id,
            "name": camera.name,
            "lat": camera.lat,
            "lon": camera.lon,
            "region": camera.region,
            "direction": camera.direction,
            "eventType": event.event_type,
            "confidence": event.confidence,
            "detectedAt": event.detected_at,
        }
        return EventPayload.model_validate(data).model_dump(mode="json", by_alias=True)

    @staticmethod
    def serialize_categories(categories: CategoryTable) -> list:
        return [
            CategoryInfo(name=c.name, label=c.label, color=c.color, icon=c.icon).model_dump()
            for c in categories
        ]

    def serialize_snapshot(self, snapshot: DashboardSnapshot, categories: CategoryTable) -> dict:
        """
        Converts a DashboardSnapshot to a JSON-serializable dict.
        """
        return {
            "updated_at": snapshot.updated_at.isoformat() if snapshot.updated_at else None,
            "camera_count": snapshot.camera_count,
            "total_events": len(snapshot.events),
            "events": [self.serialize_event(e) for e in snapshot.events],
            "counts": dict(snapshot.counts),
            "stats": {
                name: CategorySummary(
                    count=s.count,
                    avg_confidence=round(s.avg_confidence, 2),
                ).model_dump(by_alias=True)
                for name, s in snapshot.stats.items()
            },
            "most_recent": self.serialize_event(snapshot.most_recent) if snapshot.most_recent else None,
            "categories": self.serialize_categories(categories),
        }
