"""
Refresh orchestration: owns the camera set and the latest snapshot.
"""
import asyncio
from datetime import datetime
from typing import Optional, Tuple

from ....common.logging import setup_logger
from ...domain.categories import CategoryTable
from ...domain.entities import Camera, DashboardSnapshot
from ...domain.protocols import CameraSource, Clock
from ...infrastructure.broadcast.realtime_broadcaster import DEFAULT_CHANNEL, RealtimeBroadcaster
from ..aggregator import category_stats, count_by_type, most_recent
from ..simulator import EventSimulator, utc_now


class RefreshInProgressError(RuntimeError):
    """Raised when a refresh is requested while another is still running."""
    pass


class RefreshService:
    """
    Runs one simulated detection sweep per user-triggered refresh.

    The camera list is loaded once and kept as an immutable tuple. Every
    refresh builds a brand-new snapshot; the previous one is simply dropped.
    """

    def __init__(
        self,
        source: CameraSource,
        simulator: EventSimulator,
        categories: CategoryTable,
        broadcaster: Optional[RealtimeBroadcaster] = None,
        refresh_delay: float = 1.0,
        clock: Optional[Clock] = None,
    ):
        self.source = source
        self.simulator = simulator
        self.categories = categories
        self.broadcaster = broadcaster
        self.refresh_delay = refresh_delay
        self.clock = clock if clock is not None else utc_now
        self.logger = setup_logger(__name__)

        self._cameras: Tuple[Camera, ...] = ()
        self._snapshot = self._empty_snapshot()
        self._in_flight = 0

    @property
    def cameras(self) -> Tuple[Camera, ...]:
        return self._cameras

    @property
    def is_refreshing(self) -> bool:
        return self._in_flight > 0

    def load_cameras(self) -> Tuple[Camera, ...]:
        """Reads the camera source. An unreadable source leaves the set empty."""
        self._cameras = tuple(self.source.load())
        if not self._cameras:
            self.logger.warning("No cameras available; refreshes will produce no events")
        self._snapshot = self._empty_snapshot()
        return self._cameras

    def snapshot(self) -> DashboardSnapshot:
        return self._snapshot

    def build_snapshot(self, now: Optional[datetime] = None) -> DashboardSnapshot:
        """Simulates and aggregates synchronously, without delay or publishing."""
        cameras = self._cameras
        now = now if now is not None else self.clock()
        events = self.simulator.simulate(cameras, now=now)
        return DashboardSnapshot(
            events=events,
            counts=count_by_type(events, self.categories),
            stats=category_stats(events, self.categories),
            most_recent=most_recent(events),
            updated_at=now,
            camera_count=len(cameras),
        )

    async def refresh(self, exclusive: bool = False) -> DashboardSnapshot:
        """
        Waits the configured delay, then replaces the current snapshot.

        With exclusive=True a refresh that overlaps another one is rejected
        with RefreshInProgressError.
        """
        if exclusive and self.is_refreshing:
            raise RefreshInProgressError("A refresh is already in progress")

        self._in_flight += 1
        try:
            if self.refresh_delay > 0:
                await asyncio.sleep(self.refresh_delay)
            snapshot = self.build_snapshot()
            self._snapshot = snapshot
        finally:
            self._in_flight -= 1

        self.logger.info(
            f"Refreshed: {len(snapshot.events)} events across {snapshot.camera_count} cameras"
        )

        if self.broadcaster is not None:
            await self.broadcaster.broadcast(
                DEFAULT_CHANNEL,
                self.broadcaster.serialize_snapshot(snapshot, self.categories),
            )
        return snapshot

    def _empty_snapshot(self) -> DashboardSnapshot:
        events = []
        return DashboardSnapshot(
            events=events,
            counts=count_by_type(events, self.categories),
            stats=category_stats(events, self.categories),
            most_recent=None,
            updated_at=None,
            camera_count=len(self._cameras),
        )
