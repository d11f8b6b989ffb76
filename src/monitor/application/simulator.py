"""
Synthetic event simulator.

Each call models one detection sweep: a random 20-30% of the cameras
"detect" something, every selected camera gets a random category from the
configured table and a confidence in [0.7, 1.0).
"""
import logging
import math
import random
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ...common.exceptions import ConfigurationError
from ...common.logging import setup_logger, log_execution_time
from ..domain.categories import CategoryTable
from ..domain.entities import Camera, Event
from ..domain.protocols import Clock, RandomSource


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EventSimulator:
    """
    Turns a camera list into a fresh list of events.

    The random source and the clock are injected so a seeded run is fully
    reproducible. The simulator keeps no state between calls apart from the
    random source itself, so callers running in parallel should each pass
    their own.
    """

    def __init__(
        self,
        categories: CategoryTable,
        rng: Optional[RandomSource] = None,
        clock: Optional[Clock] = None,
        min_fraction: float = 0.20,
        max_fraction: float = 0.30,
        min_confidence: float = 0.7,
        max_confidence: float = 1.0,
    ):
        if categories is None or len(categories) == 0:
            raise ConfigurationError("EventSimulator needs at least one category")
        if not 0.0 <= min_fraction <= max_fraction <= 1.0:
            raise ConfigurationError(
                f"Invalid selection fraction range [{min_fraction}, {max_fraction})"
            )
        if not 0.0 <= min_confidence <= max_confidence <= 1.0:
            raise ConfigurationError(
                f"Invalid confidence range [{min_confidence}, {max_confidence})"
            )

        self.categories = categories
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else utc_now
        self.min_fraction = min_fraction
        self.max_fraction = max_fraction
        self.min_confidence = min_confidence
        self.max_confidence = max_confidence
        self.logger = setup_logger(__name__)

    @classmethod
    def from_config(cls, cfg, categories: CategoryTable, clock: Optional[Clock] = None) -> "EventSimulator":
        """Builds a simulator from the `simulation` section of a monitor config."""
        sim = cfg.simulation
        seed = sim.get("seed")
        return cls(
            categories,
            rng=random.Random(seed),
            clock=clock,
            min_fraction=sim.min_fraction,
            max_fraction=sim.max_fraction,
            min_confidence=sim.min_confidence,
            max_confidence=sim.max_confidence,
        )

    def selection_count(self, camera_count: int, fraction: float) -> int:
        """floor(fraction * n), at least 1 for a non-empty list, at most n."""
        if camera_count <= 0:
            return 0
        count = math.floor(camera_count * fraction)
        return min(max(count, 1), camera_count)

    @log_execution_time(logging.getLogger(__name__))
    def simulate(self, cameras: Sequence[Camera], now: Optional[datetime] = None) -> List[Event]:
        """
        Selects a random subset of cameras and attaches a synthetic event to each.

        If now is given every event carries it; otherwise the clock is read per
        event and never allowed to go backwards within the sweep.
        """
        if not cameras:
            return []

        fraction = self.min_fraction + (self.max_fraction - self.min_fraction) * self.rng.random()
        count = self.selection_count(len(cameras), fraction)

        # sample() copies the population; the caller's sequence is untouched
        selected = self.rng.sample(list(cameras), count)
        names = list(self.categories.names)

        events: List[Event] = []
        last_ts: Optional[datetime] = None
        for camera in selected:
            event_type = self.rng.choice(names)
            confidence = self.min_confidence + (self.max_confidence - self.min_confidence) * self.rng.random()

            if now is not None:
                detected_at = now
            else:
                detected_at = self.clock()
                if last_ts is not None and detected_at < last_ts:
                    detected_at = last_ts
                last_ts = detected_at

            events.append(Event(
                camera=camera,
                event_type=event_type,
                confidence=confidence,
                detected_at=detected_at,
            ))

        self.logger.debug(
            f"Simulated {len(events)} events from {len(cameras)} cameras (fraction={fraction:.3f})"
        )
        return events
