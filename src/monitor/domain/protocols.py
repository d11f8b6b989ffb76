"""
Domain protocols for the event monitor.
"""
from datetime import datetime
from typing import List, Protocol, Sequence, TypeVar
from .entities import Camera


T = TypeVar("T")


class RandomSource(Protocol):
    """
    Random number capability used by the simulator.
    random.Random satisfies it; tests pass a seeded instance or a scripted fake.
    """
    def random(self) -> float:
        ...

    def sample(self, population: Sequence[T], k: int) -> List[T]:
        ...

    def choice(self, seq: Sequence[T]) -> T:
        ...


class Clock(Protocol):
    """
    Returns the current time as a timezone-aware datetime.
    """
    def __call__(self) -> datetime:
        ...


class CameraSource(Protocol):
    """
    Provides the static camera list.
    """
    def load(self) -> List[Camera]:
        ...
