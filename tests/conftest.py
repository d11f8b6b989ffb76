import random
import pytest
from datetime import datetime, timedelta, timezone
from src.monitor.domain.categories import NZ_CATEGORIES
from src.monitor.domain.entities import Camera, Event


class ScriptedRandom:
    """
    Random source that replays fixed values.
    sample() keeps the first k cameras so selections are predictable.
    """

    def __init__(self, randoms=(), choices=()):
        self.randoms = list(randoms)
        self.choices = list(choices)

    def random(self):
        return self.randoms.pop(0)

    def sample(self, population, k):
        return list(population)[:k]

    def choice(self, seq):
        value = self.choices.pop(0)
        assert value in seq
        return value


class StepClock:
    """Clock that advances by a fixed step on each call."""

    def __init__(self, start, step=timedelta(milliseconds=1)):
        self.current = start
        self.step = step

    def __call__(self):
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture
def fixed_now():
    return datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)

@pytest.fixture
def cameras():
    return [
        Camera(
            id=f"C{i}",
            name=f"Camera {i}",
            lat=-36.8 - i * 0.01,
            lon=174.7 + i * 0.01,
            region="Auckland",
        )
        for i in range(10)
    ]

@pytest.fixture
def categories():
    return NZ_CATEGORIES

@pytest.fixture
def seeded_rng():
    return random.Random(1234)

@pytest.fixture
def scripted_rng():
    return ScriptedRandom

@pytest.fixture
def step_clock(fixed_now):
    return StepClock(fixed_now)

@pytest.fixture
def make_event(cameras, fixed_now):
    def _make(index=0, event_type="fire", confidence=0.9, seconds=0):
        return Event(
            camera=cameras[index],
            event_type=event_type,
            confidence=confidence,
            detected_at=fixed_now + timedelta(seconds=seconds),
        )
    return _make
